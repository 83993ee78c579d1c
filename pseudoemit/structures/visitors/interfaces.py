"""Module for visitor ABCs."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import pseudoemit.structures.pseudo.nodes as nodes

T = TypeVar("T")


class PseudoNodeVisitorInterface(ABC, Generic[T]):
    """Interface for visiting all nodes emitted by the builder."""

    def visit(self, node: nodes.PseudoNode) -> T:
        """Visit a PseudoNode, dispatching to the correct handler."""
        return node.accept(self)

    @abstractmethod
    def visit_unknown_op(self, node: nodes.UnknownOp) -> T:
        """Visit an UnknownOp."""

    @abstractmethod
    def visit_assignment(self, node: nodes.Assignment) -> T:
        """Visit an Assignment."""

    @abstractmethod
    def visit_cast_assignment(self, node: nodes.CastAssignment) -> T:
        """Visit a CastAssignment."""

    @abstractmethod
    def visit_math_assignment(self, node: nodes.MathAssignment) -> T:
        """Visit a MathAssignment."""

    @abstractmethod
    def visit_inc_dec(self, node: nodes.IncDec) -> T:
        """Visit an IncDec."""

    @abstractmethod
    def visit_binary_math(self, node: nodes.BinaryMath) -> T:
        """Visit a BinaryMath."""
