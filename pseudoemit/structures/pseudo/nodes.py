"""Module defining the expression nodes emitted for single low-level operations.

NODES:

unknown-op       <-  __asm (instruction)
assignment       <-  operand = operand
cast-assignment  <-  operand = (type) operand
math-assignment  <-  operand = op operand
inc-dec          <-  operand ++ | operand --
binary-math      <-  operand = operand op operand | operand op= operand

"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, TypeVar

from .operands import Operand

T = TypeVar("T")

if TYPE_CHECKING:
    from pseudoemit.structures.visitors.interfaces import PseudoNodeVisitorInterface
    from pseudoemit.util.decoration import Theme


class PseudoNode(ABC):
    """Interface for all nodes the builder may return."""

    def __str__(self) -> str:
        """Return the plain (undecorated) rendering of the node."""
        return self.render()

    def render(self, theme: Optional[Theme] = None) -> str:
        """Render the node with the given theme, falling back to plain text."""
        from pseudoemit.backend.pseudocodegenerator import PseudocodeGenerator

        return PseudocodeGenerator(theme).visit(self)

    @abstractmethod
    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        """Invoke the appropriate visitor for this node."""

    def _coerce(self, *fields: str) -> None:
        """Wrap the given fields into Operands, bypassing the frozen dataclass guard."""
        for field in fields:
            object.__setattr__(self, field, Operand.of(getattr(self, field)))


@dataclass(frozen=True)
class UnknownOp(PseudoNode):
    """An operation without modeled semantics, emitted verbatim."""

    instruction: str

    def __post_init__(self):
        object.__setattr__(self, "instruction", str(self.instruction))

    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        return visitor.visit_unknown_op(self)


@dataclass(frozen=True)
class Assignment(PseudoNode):
    """Assigns the source to the destination."""

    destination: Operand
    source: Operand

    def __post_init__(self):
        self._coerce("destination", "source")

    @property
    def is_noop(self) -> bool:
        """Check whether the assignment copies an operand onto itself."""
        return self.destination == self.source

    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        return visitor.visit_assignment(self)


@dataclass(frozen=True)
class CastAssignment(PseudoNode):
    """Assigns the source to the destination after casting it to the given type name."""

    destination: Operand
    source: Operand
    cast: str

    def __post_init__(self):
        self._coerce("destination", "source")

    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        return visitor.visit_cast_assignment(self)


@dataclass(frozen=True)
class MathAssignment(PseudoNode):
    """Assigns the source, prefixed with a unary operator, to the destination."""

    destination: Operand
    source: Operand
    operation: str

    def __post_init__(self):
        self._coerce("destination", "source")

    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        return visitor.visit_math_assignment(self)


@dataclass(frozen=True)
class IncDec(PseudoNode):
    """Increments (++) or decrements (--) the destination by one."""

    destination: Operand
    operation: str

    def __post_init__(self):
        self._coerce("destination")

    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        return visitor.visit_inc_dec(self)


@dataclass(frozen=True)
class BinaryMath(PseudoNode):
    """
    Generic binary operation assigned to the destination.

    If both sources are the same operand, the node is rendered in compound form (dst op= b).
    """

    destination: Operand
    source_a: Operand
    source_b: Operand
    operation: str

    def __post_init__(self):
        self._coerce("destination", "source_a", "source_b")

    @property
    def is_compound(self) -> bool:
        """Check whether the node is rendered as compound assignment."""
        return self.source_a == self.source_b

    def accept(self, visitor: PseudoNodeVisitorInterface[T]) -> T:
        return visitor.visit_binary_math(self)
