"""Module building simplified pseudocode nodes for single low-level operations.

Every entry point applies at most one peephole rule and never fails:

- `x = x + 1 -> x++`, `x = x - 1 -> x--`
- `x = a & 0 -> x = 0`
- `x = a ^ a -> x = 0`
- `x = a | a -> x = 0`

Operands are compared by their text only, so literals have to be handed over as 0 and 1.
"""
import logging
from types import MappingProxyType
from typing import Callable, Mapping, Union

from pseudoemit.structures.pseudo import ONE, ZERO, Assignment, BinaryMath, IncDec, Operand, PseudoNode, UnknownOp

logger = logging.getLogger(__name__)

OperandLike = Union[Operand, str]


def add(destination: OperandLike, source_a: OperandLike, source_b: OperandLike) -> PseudoNode:
    """Emit dst = a + b, or dst++ when adding one to the destination itself."""
    destination, source_a, source_b = Operand.of(destination), Operand.of(source_a), Operand.of(source_b)
    if destination == source_a and source_b == ONE:
        logger.debug(f"emit increment for {destination} = {source_a} + {source_b}")
        return IncDec(destination, "++")
    return BinaryMath(destination, source_a, source_b, "+")


def subtract(destination: OperandLike, source_a: OperandLike, source_b: OperandLike) -> PseudoNode:
    """Emit dst = a - b, or dst-- when subtracting one from the destination itself."""
    destination, source_a, source_b = Operand.of(destination), Operand.of(source_a), Operand.of(source_b)
    if destination == source_a and source_b == ONE:
        logger.debug(f"emit decrement for {destination} = {source_a} - {source_b}")
        return IncDec(destination, "--")
    return BinaryMath(destination, source_a, source_b, "-")


def and_(destination: OperandLike, source_a: OperandLike, source_b: OperandLike) -> PseudoNode:
    """Emit dst = a & b, or dst = 0 when masking with zero."""
    source_b = Operand.of(source_b)
    if source_b == ZERO:
        logger.debug(f"emit zero assignment for {destination} = {source_a} & {source_b}")
        return Assignment(destination, ZERO)
    return BinaryMath(destination, source_a, source_b, "&")


def or_(destination: OperandLike, source_a: OperandLike, source_b: OperandLike) -> PseudoNode:
    """
    Emit dst = a | b, or dst = 0 when both sources are the same operand.

    a | a is a, not 0. The zero assignment mirrors the xor rule and is kept for compatibility
    with the pseudocode emitted so far.
    """
    source_a, source_b = Operand.of(source_a), Operand.of(source_b)
    if source_a == source_b:
        logger.debug(f"emit zero assignment for {destination} = {source_a} | {source_b}")
        return Assignment(destination, ZERO)
    return BinaryMath(destination, source_a, source_b, "|")


def xor(destination: OperandLike, source_a: OperandLike, source_b: OperandLike) -> PseudoNode:
    """Emit dst = a ^ b, or dst = 0 when both sources are the same operand."""
    source_a, source_b = Operand.of(source_a), Operand.of(source_b)
    if source_a == source_b:
        logger.debug(f"emit zero assignment for {destination} = {source_a} ^ {source_b}")
        return Assignment(destination, ZERO)
    return BinaryMath(destination, source_a, source_b, "^")


def assign(destination: OperandLike, source: OperandLike) -> PseudoNode:
    """Emit dst = src."""
    return Assignment(destination, source)


def unknown(instruction: str) -> PseudoNode:
    """Emit the instruction as inline assembly."""
    return UnknownOp(instruction)


OPERATIONS: Mapping[str, Callable[..., PseudoNode]] = MappingProxyType(
    {
        "add": add,
        "and": and_,
        "assign": assign,
        "subtract": subtract,
        "or": or_,
        "xor": xor,
        "unknown": unknown,
    }
)


def build(operation: str, *operands: OperandLike) -> PseudoNode:
    """
    Emit the node for the operation with the given name.

    Operations without a registered builder are emitted as inline assembly of the name and its operands.
    """
    if (handler := OPERATIONS.get(operation.strip().lower())) is not None:
        return handler(*operands)
    logger.debug(f"no builder registered for {operation}")
    instruction = operation.strip()
    if operands:
        instruction = f"{instruction} {', '.join(str(operand) for operand in operands)}"
    return UnknownOp(instruction)
