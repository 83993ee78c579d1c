"""Module defining the opaque operand references consumed by the pseudocode builder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Operand:
    """
    Opaque reference to a register, memory location or literal as handed over by the frontend.

    The text is never parsed. Two operands are the same if and only if their text is the same,
    so 0x0 and 0 are different operands.
    """

    text: str

    def __str__(self) -> str:
        return self.text

    @classmethod
    def of(cls, value: Union[Operand, str, object]) -> Operand:
        """Return the given operand, or wrap the string representation of anything else."""
        if isinstance(value, Operand):
            return value
        return cls(str(value))


ZERO = Operand("0")
ONE = Operand("1")
