from typing import Optional

from pseudoemit.structures.pseudo import nodes
from pseudoemit.structures.visitors.interfaces import PseudoNodeVisitorInterface
from pseudoemit.util.decoration import PlainTheme, Theme


class PseudocodeGenerator(PseudoNodeVisitorInterface[str]):
    """Generate pseudocode for the nodes emitted by the builder.

    Operands are emitted as handed over by the frontend, only the tokens introduced here
    (the __asm call, raw instruction text and cast types) are decorated by the theme.
    """

    ASM_CALLNAME = "__asm"

    def __init__(self, theme: Optional[Theme] = None):
        """Initialize the generator with the theme used for decoration."""
        self._theme = theme if theme is not None else PlainTheme()

    @property
    def theme(self) -> Theme:
        return self._theme

    def visit_unknown_op(self, node: nodes.UnknownOp) -> str:
        """Return the instruction wrapped in an inline assembly call, e.g. __asm (rol eax, 1)."""
        return f"{self._theme.callname(self.ASM_CALLNAME)} ({self._theme.auto(node.instruction)})"

    def visit_assignment(self, node: nodes.Assignment) -> str:
        """Return dst = src, or nothing at all if the assignment does not change anything."""
        if node.is_noop:
            return ""
        return f"{node.destination} = {node.source}"

    def visit_cast_assignment(self, node: nodes.CastAssignment) -> str:
        """Return dst = (type) src."""
        return f"{node.destination} = ({self._theme.types(node.cast)}) {node.source}"

    def visit_math_assignment(self, node: nodes.MathAssignment) -> str:
        """Return dst = op src, without whitespace between operator and source (e.g. a = -b)."""
        return f"{node.destination} = {node.operation}{node.source}"

    def visit_inc_dec(self, node: nodes.IncDec) -> str:
        """Return dst++ or dst--."""
        return f"{node.destination}{node.operation}"

    def visit_binary_math(self, node: nodes.BinaryMath) -> str:
        """Return dst op= b if both sources are the same operand, else dst = a op b."""
        if node.is_compound:
            return f"{node.destination}{node.operation}= {node.source_b}"
        return f"{node.destination} = {node.source_a} {node.operation} {node.source_b}"
