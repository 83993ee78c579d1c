"""Module testing whether nodes can be built and rendered from several threads sharing one theme."""
from concurrent.futures import ThreadPoolExecutor
from itertools import product

import pytest
from pseudoemit.builder import build
from pseudoemit.util.decoration import HtmlTheme, PlainTheme, TerminalTheme, Theme

operations = ["add", "subtract", "and", "or", "xor", "rol"]
operand_triples = list(product(["eax", "ebx"], ["eax", "ecx"], ["0", "1", "ecx", "0x10"]))
instructions = ["cpuid", "rep movsb", "weird_op r1, 0x10", "a<b"]


def emit(theme: Theme) -> list[str]:
    """Build and render every operation on every operand combination."""
    rendered = [build(operation, *operands).render(theme) for operation in operations for operands in operand_triples]
    rendered.extend(build("unknown", instruction).render(theme) for instruction in instructions)
    rendered.extend(build("assign", destination, source).render(theme) for destination, source, _ in operand_triples)
    return rendered


@pytest.mark.parametrize("theme", [PlainTheme(), TerminalTheme(), HtmlTheme()], ids=["plain", "terminal", "html"])
def test_shared_theme_across_threads(theme: Theme):
    expected = emit(theme)
    with ThreadPoolExecutor(max_workers=8) as executor:
        futures = [executor.submit(emit, theme) for _ in range(32)]
    assert all(future.result() == expected for future in futures)
