import pytest
from pseudoemit.structures.pseudo import CastAssignment, UnknownOp
from pseudoemit.util.decoration import HtmlTheme, PlainTheme, TerminalTheme, Theme
from pseudoemit.util.options import Options
from pygments.util import ClassNotFound


class TestPlainTheme:
    @pytest.mark.parametrize("text", ["__asm", "0x10", "weird_op r1, r2", "", "a < b"])
    def test_identity(self, text: str):
        theme = PlainTheme()
        assert theme.callname(text) == text
        assert theme.auto(text) == text
        assert theme.types(text) == text


class TestTerminalTheme:
    def test_callname_is_colored(self):
        decorated = TerminalTheme().callname("__asm")
        assert "__asm" in decorated
        assert "\x1b[" in decorated

    def test_types_are_colored(self):
        decorated = TerminalTheme().types("uint32_t")
        assert "uint32_t" in decorated
        assert "\x1b[" in decorated

    def test_auto_keeps_text(self):
        decorated = TerminalTheme().auto("rol eax, 0x1")
        for part in ["rol", "eax", "0x1"]:
            assert part in decorated
        assert not decorated.endswith("\n")

    def test_empty_text(self):
        assert TerminalTheme().auto("") == ""

    def test_unknown_style(self):
        with pytest.raises(ClassNotFound):
            TerminalTheme(style="no-such-style")


class TestHtmlTheme:
    def test_callname_is_span(self):
        assert HtmlTheme().callname("__asm") == '<span class="nf">__asm</span>'

    def test_types_are_span(self):
        assert HtmlTheme().types("int") == '<span class="kt">int</span>'

    def test_auto_is_escaped(self):
        decorated = HtmlTheme().auto("a<b")
        assert "&lt;" in decorated
        assert "<b" not in decorated

    def test_auto_classifies_literals(self):
        decorated = HtmlTheme().auto("0x10")
        assert '<span class="mh">0x10</span>' in decorated

    def test_render(self):
        rendered = UnknownOp("cpuid").render(HtmlTheme())
        assert rendered.startswith('<span class="nf">__asm</span> (')
        assert "cpuid" in rendered
        assert CastAssignment("eax", "bl", "char").render(HtmlTheme()) == 'eax = (<span class="kt">char</span>) bl'

    def test_style_defs(self):
        css = HtmlTheme().style_defs()
        assert ".nf" in css
        assert "/*" not in css


@pytest.mark.parametrize(
    ["name", "theme_type"],
    [("plain", PlainTheme), ("terminal", TerminalTheme), ("html", HtmlTheme)],
)
def test_from_options(name: str, theme_type: type):
    assert isinstance(Theme.from_options(Options.from_dict({"theme.name": name, "theme.style": "monokai"})), theme_type)


def test_from_default_options():
    assert isinstance(Theme.from_options(Options.load_default_options()), PlainTheme)


def test_from_options_unknown_theme():
    with pytest.raises(ValueError):
        Theme.from_options(Options.from_dict({"theme.name": "fancy"}))
