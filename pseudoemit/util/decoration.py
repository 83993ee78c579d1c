"""Module handling the decoration of emitted pseudocode tokens."""
from __future__ import annotations

from abc import ABC, abstractmethod
from re import compile
from typing import TYPE_CHECKING, Iterable, Tuple

from pygments import format, lex
from pygments.formatter import Formatter
from pygments.formatters.html import HtmlFormatter
from pygments.formatters.terminal256 import Terminal256Formatter
from pygments.lexers.c_like import CLexer
from pygments.token import Keyword, Name, _TokenType

if TYPE_CHECKING:
    from pseudoemit.util.options import Options

DEFAULT_STYLE = "paraiso-dark"


class Theme(ABC):
    """Interface of the decoration collaborator used when rendering nodes."""

    @abstractmethod
    def callname(self, text: str) -> str:
        """Decorate a call-like name."""

    @abstractmethod
    def auto(self, text: str) -> str:
        """Decorate arbitrary text, depending on it being a literal or a symbol."""

    @abstractmethod
    def types(self, text: str) -> str:
        """Decorate a type name."""

    @classmethod
    def from_options(cls, options: Options) -> Theme:
        """Create the theme configured by theme.name and theme.style."""
        name, style = options.theme_name, options.theme_style
        if name == "plain":
            return PlainTheme()
        if name == "terminal":
            return TerminalTheme(style=style)
        if name == "html":
            return HtmlTheme(style=style)
        raise ValueError(f"Unknown theme {name}")


class PlainTheme(Theme):
    """Theme leaving every token untouched."""

    def callname(self, text: str) -> str:
        return text

    def auto(self, text: str) -> str:
        return text

    def types(self, text: str) -> str:
        return text


class PygmentsTheme(Theme):
    """Theme coloring tokens with the given pygments formatter."""

    def __init__(self, formatter: Formatter):
        self._formatter = formatter

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def callname(self, text: str) -> str:
        return self._format([(Name.Function, text)], text)

    def auto(self, text: str) -> str:
        """Let the C lexer decide which parts of the text are literals and which are names."""
        return self._format(lex(text, CLexer(stripnl=False, ensurenl=False)), text)

    def types(self, text: str) -> str:
        return self._format([(Keyword.Type, text)], text)

    def _format(self, tokens: Iterable[Tuple[_TokenType, str]], text: str) -> str:
        """Format the tokens, dropping the line separator some formatters append to the last line."""
        decorated = format(tokens, self._formatter)
        if decorated.endswith("\n") and not text.endswith("\n"):
            return decorated[:-1]
        return decorated


class TerminalTheme(PygmentsTheme):
    """Theme emitting 256-color escape sequences."""

    def __init__(self, style: str = DEFAULT_STYLE):
        super().__init__(Terminal256Formatter(style=style))


class HtmlTheme(PygmentsTheme):
    """Theme emitting html spans, to be combined with the stylesheet of style_defs()."""

    def __init__(self, style: str = DEFAULT_STYLE):
        super().__init__(HtmlFormatter(nowrap=True, style=style))

    def style_defs(self) -> str:
        """Return the stylesheet of the configured style."""
        return self._filter_css_comments(self._formatter.get_style_defs())

    @staticmethod
    def _filter_css_comments(css: str) -> str:
        """Strip the CSS block comments generated by pygments > 2.4.0."""
        find_comments = compile(r"/\*[^*]*\*/")
        return find_comments.sub("", css)
