"""Server-side syntax highlighting for code examples and fenced code."""

from __future__ import annotations

from functools import lru_cache

from markupsafe import Markup
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

HIGHLIGHT_CSS_CLASS = "highlight"
DARK_STYLE = "monokai"
LIGHT_STYLE = "friendly"

# Fenced code inside markdown keeps markdown-it's <pre><code> wrapper, so it is
# styled by the same rules under this selector.
_FENCE_SELECTOR = ".markdown-body pre code"


@lru_cache(maxsize=64)
def _lexer_for(language: str) -> Lexer:
    try:
        return get_lexer_by_name(language.strip().lower())
    except ClassNotFound:
        return TextLexer()


def highlight_code(code: str, language: str | None, *, linenos: bool = False) -> Markup:
    """Highlight ``code`` as a standalone block, optionally with a line-number gutter."""
    if not code:
        return Markup("")
    lexer = _lexer_for(language or "text")
    formatter = HtmlFormatter(
        cssclass=HIGHLIGHT_CSS_CLASS,
        linenos="table" if linenos else False,
    )
    return Markup(highlight(code, lexer, formatter))


def highlight_fence(code: str, language: str, _attrs: str) -> str:
    """``MarkdownIt`` highlight hook: token spans only, the renderer adds the wrapper."""
    lexer = _lexer_for(language or "text")
    return highlight(code, lexer, HtmlFormatter(nowrap=True))


def _scoped_style_defs(style: str, mode: str) -> str:
    selectors = [
        f'html[data-mode="{mode}"] .{HIGHLIGHT_CSS_CLASS}',
        f'html[data-mode="{mode}"] {_FENCE_SELECTOR}',
    ]
    return HtmlFormatter(style=style).get_style_defs(selectors)


@lru_cache(maxsize=1)
def highlight_stylesheet() -> str:
    """Token colours for both modes, keyed off the root ``data-mode`` attribute."""
    return "\n".join(
        (
            _scoped_style_defs(DARK_STYLE, "dark"),
            _scoped_style_defs(LIGHT_STYLE, "light"),
        )
    )
