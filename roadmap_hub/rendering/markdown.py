from __future__ import annotations

from markdown_it import MarkdownIt
from markupsafe import Markup

from roadmap_hub.rendering.highlight import highlight_fence

# Raw HTML in content is escaped, never passed through.
_markdown = MarkdownIt(
    "commonmark",
    {"html": False, "breaks": True, "highlight": highlight_fence},
).enable("table")


def normalize_newlines(text: str) -> str:
    """Turn literal ``\\n`` escape sequences into real newlines."""
    return text.replace("\\n", "\n")


def render_markdown(text: str | None) -> Markup:
    if not text:
        return Markup("")
    return Markup(_markdown.render(text))
