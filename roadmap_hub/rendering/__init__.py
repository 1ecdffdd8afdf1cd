from roadmap_hub.rendering.highlight import highlight_code, highlight_stylesheet
from roadmap_hub.rendering.markdown import normalize_newlines, render_markdown

__all__ = ["highlight_code", "highlight_stylesheet", "normalize_newlines", "render_markdown"]
