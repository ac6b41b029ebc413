from app.domain.cv.renderers.latex_prompt import escape_latex, render_latex_prompt_text
from app.domain.cv.renderers.plain_text import render_plain_text
from app.domain.cv.renderers.styled_markup import emphasize, render_styled_markup

__all__ = [
    "escape_latex",
    "emphasize",
    "render_plain_text",
    "render_styled_markup",
    "render_latex_prompt_text",
]
