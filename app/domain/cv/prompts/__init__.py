from app.domain.cv.prompts.latex import (
    DEFAULT_STYLE_PREFERENCE,
    LATEX_CV_HUMAN,
    LATEX_CV_SYSTEM,
    LATEX_FALLBACK_TEMPLATE,
)
from app.domain.cv.prompts.section_order import (
    DEFAULT_PREFERENCE,
    SECTION_ORDER_HUMAN,
    SECTION_ORDER_SYSTEM,
)

__all__ = [
    "SECTION_ORDER_SYSTEM",
    "SECTION_ORDER_HUMAN",
    "DEFAULT_PREFERENCE",
    "LATEX_CV_SYSTEM",
    "LATEX_CV_HUMAN",
    "LATEX_FALLBACK_TEMPLATE",
    "DEFAULT_STYLE_PREFERENCE",
]
