"""
Inline Renderer - Embed rendered math into HTML/Markdown text

Replaces every $$...$$ and $...$ span of a normalized string with rendered
markup (MathML by default) so the result can be dropped into an HTML
preview or an HTML-based Word export.

Rendering Strategy:
1. normalize() the input
2. Render display spans ($$...$$, may span lines) first, so the inline
   scan never splits a display span at its inner $ characters
3. Render inline spans ($...$, single line); dollar amounts such as $500$
   are left untouched
4. A fragment that fails to render becomes a red error span with the
   original expression; the rest of the text is still rendered

render_for_embedding() never raises. It runs on every preview refresh,
so one bad formula must not blank the whole document.
"""

import html
import logging
import re
from typing import Iterable, Optional

from mathmarkup.config.constants import LOG_PREVIEW_CHARS
from mathmarkup.errors import MathRenderError
from mathmarkup.latex.corrections import LatexCorrection
from mathmarkup.latex.normalizer import normalize
from mathmarkup.latex.patterns import (
    DISPLAY_MATH_PATTERN,
    INLINE_MATH_PATTERN,
    is_currency_amount,
)
from mathmarkup.rendering.mathml_renderer import MathRenderer, get_default_renderer

logger = logging.getLogger(__name__)

# Any $...$ run, for the editor source overlay
_SOURCE_MATH_PATTERN = re.compile(r'(\$.*?\$)')


def _error_color() -> str:
    from mathmarkup.config.settings import get_settings
    return get_settings().error_color


def _reason(error: Exception) -> str:
    if isinstance(error, MathRenderError):
        return error.reason
    return f"{type(error).__name__}: {error}"


def display_error_span(expression: str, color: Optional[str] = None) -> str:
    """
    Visible marker for a display expression that failed to render.

    $ is written as &#36; so the inline pass cannot pair it with a later $.
    """
    color = color or _error_color()
    escaped = html.escape(expression, quote=False).replace('$', '&#36;')
    return (
        f'<span class="math-error" style="color: {color}; font-family: monospace;">'
        f'[Error LaTeX: {escaped}]</span>'
    )


def inline_error_span(expression: str, color: Optional[str] = None) -> str:
    """Visible marker for an inline expression that failed to render"""
    color = color or _error_color()
    return (
        f'<span class="math-error" style="color: {color};">'
        f'${html.escape(expression, quote=False)}$</span>'
    )


def render_for_embedding(
    text: Optional[str],
    renderer: Optional[MathRenderer] = None,
    corrections: Optional[Iterable[LatexCorrection]] = None,
) -> str:
    """
    Render all math spans of a Markdown/HTML string.

    Args:
        text: Text with embedded math in any accepted delimiter spelling
        renderer: Math backend (default: MathML through latex2mathml)
        corrections: Correction table passed to normalize()

    Returns:
        Text with math spans replaced by rendered markup. Dollar amounts
        and unbalanced $ are left as they are.
    """
    renderer = renderer or get_default_renderer()
    normalized = normalize(text, corrections)
    if not normalized:
        return ""

    def _render_display(match) -> str:
        tex = match.group(1)
        try:
            return renderer.render(tex, display=True)
        except Exception as e:
            logger.warning(f"Failed to render display math {tex[:LOG_PREVIEW_CHARS]!r}: {_reason(e)}")
            return display_error_span(tex)

    def _render_inline(match) -> str:
        tex = match.group(1)
        if is_currency_amount(tex):
            return match.group(0)
        try:
            return renderer.render(tex, display=False)
        except Exception as e:
            logger.warning(f"Failed to render inline math {tex[:LOG_PREVIEW_CHARS]!r}: {_reason(e)}")
            return inline_error_span(tex)

    result = DISPLAY_MATH_PATTERN.sub(_render_display, normalized)
    return INLINE_MATH_PATTERN.sub(_render_inline, result)


def highlight_math_source(text: Optional[str]) -> str:
    """
    HTML-escape editor source and mark each $...$ run.

    Used behind a textarea to colour math while the author types.
    """
    if not text:
        return ""
    escaped = html.escape(text, quote=False)
    return _SOURCE_MATH_PATTERN.sub(r'<span class="math-source">\1</span>', escaped)
