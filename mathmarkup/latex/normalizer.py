r"""
Math delimiter normalizer

Rewrites the delimiter spellings produced by text generators into the
canonical $$ form and fixes common non-standard commands.

Steps, in order:
1. \[ ... \]  ->  "\n$$...$$\n"  (display math on its own line)
2. \( ... \)  ->  "$$...$$"      (no added newlines)
3. Correction table (\bold{ -> \mathbf{, \sen -> \sin, \tg -> \tan)

The function is total and idempotent: normalize(normalize(s)) == normalize(s).

Usage:
    >>> from mathmarkup.latex.normalizer import normalize
    >>> normalize(r"Sea \(x^2\) y \[y = 2x\]")
    'Sea $$x^2$$ y \n$$y = 2x$$\n'
"""

import logging
from typing import Iterable, Optional

from mathmarkup.latex.corrections import LatexCorrection, apply_corrections
from mathmarkup.latex.patterns import LEGACY_DISPLAY_PATTERN, LEGACY_INLINE_PATTERN

logger = logging.getLogger(__name__)


def _to_display(match) -> str:
    return f"\n$${match.group(1)}$$\n"


def _to_inline(match) -> str:
    # Inline legacy math also gets $$; downstream consumers rely on it.
    return f"$${match.group(1)}$$"


def _substitute_all(pattern, replacement, text: str):
    """
    Apply pattern.subn until nothing matches.

    A nested opener such as the inner \\( in "\\( f\\(a\\) \\)" is skipped
    by one pass and only matched by the next. Each round removes one
    opener per match, so the loop ends.
    """
    total = 0
    while True:
        text, count = pattern.subn(replacement, text)
        if not count:
            return text, total
        total += count


def normalize(
    text: Optional[str],
    corrections: Optional[Iterable[LatexCorrection]] = None,
) -> str:
    """
    Normalize math delimiters and command names.

    Args:
        text: Markdown text with embedded math in any accepted spelling
        corrections: Correction table (default: configured table)

    Returns:
        Text using only $/$$ delimiters. Malformed LaTeX is left as is.
    """
    if not text:
        return ""

    if corrections is None:
        from mathmarkup.config.settings import get_settings
        corrections = get_settings().correction_table()

    processed, display_count = _substitute_all(LEGACY_DISPLAY_PATTERN, _to_display, text)
    processed, inline_count = _substitute_all(LEGACY_INLINE_PATTERN, _to_inline, processed)

    if display_count or inline_count:
        logger.debug(
            f"Normalized legacy delimiters: {display_count} display, {inline_count} inline"
        )

    return apply_corrections(processed, corrections)
