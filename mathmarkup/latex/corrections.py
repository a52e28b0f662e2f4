"""
LaTeX command corrections

Generated math text often uses commands that KaTeX/MathML renderers do not
know: Spanish trig names (\\sen, \\tg) and the non-standard \\bold. The
table below maps them onto standard commands. Entries are literal
substrings applied in order, so \\senh and \\tgh become \\sinh and \\tanh.

Usage:
    >>> from mathmarkup.latex.corrections import apply_corrections
    >>> apply_corrections(r"\\sen(x) + \\tg(y)")
    '\\\\sin(x) + \\\\tan(y)'
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple

from mathmarkup.errors import CorrectionTableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatexCorrection:
    """
    One substring rewrite.

    Attributes:
        pattern: Literal text to look for (not a regex)
        replacement: Text written in its place
        description: Short note shown in logs and docs
    """
    pattern: str
    replacement: str
    description: str = ""

    def __post_init__(self):
        if not self.pattern:
            raise CorrectionTableError("correction pattern must not be empty")
        # A replacement that contains its own pattern would keep growing
        # on every pass and break normalize() idempotence.
        if self.pattern in self.replacement:
            raise CorrectionTableError(
                f"replacement {self.replacement!r} contains pattern {self.pattern!r}"
            )

    def apply(self, text: str) -> str:
        return text.replace(self.pattern, self.replacement)


DEFAULT_CORRECTIONS: Tuple[LatexCorrection, ...] = (
    LatexCorrection('\\bold{', '\\mathbf{', "\\bold is not standard; \\mathbf is"),
    LatexCorrection('\\sen', '\\sin', "Spanish sine"),
    LatexCorrection('\\tg', '\\tan', "Spanish tangent"),
)


def apply_corrections(
    text: str,
    corrections: Optional[Iterable[LatexCorrection]] = None,
) -> str:
    """
    Apply each correction in order.

    Args:
        text: Text that may contain LaTeX commands
        corrections: Table to apply (default: DEFAULT_CORRECTIONS)

    Returns:
        Corrected text
    """
    if corrections is None:
        corrections = DEFAULT_CORRECTIONS

    for correction in corrections:
        if correction.pattern in text:
            logger.debug(f"Applying LaTeX correction {correction.pattern!r} -> {correction.replacement!r}")
            text = correction.apply(text)
    return text


def build_corrections(extra: Optional[Mapping[str, str]] = None) -> Tuple[LatexCorrection, ...]:
    """
    Default table followed by caller supplied (pattern, replacement) pairs.

    Raises:
        CorrectionTableError: if an extra entry is invalid
    """
    if not extra:
        return DEFAULT_CORRECTIONS

    added = tuple(
        LatexCorrection(pattern, replacement, "configured")
        for pattern, replacement in extra.items()
    )
    return DEFAULT_CORRECTIONS + added
