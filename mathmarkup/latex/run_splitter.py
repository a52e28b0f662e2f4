"""
Run Splitter - Mixed text/math to typed segments

Partitions a normalized string into text, math and line-break segments for
document builders that compose native runs instead of parsing markup
(e.g. a python-docx paragraph with text runs and OMML runs).

Architecture:
    raw text → normalize() → RUN_TOKEN_PATTERN → [Segment, ...]

Round trip:
    join_runs(split_runs(s)) == normalize(s)

Usage:
    >>> from mathmarkup.latex.run_splitter import split_runs
    >>> [seg.kind.value for seg in split_runs("Sea $x$\\nfin")]
    ['text', 'math', 'break', 'text']
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from mathmarkup.config.constants import DISPLAY_DELIMITER, INLINE_DELIMITER, LINE_BREAK
from mathmarkup.latex.corrections import LatexCorrection
from mathmarkup.latex.normalizer import normalize
from mathmarkup.latex.patterns import RUN_TOKEN_PATTERN, is_currency_amount

logger = logging.getLogger(__name__)


# ============================================================================
# Segment types
# ============================================================================

class SegmentKind(Enum):
    """Kinds of segments produced by the splitter."""
    TEXT = "text"
    MATH = "math"
    BREAK = "break"


@dataclass
class Segment:
    """Base class for all segments."""
    # kind is set by subclasses in __post_init__, not passed as parameter
    kind: SegmentKind = field(init=False, default=SegmentKind.TEXT)

    @property
    def raw(self) -> str:
        """Source text this segment was cut from"""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}


@dataclass
class TextSegment(Segment):
    """Plain text (may contain Markdown and literal dollar amounts)."""
    value: str

    def __post_init__(self):
        self.kind = SegmentKind.TEXT

    @property
    def raw(self) -> str:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value}


@dataclass
class MathSegment(Segment):
    """Math expression with delimiters stripped."""
    value: str
    is_display: bool = False
    # Delimited source span; defaults to value wrapped in its delimiters
    source: Optional[str] = None

    def __post_init__(self):
        self.kind = SegmentKind.MATH

    @property
    def raw(self) -> str:
        if self.source is not None:
            return self.source
        delimiter = DISPLAY_DELIMITER if self.is_display else INLINE_DELIMITER
        return f"{delimiter}{self.value}{delimiter}"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "value": self.value, "isDisplay": self.is_display}


@dataclass
class BreakSegment(Segment):
    """Explicit line break."""

    def __post_init__(self):
        self.kind = SegmentKind.BREAK

    @property
    def raw(self) -> str:
        return LINE_BREAK


# ============================================================================
# Splitting
# ============================================================================

def _classify(piece: str) -> Segment:
    if piece == LINE_BREAK:
        return BreakSegment()

    if piece.startswith(DISPLAY_DELIMITER) and piece.endswith(DISPLAY_DELIMITER) and len(piece) > 4:
        return MathSegment(piece[2:-2].strip(), is_display=True, source=piece)

    interior = piece[1:-1]
    if is_currency_amount(interior):
        return TextSegment(piece)
    return MathSegment(interior.strip(), is_display=False, source=piece)


def split_runs(
    text: Optional[str],
    corrections: Optional[Iterable[LatexCorrection]] = None,
) -> List[Segment]:
    """
    Split mixed text/math into ordered segments.

    Args:
        text: Markdown text with embedded math
        corrections: Correction table passed to normalize()

    Returns:
        Segments in document order. Empty text pieces are dropped and
        adjacent text pieces are merged, so two text segments are never
        neighbours. Unbalanced $ stay inside the surrounding text.
    """
    normalized = normalize(text, corrections)
    segments: List[Segment] = []

    # re.split with one capture group alternates text, token, text, ...
    for index, piece in enumerate(RUN_TOKEN_PATTERN.split(normalized)):
        if not piece:
            continue

        segment = TextSegment(piece) if index % 2 == 0 else _classify(piece)

        if isinstance(segment, TextSegment) and segments and isinstance(segments[-1], TextSegment):
            segments[-1].value += segment.value
        else:
            segments.append(segment)

    logger.debug(f"Split {len(normalized)} chars into {len(segments)} segments")
    return segments


def join_runs(segments: Iterable[Segment]) -> str:
    """Concatenate the raw form of each segment (inverse of split_runs)."""
    return "".join(segment.raw for segment in segments)


def segments_to_dicts(segments: Iterable[Segment]) -> List[Dict[str, Any]]:
    """JSON-friendly form: {"kind": ..., "value": ..., "isDisplay": ...}"""
    return [segment.to_dict() for segment in segments]


def split_lines(
    text: Optional[str],
    corrections: Optional[Iterable[LatexCorrection]] = None,
) -> List[List[Segment]]:
    """
    Group segments into lines, one list per line.

    A break closes the current line, so "a\\n\\nb" gives three lines with
    an empty one in the middle. Display math spanning several lines stays
    in a single line group.
    """
    lines: List[List[Segment]] = [[]]
    for segment in split_runs(text, corrections):
        if segment.kind == SegmentKind.BREAK:
            lines.append([])
        else:
            lines[-1].append(segment)
    return lines
