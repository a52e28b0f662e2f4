"""
Math markup parsing: delimiter normalization and run splitting.

Example usage:
    >>> from mathmarkup.latex import normalize, split_runs
    >>> normalize(r"\\(x^2\\)")
    '$$x^2$$'
    >>> [seg.kind.value for seg in split_runs("Cuesta $500$ el kilo")]
    ['text']
"""

from mathmarkup.latex.corrections import (
    DEFAULT_CORRECTIONS,
    LatexCorrection,
    apply_corrections,
    build_corrections,
)
from mathmarkup.latex.normalizer import normalize
from mathmarkup.latex.patterns import MathFragment, find_math_fragments, is_currency_amount
from mathmarkup.latex.run_splitter import (
    BreakSegment,
    MathSegment,
    Segment,
    SegmentKind,
    TextSegment,
    join_runs,
    segments_to_dicts,
    split_lines,
    split_runs,
)

__all__ = [
    'DEFAULT_CORRECTIONS',
    'LatexCorrection',
    'apply_corrections',
    'build_corrections',
    'normalize',
    'MathFragment',
    'find_math_fragments',
    'is_currency_amount',
    'Segment',
    'SegmentKind',
    'TextSegment',
    'MathSegment',
    'BreakSegment',
    'split_runs',
    'split_lines',
    'join_runs',
    'segments_to_dicts',
]
