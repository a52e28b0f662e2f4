"""
Math markup pipeline for generated math assessments.

Turns Markdown text with embedded LaTeX (as written by authors or a text
generator) into:
- normalized text with canonical $ / $$ delimiters  (normalize)
- HTML with rendered MathML                          (render_for_embedding)
- typed text / math / break segments                 (split_runs)
"""

from mathmarkup.errors import CorrectionTableError, MathMarkupError, MathRenderError
from mathmarkup.latex import (
    BreakSegment,
    MathSegment,
    Segment,
    SegmentKind,
    TextSegment,
    join_runs,
    normalize,
    split_runs,
)
from mathmarkup.rendering import render_for_embedding

__version__ = "1.0.0"

__all__ = [
    'normalize',
    'render_for_embedding',
    'split_runs',
    'join_runs',
    'Segment',
    'SegmentKind',
    'TextSegment',
    'MathSegment',
    'BreakSegment',
    'MathMarkupError',
    'MathRenderError',
    'CorrectionTableError',
]
