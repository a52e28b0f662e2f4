r"""
Math delimiter patterns and the dollar-amount heuristic

Canonical delimiters:
- Display math: $$...$$ (may span lines)
- Inline math:  $...$   (single line, no $ inside)

Legacy delimiters, rewritten by the normalizer:
- Display math: \[...\]
- Inline math:  \(...\)

All patterns are non-greedy with a single repeated class, so a failed
match never backtracks into nested quantifiers.
"""

import re
from dataclasses import dataclass
from typing import List

# Legacy delimiters
LEGACY_DISPLAY_PATTERN = re.compile(r'\\\[([\s\S]+?)\\\]')
LEGACY_INLINE_PATTERN = re.compile(r'\\\(([\s\S]+?)\\\)')

# Canonical delimiters (display must be resolved before inline)
DISPLAY_MATH_PATTERN = re.compile(r'\$\$([\s\S]+?)\$\$')
INLINE_MATH_PATTERN = re.compile(r'\$([^$\n]+?)\$')

# Run splitter tokenizer: display | inline | newline, in that priority
RUN_TOKEN_PATTERN = re.compile(r'(\$\$[\s\S]+?\$\$|\$[^$\n]+?\$|\n)')

# Prices such as $500$, $1.000$ or $3,50$
CURRENCY_AMOUNT_PATTERN = re.compile(r'[0-9]+(?:[.,][0-9]+)?')


def is_currency_amount(expression: str) -> bool:
    """
    True if a $-delimited interior looks like a money amount, not math.

    The check is a guess: there is no markup to force $5$ to be math.
    """
    return CURRENCY_AMOUNT_PATTERN.fullmatch(expression.strip()) is not None


@dataclass(frozen=True)
class MathFragment:
    """
    A math span found in a normalized string.

    Attributes:
        raw: Span including its delimiters
        expression: Interior without delimiters, trimmed
        is_display: True for $$...$$, False for $...$
        start: Offset of raw in the scanned string
    """
    raw: str
    expression: str
    is_display: bool
    start: int = 0

    @classmethod
    def from_match(cls, match: re.Match, is_display: bool) -> "MathFragment":
        return cls(
            raw=match.group(0),
            expression=match.group(1).strip(),
            is_display=is_display,
            start=match.start(),
        )

    @property
    def end(self) -> int:
        return self.start + len(self.raw)

    @property
    def is_currency(self) -> bool:
        return not self.is_display and is_currency_amount(self.expression)


def find_math_fragments(text: str, include_currency: bool = False) -> List[MathFragment]:
    """
    List the math spans of a normalized string in document order.

    Display spans claim their region first; inline spans are only looked
    for in the text between them. Dollar amounts are skipped unless
    include_currency is set.

    Inspection only (editor tooling, tests): render_for_embedding() and
    split_runs() scan with DISPLAY_MATH_PATTERN, INLINE_MATH_PATTERN and
    RUN_TOKEN_PATTERN directly and never call this function. The fragments
    match what render_for_embedding() sends to its renderer, except for an
    inline span that would straddle a rendered display span.
    """
    if not text:
        return []

    fragments: List[MathFragment] = []
    position = 0
    for display in DISPLAY_MATH_PATTERN.finditer(text):
        fragments.extend(_inline_fragments(text, position, display.start(), include_currency))
        fragments.append(MathFragment.from_match(display, is_display=True))
        position = display.end()
    fragments.extend(_inline_fragments(text, position, len(text), include_currency))
    return fragments


def _inline_fragments(text: str, start: int, end: int, include_currency: bool) -> List[MathFragment]:
    found = []
    for match in INLINE_MATH_PATTERN.finditer(text, start, end):
        fragment = MathFragment.from_match(match, is_display=False)
        if fragment.is_currency and not include_currency:
            continue
        found.append(fragment)
    return found
