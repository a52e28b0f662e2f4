"""
Unit tests for delimiter patterns and the dollar-amount heuristic
"""

import pytest

from mathmarkup.latex.patterns import (
    MathFragment,
    find_math_fragments,
    is_currency_amount,
)


class TestCurrencyHeuristic:
    """$-delimited numbers are money, not math"""

    @pytest.mark.parametrize("interior", ["500", "1.000", "3,50", " 500 ", "0"])
    def test_amounts(self, interior):
        assert is_currency_amount(interior) is True

    @pytest.mark.parametrize("interior", [
        "x", "2x", "1.000.000", "-5", "5 + 3", "\\frac{1}{2}", "1,5,0", "", "٣",
    ])
    def test_not_amounts(self, interior):
        assert is_currency_amount(interior) is False


class TestFindMathFragments:
    """Fragment inspection on normalized text"""

    def test_display_and_inline_in_order(self):
        fragments = find_math_fragments("Sea $x$ y $$ y = 2x $$ con $z$")

        assert [f.expression for f in fragments] == ["x", "y = 2x", "z"]
        assert [f.is_display for f in fragments] == [False, True, False]

    def test_raw_and_offsets(self):
        text = "Sea $x$"
        fragment = find_math_fragments(text)[0]

        assert fragment.raw == "$x$"
        assert text[fragment.start:fragment.end] == "$x$"

    def test_inline_scan_does_not_split_display(self):
        fragments = find_math_fragments("$$ \\frac{1}{2} $$ and $x$")

        assert len(fragments) == 2
        assert fragments[0] == MathFragment("$$ \\frac{1}{2} $$", "\\frac{1}{2}", True, 0)

    def test_currency_skipped_by_default(self):
        assert find_math_fragments("Cuesta $500$") == []

        fragments = find_math_fragments("Cuesta $500$", include_currency=True)
        assert len(fragments) == 1
        assert fragments[0].is_currency

    def test_inline_does_not_span_lines(self):
        assert find_math_fragments("$a\nb$") == []

    def test_multiline_display(self):
        fragments = find_math_fragments("$$\\begin{matrix} a \\\\\n b \\end{matrix}$$")

        assert len(fragments) == 1
        assert fragments[0].is_display

    def test_empty(self):
        assert find_math_fragments("") == []
