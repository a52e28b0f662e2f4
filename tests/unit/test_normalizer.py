"""
Unit tests for the math delimiter normalizer

Tests:
- \\[...\\] → display $$ on its own line
- \\(...\\) → $$ without added newlines
- Command corrections
- Idempotence
"""

import pytest

from mathmarkup.latex.corrections import LatexCorrection
from mathmarkup.latex.normalizer import normalize


class TestLegacyDelimiters:
    """Legacy delimiter conversion"""

    def test_inline_paren(self):
        result = normalize(r"\(x^2\)")

        assert r"\(" not in result
        assert r"\)" not in result
        assert result == "$$x^2$$"

    def test_inline_paren_keeps_flow(self):
        result = normalize(r"Sea \(a + b\) un número")

        assert result == "Sea $$a + b$$ un número"
        assert "\n" not in result

    def test_display_bracket(self):
        result = normalize(r"\[x^2\]")

        assert result == "\n$$x^2$$\n"

    def test_display_bracket_inside_paragraph(self):
        result = normalize(r"Calcula \[\frac{1}{2} + \frac{1}{3}\] y simplifica")

        assert result == "Calcula \n$$\\frac{1}{2} + \\frac{1}{3}$$\n y simplifica"

    def test_multiline_bracket(self):
        source = "\\[\n\\begin{pmatrix} 1 & 0 \\\\\n 0 & 1 \\end{pmatrix}\n\\]"
        result = normalize(source)

        assert result.startswith("\n$$\n\\begin{pmatrix}")
        assert result.endswith("\\end{pmatrix}\n$$\n")

    def test_non_greedy_matching(self):
        result = normalize(r"\(a\) y \(b\)")

        assert result == "$$a$$ y $$b$$"

    def test_nested_inline_paren(self):
        result = normalize(r"\( f\(a\) \)")

        assert result == "$$ f$$a$$ $$"
        assert r"\(" not in result
        assert r"\)" not in result

    def test_nested_display_bracket(self):
        result = normalize(r"\[ \[ x \] \]")

        assert result == "\n$$ \n$$ x $$\n $$\n"
        assert r"\[" not in result

    def test_unclosed_legacy_delimiter_left_alone(self):
        assert normalize(r"Sea \(x sin cerrar") == r"Sea \(x sin cerrar"

    def test_canonical_text_unchanged(self):
        text = "Sea $x$ y $$y = 2x$$"
        assert normalize(text) == text


class TestCommandCorrections:
    """Correction table applied by normalize()"""

    def test_spanish_trig_and_bold(self):
        result = normalize(r"\sen(x) + \tg(y) + \bold{z}")

        assert r"\sin(x)" in result
        assert r"\tan(y)" in result
        assert r"\mathbf{z}" in result
        assert r"\sen" not in result
        assert r"\tg" not in result
        assert r"\bold" not in result

    def test_corrections_inside_legacy_delimiters(self):
        assert normalize(r"\(\sen x\)") == r"$$\sin x$$"

    def test_custom_table(self):
        table = (LatexCorrection('\\cosec', '\\csc'),)

        assert normalize(r"\cosec x + \sen x", corrections=table) == r"\csc x + \sen x"


class TestEdgeCases:
    """Empty and degenerate input"""

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert normalize(value) == ""

    def test_malformed_latex_not_rejected(self):
        assert normalize(r"$\frac{1}{$") == r"$\frac{1}{$"


IDEMPOTENCE_SAMPLES = [
    r"\(x^2\)",
    r"\[x^2\]",
    r"Texto \(a\) y \[b\] y $c$ y $$d$$",
    r"\sen(x) + \tg(y) + \bold{z}",
    r"\( \[ \) \]",
    r"\[ a \[ b \]",
    r"\\(x\) doble barra",
    "\\[\n\\begin{matrix} a \\\\ b \\end{matrix}\n\\]",
    "Cuesta $500 el kilo",
    r"\[ \[ x \] \]",
    r"\(\(x\)\)",
    r"\( f\(a\) \)",
    "",
]


class TestIdempotence:
    """normalize(normalize(s)) == normalize(s)"""

    @pytest.mark.parametrize("text", IDEMPOTENCE_SAMPLES)
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once
