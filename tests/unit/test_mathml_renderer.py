"""
Unit tests for the latex2mathml backend
"""

import pytest

from mathmarkup.errors import MathRenderError
from mathmarkup.rendering.mathml_renderer import (
    MathMLRenderer,
    check_structure,
    get_default_renderer,
)


class TestCheckStructure:
    """Structural validation before conversion"""

    @pytest.mark.parametrize("expression", [
        "x^2",
        "\\frac{1}{2}",
        "\\left( \\frac{a}{b} \\right)",
        "\\{1, 2\\}",
        "a \\leftarrow b",
        "\\begin{pmatrix} 1 & 0 \\\\ 0 & 1 \\end{pmatrix}",
        "\\begin{cases} x \\\\ \\begin{matrix} a \\end{matrix} \\end{cases}",
    ])
    def test_valid(self, expression):
        check_structure(expression)

    @pytest.mark.parametrize("expression", [
        "",
        "   ",
        "\\frac{1}{",
        "x}",
        "\\left( x",
        "\\begin{matrix} a \\end{pmatrix}",
        "\\begin{matrix} a",
        "a \\end{matrix}",
    ])
    def test_invalid(self, expression):
        with pytest.raises(MathRenderError):
            check_structure(expression)


class TestMathMLRenderer:
    """Rendering through latex2mathml"""

    def test_inline(self):
        result = MathMLRenderer().render("x", display=False)

        assert result.startswith("<math")
        assert 'display="inline"' in result
        assert "<mi>x</mi>" in result

    def test_display(self):
        result = MathMLRenderer().render(" \\frac{1}{2} ", display=True)

        assert 'display="block"' in result
        assert "<mfrac>" in result

    def test_namespace(self):
        result = MathMLRenderer().render("x", display=False)

        assert 'xmlns="http://www.w3.org/1998/Math/MathML"' in result

    @pytest.mark.parametrize("expression", [
        "\\sin(x) + \\sqrt{2}",
        "x_1^2 + \\frac{1}{2}",
        "\\sqrt[3]{x} \\cdot \\pi",
        "\\mathbf{v} = (1, 2)",
    ])
    def test_known_commands_render(self, expression):
        result = MathMLRenderer().render(expression, display=False)

        assert "<math" in result
        assert "\\" not in result

    @pytest.mark.parametrize("expression", [
        "\\foo{x}",
        "\\unknowncmd",
        "a + \\sen x",
    ])
    def test_unknown_command_raises(self, expression):
        with pytest.raises(MathRenderError) as exc_info:
            MathMLRenderer().render(expression, display=False)

        assert "unknown command" in exc_info.value.reason

    @pytest.mark.parametrize("expression", [
        "\\frac{1}",
        "\\dfrac{a}",
    ])
    def test_missing_argument_raises(self, expression):
        with pytest.raises(MathRenderError):
            MathMLRenderer().render(expression, display=True)

    def test_malformed_raises(self):
        with pytest.raises(MathRenderError) as exc_info:
            MathMLRenderer().render("\\frac{1}{", display=False)

        assert exc_info.value.expression == "\\frac{1}{"

    def test_default_renderer_is_shared(self):
        assert get_default_renderer() is get_default_renderer()
        assert isinstance(get_default_renderer(), MathMLRenderer)
