"""
LaTeX → MathML renderer backend

Renders one math expression (no delimiters) to presentation MathML with
latex2mathml. Malformed expressions raise MathRenderError; callers decide
how to degrade.

latex2mathml is lenient with bad input: an unclosed group can render as a
partial formula, an unknown command comes out as <mi>\foo</mi> and a
missing argument leaves a one-child <mfrac>. The source structure is
checked before conversion and the element tree after it.
"""

import logging
import re
from xml.etree.ElementTree import tostring
from xml.sax.saxutils import unescape

from latex2mathml.converter import convert_to_element

from mathmarkup.config.constants import MATHML_NAMESPACE
from mathmarkup.errors import MathRenderError

logger = logging.getLogger(__name__)

_LEFT_PATTERN = re.compile(r'\\left(?![a-zA-Z])')
_RIGHT_PATTERN = re.compile(r'\\right(?![a-zA-Z])')
_ENVIRONMENT_PATTERN = re.compile(r'\\(begin|end)\{([^}]*)\}')

# Known control words never reach the output as literal text
_CONTROL_WORD_PATTERN = re.compile(r'\\[a-zA-Z]+')
_TOKEN_ELEMENTS = ('mi', 'mo', 'mn')

# Presentation MathML elements with a fixed number of children
_ELEMENT_ARITY = {
    'mfrac': 2,
    'mroot': 2,
    'msub': 2,
    'msup': 2,
    'msubsup': 3,
    'munder': 2,
    'mover': 2,
    'munderover': 3,
}


def check_structure(expression: str) -> None:
    """
    Reject expressions with unbalanced groups.

    Checks {...} nesting (ignoring escaped \\{ and \\}), \\left/\\right
    pairs and \\begin/\\end environment names.

    Raises:
        MathRenderError: if the expression is empty or unbalanced
    """
    if not expression or not expression.strip():
        raise MathRenderError(expression, "empty expression")

    depth = 0
    escaped = False
    for char in expression:
        if escaped:
            escaped = False
            continue
        if char == '\\':
            escaped = True
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth < 0:
                raise MathRenderError(expression, "unexpected '}'")
    if depth:
        raise MathRenderError(expression, f"{depth} unclosed '{{'")

    if len(_LEFT_PATTERN.findall(expression)) != len(_RIGHT_PATTERN.findall(expression)):
        raise MathRenderError(expression, "unbalanced \\left/\\right")

    open_environments = []
    for match in _ENVIRONMENT_PATTERN.finditer(expression):
        command, name = match.groups()
        if command == 'begin':
            open_environments.append(name)
        elif not open_environments or open_environments.pop() != name:
            raise MathRenderError(expression, f"unexpected \\end{{{name}}}")
    if open_environments:
        raise MathRenderError(expression, f"unclosed \\begin{{{open_environments[-1]}}}")


def check_rendered(expression: str, math_element) -> None:
    """
    Reject a converted <math> tree that hides an input error.

    Raises:
        MathRenderError: on a control word left as literal text (unknown
            command) or a fraction, root or script with missing arguments
    """
    for element in math_element.iter():
        tag = element.tag
        text = element.text or ""
        if tag in _TOKEN_ELEMENTS and _CONTROL_WORD_PATTERN.fullmatch(text.strip()):
            raise MathRenderError(expression, f"unknown command {text.strip()}")

        arity = _ELEMENT_ARITY.get(tag)
        if arity is not None and len(element) != arity:
            raise MathRenderError(
                expression, f"<{tag}> has {len(element)} of {arity} arguments"
            )


class MathRenderer:
    """Base class for math renderer backends."""

    def render(self, expression: str, display: bool) -> str:
        """
        Render one expression.

        Args:
            expression: LaTeX without delimiters
            display: True for block math, False for inline math

        Returns:
            Rendered markup

        Raises:
            MathRenderError: if the expression is malformed
        """
        raise NotImplementedError


class MathMLRenderer(MathRenderer):
    """Presentation MathML through latex2mathml."""

    def __init__(self, xmlns: str = MATHML_NAMESPACE):
        self.xmlns = xmlns

    def render(self, expression: str, display: bool) -> str:
        check_structure(expression)

        try:
            math_element = convert_to_element(
                expression.strip(),
                xmlns=self.xmlns,
                display="block" if display else "inline",
            )
        except Exception as e:
            # latex2mathml raises its own exception types plus plain
            # IndexError/KeyError on some malformed input
            raise MathRenderError(expression, f"{type(e).__name__}: {e}") from e

        check_rendered(expression, math_element)
        # Same serialization as latex2mathml.converter.convert()
        return unescape(tostring(math_element, encoding="unicode"))


_DEFAULT_RENDERER = None


def get_default_renderer() -> MathRenderer:
    """Process-wide MathMLRenderer."""
    global _DEFAULT_RENDERER
    if _DEFAULT_RENDERER is None:
        _DEFAULT_RENDERER = MathMLRenderer()
    return _DEFAULT_RENDERER
