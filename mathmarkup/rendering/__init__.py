"""
Rendering of normalized math markup: MathML for HTML embedding, OMML and
python-docx runs for Word export.
"""

from mathmarkup.rendering.inline_renderer import highlight_math_source, render_for_embedding
from mathmarkup.rendering.mathml_renderer import MathMLRenderer, MathRenderer, get_default_renderer

__all__ = [
    'render_for_embedding',
    'highlight_math_source',
    'MathRenderer',
    'MathMLRenderer',
    'get_default_renderer',
]
