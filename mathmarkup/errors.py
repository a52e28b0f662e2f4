"""
Exceptions raised by the math markup pipeline.

Only configuration problems escape to callers. Render failures are raised by
the renderer backend and caught again by the inline renderer.
"""


class MathMarkupError(Exception):
    """Base exception for math markup errors"""
    pass


class MathRenderError(MathMarkupError):
    """Expression could not be rendered to the target markup"""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Cannot render {expression!r}: {reason}")


class CorrectionTableError(MathMarkupError):
    """Invalid entry in a LaTeX correction table"""
    pass
