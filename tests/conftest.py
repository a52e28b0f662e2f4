"""
Pytest configuration and shared fixtures for math markup tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from mathmarkup.config.settings import get_settings
from mathmarkup.errors import MathRenderError
from mathmarkup.rendering.mathml_renderer import MathRenderer


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from MATHMARKUP_* variables and cached settings."""
    for name in list(os.environ):
        if name.upper().startswith("MATHMARKUP_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Fixtures: Renderers
# ============================================================================

class RecordingRenderer(MathRenderer):
    """Renders to <m display=...>expr</m>; fails on expressions containing 'BAD'."""

    def __init__(self):
        self.calls = []

    def render(self, expression: str, display: bool) -> str:
        self.calls.append((expression, display))
        if "BAD" in expression:
            raise MathRenderError(expression, "marked bad")
        mode = "block" if display else "inline"
        return f'<m display="{mode}">{expression.strip()}</m>'


@pytest.fixture
def recording_renderer():
    """Fake renderer that records calls."""
    return RecordingRenderer()


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_sections():
    """Assessment sections as produced by the content generator."""
    return [
        (
            "Ítem I: Selección múltiple",
            "**Pregunta 1.** Si $x + 3 = 7$, ¿cuál es el valor de $x$?\n"
            "Una bebida cuesta $500$ pesos.",
        ),
        (
            "Ítem II: Desarrollo",
            "Resuelve la ecuación:\n\\[x^2 - 5x + 6 = 0\\]\nJustifica tu respuesta.",
        ),
    ]
