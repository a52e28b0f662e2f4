#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DOCUMENT_FONT,
    EQUATION_RENDERING_MODES,
    ERROR_COLOR,
    LOG_LEVEL,
    PANDOC_TIMEOUT_SECONDS,
)


class MarkupSettings(BaseSettings):
    """Math markup settings, read from MATHMARKUP_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MATHMARKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[Path] = None

    # ========== Inline rendering ==========
    error_color: str = ERROR_COLOR

    # Extra \command corrections appended after the built-in table,
    # e.g. MATHMARKUP_EXTRA_CORRECTIONS='{"\\cosec": "\\csc"}'
    extra_corrections: Dict[str, str] = {}

    # ========== DOCX export ==========
    equation_rendering_mode: str = "latex_text"  # latex_text | omml
    document_font: str = DOCUMENT_FONT
    pandoc_timeout: int = PANDOC_TIMEOUT_SECONDS

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {value}")
        return value

    @field_validator("equation_rendering_mode")
    @classmethod
    def _check_equation_mode(cls, value: str) -> str:
        if value not in EQUATION_RENDERING_MODES:
            raise ValueError(
                f"equation_rendering_mode must be one of {EQUATION_RENDERING_MODES}"
            )
        return value

    def correction_table(self) -> Tuple:
        """Built-in correction table followed by the configured extras"""
        from mathmarkup.latex.corrections import build_corrections
        return build_corrections(self.extra_corrections)


@lru_cache(maxsize=1)
def get_settings() -> MarkupSettings:
    """Cached settings instance"""
    return MarkupSettings()


def reload_settings() -> MarkupSettings:
    """Drop the cached instance and read the environment again"""
    get_settings.cache_clear()
    return get_settings()
