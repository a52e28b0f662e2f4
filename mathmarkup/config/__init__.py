"""
Configuration module for the math markup pipeline.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, configure_from_settings
from .settings import MarkupSettings, get_settings, reload_settings

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'configure_from_settings',
    # Settings
    'MarkupSettings',
    'get_settings',
    'reload_settings',
    # Constants (all exported via *)
]
