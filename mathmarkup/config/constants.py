"""
Centralized constants for the math markup pipeline.
"""

# ===========================================
# DELIMITERS
# ===========================================
DISPLAY_DELIMITER = '$$'
INLINE_DELIMITER = '$'
LINE_BREAK = '\n'

# ===========================================
# RENDERING
# ===========================================
ERROR_COLOR = 'red'
MATHML_NAMESPACE = 'http://www.w3.org/1998/Math/MathML'
LOG_PREVIEW_CHARS = 50                # expression preview length in log lines

# ===========================================
# DOCX EXPORT
# ===========================================
DOCUMENT_FONT = 'Century Gothic'
MATH_FONT = 'Cambria Math'
MATH_FONT_SIZE_PT = 11.0
PARAGRAPH_SPACING_AFTER_PT = 5.0
PANDOC_TIMEOUT_SECONDS = 5
EQUATION_RENDERING_MODES = ('latex_text', 'omml')

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
