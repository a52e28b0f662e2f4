"""
OMML Equation Converter

Converts one LaTeX expression to OMML (Office Math Markup Language) so the
Word export shows native, editable equations instead of LaTeX text.

Uses pandoc to convert LaTeX → DOCX, then extracts the <m:oMath> element
with python-docx and lxml.
"""

import logging
import os
import subprocess
import tempfile
from typing import Optional

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError
from lxml import etree

from mathmarkup.config.constants import LOG_PREVIEW_CHARS, PANDOC_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

OMML_NAMESPACE = 'http://schemas.openxmlformats.org/officeDocument/2006/math'


def latex_to_omml(expression: str, timeout: int = PANDOC_TIMEOUT_SECONDS) -> Optional[str]:
    """
    Convert a LaTeX expression (no delimiters) to an OMML XML string.

    Process:
        1. Write "$$expression$$" to a temporary .tex file
        2. pandoc -f latex -t docx
        3. Extract the first <m:oMath> from the generated DOCX

    Args:
        expression: LaTeX without delimiters
        timeout: Pandoc subprocess timeout in seconds

    Returns:
        OMML XML string, or None if conversion fails (caller falls back
        to LaTeX text)
    """
    expression = (expression or "").strip()
    if not expression:
        logger.warning("Empty LaTeX expression, skipping OMML conversion")
        return None

    tex_path = None
    docx_path = None

    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            suffix='.tex',
            delete=False,
            encoding='utf-8'
        ) as tex_file:
            tex_file.write(f"$${expression}$$")
            tex_path = tex_file.name

        docx_path = tex_path[:-len('.tex')] + '.docx'

        try:
            result = subprocess.run(
                ['pandoc', '-f', 'latex', '-t', 'docx', tex_path, '-o', docx_path],
                capture_output=True,
                text=True,
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"Pandoc timeout ({timeout}s) for LaTeX: {expression[:LOG_PREVIEW_CHARS]}")
            return None
        except FileNotFoundError:
            logger.error("Pandoc not found - OMML rendering unavailable")
            return None

        if result.returncode != 0:
            logger.debug(f"Pandoc conversion failed (exit {result.returncode}): {result.stderr[:100]}")
            return None

        if not os.path.exists(docx_path):
            logger.warning("Pandoc did not create output DOCX")
            return None

        doc = DocxDocument(docx_path)
        for paragraph in doc.paragraphs:
            omath_elems = paragraph._element.findall(f'.//{{{OMML_NAMESPACE}}}oMath')
            if omath_elems:
                omml_xml = etree.tostring(omath_elems[0], encoding='unicode')
                logger.debug(f"Converted LaTeX to OMML ({len(omml_xml)} chars)")
                return omml_xml

        logger.debug(f"No OMML elements found for: {expression[:LOG_PREVIEW_CHARS]}")
        return None

    except (OSError, ValueError, PackageNotFoundError, etree.LxmlError) as e:
        logger.warning(f"OMML conversion failed for {expression[:LOG_PREVIEW_CHARS]!r}: {e}")
        return None

    finally:
        for path in (tex_path, docx_path):
            if path and os.path.exists(path):
                try:
                    os.unlink(path)
                except OSError as e:
                    logger.warning(f"Failed to delete temp file {path}: {e}")


def inject_omml(paragraph, omml_xml: str, display: bool = False) -> bool:
    """
    Append an OMML equation to a python-docx paragraph.

    Inline equations are appended as <m:oMath> between the text runs.
    Display equations are wrapped in <m:oMathPara> so Word centres them on
    their own line.

    Returns:
        True if injected, False if the XML is invalid (caller falls back)
    """
    try:
        omath_elem = etree.fromstring(omml_xml)
    except etree.XMLSyntaxError as e:
        logger.error(f"Invalid OMML XML: {e}")
        return False

    para_elem = paragraph._element
    if display:
        omath_para = etree.SubElement(para_elem, f'{{{OMML_NAMESPACE}}}oMathPara')
        etree.SubElement(omath_para, f'{{{OMML_NAMESPACE}}}oMathParaPr')
        omath_para.append(omath_elem)
    else:
        # <m:oMath> sits beside the <w:r> runs, not inside one
        para_elem.append(omath_elem)
    return True


def check_pandoc_available() -> bool:
    """True if pandoc is installed and runs."""
    try:
        result = subprocess.run(
            ['pandoc', '--version'],
            capture_output=True,
            timeout=2
        )
        return result.returncode == 0
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


# Module-level pandoc availability check (cached)
_PANDOC_AVAILABLE = None


def is_pandoc_available() -> bool:
    """Cached check for pandoc availability."""
    global _PANDOC_AVAILABLE
    if _PANDOC_AVAILABLE is None:
        _PANDOC_AVAILABLE = check_pandoc_available()
        if _PANDOC_AVAILABLE:
            logger.info("Pandoc found - OMML rendering available")
        else:
            logger.warning("Pandoc not found - OMML rendering unavailable")
    return _PANDOC_AVAILABLE
