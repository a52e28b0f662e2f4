"""
DOCX Adapter - Writes split runs into python-docx paragraphs

Maps the output of split_runs() onto native Word structures:
    text  → run in the document font (Markdown ** and __ removed)
    math  → OMML equation (pandoc) or LaTeX text in Cambria Math
    break → new paragraph

Architecture:
    section content → split_lines() → add_markup_paragraphs() → .docx

Usage:
    from docx import Document
    from mathmarkup.rendering.docx_adapter import add_markup_paragraphs

    doc = Document()
    add_markup_paragraphs(doc, "Resuelve $x^2 = 4$")
    doc.save("evaluacion.docx")
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from mathmarkup.config.constants import (
    LOG_PREVIEW_CHARS,
    MATH_FONT,
    MATH_FONT_SIZE_PT,
    PARAGRAPH_SPACING_AFTER_PT,
)
from mathmarkup.config.settings import MarkupSettings, get_settings
from mathmarkup.latex.run_splitter import MathSegment, Segment, SegmentKind, split_lines
from mathmarkup.rendering.omml_converter import inject_omml, is_pandoc_available, latex_to_omml

logger = logging.getLogger(__name__)

_MARKDOWN_EMPHASIS = ('**', '__')


def strip_markdown_emphasis(text: str) -> str:
    """Remove ** and __ markers; Word runs carry no Markdown."""
    for marker in _MARKDOWN_EMPHASIS:
        text = text.replace(marker, '')
    return text


def _is_blank(line: List[Segment]) -> bool:
    return all(seg.kind == SegmentKind.TEXT and not seg.value.strip() for seg in line)


def _is_display_only(line: List[Segment]) -> bool:
    """Line holding one display equation and nothing but whitespace."""
    math = [seg for seg in line if seg.kind == SegmentKind.MATH]
    return (
        len(math) == 1
        and math[0].is_display
        and all(seg.kind == SegmentKind.MATH or not seg.value.strip() for seg in line)
    )


def _add_math(paragraph, segment: MathSegment, use_omml: bool, timeout: int) -> None:
    if use_omml:
        omml_xml = latex_to_omml(segment.value, timeout=timeout)
        if omml_xml and inject_omml(paragraph, omml_xml, display=segment.is_display):
            return
        logger.warning(f"OMML rendering failed, using LaTeX text for: {segment.value[:LOG_PREVIEW_CHARS]}")

    run = paragraph.add_run(segment.raw)
    run.font.name = MATH_FONT
    run.font.size = Pt(MATH_FONT_SIZE_PT)


def add_markup_paragraphs(
    doc,
    text: Optional[str],
    font_name: Optional[str] = None,
    equation_mode: Optional[str] = None,
    settings: Optional[MarkupSettings] = None,
) -> list:
    """
    Append one paragraph per line of text to a python-docx document.

    Args:
        doc: python-docx Document
        text: Section content (Markdown + LaTeX)
        font_name: Font for text runs (default: settings.document_font)
        equation_mode: "latex_text" or "omml" (default: from settings)
        settings: Settings override (default: get_settings())

    Returns:
        The paragraphs that were added
    """
    settings = settings or get_settings()
    font_name = font_name or settings.document_font
    equation_mode = equation_mode or settings.equation_rendering_mode
    use_omml = equation_mode == "omml" and is_pandoc_available()

    paragraphs = []
    for line in split_lines(text):
        paragraph = doc.add_paragraph()
        paragraphs.append(paragraph)

        if _is_blank(line):
            continue

        paragraph.paragraph_format.space_after = Pt(PARAGRAPH_SPACING_AFTER_PT)
        if _is_display_only(line):
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER

        for segment in line:
            if segment.kind == SegmentKind.MATH:
                _add_math(paragraph, segment, use_omml, settings.pandoc_timeout)
            else:
                run = paragraph.add_run(strip_markdown_emphasis(segment.value))
                run.font.name = font_name

    logger.debug(f"Added {len(paragraphs)} paragraphs ({'omml' if use_omml else 'latex_text'} equations)")
    return paragraphs


def build_markup_docx(
    sections: Iterable[Tuple[str, str]],
    output_path: Union[str, Path],
    title: Optional[str] = None,
    settings: Optional[MarkupSettings] = None,
) -> Path:
    """
    Write a DOCX with a heading and body per (section title, content) pair.

    Args:
        sections: (title, Markdown + LaTeX content) pairs
        output_path: Destination .docx
        title: Optional document title (level 1 heading)
        settings: Settings override (default: get_settings())

    Returns:
        Path of the written file
    """
    settings = settings or get_settings()
    output_path = Path(output_path)

    doc = Document()
    if title:
        doc.add_heading(title, level=1)

    for index, (section_title, content) in enumerate(sections, start=1):
        doc.add_heading(f"{index}. {section_title}", level=2)
        add_markup_paragraphs(doc, content, settings=settings)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))
    logger.info(f"DOCX saved: {output_path}")
    return output_path
