"""Plain-text extraction from DOCX documents."""

import io
import logging
import zipfile
from typing import List

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from texformat.errors import ExtractionError

logger = logging.getLogger("texformat.extraction")


def extract_docx_text(data: bytes) -> str:
    """Extract raw text from a DOCX file held in memory.

    Paragraphs come first, one per line, followed by table rows with
    tab-separated cells.

    Args:
        data: DOCX file contents

    Returns:
        Extracted text

    Raises:
        ExtractionError: If the bytes are not a readable DOCX document
    """
    if not data:
        raise ExtractionError("Document is empty")

    try:
        doc = Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        raise ExtractionError(f"Could not read DOCX document: {e}") from e

    lines: List[str] = [p.text for p in doc.paragraphs]

    for table in doc.tables:
        for row in table.rows:
            lines.append("\t".join(cell.text for cell in row.cells))

    text = "\n".join(lines)
    logger.info("Extracted %d characters from paper", len(text))
    return text
