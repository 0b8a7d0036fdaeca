"""Document text extraction for texformat."""

from .document import extract_docx_text

__all__ = [
    "extract_docx_text",
]
