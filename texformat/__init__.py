"""
texformat - Typeset research papers into LaTeX templates with an LLM.

This library provides tools to:
- Extract plain text from a DOCX paper
- Ask a generation provider (Groq or Gemini) to format it with a LaTeX template
- Clean up the response and renumber \\bibitem / \\cite labels sequentially

Usage:
    from texformat import renumber
    from texformat.service import format_paper

CLI:
    texformat format paper.docx template.tex -o paper.tex
    texformat renumber paper.tex
    texformat serve
"""

from texformat.core.references import renumber

__version__ = "1.0.0"

__all__ = ["renumber"]
