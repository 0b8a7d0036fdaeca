"""Pytest configuration and fixtures for texformat tests."""

import io
from unittest.mock import MagicMock

import pytest

from texformat.config import Config


@pytest.fixture
def settings():
    """Config with defaults and no API keys, independent of the environment."""
    return Config()


@pytest.fixture
def settings_with_keys():
    """Config with both provider keys set."""
    return Config(groq_api_key="groq-key", gemini_api_key="gemini-key")


def make_response(status_code=200, json_data=None, text=""):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    return response


# --- Document fixtures ---


@pytest.fixture
def docx_bytes():
    """A small DOCX paper with paragraphs and a table."""
    from docx import Document

    doc = Document()
    doc.add_heading("Map Projection Distortion", level=1)
    doc.add_paragraph("We study conformal projections [1].")
    doc.add_paragraph("References")
    doc.add_paragraph("[1] J. P. Snyder. Map Projections: A Working Manual. 1987.")
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Projection"
    table.cell(0, 1).text = "Property"
    table.cell(1, 0).text = "Mercator"
    table.cell(1, 1).text = "Conformal"

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def template_text():
    """Minimal LaTeX template."""
    return "\\documentclass{article}\n\\begin{document}\n\\end{document}\n"


@pytest.fixture
def generated_latex():
    """Model output with fences, chatter and inconsistent reference labels."""
    return (
        "Here is your formatted paper:\n"
        "```latex\n"
        "\\documentclass{article}\n"
        "\\begin{document}\n"
        "Conformal maps \\cite{snyder} preserve angles \\cite{0}. See also \\cite{snyder}.\n"
        "\\begin{thebibliography}{99}\n"
        "\\bibitem{0} J. P. Snyder. Map Projections.\n"
        "\\bibitem Mercator. Nova et Aucta.\n"
        "\\end{thebibliography}\n"
        "\\end{document}\n"
        "```\n"
    )


@pytest.fixture
def fake_response():
    """Factory for fake requests.Response objects."""
    return make_response
