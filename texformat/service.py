"""Paper formatting pipeline.

extract DOCX text -> build prompt -> call provider -> unwrap -> renumber
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from texformat.core.constants import PROVIDER_NAMES
from texformat.core.llm import get_client
from texformat.core.prompts import FigurePlaceholder, build_format_prompt, figure_placeholders
from texformat.core.references import renumber
from texformat.core.text import clean_latex_response
from texformat.errors import MissingAPIKeyError
from texformat.extraction import extract_docx_text

logger = logging.getLogger("texformat.service")


@dataclass
class FormatResult:
    """Formatted LaTeX and the figure placeholders it refers to."""

    latex: str
    figures: List[FigurePlaceholder] = field(default_factory=list)


def format_paper(
    paper: bytes,
    template: Union[bytes, str],
    figure_names: Sequence[str] = (),
    provider: Optional[str] = None,
    api_key: Optional[str] = None,
    settings=None,
) -> FormatResult:
    """Format a DOCX paper according to a LaTeX template.

    Args:
        paper: DOCX file contents
        template: LaTeX template (bytes are decoded as UTF-8)
        figure_names: Original filenames of uploaded figures, in order
        provider: "groq" or "gemini" (defaults to settings.provider)
        api_key: Request-supplied key, overrides configured keys
        settings: Config instance (defaults to global config)

    Returns:
        FormatResult with renumbered LaTeX and figure placeholders

    Raises:
        ExtractionError: If the paper cannot be read
        MissingAPIKeyError: If no key is supplied or configured
        ProviderError: If the provider call fails
    """
    if settings is None:
        from texformat.config import config as settings

    provider = provider or settings.provider
    key = settings.resolve_api_key(provider, api_key)
    if not key:
        raise MissingAPIKeyError()

    logger.info("Extracting text from DOCX...")
    paper_text = extract_docx_text(paper)

    if isinstance(template, bytes):
        template = template.decode("utf-8", errors="replace")
    logger.info("Template length: %d characters", len(template))

    prompt = build_format_prompt(paper_text, template, figure_names)
    client = get_client(provider, key, settings)
    raw = client.generate(prompt)

    latex = renumber(clean_latex_response(raw))
    logger.info(
        "LaTeX generated via %s, length: %d characters",
        PROVIDER_NAMES.get(provider, client.name),
        len(latex),
    )

    return FormatResult(latex=latex, figures=figure_placeholders(figure_names))
