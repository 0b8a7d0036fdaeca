"""Text processing utilities for texformat."""

import re

DOCUMENTCLASS = "\\documentclass"

# Markdown fences models wrap code in, each with an optional trailing newline
_FENCE_PATTERNS = (
    re.compile(r"```latex\n?"),
    re.compile(r"```tex\n?"),
    re.compile(r"```\n?"),
)


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences from LLM output.

    Models often answer with ```latex ... ``` blocks despite being told
    not to. Fences are removed wherever they appear.

    Args:
        text: Raw model output

    Returns:
        Text without fences, with surrounding whitespace trimmed
    """
    if not text:
        return text

    for pattern in _FENCE_PATTERNS:
        text = pattern.sub("", text)

    return text.strip()


def trim_to_documentclass(text: str) -> str:
    """Drop any preamble chatter before the first \\documentclass.

    Text that already starts with \\documentclass, or never mentions it,
    is returned unchanged.

    Args:
        text: LaTeX source, possibly prefixed with explanations

    Returns:
        Text starting at \\documentclass when present
    """
    if not text or text.startswith(DOCUMENTCLASS):
        return text

    start = text.find(DOCUMENTCLASS)
    if start != -1:
        return text[start:]

    return text


def clean_latex_response(text: str) -> str:
    """Strip fences, then trim to the document class declaration."""
    return trim_to_documentclass(strip_code_fences(text))
