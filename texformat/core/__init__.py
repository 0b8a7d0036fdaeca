"""Core utilities shared across texformat modules."""

from .constants import (
    SYSTEM_PROMPT,
    PROVIDER_GROQ,
    PROVIDER_GEMINI,
    PROVIDERS,
    MAX_FIGURES,
)
from .llm import GroqClient, GeminiClient, get_client
from .prompts import FigurePlaceholder, build_format_prompt, figure_placeholders
from .references import renumber, renumber_bibitems, renumber_citations
from .text import clean_latex_response, strip_code_fences, trim_to_documentclass

__all__ = [
    # Constants
    "SYSTEM_PROMPT",
    "PROVIDER_GROQ",
    "PROVIDER_GEMINI",
    "PROVIDERS",
    "MAX_FIGURES",
    # LLM
    "GroqClient",
    "GeminiClient",
    "get_client",
    # Prompts
    "FigurePlaceholder",
    "build_format_prompt",
    "figure_placeholders",
    # References
    "renumber",
    "renumber_bibitems",
    "renumber_citations",
    # Text
    "clean_latex_response",
    "strip_code_fences",
    "trim_to_documentclass",
]
