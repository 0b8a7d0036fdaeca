"""Shared constants for texformat."""

# System prompt for chat-style providers
SYSTEM_PROMPT = (
    "You are an expert LaTeX formatter. Output only LaTeX code with no explanations. "
    "Include ALL content from the paper including title, abstract, all sections, "
    "and ALL references."
)

# Generation providers
PROVIDER_GROQ = "groq"
PROVIDER_GEMINI = "gemini"
PROVIDERS = frozenset({PROVIDER_GROQ, PROVIDER_GEMINI})

# Display names used in log and error messages
PROVIDER_NAMES = {
    PROVIDER_GROQ: "Groq",
    PROVIDER_GEMINI: "Gemini",
}

# Provider endpoints and models
GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODEL = "llama-3.3-70b-versatile"
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_MODEL = "gemini-2.0-flash-exp"

# Upload limits
MAX_FIGURES = 100

# Characters of an upstream error body kept in error messages
ERROR_BODY_LIMIT = 300
