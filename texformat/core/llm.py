"""LLM client utilities for texformat.

Two providers are supported: Groq (OpenAI-compatible chat completions)
and Google Gemini (generateContent). Both expose ``generate(prompt)``.
"""

import logging
from typing import Any, Dict, Optional

import requests

from texformat.core.constants import (
    ERROR_BODY_LIMIT,
    GEMINI_MODEL,
    GEMINI_URL,
    GROQ_MODEL,
    GROQ_URL,
    PROVIDER_GROQ,
    SYSTEM_PROMPT,
)
from texformat.errors import ProviderError

logger = logging.getLogger("texformat.llm")


class _BaseClient:
    """Shared request handling for generation providers."""

    name = "LLM"

    def __init__(
        self,
        url: str,
        model: str,
        api_key: str,
        temperature: float = 0.2,
        max_tokens: int = 32000,
        top_p: float = 0.9,
        timeout: float = 300,
    ):
        self.url = url
        self.model = model
        self.api_key = api_key
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.top_p = top_p
        self.timeout = timeout

    def _post(self, url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> Dict[str, Any]:
        try:
            response = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ProviderError(self._redact(f"{self.name} API request failed: {e}")) from e

        if not response.ok:
            error_text = self._redact(response.text)
            logger.error("%s API error: %s", self.name, error_text)
            raise ProviderError(
                f"{self.name} API returned {response.status_code}: "
                f"{error_text[:ERROR_BODY_LIMIT]}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"No valid response from {self.name} AI") from e

    def _redact(self, message: str) -> str:
        """Remove the API key from text that may echo the request."""
        if self.api_key:
            return message.replace(self.api_key, "***")
        return message

    def generate(self, prompt: str) -> str:
        raise NotImplementedError


class GroqClient(_BaseClient):
    """OpenAI-compatible chat completion client for Groq.

    Args:
        api_key: Groq API key, sent as a Bearer token
        url: Chat completions endpoint
        model: Model name (default llama-3.3-70b-versatile)
        temperature: Sampling temperature (default 0.2)
        max_tokens: Maximum tokens in response (default 32000)
        top_p: Nucleus sampling cutoff (default 0.9)
        timeout: Request timeout in seconds
    """

    name = "Groq"

    def __init__(self, api_key: str, url: str = GROQ_URL, model: str = GROQ_MODEL, **kwargs):
        super().__init__(url=url, model=model, api_key=api_key, **kwargs)

    def generate(self, prompt: str) -> str:
        """Send the prompt with the formatter system message.

        Returns:
            Response content string

        Raises:
            ProviderError: On transport errors, non-2xx status, or missing content
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "top_p": self.top_p,
        }

        logger.info("Calling Groq API (%s)...", self.model)
        data = self._post(self.url, payload, headers)
        logger.info("Received response from Groq")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not content:
            raise ProviderError("No valid response from Groq AI")
        return content


class GeminiClient(_BaseClient):
    """Client for the Gemini generateContent endpoint.

    ``url`` is the models base URL; the model name is appended per request
    and the API key is sent in the x-goog-api-key header.
    """

    name = "Gemini"

    def __init__(
        self,
        api_key: str,
        url: str = GEMINI_URL,
        model: str = GEMINI_MODEL,
        top_k: int = 40,
        **kwargs,
    ):
        super().__init__(url=url, model=model, api_key=api_key, **kwargs)
        self.top_k = top_k

    @property
    def endpoint(self) -> str:
        return f"{self.url.rstrip('/')}/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        """Send the prompt as a single user part.

        Raises:
            ProviderError: On transport errors, non-2xx status, or missing text
        """
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_tokens,
                "topP": self.top_p,
                "topK": self.top_k,
            },
        }

        logger.info("Calling Gemini API (%s)...", self.model)
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}
        data = self._post(self.endpoint, payload, headers)
        logger.info("Received response from Gemini")

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None
        if not text:
            raise ProviderError("No valid response from Gemini AI")
        return text


def get_client(provider: Optional[str], api_key: str, settings=None) -> _BaseClient:
    """Create the client for a provider name.

    Anything other than "groq" selects Gemini.

    Args:
        provider: "groq" or "gemini"
        api_key: Key for the selected provider
        settings: Config with endpoint and sampling settings (defaults to global config)

    Returns:
        GroqClient or GeminiClient
    """
    if settings is None:
        from texformat.config import config as settings

    common = {
        "temperature": settings.temperature,
        "max_tokens": settings.max_tokens,
        "top_p": settings.top_p,
        "timeout": settings.timeout,
    }

    if provider == PROVIDER_GROQ:
        return GroqClient(
            api_key=api_key, url=settings.groq_url, model=settings.groq_model, **common
        )
    return GeminiClient(
        api_key=api_key,
        url=settings.gemini_url,
        model=settings.gemini_model,
        top_k=settings.top_k,
        **common,
    )
