#!/usr/bin/env python3
"""
Configuration management for texformat.

Loads configuration from (in order of priority):
1. Environment variables (TEXFORMAT_*, plus GROQ_API_KEY, GEMINI_API_KEY, PORT)
2. Config file (~/.config/texformat/config.toml or ./config.toml)
3. Default values

Usage:
    from texformat.config import config

    print(config.provider)
    print(config.groq_model)
    key = config.resolve_api_key("groq", request_key)

Environment variables:
    TEXFORMAT_PROVIDER       - Default provider ("groq" or "gemini")
    TEXFORMAT_GROQ_URL       - Groq chat completions endpoint
    TEXFORMAT_GROQ_MODEL     - Groq model name
    GROQ_API_KEY             - Groq API key
    TEXFORMAT_GEMINI_URL     - Gemini models base URL
    TEXFORMAT_GEMINI_MODEL   - Gemini model name
    GEMINI_API_KEY           - Gemini API key
    TEXFORMAT_TEMPERATURE    - Sampling temperature
    TEXFORMAT_MAX_TOKENS     - Maximum response tokens
    TEXFORMAT_TOP_P          - Nucleus sampling cutoff
    TEXFORMAT_TOP_K          - Top-k sampling (Gemini)
    TEXFORMAT_TIMEOUT        - Provider request timeout (seconds)
    TEXFORMAT_HOST           - API server host
    TEXFORMAT_PORT / PORT    - API server port
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from texformat.core.constants import (
    GEMINI_MODEL,
    GEMINI_URL,
    GROQ_MODEL,
    GROQ_URL,
    PROVIDER_GEMINI,
    PROVIDER_GROQ,
)

# Try to import toml, fall back gracefully
try:
    import tomllib  # Python 3.11+
except ImportError:
    try:
        import tomli as tomllib  # type: ignore
    except ImportError:
        tomllib = None  # type: ignore


@dataclass
class Config:
    """Configuration container.

    Values are loaded from config.toml file. Environment variables can override.
    """

    # Provider selection
    provider: str = PROVIDER_GROQ

    # Groq (OpenAI-compatible)
    groq_url: str = GROQ_URL
    groq_model: str = GROQ_MODEL
    groq_api_key: str = ""

    # Gemini
    gemini_url: str = GEMINI_URL
    gemini_model: str = GEMINI_MODEL
    gemini_api_key: str = ""

    # Generation settings
    temperature: float = 0.2
    max_tokens: int = 32000
    top_p: float = 0.9
    top_k: int = 40
    timeout: float = 300

    # API server
    host: str = "127.0.0.1"
    port: int = 3000

    # Metadata
    config_source: str = "defaults"

    def resolve_api_key(self, provider: Optional[str], override: Optional[str] = None) -> str:
        """Pick the API key for a request.

        A request-supplied key wins, then the provider's own key, then the
        other provider's key. Returns "" when none is set.
        """
        if override:
            return override
        if provider == PROVIDER_GROQ:
            return self.groq_api_key or self.gemini_api_key
        return self.gemini_api_key or self.groq_api_key


def get_package_root() -> Path:
    """Get the root directory of the texformat package."""
    # This file is at texformat/config.py, so parent.parent is repo root
    return Path(__file__).parent.parent.resolve()


def find_config_file() -> Optional[Path]:
    """Find config file in standard locations."""
    package_root = get_package_root()

    locations = [
        Path("config.local.toml"),  # Local override (gitignored)
        Path("config.toml"),  # Current directory
        package_root / "config.local.toml",  # Package root local override
        package_root / "config.toml",  # Package root
        Path.home() / ".config" / "texformat" / "config.toml",
    ]

    for path in locations:
        if path.exists():
            return path
    return None


def load_config() -> Config:
    """Load configuration from file and environment."""
    config = Config()

    # Load from TOML file if available
    config_file = find_config_file()
    if config_file and tomllib:
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)

            if "provider" in data:
                config.provider = data["provider"].get("default", config.provider)

            if "groq" in data:
                groq = data["groq"]
                config.groq_url = groq.get("url", config.groq_url)
                config.groq_model = groq.get("model", config.groq_model)
                config.groq_api_key = groq.get("api_key", config.groq_api_key)

            if "gemini" in data:
                gemini = data["gemini"]
                config.gemini_url = gemini.get("url", config.gemini_url)
                config.gemini_model = gemini.get("model", config.gemini_model)
                config.gemini_api_key = gemini.get("api_key", config.gemini_api_key)

            if "generation" in data:
                gen = data["generation"]
                config.temperature = gen.get("temperature", config.temperature)
                config.max_tokens = gen.get("max_tokens", config.max_tokens)
                config.top_p = gen.get("top_p", config.top_p)
                config.top_k = gen.get("top_k", config.top_k)
                config.timeout = gen.get("timeout", config.timeout)

            if "server" in data:
                server = data["server"]
                config.host = server.get("host", config.host)
                config.port = int(server.get("port", config.port))

            config.config_source = str(config_file)

        except Exception as e:
            print(f"Warning: Failed to load config from {config_file}: {e}", file=sys.stderr)

    # Environment variables override file config
    env_mappings = {
        "TEXFORMAT_PROVIDER": "provider",
        "TEXFORMAT_GROQ_URL": "groq_url",
        "TEXFORMAT_GROQ_MODEL": "groq_model",
        "GROQ_API_KEY": "groq_api_key",
        "TEXFORMAT_GEMINI_URL": "gemini_url",
        "TEXFORMAT_GEMINI_MODEL": "gemini_model",
        "GEMINI_API_KEY": "gemini_api_key",
        "TEXFORMAT_TEMPERATURE": "temperature",
        "TEXFORMAT_MAX_TOKENS": "max_tokens",
        "TEXFORMAT_TOP_P": "top_p",
        "TEXFORMAT_TOP_K": "top_k",
        "TEXFORMAT_TIMEOUT": "timeout",
        "TEXFORMAT_HOST": "host",
        "PORT": "port",
        "TEXFORMAT_PORT": "port",
    }
    converters = {
        "temperature": float,
        "timeout": float,
        "max_tokens": int,
        "top_p": float,
        "top_k": int,
        "port": int,
    }

    for env_var, attr in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            if attr in converters:
                value = converters[attr](value)
            setattr(config, attr, value)
            if config.config_source == "defaults":
                config.config_source = "environment"

    if config.provider not in (PROVIDER_GROQ, PROVIDER_GEMINI):
        print(
            f"Warning: Unknown provider '{config.provider}', requests will use Gemini",
            file=sys.stderr,
        )

    return config


# Global config instance - loaded once at import
config = load_config()
