"""Exceptions raised by texformat."""


class TexformatError(Exception):
    """Base class for texformat errors."""


class ExtractionError(TexformatError):
    """The uploaded document could not be read."""


class MissingAPIKeyError(TexformatError):
    """No API key was supplied or configured."""

    def __init__(self, message: str = "API key is required"):
        super().__init__(message)


class ProviderError(TexformatError):
    """The generation provider failed or returned an unusable response."""
