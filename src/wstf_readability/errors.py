from __future__ import annotations


class ReadabilityError(RuntimeError):
    """Base class for every error raised by the readability engine."""


class UnsupportedLanguage(ReadabilityError):
    """Raised when a language is unknown or does not match the bound profile."""


class InvalidVariant(ReadabilityError, ValueError):
    """Raised when a formula selector is not one of WSTF1-WSTF4."""


class EmptyInput(ReadabilityError, ValueError):
    """Raised when no sentences or no words could be extracted from the text."""


class ResourceLoadError(ReadabilityError):
    """Raised when sentence training data or a hyphenation table cannot be loaded."""


class InvalidRequest(ReadabilityError, ValueError):
    """Raised when a service request payload is malformed."""
