"""Custom exceptions for the translation engine.

Missing translations are not errors: lookups always produce a displayable
result. These exceptions cover resource loading and configuration only.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            translator.init("en", "locales/__lng__/")
        except I18nError as e:
            logger.error("i18n_init_failed", error=str(e))
    """

    pass


class ResourceNotFoundError(I18nError):
    """Raised when the discovery pattern matches no resource.

    Example:
        >>> loader.load("missing/__lng__.json", "en")
        Traceback (most recent call last):
        ...
        ResourceNotFoundError: Translation file not found: missing/*.json
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Translation file not found: {pattern}")


class DecodeError(I18nError):
    """Raised when a resource cannot be decoded into a mapping.

    Attributes:
        identifier: Resource that failed to decode (None when raised by a
            decoder that does not know where the text came from).
        reason: Short description of the failure.
    """

    def __init__(self, reason: str, identifier: Optional[str] = None):
        self.reason = reason
        self.identifier = identifier
        if identifier:
            message = f"Invalid translation resource {identifier}: {reason}"
        else:
            message = f"Invalid translation resource: {reason}"
        super().__init__(message)


class PathTemplateError(I18nError, ValueError):
    """Raised when a resource path template is malformed."""

    pass
