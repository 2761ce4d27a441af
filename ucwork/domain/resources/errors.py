"""
Error taxonomy for request handling.

Every stage of a resource handler (decode, convert, persist, encode,
write) fails with one of these kinds, and business rules reject with
BusinessRuleRejection. The kind decides the HTTP status of the
resulting envelope (see ``ucwork.shared.errors.envelope``).
No framework imports allowed.
"""

from typing import Optional


class ResourceError(Exception):
    """Base error for every handler failure kind.

    Attributes:
        message: Human readable description.
        cause: The backend or library error that triggered this one, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(self.message)


class DecodeError(ResourceError):
    """Raised when a request body cannot be parsed into a request value."""


class ConversionError(ResourceError):
    """Raised when a request value cannot be mapped to a domain entity."""


class StoreError(ResourceError):
    """Raised by store adapters when the backing store call fails."""


class EncodeError(ResourceError):
    """Raised when a result cannot be serialized to JSON."""


class WriteError(ResourceError):
    """Raised when the response body cannot be written."""


class BusinessRuleRejection(ResourceError):
    """Raised when a request is structurally valid but a rule forbids it."""
