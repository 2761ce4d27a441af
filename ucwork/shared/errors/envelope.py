"""
Error envelope returned by fallible handlers.

An AppError bundles the HTTP status, the client-facing message and the
underlying cause. The status is looked up from the error kind in
STATUS_BY_KIND; it is never passed in by the caller.
"""

from dataclasses import dataclass

from ucwork.domain.resources.errors import (
    BusinessRuleRejection,
    ConversionError,
    DecodeError,
    EncodeError,
    StoreError,
    WriteError,
)

HTTP_400 = 400
HTTP_409 = 409
HTTP_422 = 422
HTTP_500 = 500

STATUS_BY_KIND: dict[type[BaseException], int] = {
    DecodeError: HTTP_400,
    ConversionError: HTTP_422,
    BusinessRuleRejection: HTTP_409,
    StoreError: HTTP_500,
    EncodeError: HTTP_500,
    WriteError: HTTP_500,
}


def status_for(error: BaseException) -> int:
    """Return the HTTP status for an error, following its class hierarchy."""
    for kind in type(error).__mro__:
        if kind in STATUS_BY_KIND:
            return STATUS_BY_KIND[kind]
    return HTTP_500


@dataclass(frozen=True)
class AppError:
    """A failed handler invocation.

    Attributes:
        status: HTTP status code sent to the client.
        message: Plain-text message sent to the client.
        cause: The error that caused the failure. Logged, never sent.
    """

    status: int
    message: str
    cause: BaseException


def app_error_format(error: BaseException, template: str, *args: object) -> AppError:
    """Build an envelope for ``error`` with a %-style formatted message.

    Args:
        error: The failure kind (usually a ResourceError subclass).
        template: Message template, e.g. ``"decode error: %s"``.
        *args: Values substituted into the template.

    Returns:
        An AppError whose status is derived from the type of ``error``.
    """
    message = template % args if args else template
    return AppError(status=status_for(error), message=message, cause=error)
