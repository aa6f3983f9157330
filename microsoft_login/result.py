# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Result types returned by the OAuth operations.

Every operation that talks to Microsoft returns either ``Ok(value)`` or
``Error(reason, detail)`` instead of raising, so callers can branch on the
outcome and render an error page. ``unwrap()`` converts an ``Error`` into
the matching exception for callers that prefer exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorReason(str, Enum):
    """Why an operation failed."""

    TRANSPORT_ERROR = "transport_error"
    NO_BODY = "no_body"
    DECODE_ERROR = "decode_error"


class MicrosoftLoginError(Exception):
    """Base class for errors raised by ``Error.unwrap()``."""

    reason: ErrorReason

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.detail = detail


class TransportFailure(MicrosoftLoginError):
    """Raised when the HTTP transport could not complete the request."""

    reason = ErrorReason.TRANSPORT_ERROR


class EmptyResponseError(MicrosoftLoginError):
    """Raised when Microsoft answered without a response body."""

    reason = ErrorReason.NO_BODY


class ResponseDecodeError(MicrosoftLoginError):
    """Raised when the response body is not a JSON object."""

    reason = ErrorReason.DECODE_ERROR


_EXCEPTIONS: dict[ErrorReason, type[MicrosoftLoginError]] = {
    ErrorReason.TRANSPORT_ERROR: TransportFailure,
    ErrorReason.NO_BODY: EmptyResponseError,
    ErrorReason.DECODE_ERROR: ResponseDecodeError,
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Error:
    """Failed outcome.

    Attributes:
        reason: Category of the failure
        detail: Transport or decoder message, if any
    """
    reason: ErrorReason
    detail: Any = None

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the exception matching this error's reason."""
        exc_class = _EXCEPTIONS[self.reason]
        message = self.reason.value
        if self.detail is not None:
            message = f"{message}: {self.detail}"
        raise exc_class(message, detail=self.detail)


Result = Union[Ok[T], Error]
