"""
Structured error types for anukit.

Provides the base ``AnuKitError`` used by every error the toolkit raises,
the state-violation errors raised when a Result is read in the wrong state,
and ``PropagateError``: the exception that carries an arbitrary error
payload back into raised-exception control flow.

Manifesto:
    - **Errors as values first:** Results hold errors; raising is opt-in
    - **Any payload:** A propagated error may be an exception, a string, or a
      structured domain object, and is kept verbatim
    - **Error Chaining:** Preserve original exceptions as ``__cause__``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                       AnuKitError                            │
        │                  (message, cause, to_dict)                   │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  ResultStateError                PropagateError              │
        │  (wrong-state access)            (error payload + message)   │
        │       │                                │                     │
        │  UninitializedResultError        ErrorPayload                │
        │  (NONE access)                   Structured | Message |      │
        │                                  Wrapped                     │
        └─────────────────────────────────────────────────────────────┘

Examples:
    Propagating a plain string:

    >>> error = PropagateError("disk full")
    >>> error.message
    'disk full'
    >>> error.error
    'disk full'

    Propagating a structured domain error with a message:

    >>> error = PropagateError({"code": 42}, message="quota exceeded")
    >>> error.message
    'quota exceeded'
    >>> error.payload
    Structured(value={'code': 42})

Guardrails:
    ❌ DON'T: Stringify the payload before wrapping it
    ✅ DO: Pass the raw object, callers inspect ``error`` programmatically

Tags:
    error-handling, exception-hierarchy, error-propagation, anukit
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

UNKNOWN_ERROR_MESSAGE = "Unknown error"


# =============================================================================
# ERROR PAYLOAD
# =============================================================================


@dataclass(frozen=True, slots=True)
class Structured(Generic[T]):
    """Payload that is a domain value (neither an exception nor a string)."""

    value: T


@dataclass(frozen=True, slots=True)
class Message:
    """Payload that is a plain message string."""

    text: str


@dataclass(frozen=True, slots=True)
class Wrapped:
    """Payload that is itself an exception."""

    cause: BaseException


ErrorPayload = Structured[Any] | Message | Wrapped


def classify_payload(error: Any) -> ErrorPayload:
    """
    Map an arbitrary error object onto the closed ``ErrorPayload`` set.

    Exceptions become ``Wrapped``, strings become ``Message`` and anything
    else (including ``None``) becomes ``Structured``.

    >>> classify_payload(ValueError("bad"))
    Wrapped(cause=ValueError('bad'))
    >>> classify_payload("bad")
    Message(text='bad')
    >>> classify_payload(404)
    Structured(value=404)
    """
    if isinstance(error, BaseException):
        return Wrapped(error)
    if isinstance(error, str):
        return Message(error)
    return Structured(error)


# =============================================================================
# BASE ERROR
# =============================================================================


class AnuKitError(Exception):
    """
    Base exception for all anukit errors.

    Carries a human-readable ``message`` and an optional ``cause`` that is
    chained as ``__cause__`` so tracebacks show the original failure.

    Examples:
        >>> error = AnuKitError("Something went wrong")
        >>> error.message
        'Something went wrong'
        >>> error.to_dict()
        {'error_type': 'AnuKitError', 'message': 'Something went wrong'}

        Chaining errors:

        >>> error = AnuKitError("Parse failed", cause=ValueError("x"))
        >>> error.__cause__
        ValueError('x')
    """

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# =============================================================================
# STATE ERRORS
# =============================================================================


class ResultStateError(AnuKitError):
    """A Result was accessed in a state that does not support the operation."""


class UninitializedResultError(ResultStateError):
    """A value or error was read from a Result in the NONE state."""


# =============================================================================
# PROPAGATION WRAPPER
# =============================================================================


class PropagateError(AnuKitError):
    """
    Exception used to raise a captured error of any type.

    PropagateError is the vehicle ``Result.unwrap_or_raise`` uses when an ERR
    result must become a live exception. The payload is stored untouched in
    ``error`` so handlers can inspect structured errors, not just display
    strings.

    Message resolution:
        1. explicit ``message`` argument
        2. ``str(error)`` when the payload is not ``None``
        3. ``"Unknown error"``

    Examples:
        Error-only:

        >>> PropagateError(None).message
        'Unknown error'

        Message, cause and payload:

        >>> cause = KeyError("id")
        >>> error = PropagateError("bad-record", message="import failed", cause=cause)
        >>> error.message, error.error, error.cause is cause
        ('import failed', 'bad-record', True)

    Guardrails:
        ❌ DON'T: Catch PropagateError and read only ``str(error)``
        ✅ DO: Read ``error`` or match on ``payload`` for the original object
    """

    def __init__(
        self,
        error: Any,
        *,
        message: str | None = None,
        cause: BaseException | None = None,
    ):
        if message is None:
            message = str(error) if error is not None else UNKNOWN_ERROR_MESSAGE
        super().__init__(message, cause=cause)
        self.error = error

    @property
    def payload(self) -> ErrorPayload:
        """The payload classified as ``Structured``, ``Message`` or ``Wrapped``."""
        return classify_payload(self.error)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["payload_type"] = type(self.error).__name__
        return result


__all__ = [
    "AnuKitError",
    "ResultStateError",
    "UninitializedResultError",
    "PropagateError",
    "ErrorPayload",
    "Structured",
    "Message",
    "Wrapped",
    "classify_payload",
    "UNKNOWN_ERROR_MESSAGE",
]
