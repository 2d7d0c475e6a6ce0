"""
Tri-state result container for exception-free error handling.

A ``Result`` is exactly one of three variants:

- ``Ok(value)``: a computation succeeded
- ``Err(error)``: a computation failed; ``error`` may be any object
- ``Empty()``: nothing was computed yet (the NONE state)

The variant never changes after construction. The only mutable part of a
Result is its diagnostic message, kept in a separate cell and written by
``intercept()`` or by ``unwrap_or_raise(custom_message)`` on failure.

Manifesto:
    - **Errors as values:** ``try_wrap`` turns a raising call into a Result
    - **Three states, not two:** "no value yet" is not the same as
      "succeeded with None"
    - **One escalation point:** only ``unwrap_or_raise`` turns an error back
      into a live exception

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                       Result[T, E]                           │
        ├───────────────┬───────────────┬─────────────────────────────┤
        │   Ok(value)   │  Err(error)   │   Empty()                   │
        │   State.OK    │  State.ERR    │   State.NONE                │
        ├───────────────┴───────────────┴─────────────────────────────┤
        │  message cell (mutable, single writer)                       │
        ├─────────────────────────────────────────────────────────────┤
        │  Inspection       │ Extraction          │ Context           │
        │  • is_ok()        │ • try_get_ok()      │ • intercept()     │
        │  • is_err()       │ • try_get_err()     │ • message         │
        │  • is_none()      │ • unwrap_or_raise() │ • on_error()      │
        │  • state          │ • get_error()       │ • to_dict()       │
        └─────────────────────────────────────────────────────────────┘

Examples:
    Wrapping a call that may raise:

    >>> result = try_wrap(lambda: int("42"))
    >>> result.is_ok(), result.unwrap_or_raise()
    (True, 42)
    >>> failed = try_wrap(lambda: int("oops"))
    >>> failed.is_err()
    True
    >>> failed.get_error_message()
    "invalid literal for int() with base 10: 'oops'"

    Pattern matching on the variant:

    >>> match Result.err("timeout").variant:
    ...     case Ok(value):
    ...         print("got", value)
    ...     case Err(error):
    ...         print("failed:", error)
    ...     case Empty():
    ...         print("nothing yet")
    failed: timeout

Concurrency:
    Reading a shared Result from several threads is safe. Writing the
    message (``intercept``, ``unwrap_or_raise(custom_message)``) is not
    synchronized; treat those calls as single-writer.

Guardrails:
    ❌ DON'T: Use ``try_get_ok()`` to tell ``Result.ok(None)`` from NONE
    ✅ DO: Check ``is_ok()`` / ``is_none()`` or match on ``variant``

Tags:
    result-pattern, error-handling, tri-state, anukit
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from anukit.core.errors import (
    AnuKitError,
    PropagateError,
    ResultStateError,
    UninitializedResultError,
    Wrapped,
    classify_payload,
)
from anukit.core.logging import get_library_logger

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")

logger = get_library_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Error occurred"
UNINITIALIZED_MESSAGE = "result is uninitialized"


class State(str, Enum):
    """The three mutually exclusive states of a Result."""

    OK = "OK"
    ERR = "ERR"
    NONE = "NONE"


# =============================================================================
# VARIANTS
# =============================================================================


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant holding the computed value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant holding the error object."""

    error: E


@dataclass(frozen=True, slots=True)
class Empty:
    """Uninitialized variant holding nothing."""


Variant = Ok[Any] | Err[Any] | Empty


@dataclass(slots=True)
class _MessageCell:
    text: str | None = None


_FACTORY = object()


# =============================================================================
# RESULT
# =============================================================================


class Result(Generic[T, E]):
    """
    Immutable tri-state container with a mutable diagnostic message.

    Results are only created through ``Result.ok()``, ``Result.err()`` and
    ``Result.none()``; calling ``Result(...)`` directly raises ``TypeError``.

    Examples:
        >>> ok = Result.ok("Success")
        >>> ok.is_ok(), ok.is_err(), ok.is_none()
        (True, False, False)
        >>> ok.try_get_ok()
        'Success'

        >>> err = Result.err(ValueError("bad input"), "parsing row 3")
        >>> err.message
        'parsing row 3'
        >>> err.get_error_message()
        'bad input'

        >>> Result.none().get_error_message()
        'result is uninitialized'
    """

    __slots__ = ("_variant", "_note")

    def __init__(self, variant: Variant, message: str | None = None, *, _token: object = None):
        if _token is not _FACTORY:
            raise TypeError(
                "Result cannot be instantiated directly; "
                "use Result.ok(), Result.err() or Result.none()"
            )
        object.__setattr__(self, "_variant", variant)
        object.__setattr__(self, "_note", _MessageCell(message))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Result is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Result is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        # copy, deepcopy and pickle rebuild through the factory path; the
        # copy gets its own message cell
        return (_rebuild, (self._variant, self._note.text))

    # ====== Factories ======

    @classmethod
    def ok(cls, value: T) -> Result[T, E]:
        """Create a success result. ``value`` may be ``None``."""
        return cls(Ok(value), _token=_FACTORY)

    @classmethod
    def err(cls, error: E, message: str | None = None) -> Result[T, E]:
        """Create a failure result, optionally attaching a diagnostic message."""
        return cls(Err(error), message, _token=_FACTORY)

    @classmethod
    def none(cls) -> Result[T, E]:
        """Create an uninitialized result."""
        return cls(Empty(), _token=_FACTORY)

    # ====== State ======

    @property
    def variant(self) -> Variant:
        """The underlying ``Ok`` / ``Err`` / ``Empty`` variant, for ``match``."""
        return self._variant

    @property
    def state(self) -> State:
        match self._variant:
            case Ok():
                return State.OK
            case Err():
                return State.ERR
            case _:
                return State.NONE

    @property
    def message(self) -> str | None:
        """The attached diagnostic message, if any."""
        return self._note.text

    def is_ok(self) -> bool:
        return isinstance(self._variant, Ok)

    def is_err(self) -> bool:
        return isinstance(self._variant, Err)

    def is_none(self) -> bool:
        return isinstance(self._variant, Empty)

    # ====== Safe accessors ======

    def try_get_ok(self) -> T | None:
        """Return the success value, or ``None`` when not OK. Never raises."""
        if isinstance(self._variant, Ok):
            return self._variant.value
        return None

    def try_get_err(self) -> E | None:
        """Return the error, or ``None`` when not ERR. Never raises."""
        if isinstance(self._variant, Err):
            return self._variant.error
        return None

    def unwrap_or(self, default: T) -> T:
        """Return the success value, or ``default`` for ERR and NONE."""
        if isinstance(self._variant, Ok):
            return self._variant.value
        return default

    # ====== Unwrapping ======

    def unwrap_or_raise(self, custom_message: str | None = None) -> T:
        """
        Return the success value or raise.

        - OK: returns the value. ``custom_message`` is ignored and the
          message cell is left untouched.
        - NONE: raises ``UninitializedResultError``.
        - ERR: raises ``PropagateError`` around the error. An exception
          payload becomes the cause and the message is the attached message
          (or ``"Error occurred"``). Any other payload is rendered with
          ``str()``, prefixed by the attached message when there is one.

        On the NONE and ERR paths ``custom_message`` first overwrites the
        attached message.

        Raises:
            UninitializedResultError: result is NONE
            PropagateError: result is ERR
        """
        match self._variant:
            case Ok(value):
                return value
            case Err(error):
                if custom_message is not None:
                    self._note.text = custom_message
                raise self._escalate(error)
            case _:
                if custom_message is None:
                    raise UninitializedResultError(f"{UNINITIALIZED_MESSAGE} (NONE)")
                self._note.text = custom_message
                raise UninitializedResultError(f"{UNINITIALIZED_MESSAGE}: {custom_message}")

    def _escalate(self, error: E) -> PropagateError:
        attached = self._note.text
        match classify_payload(error):
            case Wrapped(cause):
                wrapper = PropagateError(
                    error,
                    message=attached if attached is not None else DEFAULT_ERROR_MESSAGE,
                    cause=cause,
                )
            case _:
                prefix = f"{attached}: " if attached is not None else ""
                wrapper = PropagateError(error, message=f"{prefix}{error}")
        logger.debug(
            "result_escalated",
            error_type=type(error).__name__,
            message=wrapper.message,
        )
        return wrapper

    # ====== Error access ======

    def get_error(self) -> E:
        """
        Return the raw error of an ERR result.

        Raises:
            UninitializedResultError: result is NONE
            ResultStateError: result is OK
        """
        match self._variant:
            case Err(error):
                return error
            case Ok():
                raise ResultStateError("result holds a success value, not an error")
            case _:
                raise UninitializedResultError(UNINITIALIZED_MESSAGE)

    def get_error_message(self) -> str | None:
        """
        Return a human-readable description of the error.

        ``"result is uninitialized"`` for NONE, ``str(error)`` for ERR, and
        ``None`` when there is no error (OK, or ERR holding ``None``).
        """
        match self._variant:
            case Err(error) if error is not None:
                return str(error)
            case Empty():
                return UNINITIALIZED_MESSAGE
            case _:
                return None

    # ====== Context ======

    def intercept(self, message: str) -> Result[T, E]:
        """Attach a diagnostic message and return this same result."""
        self._note.text = message
        return self

    def on_error(self, callback: Callable[[E], Any]) -> Result[T, E]:
        """Call ``callback`` with the error when ERR; return this result."""
        if isinstance(self._variant, Err):
            callback(self._variant.error)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {"state": self.state.value}
        match self._variant:
            case Ok(value):
                result["value"] = value
            case Err(error):
                result["error"] = _error_to_dict(error)
        if self._note.text is not None:
            result["message"] = self._note.text
        return result

    def __repr__(self) -> str:
        match self._variant:
            case Ok(value):
                return f"Result.ok({value!r})"
            case Err(error):
                return f"Result.err({error!r})"
            case _:
                return "Result.none()"


def _rebuild(variant: Variant, message: str | None) -> Result[Any, Any]:
    return Result(variant, message, _token=_FACTORY)


def _error_to_dict(error: Any) -> Any:
    if isinstance(error, AnuKitError):
        return error.to_dict()
    if isinstance(error, BaseException):
        return {"error_type": type(error).__name__, "message": str(error)}
    return error


# =============================================================================
# TRY-BOUNDARY
# =============================================================================


def try_wrap(supplier: Callable[[], T]) -> Result[T, Exception]:
    """
    Execute a zero-argument callable and capture its outcome in a Result.

    Returns ``Result.ok`` with the return value, or ``Result.err`` with the
    raised exception. Only ``Exception`` subclasses are captured;
    ``KeyboardInterrupt`` and ``SystemExit`` still propagate.

    >>> try_wrap(lambda: "hello").try_get_ok()
    'hello'
    >>> try_wrap(lambda: 1 / 0).get_error_message()
    'division by zero'
    """
    try:
        return Result.ok(supplier())
    except Exception as e:
        logger.debug("computation_failed", error_type=type(e).__name__, error=str(e))
        return Result.err(e)


__all__ = [
    "Result",
    "State",
    "Ok",
    "Err",
    "Empty",
    "Variant",
    "try_wrap",
    "DEFAULT_ERROR_MESSAGE",
    "UNINITIALIZED_MESSAGE",
]
