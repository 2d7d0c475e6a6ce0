"""anukit core -- the Result container and the errors it raises.

Architecture::

    errors.py      AnuKitError hierarchy, PropagateError, ErrorPayload
    result.py      Result[T, E] (Ok / Err / Empty) and try_wrap
    logging.py     Structured logging (structlog)
    settings.py    AnuKitSettings (pydantic-settings)
"""

from anukit.core.errors import (
    AnuKitError,
    ErrorPayload,
    Message,
    PropagateError,
    ResultStateError,
    Structured,
    UninitializedResultError,
    Wrapped,
    classify_payload,
)
from anukit.core.result import Empty, Err, Ok, Result, State, try_wrap

__all__ = [
    "AnuKitError",
    "ErrorPayload",
    "Message",
    "PropagateError",
    "ResultStateError",
    "Structured",
    "UninitializedResultError",
    "Wrapped",
    "classify_payload",
    "Empty",
    "Err",
    "Ok",
    "Result",
    "State",
    "try_wrap",
]
