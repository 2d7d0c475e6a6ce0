"""anukit -- exception-free error handling.

A tri-state ``Result`` (OK / ERR / NONE), a short-circuiting ``Pipe`` built
on it, and ``PropagateError`` for raising a captured error of any type.

    >>> from anukit import Pipe, Result, try_wrap
    >>> Pipe.of("anu").then(str.upper).result.unwrap_or_raise()
    'ANU'
"""

from anukit.core.errors import (
    AnuKitError,
    PropagateError,
    ResultStateError,
    UninitializedResultError,
)
from anukit.core.result import Empty, Err, Ok, Result, State, try_wrap
from anukit.pipe import Pipe
from anukit.toolkit import (
    ResultStream,
    run_async,
    safe_map,
    shutdown_executor,
    try_wrap_async,
    wrap_list,
)

__version__ = "0.1.0"

__all__ = [
    "AnuKitError",
    "PropagateError",
    "ResultStateError",
    "UninitializedResultError",
    "Empty",
    "Err",
    "Ok",
    "Result",
    "State",
    "try_wrap",
    "Pipe",
    "ResultStream",
    "run_async",
    "safe_map",
    "shutdown_executor",
    "try_wrap_async",
    "wrap_list",
]
