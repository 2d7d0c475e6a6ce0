"""
Fluent, short-circuiting transformation pipeline over a Result.

A ``Pipe`` holds one ``Result``. Each ``then()`` applies a transformation
to the success value through the try-boundary and returns a new Pipe; once
a stage fails, every later stage is skipped and the first captured error is
kept as-is.

Architecture:
    ::

        Pipe.of(v) / Pipe(supplier)
                │
                ▼
        ┌──────────────┐  then(f) ok    ┌──────────────┐
        │  Active-Ok   │ ─────────────> │  Active-Ok   │
        └──────────────┘                └──────────────┘
                │ then(f) raises
                ▼
        ┌──────────────┐  then(*)
        │    Failed    │ ───────┐  (absorbing)
        └──────────────┘ <──────┘

Examples:
    >>> Pipe.of("anu").then(str.upper).then(lambda s: s + "-KIT").result.unwrap_or_raise()
    'ANU-KIT'

    Recovering with ``map_result``:

    >>> failed = Pipe(lambda: int("x"))
    >>> failed.map_result(lambda r: "fallback" if r.is_err() else r.unwrap_or_raise()).try_get_ok()
    'fallback'
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from anukit.core.logging import get_library_logger
from anukit.core.result import Ok, Result, try_wrap

T = TypeVar("T")
R = TypeVar("R")

logger = get_library_logger(__name__)


class Pipe(Generic[T]):
    """
    Immutable cursor over a ``Result[T, Exception]``.

    ``then()`` never modifies the pipe it is called on; it returns a new one
    (or the same one when already failed), so a pipe can be shared between
    call sites and branched safely.

    Examples:
        >>> base = Pipe.of(10)
        >>> doubled = base.then(lambda x: x * 2)
        >>> base.result.try_get_ok(), doubled.result.try_get_ok()
        (10, 20)
    """

    __slots__ = ("_result",)

    def __init__(self, supplier: Callable[[], T]):
        """Run ``supplier`` now and capture its outcome; never raises."""
        self._result: Result[T, Exception] = try_wrap(supplier)

    @classmethod
    def of(cls, value: T) -> Pipe[T]:
        """Create a pipe holding ``value`` as a success."""
        return cls._from_result(Result.ok(value))

    @classmethod
    def _from_result(cls, result: Result[T, Exception]) -> Pipe[T]:
        pipe = cls.__new__(cls)
        pipe._result = result
        return pipe

    @property
    def result(self) -> Result[T, Exception]:
        """The Result currently held by this pipe."""
        return self._result

    def then(self, modifier: Callable[[T], T]) -> Pipe[T]:
        """
        Apply ``modifier`` to the success value.

        Returns a new pipe holding the modifier's outcome (ERR if it raised).
        When this pipe is not OK the modifier is not called and this same
        pipe is returned.
        """
        match self._result.variant:
            case Ok(value):
                return self._from_result(try_wrap(lambda: modifier(value)))
            case _:
                logger.debug(
                    "pipe_short_circuit",
                    state=self._result.state.value,
                    stage=getattr(modifier, "__name__", repr(modifier)),
                )
                return self

    def map_result(self, transformer: Callable[[Result[T, Exception]], R]) -> Result[R, Exception]:
        """
        Apply ``transformer`` to the whole held Result and capture its outcome.

        This is the recovery hook: the transformer sees ERR results too and
        may return a substitute value, producing a fresh OK Result.
        """
        return try_wrap(lambda: transformer(self._result))

    def __repr__(self) -> str:
        return f"Pipe({self._result!r})"


__all__ = ["Pipe"]
