"""Move-only owner of an execution state."""

import functools
import logging
from typing import Any, Callable, Generic, Iterator as PyIterator, Optional, TypeVar

from .iterator import END, Iterator, Sentinel
from .models import FaultPolicy, GeneratorStats, Phase
from .protocols import LoggerProtocol, Producer
from .state import ExecutionState

T = TypeVar("T")


class Generator(Generic[T]):
    """
    Sole owner of one producer's execution state.

    Single Responsibility: manage the lifetime of the state end-to-end.
    Ownership can be transferred with ``move()`` but never duplicated; a
    moved-from handle is empty and behaves as an already-completed sequence.

    Example:
        >>> def range12():
        ...     yield 1
        ...     yield 2
        >>> gen = Generator(range12())
        >>> it = gen.begin()
        >>> while it != gen.end():
        ...     print(it.value)
        ...     it.advance()
    """

    def __init__(
        self,
        frame: Optional[PyIterator[T]] = None,
        *,
        fault_policy: Optional[FaultPolicy] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize a handle around a not yet started producer.

        Args:
            frame: Generator object returned by invoking a producer routine;
                None creates an empty handle
            fault_policy: How producer exceptions are handled (defaults to config)
            logger: Logger instance (defaults to module logger)
        """
        self._logger = logger or logging.getLogger(__name__)
        self._state: Optional[ExecutionState[T]] = None
        if frame is not None:
            self._state = ExecutionState(frame, fault_policy, logger)

    @classmethod
    def _adopt(cls, state: Optional[ExecutionState[T]], logger) -> "Generator[T]":
        handle = cls(logger=logger)
        handle._state = state
        return handle

    @property
    def empty(self) -> bool:
        return self._state is None

    @property
    def phase(self) -> Phase:
        if self._state is None:
            return Phase.COMPLETED
        return self._state.phase

    @property
    def fault_policy(self) -> Optional[FaultPolicy]:
        if self._state is None:
            return None
        return self._state.fault_policy

    @property
    def stats(self) -> GeneratorStats:
        if self._state is None:
            return GeneratorStats()
        return self._state.stats

    def begin(self) -> Iterator[T]:
        """
        Resume the producer and return an iterator over its state.

        An empty or exhausted handle runs no producer code; the returned
        iterator then compares equal to ``END``.
        """
        if self._state is not None:
            self._state.resume()
        return Iterator(self._state)

    def end(self) -> Sentinel:
        return END

    def move(self) -> "Generator[T]":
        """Transfer ownership to a new handle, leaving this one empty."""
        state, self._state = self._state, None
        if self._logger:
            self._logger.debug(f"Moved ownership of {state!r}")
        return self._adopt(state, self._logger)

    def swap(self, other: "Generator[T]") -> None:
        self._state, other._state = other._state, self._state

    def destroy(self) -> None:
        """Tear down the owned state at whatever phase it is in."""
        state, self._state = self._state, None
        if state is not None:
            state.destroy()

    close = destroy

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and destroy the owned state."""
        self.destroy()

    def __iter__(self):
        it = self.begin()
        while it != END:
            yield it.dereference()
            it.advance()

    def __copy__(self):
        raise TypeError("Generator handles cannot be copied; use move() to transfer ownership")

    def __deepcopy__(self, memo):
        raise TypeError("Generator handles cannot be copied; use move() to transfer ownership")

    def __reduce_ex__(self, protocol):
        raise TypeError("Generator handles cannot be pickled")

    def __repr__(self):
        if self._state is None:
            return "Generator(<empty>)"
        return f"Generator({self._state.name}, {self._state.phase.value})"


def swap(a: Generator[T], b: Generator[T]) -> None:
    """Exchange the states owned by two handles."""
    a.swap(b)


def generator(
    producer: Optional[Producer] = None,
    *,
    fault_policy: Optional[FaultPolicy] = None,
) -> Any:
    """
    Decorate a producer routine so that calling it returns a ``Generator``.

    Usable bare (``@generator``) or with options
    (``@generator(fault_policy=FaultPolicy.RAISE)``).
    """

    def decorate(func: Callable[..., PyIterator[T]]) -> Callable[..., Generator[T]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Generator[T]:
            return Generator(func(*args, **kwargs), fault_policy=fault_policy)

        return wrapper

    if producer is None:
        return decorate
    return decorate(producer)
