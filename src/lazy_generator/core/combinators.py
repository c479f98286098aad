"""Combinators that build generators on top of other generators."""

from typing import Callable, Iterator as PyIterator, List, Optional, TypeVar

from .handle import Generator
from .iterator import END
from .models import FaultPolicy

T = TypeVar("T")
U = TypeVar("U")


def fmap(
    transform: Callable[[T], U],
    source: Generator[T],
    *,
    fault_policy: Optional[FaultPolicy] = None,
) -> Generator[U]:
    """
    Map ``transform`` over every value of ``source``.

    Takes ownership of ``source``: the caller's handle is empty afterwards.
    Nothing is pulled from the source until the returned generator is driven.

    Args:
        transform: Function applied to each value
        source: Generator to consume
        fault_policy: Policy for the mapped generator (defaults to the source's)

    Returns:
        Generator emitting ``transform(value)`` for each source value
    """
    owned = source.move()
    return Generator(
        _mapped(transform, owned),
        fault_policy=fault_policy or owned.fault_policy,
    )


def _mapped(transform: Callable[[T], U], source: Generator[T]) -> PyIterator[U]:
    try:
        it = source.begin()
        while it != END:
            yield transform(it.dereference())
            it.advance()
    finally:
        source.destroy()


def take(
    n: int,
    source: Generator[T],
    *,
    fault_policy: Optional[FaultPolicy] = None,
) -> Generator[T]:
    """
    Emit at most ``n`` values from ``source``, then destroy it.

    The source is never resumed past its ``n``-th emission.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    owned = source.move()
    return Generator(
        _taken(n, owned),
        fault_policy=fault_policy or owned.fault_policy,
    )


def _taken(n: int, source: Generator[T]) -> PyIterator[T]:
    try:
        if n == 0:
            return
        count = 0
        it = source.begin()
        while it != END:
            yield it.dereference()
            count += 1
            if count >= n:
                return
            it.advance()
    finally:
        source.destroy()


def batched(
    size: int,
    source: Generator[T],
    *,
    fault_policy: Optional[FaultPolicy] = None,
) -> Generator[List[T]]:
    """
    Group consecutive values of ``source`` into lists of up to ``size``.

    Args:
        size: Number of values per batch
        source: Generator to consume

    Returns:
        Generator emitting batches; the last one may be shorter
    """
    if size <= 0:
        raise ValueError("size must be positive")
    owned = source.move()
    return Generator(
        _batches(size, owned),
        fault_policy=fault_policy or owned.fault_policy,
    )


def _batches(size: int, source: Generator[T]) -> PyIterator[List[T]]:
    try:
        batch: List[T] = []
        it = source.begin()
        while it != END:
            batch.append(it.dereference())
            if len(batch) >= size:
                yield batch
                batch = []
            it.advance()

        # Yield remaining values
        if batch:
            yield batch
    finally:
        source.destroy()
