"""Adapter turning a generator of records into a generator of DataFrames."""

import logging
from collections.abc import Mapping
from typing import Any, Iterator as PyIterator, List, Optional, Sequence

import pandas as pd

from .combinators import batched
from .handle import Generator
from .iterator import END
from .protocols import LoggerProtocol


def to_dataframes(
    source: Generator[Any],
    batch_size: Optional[int] = None,
    columns: Optional[Sequence[str]] = None,
    logger: Optional[LoggerProtocol] = None,
) -> Generator[pd.DataFrame]:
    """
    Transform a record generator into a generator of DataFrame batches.

    Only one batch exists in memory at a time. Records may be mappings
    (one column per key) or scalars (a single column, ``value`` by default).

    Args:
        source: Generator of records; ownership is taken
        batch_size: Records per DataFrame (defaults to config)
        columns: Column names to use
        logger: Logger instance

    Yields:
        DataFrames with a 1-based ``batch_number`` column
    """
    if batch_size is None:
        from ..config import get_generator_config

        batch_size = get_generator_config().batch_size

    batches = batched(batch_size, source)
    return Generator(
        _frames(batches, columns, logger or logging.getLogger(__name__)),
        fault_policy=batches.fault_policy,
    )


def _frames(
    batches: Generator[List[Any]],
    columns: Optional[Sequence[str]],
    logger: LoggerProtocol,
) -> PyIterator[pd.DataFrame]:
    try:
        batch_num = 0
        it = batches.begin()
        while it != END:
            batch_num += 1
            df = _to_frame(it.dereference(), columns)

            # Add metadata
            df["batch_number"] = batch_num

            if logger:
                logger.info(f"Created DataFrame batch {batch_num} with {len(df)} records")
            yield df
            it.advance()
    finally:
        batches.destroy()


def _to_frame(batch: List[Any], columns: Optional[Sequence[str]]) -> pd.DataFrame:
    if isinstance(batch[0], Mapping):
        return pd.DataFrame([dict(record) for record in batch], columns=columns)
    return pd.DataFrame({(columns[0] if columns else "value"): batch})
