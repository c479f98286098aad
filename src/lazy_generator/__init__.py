"""Lazy Generator - pull-based lazy sequences with suspend/resume producers."""

__version__ = "0.1.0"

from .core import (
    END,
    ExecutionState,
    FaultPolicy,
    Generator,
    InvalidState,
    Iterator,
    Phase,
    ProducerFault,
    Sentinel,
    batched,
    fmap,
    generator,
    swap,
    take,
    to_dataframes,
)

__all__ = [
    "END",
    "ExecutionState",
    "FaultPolicy",
    "Generator",
    "InvalidState",
    "Iterator",
    "Phase",
    "ProducerFault",
    "Sentinel",
    "batched",
    "fmap",
    "generator",
    "swap",
    "take",
    "to_dataframes",
]
