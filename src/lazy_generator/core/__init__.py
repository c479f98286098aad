"""Core suspend/resume primitives: state, handle, iterator and combinators."""

from .combinators import batched, fmap, take
from .errors import InvalidState, LazyGeneratorError, ProducerFault
from .frames import to_dataframes
from .handle import Generator, generator, swap
from .iterator import END, Iterator, Sentinel
from .models import FaultPolicy, GeneratorStats, Phase
from .protocols import LoggerProtocol, Producer
from .state import ExecutionState

__all__ = [
    # Models
    "Phase",
    "FaultPolicy",
    "GeneratorStats",
    # Errors
    "LazyGeneratorError",
    "InvalidState",
    "ProducerFault",
    # Protocols
    "LoggerProtocol",
    "Producer",
    # State
    "ExecutionState",
    # Handle
    "Generator",
    "generator",
    "swap",
    # Iteration
    "Iterator",
    "Sentinel",
    "END",
    # Combinators
    "fmap",
    "take",
    "batched",
    "to_dataframes",
]
