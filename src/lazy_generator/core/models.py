"""Data models and enumerations shared by the core components."""

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    """Execution phase of a producer."""

    NOT_STARTED = "not_started"
    SUSPENDED = "suspended"
    COMPLETED = "completed"


class FaultPolicy(str, Enum):
    """What happens to an exception raised inside producer code."""

    DISCARD = "discard"
    RAISE = "raise"


@dataclass
class GeneratorStats:
    """Statistics for a single execution state."""

    resumes: int = 0
    emitted: int = 0
    faults_discarded: int = 0
