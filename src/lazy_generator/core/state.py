"""Execution state of a single producer invocation."""

import inspect
import logging
from typing import Any, Generic, Iterator, Optional, TypeVar

from .errors import InvalidState, ProducerFault
from .models import FaultPolicy, GeneratorStats, Phase
from .protocols import LoggerProtocol

T = TypeVar("T")

_EMPTY = object()


class ExecutionState(Generic[T]):
    """
    Holds a producer's suspended progress and its most recent emission.

    The producer is a native Python generator object; its frame keeps the
    producer-local variables alive across suspensions. The emitted value is
    moved into ``_value`` so readers never reach into the producer frame.

    Invariant: ``_value`` is populated if and only if the phase is SUSPENDED.
    """

    def __init__(
        self,
        frame: Iterator[T],
        fault_policy: Optional[FaultPolicy] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize execution state without running any producer code.

        Args:
            frame: Freshly created generator object of the producer routine
            fault_policy: How producer exceptions are handled (defaults to config)
            logger: Logger instance (defaults to module logger)
        """
        if inspect.iscoroutine(frame) or inspect.isasyncgen(frame) or inspect.isawaitable(frame):
            raise TypeError(
                "Producers may only suspend at their own emission points; "
                f"got awaitable {type(frame).__name__}"
            )
        if not inspect.isgenerator(frame):
            raise TypeError(
                f"Producer must be a generator object, got {type(frame).__name__}"
            )
        if inspect.getgeneratorstate(frame) != inspect.GEN_CREATED:
            raise ValueError("Producer has already been started")

        if fault_policy is None:
            from ..config import get_generator_config

            fault_policy = get_generator_config().fault_policy

        self._frame: Optional[Iterator[T]] = frame
        self._name = getattr(frame, "__qualname__", type(frame).__name__)
        self._phase = Phase.NOT_STARTED
        self._value: Any = _EMPTY
        self.fault_policy = FaultPolicy(fault_policy)
        self.stats = GeneratorStats()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def done(self) -> bool:
        return self._phase is Phase.COMPLETED

    @property
    def value(self) -> T:
        """Return the stored emission; only valid while SUSPENDED."""
        if self._phase is not Phase.SUSPENDED:
            raise InvalidState(
                f"No value available from {self._name}: phase is {self._phase.value}"
            )
        return self._value

    def resume(self) -> None:
        """
        Run the producer up to its next emission or to its end.

        A completed state is left untouched: producer code never runs again.

        Raises:
            ProducerFault: If the producer raised and the policy is RAISE
        """
        if self._phase is Phase.COMPLETED:
            return

        if self._phase is Phase.NOT_STARTED and self._logger:
            self._logger.debug(f"Starting producer {self._name}")

        self.stats.resumes += 1
        # The previous emission is released before the producer runs again
        self._value = _EMPTY
        try:
            value = next(self._frame)
        except StopIteration:
            self._complete()
            return
        except Exception as e:
            self._complete()
            self._handle_fault(e)
            return
        except BaseException:
            self._complete()
            raise

        self._value = value
        self._phase = Phase.SUSPENDED
        self.stats.emitted += 1

    def destroy(self) -> None:
        """Tear down the producer at whatever phase it is in."""
        frame = self._frame
        if frame is None:
            self._complete()
            return

        if self._logger:
            self._logger.debug(
                f"Destroying producer {self._name} in phase {self._phase.value}"
            )
        try:
            # Runs finally blocks and context-manager exits still pending in the frame
            frame.close()
        except Exception as e:
            self._complete()
            self._handle_fault(e)
        else:
            self._complete()

    def _complete(self) -> None:
        if self._phase is not Phase.COMPLETED and self._logger:
            self._logger.debug(
                f"Producer {self._name} completed after {self.stats.emitted} values"
            )
        self._phase = Phase.COMPLETED
        self._value = _EMPTY
        self._frame = None

    def _handle_fault(self, fault: Exception) -> None:
        if self.fault_policy is FaultPolicy.RAISE:
            # Already wrapped by an inner generator driven from this producer
            if isinstance(fault, ProducerFault):
                raise fault
            raise ProducerFault(fault) from fault

        self.stats.faults_discarded += 1
        if self._logger:
            self._logger.warning(
                f"Discarding {type(fault).__name__} raised by producer {self._name}; "
                f"sequence treated as complete: {fault}",
                exc_info=fault,
            )

    def __repr__(self):
        return f"ExecutionState({self._name}, {self._phase.value})"
