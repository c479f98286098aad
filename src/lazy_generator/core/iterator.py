"""Pull-based iterator and end-of-sequence sentinel over an execution state."""

from typing import Generic, Optional, TypeVar

from .errors import InvalidState
from .state import ExecutionState

T = TypeVar("T")


class Sentinel:
    """Stateless marker for "no more elements"; all instances compare equal."""

    _instance: Optional["Sentinel"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other):
        if isinstance(other, Iterator):
            return other.exhausted
        if isinstance(other, Sentinel):
            return True
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(Sentinel)

    def __repr__(self):
        return "END"


END = Sentinel()


class Iterator(Generic[T]):
    """
    Non-owning view of an execution state.

    Holds nothing but the reference; equality with ``END`` and dereference
    both delegate to the state. A value read through ``dereference`` is the
    one stored at the last emission and is replaced by the next ``advance``.
    """

    __slots__ = ("_state",)

    def __init__(self, state: Optional[ExecutionState[T]] = None):
        self._state = state

    @property
    def exhausted(self) -> bool:
        return self._state is None or self._state.done

    def advance(self) -> "Iterator[T]":
        """
        Resume the producer up to its next emission.

        Raises:
            InvalidState: If the iterator is already at the end
            ProducerFault: If the producer raised and the policy is RAISE
        """
        if self.exhausted:
            raise InvalidState("Cannot advance an iterator past the end of its sequence")
        self._state.resume()
        return self

    def dereference(self) -> T:
        """
        Return the value emitted at the current suspension point.

        Raises:
            InvalidState: If the iterator is at the end
        """
        if self._state is None:
            raise InvalidState("Cannot dereference an iterator over an empty generator")
        return self._state.value

    @property
    def value(self) -> T:
        return self.dereference()

    def __eq__(self, other):
        if isinstance(other, Sentinel):
            return self.exhausted
        if isinstance(other, Iterator):
            return self._state is other._state
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return f"Iterator({self._state!r})"
