"""Exceptions raised by the generator primitives."""


class LazyGeneratorError(Exception):
    """Base class for all errors raised by this package."""


class InvalidState(LazyGeneratorError, RuntimeError):
    """An iterator was dereferenced or advanced past the end of its sequence."""


class ProducerFault(LazyGeneratorError):
    """
    Wraps an exception raised inside producer code.

    Only raised when the fault policy is ``FaultPolicy.RAISE``; the original
    exception is available as ``fault`` and as ``__cause__``.
    """

    def __init__(self, fault: BaseException):
        super().__init__(f"Producer raised {type(fault).__name__}: {fault}")
        self.fault = fault
