"""Protocol definitions for dependency inversion."""

from typing import Any, Protocol


class Producer(Protocol):
    """Protocol for producer routines: a callable returning a generator object."""

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Create a fresh, not yet started producer frame."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        ...
