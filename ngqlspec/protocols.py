"""Runtime-checkable protocols for ngqlspec.

These describe the collaborators a prepared statement talks to without
importing them: the execution layer that runs the final query text.
"""

from typing import Any, Callable, Protocol, Union, runtime_checkable

__all__ = ("ClosableProtocol", "QueryExecutorProtocol")


@runtime_checkable
class QueryExecutorProtocol(Protocol):
    """Protocol for objects that execute a final query string."""

    def execute(self, query: str) -> Any:
        """Send ``query`` to the backend and return its result."""
        ...


@runtime_checkable
class ClosableProtocol(Protocol):
    """Protocol for objects exposing a ``closed`` state (sessions, connections).

    ``closed`` is either a flag or a no-argument method returning one.
    """

    closed: "Union[bool, Callable[[], bool]]"
