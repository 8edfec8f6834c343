"""Type guard functions for runtime type checking in ngqlspec.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from ngqlspec.protocols import ClosableProtocol, QueryExecutorProtocol

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = (
    "is_closable",
    "is_parameter_mapping",
    "is_parameter_sequence",
    "is_position",
    "is_query_executor",
)


def is_position(obj: Any) -> "TypeGuard[int]":
    """Check if an object can be used as a parameter position.

    Booleans are integers in Python but never positions.

    Args:
        obj: The object to check

    Returns:
        True if the object is a non-boolean integer, False otherwise
    """
    return isinstance(obj, int) and not isinstance(obj, bool)


def is_parameter_sequence(obj: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if parameters are a positional sequence (not a string or bytes)."""
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def is_parameter_mapping(obj: Any) -> "TypeGuard[Mapping[Any, Any]]":
    """Check if parameters are a position mapping."""
    return isinstance(obj, Mapping)


def is_query_executor(obj: Any) -> "TypeGuard[QueryExecutorProtocol]":
    """Check if an object can execute query text."""
    return isinstance(obj, QueryExecutorProtocol)


def is_closable(obj: Any) -> "TypeGuard[ClosableProtocol]":
    """Check if an object exposes a ``closed`` flag.

    Args:
        obj: The object to check

    Returns:
        True if the object has a ``closed`` attribute, False otherwise
    """
    return isinstance(obj, ClosableProtocol)
