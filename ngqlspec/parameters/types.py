"""Core parameter types used throughout ngqlspec.

``ParameterInfo`` describes one genuine marker found in a template.
``BoundValue`` is the closed set of values that can be bound to a marker:
anything outside ``LiteralKind`` is rejected when the value is constructed.
"""

import math
from enum import Enum
from typing import Any, Final, Optional

from mypy_extensions import mypyc_attr

from ngqlspec.exceptions import NotSupportedError

__all__ = (
    "INT64_MAX",
    "INT64_MIN",
    "BoundValue",
    "LiteralKind",
    "ParameterInfo",
)

INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -(2**63)


class LiteralKind(str, Enum):
    """Kinds of values with a literal form in the target query language."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


@mypyc_attr(allow_interpreted_subclasses=False)
class ParameterInfo:
    """Immutable information about one genuine parameter marker.

    Attributes:
        ordinal: 1-based bind position of the marker
        position: Character offset of the marker in the template
        placeholder_text: The marker text as it appears in the template
    """

    __slots__ = ("ordinal", "placeholder_text", "position")

    def __init__(self, ordinal: int, position: int, placeholder_text: str) -> None:
        self.ordinal = ordinal
        self.position = position
        self.placeholder_text = placeholder_text

    @property
    def end(self) -> int:
        """Offset just past the marker."""
        return self.position + len(self.placeholder_text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (
            self.ordinal == other.ordinal
            and self.position == other.position
            and self.placeholder_text == other.placeholder_text
        )

    def __hash__(self) -> int:
        return hash((self.ordinal, self.position, self.placeholder_text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ordinal={self.ordinal!r}, position={self.position!r}, placeholder_text={self.placeholder_text!r})"


@mypyc_attr(allow_interpreted_subclasses=False)
class BoundValue:
    """A value bound to a parameter position, tagged with its literal kind.

    Use :meth:`from_python` (or the ``null``/``boolean``/``floating``/... constructors)
    rather than building instances directly: they enforce that the payload
    matches the kind.
    """

    __slots__ = ("_hash", "kind", "value")

    def __init__(self, kind: LiteralKind, value: Any) -> None:
        self.kind = kind
        self.value = value
        self._hash: Optional[int] = None

    @classmethod
    def null(cls) -> "BoundValue":
        return cls(LiteralKind.NULL, None)

    @classmethod
    def boolean(cls, value: bool) -> "BoundValue":
        return cls(LiteralKind.BOOLEAN, bool(value))

    @classmethod
    def integer(cls, value: int) -> "BoundValue":
        return cls(LiteralKind.INTEGER, int(value))

    @classmethod
    def floating(cls, value: float) -> "BoundValue":
        if math.isnan(value) or math.isinf(value):
            raise NotSupportedError("float", reason=f"{value!r} has no finite literal form")
        return cls(LiteralKind.FLOAT, value)

    @classmethod
    def string(cls, value: str) -> "BoundValue":
        return cls(LiteralKind.STRING, value)

    @classmethod
    def from_python(cls, value: Any) -> "BoundValue":
        """Wrap a Python value, rejecting types without a literal form.

        ``bool`` is checked before ``int`` since it is a subclass of it.

        Args:
            value: ``None``, ``bool``, ``int``, ``float``, ``str`` or an existing ``BoundValue``

        Raises:
            NotSupportedError: For any other type (bytes, streams, dates, decimals, containers, ...).

        Returns:
            The tagged value.
        """
        if isinstance(value, BoundValue):
            return value
        if value is None:
            return cls.null()
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.floating(value)
        if isinstance(value, str):
            return cls.string(value)
        raise NotSupportedError(type(value).__name__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundValue):
            return False
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.kind, self.value))
        return self._hash

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, value={self.value!r})"
