"""Storage for values bound to parameter positions."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

from ngqlspec.exceptions import OutOfRangeError
from ngqlspec.parameters.serializer import LiteralSerializer
from ngqlspec.utils.logging import get_logger
from ngqlspec.utils.type_guards import is_parameter_mapping, is_parameter_sequence, is_position

if TYPE_CHECKING:
    from ngqlspec.parameters.types import BoundValue
    from ngqlspec.typing import StatementParameters

__all__ = ("ParameterTable",)

logger = get_logger("parameters.table")


class ParameterTable:
    """Values bound to the 1-based positions ``[1, parameter_count]``.

    The table never accepts a position outside that range, nor a value the
    serializer cannot render. It is owned by a single statement and is not
    safe for concurrent mutation.
    """

    __slots__ = ("_parameter_count", "_serializer", "_values")

    def __init__(self, parameter_count: int, serializer: Optional[LiteralSerializer] = None) -> None:
        if not is_position(parameter_count) or parameter_count < 0:
            msg = f"parameter_count must be a non-negative integer, got {parameter_count!r}"
            raise ValueError(msg)
        self._parameter_count = parameter_count
        self._serializer = serializer or LiteralSerializer()
        self._values: "dict[int, BoundValue]" = {}

    @property
    def parameter_count(self) -> int:
        return self._parameter_count

    def _check_position(self, position: Any) -> int:
        if not is_position(position) or not 1 <= position <= self._parameter_count:
            raise OutOfRangeError(position, self._parameter_count)
        return position

    def _wrap(self, position: int, value: Any) -> "BoundValue":
        return self._serializer.check(value, position)

    def bind(self, position: int, value: Any) -> None:
        """Store ``value`` at ``position``, replacing any previous value.

        Args:
            position: 1-based marker position
            value: Value to bind; see :meth:`BoundValue.from_python`

        Raises:
            OutOfRangeError: If ``position`` is not in ``[1, parameter_count]``.
            NotSupportedError: If ``value`` has no literal form in the serializer's dialect.
        """
        self._values[self._check_position(position)] = self._wrap(position, value)

    def bind_many(self, parameters: "StatementParameters") -> None:
        """Bind several positions at once.

        A sequence binds its items to positions ``1..len(parameters)``; a
        mapping binds each value to its key. Everything is validated before
        the table is touched, so a failure leaves it unchanged.

        Raises:
            OutOfRangeError: If any position is out of range.
            NotSupportedError: If any value has no literal form.
            TypeError: If ``parameters`` is neither a sequence nor a mapping.
        """
        items: "list[tuple[Any, Any]]"
        if is_parameter_mapping(parameters):
            items = list(parameters.items())
        elif is_parameter_sequence(parameters):
            items = list(enumerate(parameters, start=1))
        else:
            msg = f"Parameters must be a sequence or a mapping of positions, got {type(parameters).__name__}"
            raise TypeError(msg)

        staged = {self._check_position(position): self._wrap(position, value) for position, value in items}
        self._values.update(staged)

    def get(self, position: int) -> "Optional[BoundValue]":
        return self._values.get(position)

    def clear(self) -> None:
        """Remove every bound value, keeping the parameter count."""
        if self._values:
            logger.debug("Clearing %d bound parameter(s)", len(self._values))
        self._values.clear()

    def missing_positions(self) -> "tuple[int, ...]":
        """Positions in ``[1, parameter_count]`` that have no bound value."""
        return tuple(p for p in range(1, self._parameter_count + 1) if p not in self._values)

    def is_complete(self) -> bool:
        return len(self._values) == self._parameter_count

    def snapshot(self) -> "Mapping[int, BoundValue]":
        """Read-only copy of the current bindings.

        Later binds or clears do not affect a snapshot already taken.
        """
        return MappingProxyType(dict(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, position: object) -> bool:
        return position in self._values

    def __iter__(self) -> "Iterator[int]":
        return iter(sorted(self._values))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parameter_count={self._parameter_count!r}, bound={sorted(self._values)!r})"
