"""Literal rendering of bound values.

nGQL literals are rendered natively:

- ``NULL``, ``true`` / ``false``
- integers in base 10, signed 64-bit range only
- floats with Python's shortest round-trip ``repr`` (locale independent)
- strings in double quotes with ``\\``, ``"`` and control characters escaped

For SQL dialects the literal is produced by a sqlglot expression and rendered
with that dialect's generator.
"""

from typing import TYPE_CHECKING, Any, Callable, Final, Optional

from sqlglot import exp

from ngqlspec.exceptions import NotSupportedError
from ngqlspec.parameters.config import ParameterStyleConfig
from ngqlspec.parameters.types import INT64_MAX, INT64_MIN, BoundValue, LiteralKind

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ("LiteralSerializer", "escape_string", "format_float")

_NGQL_STRING_ESCAPES: Final = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"})


def escape_string(value: str, quote_char: str = '"') -> str:
    """Quote and escape a string as an nGQL literal."""
    escaped = value.translate(_NGQL_STRING_ESCAPES)
    if quote_char != '"':
        escaped = escaped.replace(quote_char, f"\\{quote_char}")
    return f"{quote_char}{escaped}{quote_char}"


def format_float(value: float) -> str:
    """Lossless, locale-independent float text.

    Integral values keep a ``.0`` suffix so the literal still reads as a float.
    """
    text = repr(value)
    if text.lstrip("-").isdigit():
        text = f"{text}.0"
    return text


def _check_int64(value: int) -> None:
    if not INT64_MIN <= value <= INT64_MAX:
        raise NotSupportedError("int", reason=f"{value} is outside the signed 64-bit integer range")


class LiteralSerializer:
    """Converts bound values into literal text for one dialect."""

    __slots__ = ("_renderers", "config")

    def __init__(self, config: Optional[ParameterStyleConfig] = None) -> None:
        self.config = config or ParameterStyleConfig()
        renderers: "Mapping[LiteralKind, Callable[[Any], str]]"
        if self.config.is_native:
            renderers = {
                LiteralKind.NULL: self._native_null,
                LiteralKind.BOOLEAN: self._native_boolean,
                LiteralKind.INTEGER: str,
                LiteralKind.FLOAT: format_float,
                LiteralKind.STRING: self._native_string,
            }
        else:
            renderers = {
                LiteralKind.NULL: self._sqlglot_null,
                LiteralKind.BOOLEAN: self._sqlglot_boolean,
                LiteralKind.INTEGER: self._sqlglot_integer,
                LiteralKind.FLOAT: self._sqlglot_float,
                LiteralKind.STRING: self._sqlglot_string,
            }
        self._renderers = renderers

    def check(self, value: Any, position: Optional[int] = None) -> BoundValue:
        """Wrap a value and confirm this dialect can render it.

        Called at bind time so a value without a literal form is refused
        before it reaches the parameter table.

        Args:
            value: A :class:`BoundValue` or a raw Python value
            position: Parameter position, used for error context only

        Raises:
            NotSupportedError: If the value has no literal form in this dialect.

        Returns:
            The wrapped value.
        """
        try:
            bound = BoundValue.from_python(value)
            if self.config.is_native and bound.kind is LiteralKind.INTEGER:
                _check_int64(bound.value)
        except NotSupportedError as e:
            if position is None or e.position is not None:
                raise
            raise NotSupportedError(e.value_type, position=position, reason=e.reason) from e
        return bound

    def serialize(self, value: Any, position: Optional[int] = None) -> str:
        """Render a value as a literal.

        Args:
            value: A :class:`BoundValue` or a raw Python value
            position: Parameter position, used for error context only

        Raises:
            NotSupportedError: If the value has no literal form in this dialect.

        Returns:
            The literal text.
        """
        bound = self.check(value, position)
        return self._renderers[bound.kind](bound.value)

    @staticmethod
    def _native_null(_: Any) -> str:
        return "NULL"

    @staticmethod
    def _native_boolean(value: bool) -> str:
        return "true" if value else "false"

    def _native_string(self, value: str) -> str:
        return escape_string(value, self.config.quote_char)

    def _render(self, expression: exp.Expression) -> str:
        return expression.sql(dialect=self.config.dialect)

    def _sqlglot_null(self, _: Any) -> str:
        return self._render(exp.Null())

    def _sqlglot_boolean(self, value: bool) -> str:
        return self._render(exp.Boolean(this=value))

    def _sqlglot_integer(self, value: int) -> str:
        return self._render(exp.Literal.number(str(value)))

    def _sqlglot_float(self, value: float) -> str:
        return self._render(exp.Literal.number(format_float(value)))

    def _sqlglot_string(self, value: str) -> str:
        return self._render(exp.Literal.string(value))
