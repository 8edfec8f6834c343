"""Parameter configuration for query dialects."""

from enum import Enum
from typing import Any, Final, Literal, Optional, Union

from sqlglot.dialects.dialect import Dialect
from typing_extensions import TypeAlias

from ngqlspec.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_DIALECT", "DEFAULT_MARKER", "ParameterStyleConfig")

DEFAULT_DIALECT: Final = "ngql"
DEFAULT_MARKER: Final = "?"

_NGQL_QUOTE: Final = '"'
_NGQL_ESCAPE: Final = "\\"
_SQL_QUOTE: Final = "'"


class _UnsetEnum(Enum):
    UNSET = 0


_UnsetType: TypeAlias = Literal[_UnsetEnum.UNSET]
_UNSET: Final = _UnsetEnum.UNSET


def _literal_grammar(dialect: str) -> "tuple[str, Optional[str]]":
    """Quote and escape characters of a dialect's string literals.

    sqlglot dialects quote with ``'`` and double the quote to escape it;
    dialects whose tokenizer also accepts backslash escapes get ``\\`` as
    escape character so escaped quotes do not end a literal.

    Raises:
        ImproperConfigurationError: If the dialect is neither nGQL nor known to sqlglot.
    """
    if dialect == DEFAULT_DIALECT:
        return _NGQL_QUOTE, _NGQL_ESCAPE
    try:
        sqlglot_dialect = Dialect.get_or_raise(dialect)
    except ValueError as e:
        msg = f"Unknown query dialect {dialect!r}"
        raise ImproperConfigurationError(msg) from e
    string_escapes = getattr(sqlglot_dialect.tokenizer_class, "STRING_ESCAPES", ())
    return _SQL_QUOTE, "\\" if "\\" in string_escapes else None


class ParameterStyleConfig:
    """Declarative configuration for marker detection and literal rendering.

    ``dialect`` selects the literal grammar: ``"ngql"`` renders literals
    natively, any other name must be a sqlglot dialect and literals are
    rendered through sqlglot expressions. Quote and escape characters default
    to the dialect's own.
    """

    __slots__ = ("dialect", "escape_char", "marker", "quote_char")

    def __init__(
        self,
        dialect: str = DEFAULT_DIALECT,
        marker: str = DEFAULT_MARKER,
        quote_char: Optional[str] = None,
        escape_char: Union[str, None, _UnsetType] = _UNSET,
    ) -> None:
        """Initialize parameter configuration.

        Args:
            dialect: Target query language name, ``"ngql"`` or a sqlglot dialect
            marker: Placeholder character denoting one bindable position
            quote_char: Character that opens and closes string literals (default: the dialect's)
            escape_char: Character that escapes the next character inside a literal;
                ``None`` disables escapes (default: the dialect's)

        Raises:
            ImproperConfigurationError: If the dialect is unknown, or the characters are not single,
                distinct characters.
        """
        if not isinstance(dialect, str):
            msg = f"dialect must be a string, got {type(dialect).__name__}"
            raise ImproperConfigurationError(msg)
        dialect = dialect.lower()
        default_quote, default_escape = _literal_grammar(dialect)
        if quote_char is None:
            quote_char = default_quote
        if escape_char is _UNSET:
            escape_char = default_escape

        for label, char in (("marker", marker), ("quote_char", quote_char), ("escape_char", escape_char)):
            if char is not None and len(char) != 1:
                msg = f"{label} must be a single character, got {char!r}"
                raise ImproperConfigurationError(msg)
        special_chars = [c for c in (marker, quote_char, escape_char) if c is not None]
        if len(set(special_chars)) != len(special_chars):
            msg = f"marker, quote_char and escape_char must differ, got {marker!r}, {quote_char!r}, {escape_char!r}"
            raise ImproperConfigurationError(msg)

        self.dialect = dialect
        self.marker = marker
        self.quote_char = quote_char
        self.escape_char = escape_char

    @classmethod
    def for_dialect(cls, dialect: str = DEFAULT_DIALECT, marker: str = DEFAULT_MARKER) -> "ParameterStyleConfig":
        """Build the configuration matching a dialect's string literal grammar.

        Raises:
            ImproperConfigurationError: If the dialect is neither nGQL nor known to sqlglot.
        """
        return cls(dialect=dialect, marker=marker)

    @property
    def is_native(self) -> bool:
        """Whether literals are rendered natively (nGQL) rather than through sqlglot."""
        return self.dialect == DEFAULT_DIALECT

    def replace(self, **kwargs: Any) -> "ParameterStyleConfig":
        """Create a copy with updated attributes.

        Changing ``dialect`` resets the quote and escape characters to the new
        dialect's unless they are passed explicitly.
        """
        current = {slot: getattr(self, slot) for slot in self.__slots__}
        if "dialect" in kwargs:
            current.pop("quote_char")
            current.pop("escape_char")
        current.update(kwargs)
        return type(self)(**current)

    def hash(self) -> int:
        """Deterministic hash of the configuration."""
        return hash((self.dialect, self.marker, self.quote_char, self.escape_char))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterStyleConfig):
            return False
        return self.hash() == other.hash()

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.dialect!r}, marker={self.marker!r}, quote_char={self.quote_char!r}, escape_char={self.escape_char!r})"
