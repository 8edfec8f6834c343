"""Prepared statements over positional query templates.

A :class:`PreparedStatement` owns one template, the markers found in it, and
the values bound to those markers. Its lifecycle is::

    OPEN -> (bind | clear)* -> build -> OPEN
    OPEN -> release -> CLOSED

``CLOSED`` is terminal: every bind, clear, build or execute on a released
statement raises :class:`~ngqlspec.exceptions.ClosedError`. A statement is
not safe for concurrent use; callers keep one instance per request.
"""

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import mypyc_attr

from ngqlspec.exceptions import ClosedError, ImproperConfigurationError
from ngqlspec.parameters import (
    ParameterConverter,
    ParameterStyleConfig,
    ParameterTable,
    ParameterValidator,
)
from ngqlspec.utils.logging import get_logger, log_with_context
from ngqlspec.utils.type_guards import is_closable, is_query_executor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typing_extensions import Self

    from ngqlspec.parameters import BoundValue, ParameterInfo
    from ngqlspec.protocols import QueryExecutorProtocol
    from ngqlspec.typing import StatementParameters

__all__ = ("PreparedStatement", "StatementConfig", "get_default_config")

logger = get_logger("core.statement")

STATEMENT_CONFIG_SLOTS = ("log_final_query", "parameter_config", "parameter_converter", "parameter_validator")


class StatementConfig:
    """Configuration shared by prepared statements.

    Holds the dialect's parameter configuration and the validator and
    converter built from it.
    """

    __slots__ = STATEMENT_CONFIG_SLOTS

    def __init__(
        self,
        parameter_config: "Optional[ParameterStyleConfig]" = None,
        parameter_validator: "Optional[ParameterValidator]" = None,
        parameter_converter: "Optional[ParameterConverter]" = None,
        log_final_query: bool = False,
    ) -> None:
        """Initialize statement configuration.

        Args:
            parameter_config: Marker, quote and dialect settings (default: nGQL)
            parameter_validator: Marker extractor; built from ``parameter_config`` when omitted
            parameter_converter: Literal substitution; built from ``parameter_config`` when omitted
            log_final_query: Include the final query text in debug logs (default: False)
        """
        self.parameter_config = parameter_config or ParameterStyleConfig()
        self.parameter_validator = parameter_validator or ParameterValidator(self.parameter_config)
        self.parameter_converter = parameter_converter or ParameterConverter(
            self.parameter_config, validator=self.parameter_validator
        )
        self.log_final_query = log_final_query

    @classmethod
    def for_dialect(cls, dialect: str, **kwargs: Any) -> "StatementConfig":
        """Configuration for a named dialect (``"ngql"`` or any sqlglot dialect)."""
        return cls(parameter_config=ParameterStyleConfig.for_dialect(dialect), **kwargs)

    @property
    def dialect(self) -> str:
        return self.parameter_config.dialect

    def replace(self, **kwargs: Any) -> "StatementConfig":
        """Immutable update pattern.

        Replacing ``parameter_config`` rebuilds the validator and converter
        unless they are passed explicitly.

        Args:
            **kwargs: Attributes to update

        Returns:
            New StatementConfig instance with updated attributes
        """
        for key in kwargs:
            if key not in STATEMENT_CONFIG_SLOTS:
                msg = f"{key!r} is not a field in {type(self).__name__}"
                raise TypeError(msg)

        current = {slot: getattr(self, slot) for slot in STATEMENT_CONFIG_SLOTS}
        if "parameter_config" in kwargs:
            current.pop("parameter_validator")
            current.pop("parameter_converter")
        current.update(kwargs)
        return type(self)(**current)

    def __hash__(self) -> int:
        return hash((self.parameter_config.hash(), self.log_final_query))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.parameter_config == other.parameter_config and self.log_final_query == other.log_final_query

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parameter_config={self.parameter_config!r}, log_final_query={self.log_final_query!r})"


def get_default_config() -> StatementConfig:
    """Get default statement configuration (nGQL)."""
    return StatementConfig()


@mypyc_attr(allow_interpreted_subclasses=False)
class PreparedStatement:
    """A query template with positional ``?`` markers and their bound values.

    Example:
        >>> stmt = PreparedStatement("MATCH (v) WHERE v.name == ? AND v.age > ? RETURN v")
        >>> stmt.parameter_count
        2
        >>> stmt.bind(1, "O'Brien")
        >>> stmt.bind(2, 30)
        >>> stmt.build()
        'MATCH (v) WHERE v.name == "O\\'Brien" AND v.age > 30 RETURN v'
    """

    __slots__ = ("_closed", "_config", "_executor", "_parameter_info", "_parameters", "_template")

    def __init__(
        self,
        template: str,
        config: "Optional[StatementConfig]" = None,
        executor: "Optional[QueryExecutorProtocol]" = None,
    ) -> None:
        """Scan the template and create an empty parameter table.

        Args:
            template: Query text with positional markers
            config: Statement configuration (default: nGQL)
            executor: Collaborator that runs the final query; also consulted for a ``closed`` flag

        Raises:
            ImproperConfigurationError: If ``executor`` cannot execute query text.
        """
        if not isinstance(template, str):
            msg = f"Query template must be a string, got {type(template).__name__}"
            raise TypeError(msg)
        if executor is not None and not is_query_executor(executor):
            msg = f"{type(executor).__name__} does not provide execute(query)"
            raise ImproperConfigurationError(msg)

        self._template = template
        self._config = config or get_default_config()
        self._executor = executor
        self._parameter_info: tuple[ParameterInfo, ...] = tuple(
            self._config.parameter_validator.extract_parameters(template)
        )
        self._parameters = ParameterTable(len(self._parameter_info), self._config.parameter_converter.serializer)
        self._closed = False

    @property
    def template(self) -> str:
        return self._template

    @property
    def config(self) -> StatementConfig:
        return self._config

    @property
    def parameter_count(self) -> int:
        """Number of genuine markers in the template."""
        return len(self._parameter_info)

    @property
    def parameter_info(self) -> "tuple[ParameterInfo, ...]":
        return self._parameter_info

    @property
    def parameters(self) -> "Mapping[int, BoundValue]":
        """Read-only snapshot of the current bindings."""
        return self._parameters.snapshot()

    @property
    def closed(self) -> bool:
        """Whether the statement, or the collaborator it executes through, has been closed.

        The executor's ``closed`` may be a flag or a method returning one.
        """
        if self._closed:
            return True
        if not is_closable(self._executor):
            return False
        executor_closed = self._executor.closed
        if callable(executor_closed):
            executor_closed = executor_closed()
        return bool(executor_closed)

    def _check_closed(self, operation: str) -> None:
        if self.closed:
            raise ClosedError(operation)

    def bind(self, position: int, value: Any) -> None:
        """Bind ``value`` to the 1-based marker ``position``.

        Raises:
            ClosedError: If the statement has been released.
            OutOfRangeError: If ``position`` is not in ``[1, parameter_count]``.
            NotSupportedError: If ``value`` has no literal form.
        """
        self._check_closed("bind parameter")
        self._parameters.bind(position, value)

    def bind_parameters(self, parameters: "StatementParameters") -> None:
        """Bind a sequence (from position 1) or a position mapping in one step.

        Nothing is bound if any entry fails validation.
        """
        self._check_closed("bind parameters")
        self._parameters.bind_many(parameters)

    def clear(self) -> None:
        """Remove all bound values; the marker count is unchanged."""
        self._check_closed("clear parameters")
        self._parameters.clear()

    def missing_positions(self) -> "tuple[int, ...]":
        return self._parameters.missing_positions()

    def build(self) -> str:
        """Produce the final query with every marker replaced by its literal.

        Bindings are left untouched, so repeated builds return identical text.

        Raises:
            ClosedError: If the statement has been released.
            IncompleteBindingError: If a marker has no bound value.
            NotSupportedError: If a bound value has no literal form in the dialect.
        """
        self._check_closed("build query")
        query = self._config.parameter_converter.build_query(
            self._template, self._parameters.snapshot(), self._parameter_info
        )
        message = f"Built query: {query}" if self._config.log_final_query else "Built query"
        log_with_context(
            logger, logging.DEBUG, message, parameter_count=self.parameter_count, dialect=self._config.dialect
        )
        return query

    def execute(self) -> Any:
        """Build the final query and run it through the executor.

        Raises:
            ClosedError: If the statement has been released.
            ImproperConfigurationError: If the statement has no executor.

        Returns:
            Whatever the executor returns for the query.
        """
        self._check_closed("execute query")
        if self._executor is None:
            msg = "PreparedStatement has no executor; use build() to obtain the query text"
            raise ImproperConfigurationError(msg)
        return self._executor.execute(self.build())

    def release(self) -> None:
        """Release the statement. Calling it again has no effect."""
        if self._closed:
            return
        self._parameters.clear()
        self._closed = True
        log_with_context(logger, logging.DEBUG, "Released statement", parameter_count=self.parameter_count)

    close = release

    def __enter__(self) -> "Self":
        return self

    def __exit__(
        self,
        exc_type: "Optional[type[BaseException]]",
        exc_val: "Optional[BaseException]",
        exc_tb: "Optional[TracebackType]",
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"{type(self).__name__}({self._template!r}, parameter_count={self.parameter_count}, {state})"
