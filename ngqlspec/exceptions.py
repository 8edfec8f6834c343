from typing import Any, Optional

__all__ = (
    "ClosedError",
    "ImproperConfigurationError",
    "IncompleteBindingError",
    "NGQLSpecError",
    "NotSupportedError",
    "OutOfRangeError",
    "ParameterError",
)


class NGQLSpecError(Exception):
    """Base exception class from which all ngqlspec exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``NGQLSpecError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(NGQLSpecError):
    """Improper Configuration error.

    Raised for unknown dialects, invalid marker/quote characters, or a statement
    asked to execute without an execution collaborator.
    """


# -- Parameter Errors --
class ParameterError(NGQLSpecError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional query context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nQuery: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class OutOfRangeError(ParameterError):
    """Raised when a bind position does not correspond to a parameter marker."""

    position: Any
    parameter_count: int

    def __init__(self, position: Any, parameter_count: int, sql: Optional[str] = None) -> None:
        if parameter_count == 0:
            message = f"Parameter position {position!r} is out of range: the query has no parameter markers."
        else:
            message = f"Parameter position {position!r} is out of range: expected an integer in [1, {parameter_count}]."
        super().__init__(message, sql)
        self.position = position
        self.parameter_count = parameter_count


class IncompleteBindingError(ParameterError):
    """Raised when a query is built while some parameter markers are unbound."""

    missing_positions: "tuple[int, ...]"

    def __init__(self, missing_positions: "tuple[int, ...]", sql: Optional[str] = None) -> None:
        positions = ", ".join(str(p) for p in missing_positions)
        super().__init__(f"No value bound for parameter position(s): {positions}.", sql)
        self.missing_positions = missing_positions


class NotSupportedError(NGQLSpecError):
    """Raised when a value has no literal form in the target query language."""

    value_type: str
    position: Optional[int]
    reason: Optional[str]

    def __init__(self, value_type: str, position: Optional[int] = None, reason: Optional[str] = None) -> None:
        message = f"Values of type {value_type!r} cannot be bound as query literals"
        if position is not None:
            message = f"{message} (parameter position {position})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(detail=message)
        self.value_type = value_type
        self.position = position
        self.reason = reason


class ClosedError(NGQLSpecError):
    """Raised when an operation is attempted on a released statement."""

    def __init__(self, operation: Optional[str] = None) -> None:
        message = "Statement has been released."
        if operation:
            message = f"Cannot {operation}: statement has been released."
        super().__init__(detail=message)
