"""ngqlspec: positional parameter binding for textual graph queries."""

from ngqlspec import core, exceptions, parameters, protocols, typing, utils
from ngqlspec.__metadata__ import __version__
from ngqlspec.core.statement import PreparedStatement, StatementConfig, get_default_config
from ngqlspec.exceptions import (
    ClosedError,
    ImproperConfigurationError,
    IncompleteBindingError,
    NGQLSpecError,
    NotSupportedError,
    OutOfRangeError,
    ParameterError,
)
from ngqlspec.parameters import (
    BoundValue,
    LiteralKind,
    LiteralSerializer,
    ParameterConverter,
    ParameterStyleConfig,
    ParameterTable,
    ParameterValidator,
    count_parameter_markers,
)
from ngqlspec.protocols import QueryExecutorProtocol

__all__ = (
    "BoundValue",
    "ClosedError",
    "ImproperConfigurationError",
    "IncompleteBindingError",
    "LiteralKind",
    "LiteralSerializer",
    "NGQLSpecError",
    "NotSupportedError",
    "OutOfRangeError",
    "ParameterConverter",
    "ParameterError",
    "ParameterStyleConfig",
    "ParameterTable",
    "ParameterValidator",
    "PreparedStatement",
    "QueryExecutorProtocol",
    "StatementConfig",
    "__version__",
    "core",
    "count_parameter_markers",
    "exceptions",
    "get_default_config",
    "parameters",
    "protocols",
    "typing",
    "utils",
)
