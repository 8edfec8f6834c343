"""Parameter handling for ngqlspec.

Marker scanning, value binding, literal serialization and substitution.
"""

from ngqlspec.parameters.config import DEFAULT_DIALECT, DEFAULT_MARKER, ParameterStyleConfig
from ngqlspec.parameters.converter import ParameterConverter
from ngqlspec.parameters.serializer import LiteralSerializer, escape_string, format_float
from ngqlspec.parameters.table import ParameterTable
from ngqlspec.parameters.types import INT64_MAX, INT64_MIN, BoundValue, LiteralKind, ParameterInfo
from ngqlspec.parameters.validator import ParameterValidator, count_parameter_markers

__all__ = (
    "DEFAULT_DIALECT",
    "DEFAULT_MARKER",
    "INT64_MAX",
    "INT64_MIN",
    "BoundValue",
    "LiteralKind",
    "LiteralSerializer",
    "ParameterConverter",
    "ParameterInfo",
    "ParameterStyleConfig",
    "ParameterTable",
    "ParameterValidator",
    "count_parameter_markers",
    "escape_string",
    "format_float",
)
