"""Substitution of serialized literals into query templates."""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Optional

from ngqlspec.exceptions import IncompleteBindingError
from ngqlspec.parameters.config import ParameterStyleConfig
from ngqlspec.parameters.serializer import LiteralSerializer
from ngqlspec.parameters.validator import ParameterValidator
from ngqlspec.utils.logging import get_logger

if TYPE_CHECKING:
    from ngqlspec.parameters.types import BoundValue, ParameterInfo

__all__ = ("ParameterConverter",)

logger = get_logger("parameters.converter")


class ParameterConverter:
    """Builds final query text from a template and its bound values."""

    __slots__ = ("config", "serializer", "validator")

    def __init__(
        self,
        config: Optional[ParameterStyleConfig] = None,
        validator: Optional[ParameterValidator] = None,
        serializer: Optional[LiteralSerializer] = None,
    ) -> None:
        self.config = config or ParameterStyleConfig()
        self.validator = validator or ParameterValidator(self.config)
        self.serializer = serializer or LiteralSerializer(self.config)

    def build_query(
        self,
        template: str,
        bound: "Mapping[int, BoundValue]",
        parameter_info: "Optional[Sequence[ParameterInfo]]" = None,
    ) -> str:
        """Replace each genuine marker with the literal of its bound value.

        The Nth marker receives the value bound at position N. Text between
        markers, including markers inside string literals, is copied as is.

        Args:
            template: The query template
            bound: Values keyed by 1-based position
            parameter_info: Markers of ``template``; extracted when omitted

        Raises:
            IncompleteBindingError: If a marker has no bound value.
            NotSupportedError: If a bound value has no literal form in the dialect.

        Returns:
            The final query text.
        """
        if parameter_info is None:
            parameter_info = self.validator.extract_parameters(template)

        missing = tuple(p.ordinal for p in parameter_info if p.ordinal not in bound)
        if missing:
            raise IncompleteBindingError(missing, template)

        if not parameter_info:
            return template

        parts: list[str] = []
        cursor = 0
        for param in parameter_info:
            parts.append(template[cursor : param.position])
            parts.append(self.serializer.serialize(bound[param.ordinal], position=param.ordinal))
            cursor = param.end
        parts.append(template[cursor:])

        logger.debug("Substituted %d parameter(s)", len(parameter_info))
        return "".join(parts)
