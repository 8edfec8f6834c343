"""Parameter marker extraction.

Markers are found with a single left-to-right pass over the template that
tracks whether the cursor is inside a quoted string literal. Markers inside a
literal are plain text and are never counted or substituted.

Unterminated literals: an opening quote without a matching closing quote keeps
the scanner inside the literal until the end of the template, so markers after
it are not parameters.
"""

from collections import OrderedDict
from typing import Final, Optional

from ngqlspec.parameters.config import ParameterStyleConfig
from ngqlspec.parameters.types import ParameterInfo
from ngqlspec.utils.logging import get_logger

__all__ = ("DEFAULT_CACHE_MAX_SIZE", "ParameterValidator", "count_parameter_markers")

logger = get_logger("parameters.validator")

DEFAULT_CACHE_MAX_SIZE: Final = 5000

_OUTSIDE: Final = 0
_INSIDE: Final = 1


class ParameterValidator:
    """Extracts genuine parameter markers from query templates."""

    __slots__ = ("_cache_max_size", "_parameter_cache", "config")

    def __init__(
        self, config: Optional[ParameterStyleConfig] = None, cache_max_size: int = DEFAULT_CACHE_MAX_SIZE
    ) -> None:
        """Initialize validator with bounded LRU cache.

        Args:
            config: Marker and quote characters to scan with
            cache_max_size: Maximum number of templates to cache (default: 5000)
        """
        self.config = config or ParameterStyleConfig()
        self._parameter_cache: OrderedDict[str, tuple[ParameterInfo, ...]] = OrderedDict()
        self._cache_max_size = cache_max_size

    def extract_parameters(self, template: str) -> "tuple[ParameterInfo, ...]":
        """Extract the genuine parameter markers of a template.

        Args:
            template: Query template to analyze

        Returns:
            Marker information ordered by position, with 1-based ordinals
        """
        cached = self._parameter_cache.get(template)
        if cached is not None:
            self._parameter_cache.move_to_end(template)
            return cached

        marker = self.config.marker
        quote_char = self.config.quote_char
        escape_char = self.config.escape_char

        parameters: list[ParameterInfo] = []
        state = _OUTSIDE
        literal_start = -1
        index = 0
        length = len(template)

        while index < length:
            char = template[index]
            if state == _INSIDE:
                if char == escape_char:
                    index += 2
                    continue
                if char == quote_char:
                    state = _OUTSIDE
            elif char == quote_char:
                state = _INSIDE
                literal_start = index
            elif char == marker:
                parameters.append(ParameterInfo(ordinal=len(parameters) + 1, position=index, placeholder_text=marker))
            index += 1

        if state == _INSIDE:
            logger.debug(
                "Template ends inside a string literal opened at offset %d; markers after it are not parameters",
                literal_start,
            )

        result = tuple(parameters)
        if self._cache_max_size > 0:
            if len(self._parameter_cache) >= self._cache_max_size:
                self._parameter_cache.popitem(last=False)
            self._parameter_cache[template] = result
        logger.debug("Found %d parameter marker(s) in template of length %d", len(result), length)
        return result

    def count_parameters(self, template: str) -> int:
        """Number of genuine parameter markers in a template."""
        return len(self.extract_parameters(template))


def count_parameter_markers(template: str, config: Optional[ParameterStyleConfig] = None) -> int:
    """Count the genuine parameter markers of a template.

    Args:
        template: Query template to analyze
        config: Marker and quote characters, defaults to nGQL

    Returns:
        The marker count
    """
    return ParameterValidator(config).count_parameters(template)
