"""Type aliases shared across ngqlspec."""

from collections.abc import Mapping, Sequence
from typing import Union

from typing_extensions import TypeAlias

__all__ = ("BindableValue", "StatementParameters")

BindableValue: TypeAlias = Union[None, bool, int, float, str]
"""Python values that have a literal form in the target query language."""

StatementParameters: TypeAlias = Union[Sequence[BindableValue], Mapping[int, BindableValue]]
"""Values for several positions at once: a sequence bound from position 1, or a position mapping."""
