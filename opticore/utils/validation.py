"""Input validation helpers shared by the configuration dataclasses."""

from enum import Enum
from typing import Type, TypeVar

__all__ = ["coerce_enum"]

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value) -> E:
    """Convert a member or its string value to ``enum_cls``.

    Raises:
        ValueError: If ``value`` names no member of ``enum_cls``.

    Example:
        ```python
        coerce_enum(SlitMode, "single")  # SlitMode.SINGLE
        ```
    """
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(repr(m.value) for m in enum_cls)
        raise ValueError(
            f"Unknown {enum_cls.__name__} {value!r}. Use one of {allowed}."
        ) from None
