from __future__ import annotations

from enum import Enum
from typing import Any, Type


class EnumCast:
    """
    Cast for enum-valued properties.

    Accepts an enum member, a member value or a member name, and always
    produces the enum member.
    """

    def __init__(self, enum_class: Type[Enum]) -> None:
        self.enum_class = enum_class

    def cast(self, value: Any) -> Enum:
        """Convert a raw value to an enum member."""
        if isinstance(value, self.enum_class):
            return value

        try:
            return self.enum_class(value)
        except ValueError:
            if isinstance(value, str) and value in self.enum_class.__members__:
                return self.enum_class[value]
            raise

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EnumCast) and other.enum_class is self.enum_class

    def __hash__(self) -> int:
        return hash((EnumCast, self.enum_class))

    def __repr__(self) -> str:
        return f"EnumCast({self.enum_class.__name__})"
