from __future__ import annotations

from typing import Any, Optional, Type, TYPE_CHECKING, overload

if TYPE_CHECKING:
    from graphnode.Models.Node import Node


class Property:
    """
    Declares a node property and acts as its generated accessor.

    Usage:
        class Person(Node):
            name = Property(str, index='exact')
            score = Property(int, default=0)

    Reads go through ``Node.read_attribute`` and writes through
    ``Node.write_attribute``, which typecasts and records the change.
    """

    def __init__(
        self,
        type: Any = None,
        default: Any = None,
        index: Optional[str] = None,
        constraint: Optional[str] = None
    ) -> None:
        self.type = type
        self.default = default
        self.index = index
        self.constraint = constraint
        self.name: Optional[str] = None

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: Type[Any]) -> Property: ...

    @overload
    def __get__(self, instance: Node, owner: Type[Any]) -> Any: ...

    def __get__(self, instance: Optional[Node], owner: Type[Any]) -> Any:
        if instance is None:
            return self
        return instance.read_attribute(self.name)

    def __set__(self, instance: Node, value: Any) -> None:
        instance.write_attribute(self.name, value)

    def __repr__(self) -> str:
        type_name = getattr(self.type, '__name__', repr(self.type))
        return f"Property({self.name!r}, type={type_name})"
