from __future__ import annotations

from enum import Enum
from typing import Optional


class RelationType(Enum):
    """Relationship cardinality enum"""
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"


class Direction(Enum):
    """Relationship direction enum"""
    OUTGOING = "out"
    INCOMING = "in"
    BOTH = "both"


class RelationshipDefinition:
    """
    Graph relationship declared on a node class.

    Only the declaration lives here; loading and persisting relationship
    values belongs to the storage layer. Construction hands relationship
    values over untouched through ``Node.relationship_attributes``.
    """

    def __init__(
        self,
        name: str,
        relation_type: RelationType,
        direction: Direction = Direction.OUTGOING,
        rel_type: Optional[str] = None,
        model_class: Optional[str] = None
    ) -> None:
        self.name = name
        self.relation_type = relation_type
        self.direction = direction
        self.rel_type = rel_type or name.upper()
        self.model_class = model_class

    def __repr__(self) -> str:
        return (
            f"RelationshipDefinition({self.name!r}, {self.relation_type.value}, "
            f"{self.direction.value}, {self.rel_type!r})"
        )
