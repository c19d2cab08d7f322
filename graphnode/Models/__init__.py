from .Node import Node
from .Relationships import RelationshipDefinition, RelationType, Direction

__all__ = [
    "Node",
    "RelationshipDefinition",
    "RelationType",
    "Direction",
]
