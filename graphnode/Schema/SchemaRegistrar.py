from __future__ import annotations

import threading
from typing import List, Optional

from config.properties import settings
from graphnode.Properties.Exceptions import PropertyConfigurationError
from graphnode.Utils.Logger import get_logger

logger = get_logger(__name__)


class IndexDefinition:
    """Represents a property index on a node label."""

    def __init__(self, label: str, property_name: str, mode: str = 'exact') -> None:
        self.label = label
        self.property_name = property_name
        self.mode = mode

    def to_cypher(self) -> str:
        """Convert index to a Cypher schema statement."""
        return f"CREATE INDEX ON :{self.label}({self.property_name})"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, IndexDefinition)
            and (other.label, other.property_name, other.mode) == (self.label, self.property_name, self.mode)
        )

    def __repr__(self) -> str:
        return f"IndexDefinition({self.label!r}, {self.property_name!r}, {self.mode!r})"


class ConstraintDefinition:
    """Represents a uniqueness constraint on a node label."""

    def __init__(self, label: str, property_name: str, type: str = 'unique') -> None:
        self.label = label
        self.property_name = property_name
        self.type = type

    def to_cypher(self) -> str:
        """Convert constraint to a Cypher schema statement."""
        return f"CREATE CONSTRAINT ON (n:{self.label}) ASSERT n.{self.property_name} IS UNIQUE"

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ConstraintDefinition)
            and (other.label, other.property_name, other.type) == (self.label, self.property_name, self.type)
        )

    def __repr__(self) -> str:
        return f"ConstraintDefinition({self.label!r}, {self.property_name!r}, {self.type!r})"


class SchemaRegistrar:
    """
    Collects the indexes and constraints declared by node classes.

    Storage engines read ``indexes`` / ``constraints`` (or the rendered
    ``to_cypher()`` statements) to apply the schema.
    """

    def __init__(self) -> None:
        self.indexes: List[IndexDefinition] = []
        self.constraints: List[ConstraintDefinition] = []
        self._lock = threading.Lock()

    def declare_index(self, label: str, property_name: str, mode: Optional[str] = None) -> IndexDefinition:
        """Add an index."""
        mode = mode or settings.DEFAULT_INDEX_MODE
        if mode not in settings.INDEX_MODES:
            raise PropertyConfigurationError(f"unknown index type {mode}, only {settings.DEFAULT_INDEX_MODE} supported")

        index = IndexDefinition(label, property_name, mode)
        with self._lock:
            if index not in self.indexes:
                self.indexes.append(index)

        logger.debug("Registered index", {'label': label, 'property': property_name})
        return index

    def declare_unique_constraint(self, label: str, property_name: str) -> ConstraintDefinition:
        """Add a uniqueness constraint."""
        constraint = ConstraintDefinition(label, property_name, settings.DEFAULT_CONSTRAINT_TYPE)
        with self._lock:
            if constraint not in self.constraints:
                self.constraints.append(constraint)

        logger.debug("Registered unique constraint", {'label': label, 'property': property_name})
        return constraint

    def drop_index(self, label: str, property_name: str) -> None:
        """Drop an index."""
        with self._lock:
            self.indexes = [
                index for index in self.indexes
                if (index.label, index.property_name) != (label, property_name)
            ]

    def indexes_for(self, label: str) -> List[IndexDefinition]:
        with self._lock:
            return [index for index in self.indexes if index.label == label]

    def constraints_for(self, label: str) -> List[ConstraintDefinition]:
        with self._lock:
            return [constraint for constraint in self.constraints if constraint.label == label]

    def to_cypher(self) -> List[str]:
        """Render every declared index and constraint."""
        with self._lock:
            return [c.to_cypher() for c in self.constraints] + [i.to_cypher() for i in self.indexes]


schema = SchemaRegistrar()
