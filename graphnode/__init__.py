"""
graphnode: property declaration, typecasting and change tracking for
graph-database-backed domain objects.
"""
from __future__ import annotations

from graphnode.Models import Node, RelationshipDefinition, RelationType, Direction
from graphnode.Properties import (
    Property,
    PropertyDeclaration,
    PropertyRegistry,
    PropertyException,
    UndefinedPropertyError,
    MultiparameterAssignmentError,
    PropertyConfigurationError,
    UnknownAttributeError,
    TypecastError
)

__version__ = "0.1.0"

__all__ = [
    'Node',
    'Property',
    'PropertyDeclaration',
    'PropertyRegistry',
    'RelationshipDefinition',
    'RelationType',
    'Direction',
    'PropertyException',
    'UndefinedPropertyError',
    'MultiparameterAssignmentError',
    'PropertyConfigurationError',
    'UnknownAttributeError',
    'TypecastError'
]
