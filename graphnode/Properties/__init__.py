"""
Node property declarations and processing.

Modules:
- PropertyRegistry: per-class property declarations
- Property: declarative property descriptor
- Multiparameter: reconstruction of multi-part form values
- Partitioner: relationship / writer extraction
- Validator: undeclared key detection
- AttributeEngine: per-node typed store with defaults and change tracking

AttributeEngine depends on graphnode.Casts and is imported from its module
directly.
"""
from __future__ import annotations

from .Exceptions import (
    PropertyException,
    UndefinedPropertyError,
    MultiparameterAssignmentError,
    PropertyConfigurationError,
    UnknownAttributeError,
    TypecastError
)
from .PropertyRegistry import PropertyDeclaration, PropertyRegistry
from .Property import Property

__all__ = [
    'PropertyException',
    'UndefinedPropertyError',
    'MultiparameterAssignmentError',
    'PropertyConfigurationError',
    'UnknownAttributeError',
    'TypecastError',
    'PropertyDeclaration',
    'PropertyRegistry',
    'Property'
]
