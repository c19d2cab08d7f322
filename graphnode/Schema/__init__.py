from __future__ import annotations

from .SchemaRegistrar import SchemaRegistrar, IndexDefinition, ConstraintDefinition, schema

__all__ = ['SchemaRegistrar', 'IndexDefinition', 'ConstraintDefinition', 'schema']
