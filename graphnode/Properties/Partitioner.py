from __future__ import annotations

import inspect
from typing import Any, Dict, Mapping, Tuple, Type

from graphnode.Properties.Property import Property

Partition = Tuple[Dict[str, Any], Dict[str, Any]]


def extract_relationship_attributes(node_class: Type[Any], attributes: Mapping[str, Any]) -> Partition:
    """
    Split out the keys that name relationships of ``node_class``.

    Returns ``(relationship_attributes, remaining)``. Relationships win over
    properties and writers of the same name.
    """
    relationship_props: Dict[str, Any] = {}
    remaining: Dict[str, Any] = {}

    for key, value in attributes.items():
        if node_class.has_relationship(key):
            relationship_props[key] = value
        else:
            remaining[key] = value

    return relationship_props, remaining


def has_writer_method(node: Any, name: str) -> bool:
    """
    Check whether the node class defines its own setter for ``name``.

    Generated property accessors do not count, plain values go through
    base initialization instead.
    """
    attr = inspect.getattr_static(type(node), name, None)
    if attr is None or isinstance(attr, Property):
        return False
    if isinstance(attr, property):
        return attr.fset is not None
    return hasattr(type(attr), '__set__')


def extract_writer_methods(node: Any, attributes: Mapping[str, Any]) -> Partition:
    """Split out the keys assigned through custom writers. Returns ``(writer_attributes, remaining)``."""
    writer_method_props: Dict[str, Any] = {}
    remaining: Dict[str, Any] = {}

    for key, value in attributes.items():
        if has_writer_method(node, key):
            writer_method_props[key] = value
        else:
            remaining[key] = value

    return writer_method_props, remaining
