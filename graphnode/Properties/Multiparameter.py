"""
Multiparameter attribute reconstruction.

Form helpers split one value over several inputs, e.g. a date select posts
``dob(1i)``, ``dob(2i)`` and ``dob(3i)``. The parts are merged here into a
single constructor call on the declared property type before the normal
assignment pipeline sees the attributes.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from graphnode.Properties.Exceptions import MultiparameterAssignmentError
from graphnode.Properties.PropertyRegistry import PropertyRegistry
from graphnode.Utils.Logger import get_logger

logger = get_logger(__name__)

MULTIPARAMETER_KEY = re.compile(r'\A([^(]+)\((\d+)([if])\)\Z')

# stands in for absent parts when at least one part is present
MISSING_PART = 1

_PART_CASTS = {'i': int, 'f': float}


def parse_multiparameter_key(key: str) -> Optional[Tuple[str, int, str]]:
    """Split ``name(3i)`` into ``('name', 3, 'i')``; None for ordinary keys."""
    match = MULTIPARAMETER_KEY.match(key)
    if match is None:
        return None
    return match.group(1), int(match.group(2)), match.group(3)


def process_attributes(attributes: Mapping[str, Any], registry: PropertyRegistry) -> Dict[str, Any]:
    """
    Return a new attribute mapping with multiparameter keys merged.

    Ordinary keys pass through unchanged and in order. A group lands where
    its base name first appears, so a plain key with the same name that comes
    earlier keeps its slot and is replaced by the merged value.
    """
    groups: Dict[str, Dict[int, Any]] = {}
    new_attributes: Dict[str, Any] = {}

    for key, value in attributes.items():
        parsed = parse_multiparameter_key(str(key))
        if parsed is None:
            new_attributes[str(key)] = value
            continue

        name, index, suffix = parsed
        if name not in groups:
            groups[name] = {}
            new_attributes[name] = None
        groups[name][index] = (suffix, value)

    for name, parts in groups.items():
        new_attributes[name] = _reconstruct(name, parts, registry)

    return new_attributes


def _reconstruct(name: str, parts: Dict[int, Any], registry: PropertyRegistry) -> Any:
    values: Any = {index: raw for index, (_, raw) in parts.items()}
    try:
        cast_parts = {index: _cast_part(suffix, raw) for index, (suffix, raw) in parts.items()}
        values = [cast_parts.get(i) for i in range(min(cast_parts), max(cast_parts) + 1)]
        if all(value is None for value in values):
            return None

        declaration = registry.lookup(name)
        if declaration is None:
            raise KeyError(f"{name} is not a declared property")

        result = instantiate_object(declaration.type, values)
    except Exception as e:
        raise MultiparameterAssignmentError(name, values) from e

    logger.debug("Reconstructed multiparameter attribute", {'name': name, 'parts': len(values)})
    return result


def _cast_part(suffix: str, value: Any) -> Any:
    if value is None or value == '':
        return None
    return _PART_CASTS[suffix](value)


def instantiate_object(type_: Any, values_with_empty_parameters: List[Any]) -> Any:
    """Build the composite value, or None when every part is empty."""
    if all(value is None for value in values_with_empty_parameters):
        return None

    values = [MISSING_PART if value is None else value for value in values_with_empty_parameters]
    if type_:
        return type_(*values)
    return values
