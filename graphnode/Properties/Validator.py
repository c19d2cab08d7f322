from __future__ import annotations

from typing import Any, Collection, Mapping

from graphnode.Properties.Exceptions import UndefinedPropertyError


def validate_attributes(declared_names: Collection[str], attributes: Mapping[str, Any]) -> None:
    """Raise UndefinedPropertyError if any key is not a declared property."""
    invalid_properties = [str(key) for key in attributes if str(key) not in declared_names]
    if invalid_properties:
        raise UndefinedPropertyError(invalid_properties)
