from __future__ import annotations

import copy
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from graphnode.Casts.Typecaster import Typecaster, typecaster as default_typecaster
from graphnode.Properties.Exceptions import UnknownAttributeError
from graphnode.Properties.PropertyRegistry import PropertyRegistry
from graphnode.Utils.Logger import get_logger

logger = get_logger(__name__)

FALSE_VALUES = frozenset(['0', 'f', 'false', 'n', 'no', 'off'])


class AttributeEngine:
    """
    Per-node property store.

    Owns the typed property values of one node together with default
    application and change tracking. Every write is typecast through the
    typecaster; a write only marks the property changed when the typecast
    value differs from the current one, and the original value is captured
    before the new value is stored.
    """

    def __init__(
        self,
        registry: PropertyRegistry,
        owner: Any = None,
        typecaster: Optional[Typecaster] = None
    ) -> None:
        self.registry = registry
        self.owner = owner
        self.typecaster = typecaster or default_typecaster
        self._attributes: Dict[str, Any] = {}
        self._changed_attributes: Dict[str, Any] = {}
        self._previous_changes: Dict[str, Tuple[Any, Any]] = {}

    # Reading and writing

    def has_attribute(self, name: str) -> bool:
        return str(name) in self.registry

    def read(self, name: str) -> Any:
        """Current value of ``name``; None for unset or undeclared properties."""
        name = str(name)
        if not self.has_attribute(name):
            return None
        return self._attributes.get(name)

    def typecast(self, name: str, value: Any) -> Any:
        declaration = self.registry.lookup(name)
        if declaration is None:
            raise UnknownAttributeError(name, self._model_name())
        return self.typecaster.cast(declaration.type, value)

    def write(self, name: str, value: Any) -> None:
        """Typecast and store ``value``, recording the change if it differs."""
        name = str(name)
        typecast_value = self.typecast(name, value)

        if typecast_value != self.read(name):
            self.attribute_will_change(name)

        self._attributes[name] = typecast_value

        if name in self._changed_attributes and self._changed_attributes[name] == typecast_value:
            del self._changed_attributes[name]

    def assign(self, attributes: Mapping[str, Any]) -> None:
        for name, value in attributes.items():
            self.write(name, value)

    def is_set(self, name: str) -> bool:
        return str(name) in self._attributes

    def attributes(self) -> Dict[str, Any]:
        """All declared properties and their current values, in declaration order."""
        return {name: self._attributes.get(name) for name in self.registry.names()}

    def apply_defaults(self) -> List[str]:
        """
        Store declared defaults for properties that were never assigned.

        Defaults are typecast but not tracked as changes. Returns the names
        that received a default.
        """
        applied = []
        for declaration in self.registry.declarations():
            if self.is_set(declaration.name) or not declaration.has_default:
                continue
            value = self.registry.default_for(declaration.name, self.owner)
            self._attributes[declaration.name] = self.typecaster.cast(declaration.type, value)
            applied.append(declaration.name)

        if applied:
            logger.debug("Applied property defaults", {'model': self._model_name(), 'names': ','.join(applied)})
        return applied

    def query(self, name: str) -> bool:
        """Truthiness of a property, treating '0', 'false', 'no' and blank strings as false."""
        if not self.has_attribute(name):
            raise UnknownAttributeError(str(name), self._model_name())

        value = self.read(name)
        if isinstance(value, str):
            stripped = value.strip()
            return bool(stripped) and stripped.lower() not in FALSE_VALUES
        if isinstance(value, (int, float, Decimal)):
            return value != 0
        return bool(value)

    # Change tracking

    def attribute_will_change(self, name: str) -> None:
        """Capture the current value of ``name`` as its original, once."""
        name = str(name)
        if name not in self._changed_attributes:
            self._changed_attributes[name] = copy.copy(self.read(name))

    @property
    def changed(self) -> List[str]:
        return list(self._changed_attributes)

    @property
    def changed_attributes(self) -> Dict[str, Any]:
        return dict(self._changed_attributes)

    @property
    def changes(self) -> Dict[str, Tuple[Any, Any]]:
        return {name: (original, self.read(name)) for name, original in self._changed_attributes.items()}

    @property
    def previous_changes(self) -> Dict[str, Tuple[Any, Any]]:
        return dict(self._previous_changes)

    def is_dirty(self, name: Optional[str] = None) -> bool:
        if name is None:
            return bool(self._changed_attributes)
        return str(name) in self._changed_attributes

    def attribute_was(self, name: str) -> Any:
        name = str(name)
        if name in self._changed_attributes:
            return self._changed_attributes[name]
        return self.read(name)

    def get_dirty(self) -> Dict[str, Any]:
        return {name: self.read(name) for name in self._changed_attributes}

    def was_changed(self, name: Optional[str] = None) -> bool:
        if name is None:
            return bool(self._previous_changes)
        return str(name) in self._previous_changes

    def changes_applied(self) -> None:
        """Mark the current state clean, keeping the applied changes as previous changes."""
        self._previous_changes = self.changes
        self._changed_attributes = {}

    def clear_changes_information(self) -> None:
        self._previous_changes = {}
        self._changed_attributes = {}

    def restore_attributes(self, names: Optional[Iterable[str]] = None) -> None:
        """Reset changed properties to their original values."""
        for name in list(names if names is not None else self._changed_attributes):
            name = str(name)
            if name in self._changed_attributes:
                self._attributes[name] = self._changed_attributes.pop(name)

    def _model_name(self) -> Optional[str]:
        if self.owner is None:
            return None
        return type(self.owner).__name__
