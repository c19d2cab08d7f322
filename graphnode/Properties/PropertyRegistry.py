from __future__ import annotations

import copy
import inspect
import threading
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, Callable, Dict, Iterator, List, Optional, TYPE_CHECKING

from config.properties import settings
from graphnode.Properties.Exceptions import PropertyConfigurationError
from graphnode.Utils.Logger import get_logger

if TYPE_CHECKING:
    from graphnode.Schema.SchemaRegistrar import SchemaRegistrar

logger = get_logger(__name__)

TIMESTAMP_PROPERTIES = ('created_at', 'updated_at')


@dataclass(frozen=True)
class PropertyDeclaration:
    """A property declared on a node class."""

    name: str
    type: Any = None
    default: Any = None
    index: Optional[str] = None
    constraint: Optional[str] = None

    @property
    def indexed(self) -> bool:
        return self.index is not None

    @property
    def has_default(self) -> bool:
        return self.default is not None


def call_with_instance(producer: Callable[..., Any], instance: Any) -> Any:
    """
    Call a default producer, passing the instance only when the producer takes it.

    Producers with a required positional parameter (``lambda node: ...``) or
    ``*args`` receive the instance; zero-argument producers such as ``list``
    or ``datetime.now`` are called bare.
    """
    try:
        parameters = inspect.signature(producer).parameters.values()
    except (TypeError, ValueError):
        return producer()

    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return producer(instance)
        if (
            parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            and parameter.default is inspect.Parameter.empty
        ):
            return producer(instance)

    return producer()


class PropertyRegistry:
    """
    Per-class registry of declared properties.

    Declarations keep their first declaration order; re-declaring a name
    replaces its declaration in place. Index and uniqueness options are
    validated and forwarded to the class's schema registrar when the
    property is declared.
    """

    def __init__(
        self,
        label: str,
        registrar: Optional[SchemaRegistrar] = None,
        declarations: Optional[Dict[str, PropertyDeclaration]] = None
    ) -> None:
        self.label = label
        self.registrar = registrar
        self._declarations: Dict[str, PropertyDeclaration] = dict(declarations or {})
        self._lock = threading.RLock()

    def inherit(self, label: str, registrar: Optional[SchemaRegistrar] = None) -> PropertyRegistry:
        """Create a registry for a subclass, seeded with this registry's declarations."""
        with self._lock:
            return PropertyRegistry(label, registrar or self.registrar, self._declarations)

    def declare(
        self,
        name: str,
        type: Any = None,
        default: Any = None,
        index: Optional[str] = None,
        constraint: Optional[str] = None
    ) -> PropertyDeclaration:
        """Record a property declaration."""
        name = str(name)
        type = self._normalize_type(name, type)
        self._validate_schema_options(name, index, constraint)

        declaration = PropertyDeclaration(
            name=name,
            type=type,
            default=default,
            index=None if constraint else index,
            constraint=constraint
        )

        with self._lock:
            self._declarations[name] = declaration

        logger.debug("Declared property", {'label': self.label, 'name': name, 'type': repr(type)})

        # either constraint or index, never both
        if self.registrar is not None:
            if constraint:
                self.registrar.declare_unique_constraint(self.label, name)
            elif index:
                self.registrar.declare_index(self.label, name, index)

        return declaration

    def lookup(self, name: str) -> Optional[PropertyDeclaration]:
        with self._lock:
            return self._declarations.get(str(name))

    def names(self) -> List[str]:
        with self._lock:
            return list(self._declarations)

    def declarations(self) -> List[PropertyDeclaration]:
        with self._lock:
            return list(self._declarations.values())

    def default_for(self, name: str, instance: Any) -> Any:
        """Produce the declared default for ``name``, or None when it has none."""
        declaration = self.lookup(name)
        if declaration is None or not declaration.has_default:
            return None

        default = declaration.default
        if callable(default):
            return call_with_instance(default, instance)
        return copy.copy(default)

    def __contains__(self, name: object) -> bool:
        return self.lookup(str(name)) is not None

    def __iter__(self) -> Iterator[PropertyDeclaration]:
        return iter(self.declarations())

    def __len__(self) -> int:
        with self._lock:
            return len(self._declarations)

    def _normalize_type(self, name: str, type_: Any) -> Any:
        if name in TIMESTAMP_PROPERTIES:
            return datetime
        # a bare wall-clock time is stored as a full datetime
        if type_ is time:
            return datetime
        return type_

    def _validate_schema_options(self, name: str, index: Optional[str], constraint: Optional[str]) -> None:
        if index and constraint:
            raise PropertyConfigurationError(
                f"property {name} declares both index {index!r} and constraint {constraint!r}, only one is allowed"
            )
        if constraint and constraint not in settings.CONSTRAINT_TYPES:
            raise PropertyConfigurationError(
                f"unknown constraint type {constraint}, only {settings.DEFAULT_CONSTRAINT_TYPE} supported"
            )
        if index and index not in settings.INDEX_MODES:
            raise PropertyConfigurationError(
                f"unknown index type {index}, only {settings.DEFAULT_INDEX_MODE} supported"
            )
