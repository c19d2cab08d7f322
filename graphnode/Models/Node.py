from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple

from config.properties import settings
from graphnode.Casts.Typecaster import Typecaster, typecaster
from graphnode.Models.Relationships import Direction, RelationshipDefinition, RelationType
from graphnode.Properties.AttributeEngine import AttributeEngine
from graphnode.Properties.Exceptions import PropertyConfigurationError
from graphnode.Properties.Multiparameter import process_attributes
from graphnode.Properties.Partitioner import extract_relationship_attributes, extract_writer_methods
from graphnode.Properties.Property import Property
from graphnode.Properties.PropertyRegistry import PropertyDeclaration, PropertyRegistry, call_with_instance
from graphnode.Properties.Validator import validate_attributes
from graphnode.Schema.SchemaRegistrar import ConstraintDefinition, IndexDefinition, SchemaRegistrar, schema
from graphnode.Utils.Logger import get_logger

logger = get_logger(__name__)

NODE_OPTIONS = ('persisted',)


class Node:
    """
    Base class for graph-backed domain objects.

    Properties are declared on the class, either declaratively::

        class Person(Node):
            name = Property(str, index='exact')
            score = Property(int, default=0)

    or through the class API (``Person.property('email', constraint='unique')``).

    Construction runs the attribute pipeline: multiparameter values are
    reconstructed, relationship values and custom writer values are split
    out, the remaining keys must all be declared properties, custom writers
    run first, and the plain properties are then typecast, tracked and
    completed with their defaults.
    """

    __label__: ClassVar[Optional[str]] = None
    __schema__: ClassVar[SchemaRegistrar] = schema
    __typecaster__: ClassVar[Typecaster] = typecaster
    __relationships__: ClassVar[Dict[str, RelationshipDefinition]] = {}

    _registry: ClassVar[PropertyRegistry] = PropertyRegistry('Node', schema)
    _default_property_producers: ClassVar[Dict[str, Callable[..., Any]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        cls._registry = cls._registry.inherit(cls.mapped_label_name(), cls.__schema__)
        cls.__relationships__ = dict(cls.__relationships__)
        cls._default_property_producers = dict(cls._default_property_producers)

        for name, value in list(cls.__dict__.items()):
            if isinstance(value, Property):
                cls._declare(name, value)

    def __init__(
        self,
        attributes: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        **kwargs: Any
    ) -> None:
        self._engine = AttributeEngine(type(self)._registry, self, type(self).__typecaster__)
        self._default_properties: Dict[str, Any] = {}
        self.relationship_attributes: Dict[str, Any] = {}

        raw_attributes = dict(attributes or {})
        raw_attributes.update(kwargs)

        attributes = self._process_assignment(raw_attributes)
        self.init_attributes(attributes, options)

    def init_attributes(self, attributes: Mapping[str, Any], options: Optional[Mapping[str, Any]] = None) -> None:
        """Base initialization: assign plain properties, then fill in defaults."""
        options = dict(options or {})
        unknown_options = [key for key in options if key not in NODE_OPTIONS]
        if unknown_options:
            raise ValueError(f"Unknown options: {', '.join(unknown_options)}")

        self._engine.assign(attributes)
        self._engine.apply_defaults()

        if options.get('persisted'):
            self._engine.clear_changes_information()

    def assign_attributes(self, attributes: Mapping[str, Any]) -> None:
        """Bulk assignment through the same pipeline as construction, without defaults."""
        self._engine.assign(self._process_assignment(attributes))

    def _process_assignment(self, raw_attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Run the pre-assignment steps and return the plain property values.

        Relationship values are set aside on ``relationship_attributes`` and
        custom writer values are applied here, in the order they were given.
        """
        attributes = process_attributes(raw_attributes, type(self)._registry)
        relationship_props, attributes = extract_relationship_attributes(type(self), attributes)
        writer_method_props, attributes = extract_writer_methods(self, attributes)
        validate_attributes(type(self)._registry.names(), attributes)

        if relationship_props:
            logger.debug(
                "Set aside relationship attributes",
                {'model': type(self).__name__, 'names': ','.join(relationship_props)}
            )
            self.relationship_attributes.update(relationship_props)

        for key, value in writer_method_props.items():
            setattr(self, key, value)

        return attributes

    # Attribute access

    def read_attribute(self, name: str) -> Any:
        """Read a property; None when the name is not a declared property."""
        return self._engine.read(name)

    def write_attribute(self, name: str, value: Any) -> None:
        """Write a declared property, raising UnknownAttributeError for undeclared names."""
        self._engine.write(name, value)

    def __getitem__(self, name: str) -> Any:
        return self.read_attribute(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.write_attribute(name, value)

    @property
    def attributes(self) -> Dict[str, Any]:
        return self._engine.attributes()

    def query_attribute(self, name: str) -> bool:
        return self._engine.query(name)

    # Change tracking

    @property
    def changed(self) -> List[str]:
        return self._engine.changed

    @property
    def changes(self) -> Dict[str, Tuple[Any, Any]]:
        return self._engine.changes

    @property
    def changed_attributes(self) -> Dict[str, Any]:
        return self._engine.changed_attributes

    @property
    def previous_changes(self) -> Dict[str, Tuple[Any, Any]]:
        return self._engine.previous_changes

    def is_dirty(self, name: Optional[str] = None) -> bool:
        return self._engine.is_dirty(name)

    def is_clean(self, name: Optional[str] = None) -> bool:
        return not self._engine.is_dirty(name)

    def attribute_changed(self, name: str) -> bool:
        return self._engine.is_dirty(name)

    def attribute_was(self, name: str) -> Any:
        return self._engine.attribute_was(name)

    def attribute_will_change(self, name: str) -> None:
        self._engine.attribute_will_change(name)

    def get_dirty(self) -> Dict[str, Any]:
        return self._engine.get_dirty()

    def was_changed(self, name: Optional[str] = None) -> bool:
        return self._engine.was_changed(name)

    def changes_applied(self) -> None:
        self._engine.changes_applied()

    def clear_changes_information(self) -> None:
        self._engine.clear_changes_information()

    def restore_attributes(self, names: Optional[Iterable[str]] = None) -> None:
        self._engine.restore_attributes(names)

    # Default properties

    @property
    def default_properties(self) -> Dict[str, Any]:
        return self._default_properties

    @default_properties.setter
    def default_properties(self, properties: Mapping[str, Any]) -> None:
        """Store values loaded from storage, keeping only declared default properties."""
        keys = type(self)._default_property_producers
        self._default_properties = {str(key): value for key, value in properties.items() if str(key) in keys}

    def default_property(self, key: str) -> Any:
        key = str(key)
        if key not in type(self)._default_property_producers:
            return None
        return self._default_properties.get(key)

    def __repr__(self) -> str:
        values = ' '.join(f"{name}={value!r}" for name, value in self.attributes.items())
        return f"<{type(self).__name__} {values}>" if values else f"<{type(self).__name__}>"

    # Class API

    @classmethod
    def mapped_label_name(cls) -> str:
        return cls.__dict__.get('__label__') or cls.__name__

    @classmethod
    def property_registry(cls) -> PropertyRegistry:
        return cls._registry

    @classmethod
    def attribute_names(cls) -> List[str]:
        return cls._registry.names()

    @classmethod
    def declared_property(cls, name: str) -> Optional[PropertyDeclaration]:
        return cls._registry.lookup(name)

    @classmethod
    def index(cls, name: str, mode: Optional[str] = None) -> IndexDefinition:
        """Register an index on a property of this label."""
        return cls.__schema__.declare_index(cls.mapped_label_name(), name, mode)

    @classmethod
    def constraint(cls, name: str, type: Optional[str] = None) -> ConstraintDefinition:
        """Register a uniqueness constraint on a property of this label."""
        if type is not None and type not in settings.CONSTRAINT_TYPES:
            raise PropertyConfigurationError(
                f"unknown constraint type {type}, only {settings.DEFAULT_CONSTRAINT_TYPE} supported"
            )
        return cls.__schema__.declare_unique_constraint(cls.mapped_label_name(), name)

    @classmethod
    def has_relationship(cls, name: str) -> bool:
        return str(name) in cls.__relationships__

    @classmethod
    def has_one(
        cls,
        name: str,
        rel_type: Optional[str] = None,
        direction: Direction = Direction.OUTGOING,
        model_class: Optional[str] = None
    ) -> RelationshipDefinition:
        """Declare a single-valued relationship"""
        definition = RelationshipDefinition(name, RelationType.HAS_ONE, direction, rel_type, model_class)
        cls.__relationships__[name] = definition
        return definition

    @classmethod
    def has_many(
        cls,
        name: str,
        rel_type: Optional[str] = None,
        direction: Direction = Direction.OUTGOING,
        model_class: Optional[str] = None
    ) -> RelationshipDefinition:
        """Declare a collection relationship"""
        definition = RelationshipDefinition(name, RelationType.HAS_MANY, direction, rel_type, model_class)
        cls.__relationships__[name] = definition
        return definition

    @classmethod
    def declare_default_property(
        cls,
        name: str,
        producer: Optional[Callable[..., Any]] = None
    ) -> Any:
        """
        Declare a default property produced for every node written by the storage layer.

        Usable directly or as a decorator::

            @Person.declare_default_property('_classname')
            def classname(node):
                return type(node).__name__
        """
        if producer is None:
            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                cls._default_property_producers[str(name)] = func
                return func
            return decorator

        cls._default_property_producers[str(name)] = producer
        return producer

    @classmethod
    def declared_default_properties(cls) -> Dict[str, Callable[..., Any]]:
        return dict(cls._default_property_producers)

    @classmethod
    def default_property_values(cls, instance: Node) -> Dict[str, Any]:
        return {
            name: call_with_instance(producer, instance)
            for name, producer in cls._default_property_producers.items()
        }

    @classmethod
    def _declare(cls, name: str, prop: Property) -> PropertyDeclaration:
        declaration = cls._registry.declare(
            name,
            type=prop.type,
            default=prop.default,
            index=prop.index,
            constraint=prop.constraint
        )
        prop.type = declaration.type
        return declaration

    # declared last: the name shadows the builtin decorator for the rest of the class body
    @classmethod
    def property(
        cls,
        name: str,
        type: Any = None,
        default: Any = None,
        index: Optional[str] = None,
        constraint: Optional[str] = None
    ) -> PropertyDeclaration:
        """
        Declare a property at runtime.

        A generated accessor is installed unless the class already defines
        its own attribute of that name.
        """
        prop = Property(type=type, default=default, index=index, constraint=constraint)
        prop.__set_name__(cls, name)

        declaration = cls._declare(name, prop)

        existing = cls.__dict__.get(name)
        if existing is None or isinstance(existing, Property):
            setattr(cls, name, prop)

        return declaration
