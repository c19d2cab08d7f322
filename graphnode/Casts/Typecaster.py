from __future__ import annotations

import threading
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, Optional, Protocol, get_origin, runtime_checkable

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from config.properties import settings
from graphnode.Casts.EnumCast import EnumCast
from graphnode.Properties.Exceptions import TypecastError
from graphnode.Utils.Logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class CastInterface(Protocol):
    """Interface for custom property casts."""

    def cast(self, value: Any) -> Any:
        """Convert a raw value to its in-memory representation."""
        ...


class Typecaster:
    """
    Converts raw values to the canonical in-memory form of a declared type.

    Type descriptors are either ``None`` (no conversion), a Python type, or a
    cast object implementing :class:`CastInterface`. Builtin and standard
    library types are validated through pydantic in lax mode, so ``"5"``
    becomes ``5`` for ``int`` and ISO strings become dates.

    A value that cannot be converted becomes ``None``; with strict
    typecasting enabled a :class:`TypecastError` is raised instead.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        self._strict = strict
        self._adapters: Dict[Any, Optional[TypeAdapter[Any]]] = {}
        self._lock = threading.Lock()

    @property
    def strict(self) -> bool:
        if self._strict is None:
            return settings.STRICT_TYPECASTING
        return self._strict

    def cast(self, type_: Any, value: Any) -> Any:
        """Cast ``value`` to ``type_``."""
        if type_ is None or value is None:
            return value

        try:
            return self._cast(type_, value)
        except (ValueError, TypeError, ArithmeticError) as e:
            logger.debug("Typecast failed", {'type': repr(type_), 'value': repr(value), 'error': str(e)})
            if self.strict:
                raise TypecastError(type_, value) from e
            return None

    def _cast(self, type_: Any, value: Any) -> Any:
        if isinstance(type_, CastInterface) and not isinstance(type_, type):
            return type_.cast(value)

        if isinstance(type_, type) and get_origin(type_) is None:
            if issubclass(type_, Enum):
                return EnumCast(type_).cast(value)

            if type_ is datetime and isinstance(value, date) and not isinstance(value, datetime):
                return datetime.combine(value, time())

            if type_ is date and isinstance(value, datetime):
                return value.date()

            if isinstance(value, type_) and not (isinstance(value, bool) and type_ is not bool):
                return value

            if type_ is str:
                return str(value)

        adapter = self._adapter_for(type_)
        if adapter is None:
            return type_(value)

        try:
            return adapter.validate_python(value)
        except ValidationError as e:
            raise ValueError(str(e)) from e

    def _adapter_for(self, type_: Any) -> Optional[TypeAdapter[Any]]:
        """Get a cached pydantic adapter, or None when pydantic has no schema for the type."""
        with self._lock:
            if type_ not in self._adapters:
                try:
                    self._adapters[type_] = TypeAdapter(type_)
                except PydanticSchemaGenerationError:
                    self._adapters[type_] = None
            return self._adapters[type_]


typecaster = Typecaster()
