from __future__ import annotations

from typing import Any, List, Optional


class PropertyException(RuntimeError):
    """Base exception for node property processing"""
    pass


class UndefinedPropertyError(PropertyException):
    """Exception raised when construction receives keys that are not declared properties"""

    def __init__(self, properties: List[str]) -> None:
        self.properties = properties
        super().__init__(f"Undefined properties: {','.join(properties)}")


class MultiparameterAssignmentError(PropertyException):
    """Exception raised when a multiparameter value cannot be reconstructed"""

    def __init__(self, attribute: str, values: Any) -> None:
        self.attribute = attribute
        self.values = values
        super().__init__(f"error on assignment {values!r} to {attribute}")


class PropertyConfigurationError(PropertyException):
    """Exception raised for invalid property declarations"""
    pass


class UnknownAttributeError(PropertyException):
    """Exception raised when writing or querying a property that was never declared"""

    def __init__(self, name: str, model_name: Optional[str] = None) -> None:
        self.name = name
        self.model_name = model_name

        if model_name:
            super().__init__(f"unknown attribute: {name} (on {model_name})")
        else:
            super().__init__(f"unknown attribute: {name}")


class TypecastError(PropertyException):
    """Exception raised by strict typecasting when a value cannot be converted"""

    def __init__(self, type_: Any, value: Any) -> None:
        self.type = type_
        self.value = value
        type_name = getattr(type_, '__name__', repr(type_))
        super().__init__(f"cannot cast {value!r} to {type_name}")
