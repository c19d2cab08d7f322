from __future__ import annotations

from .JsonCast import JsonCast
from .EnumCast import EnumCast
from .Typecaster import CastInterface, Typecaster, typecaster

__all__ = ['JsonCast', 'EnumCast', 'CastInterface', 'Typecaster', 'typecaster']
