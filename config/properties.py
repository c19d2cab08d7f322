from __future__ import annotations

import os
from typing import Tuple


class PropertySettings:
    # Typecasting
    STRICT_TYPECASTING: bool = os.getenv("GRAPHNODE_STRICT_TYPECASTING", "False").lower() == "true"

    # Logging
    LOG_CHANNEL: str = os.getenv("GRAPHNODE_LOG_CHANNEL", "stderr")
    LOG_LEVEL: str = os.getenv("GRAPHNODE_LOG_LEVEL", "warning")

    # Schema; the first entry of each tuple is the default
    INDEX_MODES: Tuple[str, ...] = ("exact",)
    CONSTRAINT_TYPES: Tuple[str, ...] = ("unique",)
    DEFAULT_INDEX_MODE: str = INDEX_MODES[0]
    DEFAULT_CONSTRAINT_TYPE: str = CONSTRAINT_TYPES[0]


settings = PropertySettings()
