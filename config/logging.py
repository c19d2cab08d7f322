from __future__ import annotations

from typing import Dict, Any

from config.properties import settings

channels: Dict[str, Dict[str, Any]] = {
    'stderr': {
        'driver': 'stderr',
        'level': settings.LOG_LEVEL,
        'format': '[%(asctime)s] %(name)s.%(levelname)s: %(message)s',
        'date_format': '%Y-%m-%d %H:%M:%S',
    },

    'null': {
        'driver': 'null',
        'level': 'critical',
    },
}
