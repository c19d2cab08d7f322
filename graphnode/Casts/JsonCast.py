from __future__ import annotations

import json
from typing import Any, Union


class JsonCast:
    """Cast for JSON-encoded property values."""

    def cast(self, value: Any) -> Union[dict[str, Any], list[Any]]:
        """Transform a JSON string to a Python object."""
        if isinstance(value, (dict, list)):
            return value

        if isinstance(value, (str, bytes)):
            decoded = json.loads(value)
            if isinstance(decoded, (dict, list)):
                return decoded

        raise ValueError(f"{value!r} is not a JSON object or array")

    def dump(self, value: Any) -> str:
        """Transform a Python object to a JSON string for storage."""
        return json.dumps(value)

    def __repr__(self) -> str:
        return "JsonCast()"
