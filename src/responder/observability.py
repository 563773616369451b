"""Selection record schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

SELECTION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "selected_at",
        "words",
        "layer",
        "keyword_hit",
        "default_index",
        "response",
    ],
    "properties": {
        "selected_at": {"type": "string", "format": "date-time"},
        "words": {"type": "array", "items": {"type": "string"}},
        "layer": {"type": "string", "enum": ["keyword", "default"]},
        "keyword_hit": {"type": ["string", "null"]},
        "default_index": {"type": ["integer", "null"], "minimum": 0},
        "response": {"type": "string"},
    },
    "allOf": [
        {
            "if": {"properties": {"layer": {"const": "keyword"}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "string"},
                    "default_index": {"type": "null"},
                }
            },
        },
        {
            "if": {"properties": {"layer": {"const": "default"}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "null"},
                    "default_index": {"type": "integer"},
                }
            },
        },
    ],
}

_validator = Draft7Validator(SELECTION_SCHEMA)


def validate_selection(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: e.path)
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"selection record validation failed: {messages}")


@dataclass
class SelectionRecord:
    words: List[str]
    layer: str
    response: str
    keyword_hit: Optional[str] = None
    default_index: Optional[int] = None
    selected_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "selected_at": self.selected_at,
            "words": list(self.words),
            "layer": self.layer,
            "keyword_hit": self.keyword_hit,
            "default_index": self.default_index,
            "response": self.response,
        }
        validate_selection(payload)
        return payload
