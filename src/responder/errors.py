"""Exception types raised while loading response files."""

from __future__ import annotations

from typing import Any, Optional


class ResponderError(Exception):
    """Base class for responder failures."""


class MalformedInputError(ResponderError):
    """Two or more consecutive blank lines were encountered."""

    def __init__(self, line_number: int, source: Optional[str] = None) -> None:
        self.line_number = line_number
        self.source = source
        self.partial: Any = None
        where = f"{source}:{line_number}" if source else f"line {line_number}"
        super().__init__(f"two or more consecutive blank lines at {where}")


class ResourceUnavailableError(ResponderError):
    """A response file could not be opened or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"unable to read {path}: {reason}")
