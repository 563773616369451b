"""Fallback responses used when no keyword is recognised."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from .errors import MalformedInputError, ResourceUnavailableError
from .records import iter_blocks, join_response, read_lines

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def build_default_responses(lines: Iterable[str], source: Optional[str] = None) -> List[str]:
    """Parse default file lines into responses, one per blank-line separated block."""
    responses: List[str] = []
    try:
        for block in iter_blocks(lines, source):
            responses.append(join_response(block))
    except MalformedInputError as exc:
        exc.partial = list(responses)
        raise
    return responses


class DefaultResponseList:
    """Ordered fallback responses, never empty."""

    def __init__(self, responses: Optional[Sequence[str]] = None) -> None:
        items = list(responses or [])
        if not items:
            items.append(FALLBACK_RESPONSE)
        self._responses: Tuple[str, ...] = tuple(items)

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[str] = None) -> "DefaultResponseList":
        return cls(build_default_responses(lines, source))

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        encoding: str = "ascii",
        strict: bool = True,
    ) -> "DefaultResponseList":
        try:
            lines = read_lines(path, encoding)
        except ResourceUnavailableError as exc:
            logger.error("Default responses unavailable: %s", exc)
            return cls()
        try:
            defaults = cls.from_lines(lines, source=str(path))
        except MalformedInputError as exc:
            if strict:
                raise
            logger.warning("Keeping %d default responses parsed before error: %s", len(exc.partial), exc)
            defaults = cls(exc.partial)
        logger.info("Loaded %d default responses from %s", len(defaults), path)
        return defaults

    def pick(self, rng: RandomSource) -> Tuple[int, str]:
        index = rng.randrange(len(self._responses))
        return index, self._responses[index]

    def responses(self) -> Tuple[str, ...]:
        return self._responses

    def __len__(self) -> int:
        return len(self._responses)
