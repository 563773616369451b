"""Keyword to response table parsed from the response file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .errors import MalformedInputError, ResourceUnavailableError
from .records import iter_blocks, join_response, read_lines

logger = logging.getLogger(__name__)


def parse_keys(header: str) -> List[str]:
    return [key.strip() for key in header.split(",")]


def build_response_map(lines: Iterable[str], source: Optional[str] = None) -> Dict[str, str]:
    """Parse response file lines into a keyword -> response mapping.

    The first line of a record is its comma separated key list, the lines
    after it are the response. A key list with no response lines stays
    active across a single blank line and picks up the next block as its
    response; a key list still without a response at the end is dropped.
    Later records overwrite earlier ones for a repeated key.
    """
    mapping: Dict[str, str] = {}
    keys: Optional[List[str]] = None
    try:
        for block in iter_blocks(lines, source):
            body = block
            if keys is None:
                keys = parse_keys(block[0])
                body = block[1:]
            if not body:
                continue
            response = join_response(body)
            for key in keys:
                mapping[key] = response
            keys = None
    except MalformedInputError as exc:
        exc.partial = dict(mapping)
        raise
    return mapping


class ResponseTable:
    def __init__(self, mapping: Optional[Dict[str, str]] = None) -> None:
        self._mapping: Dict[str, str] = dict(mapping or {})

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[str] = None) -> "ResponseTable":
        return cls(build_response_map(lines, source))

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        encoding: str = "ascii",
        strict: bool = True,
    ) -> "ResponseTable":
        try:
            lines = read_lines(path, encoding)
        except ResourceUnavailableError as exc:
            logger.error("Keyword responses unavailable: %s", exc)
            return cls()
        try:
            table = cls.from_lines(lines, source=str(path))
        except MalformedInputError as exc:
            if strict:
                raise
            logger.warning("Keeping %d keywords parsed before error: %s", len(exc.partial), exc)
            table = cls(exc.partial)
        logger.info("Loaded %d keywords from %s", len(table), path)
        return table

    def match(self, word: str) -> Optional[str]:
        return self._mapping.get(word)

    def keywords(self) -> Dict[str, str]:
        return dict(self._mapping)

    def __contains__(self, word: object) -> bool:
        return word in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)
