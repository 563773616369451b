"""Keyword lookup with random default fallback."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import AbstractSet, Iterable, Optional

from .config import ResponderConfig
from .defaults import DefaultResponseList, RandomSource
from .observability import SelectionRecord
from .table import ResponseTable

logger = logging.getLogger(__name__)


class ResponseSelector:
    """
    Picks a response for a set of input words.

    The first word (in sorted order) found in the keyword table decides the
    response. If no word is known, a default response is drawn uniformly
    at random.
    """

    def __init__(
        self,
        table: ResponseTable,
        defaults: DefaultResponseList,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._table = table
        self._defaults = defaults
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_lines(
        cls,
        response_lines: Iterable[str],
        default_lines: Iterable[str],
        rng: Optional[RandomSource] = None,
    ) -> "ResponseSelector":
        return cls(
            ResponseTable.from_lines(response_lines),
            DefaultResponseList.from_lines(default_lines),
            rng,
        )

    @classmethod
    def from_paths(
        cls,
        responses_path: str | Path = "responses.txt",
        defaults_path: str | Path = "default.txt",
        rng: Optional[RandomSource] = None,
        encoding: str = "ascii",
        strict: bool = True,
    ) -> "ResponseSelector":
        return cls(
            ResponseTable.from_path(responses_path, encoding=encoding, strict=strict),
            DefaultResponseList.from_path(defaults_path, encoding=encoding, strict=strict),
            rng,
        )

    @classmethod
    def from_config(
        cls,
        config: ResponderConfig,
        rng: Optional[RandomSource] = None,
    ) -> "ResponseSelector":
        if rng is None:
            rng = random.Random(config.random_seed)
        return cls.from_paths(
            config.responses_path,
            config.defaults_path,
            rng=rng,
            encoding=config.encoding,
            strict=config.strict_parsing,
        )

    @property
    def table(self) -> ResponseTable:
        return self._table

    @property
    def defaults(self) -> DefaultResponseList:
        return self._defaults

    def decide(self, words: AbstractSet[str]) -> SelectionRecord:
        ordered = sorted(words)
        for word in ordered:
            response = self._table.match(word)
            if response is not None:
                logger.debug("Keyword hit %r", word)
                return SelectionRecord(
                    words=ordered,
                    layer="keyword",
                    response=response,
                    keyword_hit=word,
                )

        index, response = self._defaults.pick(self._rng)
        logger.debug("No keyword in %d words, default response #%d", len(ordered), index)
        return SelectionRecord(
            words=ordered,
            layer="default",
            response=response,
            default_index=index,
        )

    def select(self, words: AbstractSet[str]) -> str:
        return self.decide(words).response
