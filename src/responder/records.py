"""Line handling shared by the response and default response formats."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .errors import MalformedInputError, ResourceUnavailableError

MAX_CONSECUTIVE_BLANKS = 1


def is_blank(line: str) -> bool:
    return not line.strip()


def iter_blocks(lines: Iterable[str], source: Optional[str] = None) -> Iterator[List[str]]:
    """Yield runs of consecutive non-blank lines.

    Line terminators are stripped, everything else is kept verbatim. A run
    ends at a single blank line or at the end of input. Raises
    MalformedInputError as soon as a second blank line follows another.
    """
    block: List[str] = []
    blanks = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if is_blank(line):
            blanks += 1
            if blanks > MAX_CONSECUTIVE_BLANKS:
                raise MalformedInputError(number, source)
            if block:
                yield block
                block = []
        else:
            blanks = 0
            block.append(line)
    if block:
        yield block


def join_response(lines: List[str]) -> str:
    return "\n".join(lines).strip()


def read_lines(path: str | Path, encoding: str = "ascii") -> List[str]:
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as handle:
            return list(handle)
    except OSError as exc:
        raise ResourceUnavailableError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ResourceUnavailableError(str(path), f"not valid {encoding}: {exc.reason}") from exc
    except LookupError as exc:
        raise ResourceUnavailableError(str(path), f"unknown encoding {encoding}") from exc
