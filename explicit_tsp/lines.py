# explicit_tsp/lines.py
from __future__ import annotations
import re
from typing import Iterable, Iterator, NamedTuple, Optional

from .errors import StreamError, StructureError

WHITESPACE = " \n\r\t\f\v"
EOF_MARKER = "EOF"

_BLANK = re.compile(r"[ \n\r\t\f\v]*")
_TOKEN = re.compile(r"[^ \n\r\t\f\v]+")
# group 1: key, group 2: separator, group 3: value
_ENTRY = re.compile(r"([a-zA-Z0-9_]+)(: )?[ \t]*(.*)")


def is_blank(line: str) -> bool:
    return _BLANK.fullmatch(line) is not None


class Entry(NamedTuple):
    key: str
    value: Optional[str]  # None for data section markers

    @property
    def is_data_marker(self) -> bool:
        return self.value is None


def classify_line(line: str) -> Entry:
    """
    'KEY: value' -> specification entry, bare 'KEY' -> data section marker.
    Anything after a bare key is ignored, the section reads its data from the stream.
    """
    m = _ENTRY.match(line)
    if m is None:
        raise StructureError("Did not match a specification entry or data section key")
    key, colon, value = m.group(1), m.group(2), m.group(3)
    if not colon:
        return Entry(key, None)
    return Entry(key, value.rstrip(WHITESPACE))


class LineSource:
    """
    Forward-only reader shared by the header loop and the section builders.
    Token reads may stop in the middle of a line; the remainder is handed
    back by the next read_line().
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._pending: Optional[str] = None
        self.line_number = 0

    def read_line(self) -> Optional[str]:
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        try:
            raw = next(self._lines)
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StreamError(f"Could not read input: {e}") from e
        self.line_number += 1
        return raw.rstrip("\r\n")

    def next_substantive(self) -> Optional[str]:
        while True:
            line = self.read_line()
            if line is None or not is_blank(line):
                return line

    def read_token(self) -> Optional[str]:
        while True:
            line = self.read_line()
            if line is None:
                return None
            m = _TOKEN.search(line)
            if m is None:
                continue
            rest = line[m.end():]
            self._pending = rest or None
            return m.group()
