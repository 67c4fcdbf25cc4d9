"""Shared types for rcp-palette: Colour, ParseError, ScanIOError, BatchResult."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Colour:
    """A parsed colour. Channels are 8-bit ints; alpha is None for opaque RGB input."""

    r: int
    g: int
    b: int
    a: int | None = None

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b', 'a'):
            value = getattr(self, name)
            if value is None and name == 'a':
                continue
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f'channel {name} out of range 0..255: {value!r}')

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Canonical form: #RRGGBB, or #RRGGBBAA when alpha is present. Upper-case."""
        text = f'#{self.r:02X}{self.g:02X}{self.b:02X}'
        if self.a is not None:
            text += f'{self.a:02X}'
        return text

    def as_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {'hex': self.hex, 'r': self.r, 'g': self.g, 'b': self.b}
        if self.a is not None:
            obj['a'] = self.a
        return obj

    def __str__(self) -> str:
        return self.hex


class ParseReason(Enum):
    EMPTY_INPUT = 'empty-input'
    INVALID_LENGTH = 'invalid-length'
    INVALID_CHARACTER = 'invalid-character'
    MISSING_PREFIX = 'missing-prefix'
    # rgb(...) functional notation
    INVALID_FORMAT = 'invalid-format'
    INVALID_COMPONENT = 'invalid-component'
    OUT_OF_RANGE = 'out-of-range'


_REASON_TEXT = {
    ParseReason.EMPTY_INPUT: 'empty input',
    ParseReason.INVALID_LENGTH: 'invalid hex length',
    ParseReason.INVALID_CHARACTER: 'invalid character',
    ParseReason.MISSING_PREFIX: "colour must start with '#'",
    ParseReason.INVALID_FORMAT: 'malformed rgb(), expected rgb(r, g, b)',
    ParseReason.INVALID_COMPONENT: 'rgb() component is not an integer',
    ParseReason.OUT_OF_RANGE: 'rgb() component outside 0..255',
}


class ParseError(Exception):
    """A colour string that could not be parsed.

    `line` is the 1-based line number when the string came from a file.
    """

    def __init__(self, text: str, reason: ParseReason, detail: str | None = None, line: int | None = None):
        self.text = text
        self.reason = reason
        self.detail = detail
        self.line = line
        super().__init__(self.message)

    @property
    def message(self) -> str:
        msg = _REASON_TEXT[self.reason]
        if self.detail:
            msg += f': {self.detail}'
        return msg

    def at_line(self, line: int) -> ParseError:
        """Return a copy of this error tagged with a file line number."""
        return ParseError(self.text, self.reason, detail=self.detail, line=line)

    def as_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {'input': self.text, 'reason': self.reason.value, 'message': self.message}
        if self.line is not None:
            obj['line'] = self.line
        return obj


class ScanIOReason(Enum):
    NOT_FOUND = 'not-found'
    PERMISSION_DENIED = 'permission-denied'
    NOT_READABLE = 'not-readable'


class ScanIOError(Exception):
    """The input file itself could not be read. Aborts the whole scan."""

    def __init__(self, path: str, reason: ScanIOReason, detail: str = ''):
        self.path = path
        self.reason = reason
        self.detail = detail
        text = f'cannot read {path}: {reason.value.replace("-", " ")}'
        if detail:
            text += f' ({detail})'
        super().__init__(text)


Outcome = Colour | ParseError


@dataclass
class BatchResult:
    """Outcomes of scanning one file, in input line order."""

    path: str = ''
    entries: list[tuple[int, Outcome]] = field(default_factory=list)

    def add(self, line: int, outcome: Outcome) -> None:
        self.entries.append((line, outcome))

    @property
    def successes(self) -> list[tuple[int, Colour]]:
        return [(n, o) for n, o in self.entries if isinstance(o, Colour)]

    @property
    def failures(self) -> list[tuple[int, ParseError]]:
        return [(n, o) for n, o in self.entries if isinstance(o, ParseError)]

    @property
    def ok_count(self) -> int:
        return len(self.successes)

    @property
    def error_count(self) -> int:
        return len(self.failures)

    @property
    def all_ok(self) -> bool:
        return self.error_count == 0
