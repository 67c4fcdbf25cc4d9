"""Parser for single colour strings.

Accepted forms:

  #RGB  #RGBA  #RRGGBB  #RRGGBBAA   hex, case-insensitive, shorthand digits doubled
  RRGGBB  RRGGBBAA                  hex without '#' (full length only)
  rgb(R, G, B)                      decimal components 0..255, spaces allowed inside
  red, AliceBlue, ...               CSS colour names

The parser never trims its input: surrounding whitespace is an error.
Callers that read free-form text (the file scanner) strip lines themselves.
"""

import re
import string

from rcp_palette.core.palette import lookup_name
from rcp_palette.core.types import Colour, ParseError, ParseReason

HEX_LENGTHS = (3, 4, 6, 8)
BARE_HEX_LENGTHS = (6, 8)

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
# ASCII punctuation other than '#'
_PREFIX_PUNCT = ''.join(ch for ch in string.punctuation if ch != '#')
_BAD_PREFIX = re.compile(rf'^(?:##|0[xX]|[{re.escape(_PREFIX_PUNCT)}])')
_INT = re.compile(r'[+-]?[0-9]+')


def parse_colour(text: str) -> Colour:
    """Parse one colour string. Raises ParseError on any malformed input."""
    if text == '':
        raise ParseError(text, ParseReason.EMPTY_INPUT)
    if text != text.strip():
        raise ParseError(text, ParseReason.INVALID_CHARACTER, 'surrounding whitespace')
    if _BAD_PREFIX.match(text):
        raise ParseError(text, ParseReason.MISSING_PREFIX, f'unexpected prefix {text[:2]!r}')

    if text.startswith('#'):
        return _parse_hex(text, text[1:], HEX_LENGTHS)
    if text.lower().startswith('rgb('):
        return _parse_rgb(text)

    named = lookup_name(text)
    if named is not None:
        return Colour(*named)

    # Without '#' a word is only a colour if it is all hex digits
    for ch in text:
        if ch not in _HEX_DIGITS:
            raise ParseError(text, ParseReason.INVALID_CHARACTER, f'{ch!r} is not a hex digit or colour name')
    if len(text) in (3, 4):
        raise ParseError(text, ParseReason.INVALID_LENGTH, "shorthand hex needs a leading '#'")
    return _parse_hex(text, text, BARE_HEX_LENGTHS)


def _parse_hex(text: str, digits: str, lengths: tuple[int, ...]) -> Colour:
    if len(digits) not in lengths:
        expected = ', '.join(str(n) for n in lengths)
        raise ParseError(text, ParseReason.INVALID_LENGTH, f'{len(digits)} digits, expected one of {expected}')
    for i, ch in enumerate(digits):
        if ch not in _HEX_DIGITS:
            raise ParseError(text, ParseReason.INVALID_CHARACTER, f'{ch!r} is not a hex digit (position {i + 1})')

    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    return Colour(*channels)


def _parse_rgb(text: str) -> Colour:
    """rgb(R, G, B) — exactly three decimal integers in 0..255."""
    if not text.endswith(')'):
        raise ParseError(text, ParseReason.INVALID_FORMAT, "missing closing ')'")
    inner = text[4:-1]
    if '(' in inner or ')' in inner:
        raise ParseError(text, ParseReason.INVALID_FORMAT, 'unbalanced parentheses')

    parts = [p.strip() for p in inner.split(',')]
    if len(parts) != 3:
        raise ParseError(text, ParseReason.INVALID_FORMAT, f'{len(parts)} components, expected 3')

    values = []
    for part in parts:
        if not _INT.fullmatch(part):
            raise ParseError(text, ParseReason.INVALID_COMPONENT, repr(part))
        value = int(part)
        if not 0 <= value <= 255:
            raise ParseError(text, ParseReason.OUT_OF_RANGE, str(value))
        values.append(value)
    return Colour(*values)
