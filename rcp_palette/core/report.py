"""Report builder — text and JSON output for rcp-palette results."""

import json
import os
from typing import Any

from rcp_palette.core.palette import nearest_colour
from rcp_palette.core.types import BatchResult, Colour, ParseError

# Nearest names further than this are not reported
NEAREST_THRESHOLD = 30.0


def _nearest(colour: Colour) -> tuple[str, float] | None:
    name, dist = nearest_colour(colour.rgb, threshold=NEAREST_THRESHOLD)
    if name is None:
        return None
    return name, dist


def _channels(colour: Colour) -> str:
    text = f'r:{colour.r}, g:{colour.g}, b:{colour.b}'
    if colour.a is not None:
        text += f', a:{colour.a}'
    return text


def format_colour_text(source: str, colour: Colour, show_nearest: bool = True) -> str:
    """Format a single successful parse."""
    lines = [
        f'rcp-palette: {source}',
        f'  canonical: {colour.hex}',
        f'  channels:  {_channels(colour)}',
    ]
    if show_nearest:
        near = _nearest(colour)
        if near is None:
            lines.append('  nearest:   (none within threshold)')
        else:
            name, dist = near
            lines.append(f'  nearest:   {name} Δ={dist:.1f}')
    return '\n'.join(lines)


def format_error_text(err: ParseError) -> str:
    """One-line diagnostic for a failed parse."""
    where = f'line {err.line}: ' if err.line is not None else ''
    return f'{where}{err.text!r}: {err.message} [{err.reason.value}]'


def format_batch_text(result: BatchResult, show_nearest: bool = True) -> str:
    """Per-line diagnostics in line order, then a summary line."""
    lines = []
    name = os.path.basename(result.path) if result.path else '<string>'
    lines.append(f'rcp-palette: {name} ({len(result.entries)} colours)')
    lines.append('')

    for lineno, outcome in result.entries:
        if isinstance(outcome, Colour):
            row = f'  {lineno:>4}  ✓ {outcome.hex}  {_channels(outcome)}'
            if show_nearest:
                near = _nearest(outcome)
                if near is not None:
                    row += f'  ~{near[0]}'
            lines.append(row)
        else:
            lines.append(f'  {lineno:>4}  ✗ {outcome.text!r}  {outcome.message}')

    lines.append('')
    total = len(result.entries)
    lines.append(f'PASS {result.ok_count}/{total} lines  FAIL {result.error_count}/{total} lines')
    return '\n'.join(lines)


def _colour_obj(colour: Colour, show_nearest: bool) -> dict[str, Any]:
    obj = colour.as_dict()
    if show_nearest:
        near = _nearest(colour)
        obj['nearest'] = {'name': near[0], 'distance': round(near[1], 1)} if near else None
    return obj


def format_colour_json(source: str, colour: Colour, show_nearest: bool = True) -> str:
    obj = {'input': source, 'ok': True, 'colour': _colour_obj(colour, show_nearest)}
    return json.dumps(obj, indent=2)


def format_error_json(err: ParseError) -> str:
    obj = {'input': err.text, 'ok': False, 'error': err.as_dict()}
    return json.dumps(obj, indent=2)


def format_batch_json(result: BatchResult, show_nearest: bool = True) -> str:
    """Format a scan as JSON."""
    entries = []
    for lineno, outcome in result.entries:
        if isinstance(outcome, Colour):
            entries.append({'line': lineno, 'ok': True, 'colour': _colour_obj(outcome, show_nearest)})
        else:
            entries.append({'line': lineno, 'ok': False, 'error': outcome.as_dict()})

    obj: dict[str, Any] = {'file': result.path, 'entries': entries}
    obj['summary'] = {
        'total': len(result.entries),
        'pass': result.ok_count,
        'fail': result.error_count,
    }
    return json.dumps(obj, indent=2)
