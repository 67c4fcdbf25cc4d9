"""Line-by-line colour scanner for text files.

One colour per line. Blank lines and comment lines (default marker `//`)
are skipped and produce no entry. `#` cannot be the comment marker: it is
the hex prefix.

Every other line is stripped and handed to parse_colour. A bad line is
recorded and scanning continues; only a failure to read the file itself
(ScanIOError) aborts the scan.
"""

from rcp_palette.core.colour_parser import parse_colour
from rcp_palette.core.types import BatchResult, ParseError, ScanIOError, ScanIOReason

DEFAULT_COMMENT_MARKER = '//'


def scan_file(path: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> BatchResult:
    """Scan a colour file from disk."""
    try:
        with open(path, encoding='utf-8-sig') as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ScanIOError(path, ScanIOReason.NOT_FOUND) from e
    except PermissionError as e:
        raise ScanIOError(path, ScanIOReason.PERMISSION_DENIED) from e
    except IsADirectoryError as e:
        raise ScanIOError(path, ScanIOReason.NOT_READABLE, 'is a directory') from e
    except UnicodeDecodeError as e:
        raise ScanIOError(path, ScanIOReason.NOT_READABLE, 'not UTF-8 text') from e
    except OSError as e:
        raise ScanIOError(path, ScanIOReason.NOT_READABLE, e.strerror or str(e)) from e
    return scan_string(text, path=path, comment_marker=comment_marker)


def scan_string(text: str, path: str = '', comment_marker: str = DEFAULT_COMMENT_MARKER) -> BatchResult:
    """Scan colour lines from a string."""
    if comment_marker.startswith('#'):
        raise ValueError("comment marker may not start with '#'")

    result = BatchResult(path=path)
    # Only '\n' ends a line; form feeds and unicode separators stay inside it
    for lineno, raw in enumerate(text.split('\n'), start=1):
        line = raw.strip()
        if _is_skipped(line, comment_marker):
            continue
        try:
            result.add(lineno, parse_colour(line))
        except ParseError as e:
            result.add(lineno, e.at_line(lineno))
    return result


def _is_skipped(line: str, comment_marker: str) -> bool:
    if not line:
        return True
    return bool(comment_marker) and line.startswith(comment_marker)
