"""Settings for rcp-palette, resolved from the environment and .env files.

Resolution order (first wins):
  1. OS environment variables.
  2. .env file at --env-file path (if explicitly provided), otherwise the
     first .env found walking up from cwd, stopping at a .git boundary.
  3. Built-in defaults.

Unlike a dotenv loader this never writes to os.environ: the merged values
are returned as a Settings object.

Variables:
  RCP_PALETTE_FORMAT    text | json           default: text
  RCP_PALETTE_COMMENT   comment marker        default: //
  RCP_PALETTE_NEAREST   1 | 0                 default: 1 (report nearest CSS name)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rcp_palette.core.file_scanner import DEFAULT_COMMENT_MARKER

ENV_PREFIX = 'RCP_PALETTE_'
FORMATS = ('text', 'json')
_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


class ConfigError(ValueError):
    """A setting has a value the tool cannot use."""


@dataclass(frozen=True)
class Settings:
    output_format: str = 'text'
    comment_marker: str = DEFAULT_COMMENT_MARKER
    show_nearest: bool = True
    source: Path | None = None  # .env file that contributed, if any


def find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start; never look past a .git (dir or worktree file)."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are dropped; # starts a comment line."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8-sig').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_settings(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Merge OS environment, .env file and defaults into Settings.

    Raises ConfigError when --env-file names a missing file, the .env file
    cannot be read, or a value is invalid.
    """
    environ = os.environ if environ is None else environ

    if env_file:
        dotenv_path: Path | None = Path(env_file)
        if not dotenv_path.is_file():
            raise ConfigError(f'env file not found: {env_file}')
    else:
        dotenv_path = find_dotenv(Path.cwd())

    file_values: dict[str, str] = {}
    if dotenv_path:
        try:
            file_values = read_dotenv(dotenv_path)
        except UnicodeDecodeError as e:
            raise ConfigError(f'cannot read {dotenv_path}: not UTF-8 text') from e
        except OSError as e:
            raise ConfigError(f'cannot read {dotenv_path}: {e.strerror or e}') from e

    def get(name: str) -> str | None:
        key = ENV_PREFIX + name
        if key in environ:
            return environ[key]
        return file_values.get(key)

    output_format = (get('FORMAT') or 'text').strip().lower()
    if output_format not in FORMATS:
        raise ConfigError(f'{ENV_PREFIX}FORMAT must be one of {", ".join(FORMATS)}, got {output_format!r}')

    comment_marker = get('COMMENT')
    if comment_marker is None:
        comment_marker = DEFAULT_COMMENT_MARKER
    if comment_marker.startswith('#'):
        raise ConfigError(f"{ENV_PREFIX}COMMENT may not start with '#' (hex prefix)")

    return Settings(
        output_format=output_format,
        comment_marker=comment_marker,
        show_nearest=_parse_bool(get('NEAREST'), default=True, name='NEAREST'),
        source=dotenv_path,
    )


def _parse_bool(value: str | None, default: bool, name: str) -> bool:
    if value is None or value.strip() == '':
        return default
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f'{ENV_PREFIX}{name} must be a boolean (1/0, true/false), got {value!r}')
