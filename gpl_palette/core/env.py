"""Environment loading for gpl-tool.

Load order (first wins):
  1. Existing OS environment variables (never overwritten).
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  GPL_DEFAULT_NAME: name given to default palettes (e.g. a translated "Default").
"""

import os
from pathlib import Path

DEFAULT_NAME_VAR = 'GPL_DEFAULT_NAME'
FALLBACK_DEFAULT_NAME = 'Default'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone and a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value / KEY="value" pairs, skipping blanks and comments."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Populate os.environ from a .env file for keys not already set.

    Returns the file that was loaded, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def default_palette_name() -> str:
    """Name for newly generated default palettes."""
    return os.environ.get(DEFAULT_NAME_VAR, '').strip() or FALLBACK_DEFAULT_NAME
