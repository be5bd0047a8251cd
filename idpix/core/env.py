"""Configuration for idpix: .env loading and IDPIX_* settings.

Load order (first wins):
  1. Existing OS environment variables — never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read after loading:
  IDPIX_SCALE       integer upscale factor for PNG output (default 12)
  IDPIX_DESIGNS     default design catalog file (optional)
  IDPIX_OUTPUT_DIR  directory for PNG output (default '.')
"""

import os
from dataclasses import dataclass
from pathlib import Path

from idpix.core.types import DEFAULT_SCALE


@dataclass(frozen=True)
class Settings:
    scale: int = DEFAULT_SCALE
    designs: str | None = None
    output_dir: str = '.'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
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


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes around values are dropped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def settings() -> Settings:
    """Read IDPIX_* settings from the environment."""
    raw_scale = os.environ.get('IDPIX_SCALE', '').strip()
    scale = DEFAULT_SCALE
    if raw_scale:
        try:
            scale = int(raw_scale)
        except ValueError:
            raise ValueError(f'IDPIX_SCALE must be an integer, got {raw_scale!r}') from None
        if scale < 1:
            raise ValueError(f'IDPIX_SCALE must be >= 1, got {scale}')
    return Settings(
        scale=scale,
        designs=os.environ.get('IDPIX_DESIGNS') or None,
        output_dir=os.environ.get('IDPIX_OUTPUT_DIR') or '.',
    )
