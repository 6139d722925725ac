import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _find_project_root(start: Optional[Path] = None) -> Path:
    '''Walk up from start until a directory holding pyproject.toml or .git.'''
    origin = start or Path(__file__).resolve()
    origin = origin if origin.is_dir() else origin.parent
    for candidate in (origin, *origin.parents):
        if (candidate / 'pyproject.toml').exists() or (candidate / '.git').exists():
            return candidate
    return origin


def _env_file_candidates() -> list[str]:
    explicit = os.getenv('ENV_FILE')
    if explicit:
        return [explicit]

    stage = (os.getenv('LIFESCORE_ENV') or os.getenv('ENV') or 'local').lower()
    if stage in {'prod', 'production'}:
        return ['.env.prod', '.env']
    return ['.env.local', '.env']


def load_env(override: bool = False) -> Optional[Path]:
    '''Load the first env file that exists for the current stage.

    Returns the path that was loaded, or None when no file was found and only
    the process environment applies.
    '''
    root = _find_project_root()
    for name in _env_file_candidates():
        path = Path(name)
        if not path.is_absolute():
            path = root / path
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    log_level: str = 'INFO'
    # Zone used for unlock timestamps and the time-of-day achievements
    timezone: str = 'UTC'
    tracing: bool = False

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            timezone=os.getenv('LIFESCORE_TIMEZONE', 'UTC'),
            tracing=_env_flag('ACHIEVEMENT_TRACING'),
        )
