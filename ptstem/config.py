"""
Environment-backed settings.

Only dictionary location and logging defaults are configurable. The stemming
pipeline itself takes all of its options as function arguments.

Environment variables:
    PTSTEM_HUNSPELL_LANGUAGE: Hunspell dictionary name (default: pt_BR)
    PTSTEM_HUNSPELL_DIR: Directory holding <language>.dic/.aff (default: library search path)
    PTSTEM_LOG_FILE: Base log file path (default: logs/ptstem.log)
    PTSTEM_LOG_LEVEL: Console log level (default: INFO)

Values are read from .env.local (highest priority) or .env in the working
directory when present, then from the process environment.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values"""
    hunspell_language: str = "pt_BR"
    hunspell_dir: Optional[str] = None
    log_file: str = "logs/ptstem.log"
    log_level: int = logging.INFO


def load_env(base_dir: Union[str, Path, None] = None) -> Optional[Path]:
    """
    Load .env.local or .env from base_dir (default: current directory).

    Existing environment variables are not overridden.

    Returns:
        Path of the loaded file, or None if neither exists
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    for name in (".env.local", ".env"):
        env_file = base / name
        if env_file.exists():
            logger.debug(f"Loading environment from: {env_file}")
            load_dotenv(env_file, override=False)
            return env_file
    return None


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid PTSTEM_LOG_LEVEL: {value!r}")
    return level


def get_settings(base_dir: Union[str, Path, None] = None) -> Settings:
    """Build Settings from the environment (after loading any .env file)."""
    load_env(base_dir)
    return Settings(
        hunspell_language=os.getenv("PTSTEM_HUNSPELL_LANGUAGE", "pt_BR"),
        hunspell_dir=os.getenv("PTSTEM_HUNSPELL_DIR") or None,
        log_file=os.getenv("PTSTEM_LOG_FILE", "logs/ptstem.log"),
        log_level=_parse_log_level(os.getenv("PTSTEM_LOG_LEVEL", "INFO")),
    )
