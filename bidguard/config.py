"""
bidguard/config.py

Settings come from the environment, optionally seeded from a .env file in the
project root. Logging goes through loguru; the library never adds sinks on
import, callers opt in with setup_logging().
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{message}</level>"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT


def load_settings(env_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Loads .env (explicit path, then project root, then the working directory)
    and reads BIDGUARD_* variables. Values already in the environment win.
    """
    if env_path is not None:
        load_dotenv(dotenv_path=env_path)
    elif (PROJECT_ROOT / ".env").exists():
        load_dotenv(dotenv_path=PROJECT_ROOT / ".env")
    else:
        load_dotenv()

    level = os.getenv("BIDGUARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
    fmt = os.getenv("BIDGUARD_LOG_FORMAT") or DEFAULT_LOG_FORMAT
    return Settings(log_level=level, log_format=fmt)


def setup_logging(settings: Optional[Settings] = None, sink=sys.stderr) -> int:
    """Replaces loguru's default sink. Returns the new handler id."""
    settings = settings or load_settings()
    logger.remove()
    return logger.add(sink, format=settings.log_format, level=settings.log_level)
