"""
Configuration

Settings are read from the environment, with a local ``.env`` file loaded
first if present.

Environment variables:
    MERKLE_SORT_PAIRS: Default sort flag for whitelist trees (default: true)
    MERKLE_LOG_LEVEL: Logging level name (default: INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    sort_pairs: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            sort_pairs=_env_bool("MERKLE_SORT_PAIRS", True),
            log_level=os.getenv("MERKLE_LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(verbose: bool = False, settings: Optional[Settings] = None):
    """Setup logging configuration."""
    settings = settings or Settings.from_env()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    return level
