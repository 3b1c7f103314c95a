"""Environment-driven settings and logging setup.

Variables:
- FORMATTER_LOG_LEVEL: root log level for configure_logging (default INFO)
- FORMATTER_PRESETS_DIR: directory of preset YAML files, overriding the
  bundled src/formatter/definitions
"""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_level() -> str:
    return os.environ.get("FORMATTER_LOG_LEVEL", "INFO").upper()


def get_presets_dir() -> Optional[Path]:
    """Preset directory from the environment, or None for the bundled one."""
    presets_dir = os.environ.get("FORMATTER_PRESETS_DIR")
    return Path(presets_dir) if presets_dir else None


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging the way applications embedding the formatter expect."""
    logging.basicConfig(
        level=(level or get_log_level()).upper(),
        format=LOG_FORMAT,
    )
