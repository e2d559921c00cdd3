"""Runtime configuration and logging setup.

Settings come from environment variables, optionally loaded from a ``.env``
file in the working directory:

- ``SRD_MODEL_DIR``: directory holding the exported model files
  (default: ``model_files``)
- ``SRD_LOG_LEVEL``: logging level name (default: ``INFO``)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

DEFAULT_MODEL_DIR = "model_files"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, resolved once at startup."""

    model_dir: Path = Path(DEFAULT_MODEL_DIR)
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Load ``.env`` (if present) and read settings from the environment."""
    load_dotenv()
    return Settings(
        model_dir=Path(os.getenv("SRD_MODEL_DIR") or DEFAULT_MODEL_DIR),
        log_level=(os.getenv("SRD_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Route package logs through rich on stderr.

    Unknown level names fall back to INFO.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
