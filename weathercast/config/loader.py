"""YAML config loader with environment overrides."""

import logging
import os
from pathlib import Path

import yaml

from weathercast.config.schema import AppConfig

logger = logging.getLogger(__name__)

DB_PATH_ENV = "WEATHERCAST_DB_PATH"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. ``WEATHERCAST_DB_PATH``
    overrides ``database.path`` when set.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.info("Config file %s not found, using defaults", path)

    db_path = os.environ.get(DB_PATH_ENV)
    if db_path:
        raw.setdefault("database", {})["path"] = db_path

    return AppConfig(**raw)
