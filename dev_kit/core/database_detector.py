"""Database settings discovery for node-express projects"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union
from urllib.parse import urlsplit

from ..constants import (
    DATABASE_DIR,
    DATABASE_DUMPS_DIR,
    DATABASE_MIGRATIONS_DIR,
    DATABASE_URL_KEY,
    DATABASE_URL_SCHEMES,
    ENV_FILE,
)
from ..models.config import DatabaseConfig

logger = logging.getLogger(__name__)


def detect_database_config(root_dir: Union[str, Path, None] = None) -> Optional[DatabaseConfig]:
    """
    Probe the database/ directory and .env for database settings

    Args:
        root_dir: Project root (defaults to the current directory)

    Returns:
        DatabaseConfig with only the discovered fields set, or None when
        there is no database/ directory or nothing was found. Never raises.
    """
    root = Path(root_dir) if root_dir else Path.cwd()

    try:
        if not (root / DATABASE_DIR).is_dir():
            return None

        config = DatabaseConfig()

        if (root / DATABASE_DUMPS_DIR).is_dir():
            config.dumps_dir = DATABASE_DUMPS_DIR
        if (root / DATABASE_MIGRATIONS_DIR).is_dir():
            config.migrations_dir = DATABASE_MIGRATIONS_DIR

        env_path = root / ENV_FILE
        if env_path.is_file():
            found = parse_env_for_database(env_path.read_text(encoding='utf-8'))
            for key, value in found.items():
                setattr(config, key, value)

        return None if config.is_empty else config

    except Exception as e:
        logger.debug("Database detection failed: %s", e)
        return None


def parse_env_for_database(content: str) -> Dict[str, object]:
    """
    Scan .env content for a *DATABASE_URL* variable

    Args:
        content: Raw .env text

    Returns:
        DatabaseConfig field values found (db_url_env_name, db_type, db_name)
    """
    found = {}

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        key, sep, value = line.partition('=')
        key = key.strip()
        value = _unquote(value.strip())
        if not sep or not key or not value:
            continue

        if DATABASE_URL_KEY not in key or '://' not in value:
            continue

        found['db_url_env_name'] = key

        try:
            parts = urlsplit(value)
        except ValueError:
            # Unparseable URL: type and name are asked for interactively
            continue

        db_type = DATABASE_URL_SCHEMES.get(parts.scheme.lower())
        if db_type:
            found['db_type'] = db_type

        db_name = parts.path.lstrip('/').split('/')[0].split('?')[0]
        if db_name:
            found['db_name'] = db_name

    return found


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value
