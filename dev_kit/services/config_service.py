"""Configuration management service"""

import logging
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ConfigNotFoundError, ConfigParseError
from ..constants import CONFIG_FILE, CONFIG_LATEST_VERSION
from ..models.config import DKConfig
from ..utils.file_utils import read_json, write_json

logger = logging.getLogger(__name__)


class ConfigUpdateStatus(Enum):
    """Outcome of ``dk config update``"""
    MISSING = "missing"
    UP_TO_DATE = "up_to_date"
    UPDATED = "updated"


class ConfigService:
    """Service for managing dk.config.json"""

    def __init__(self, project_root: Union[str, Path, None] = None):
        """Initialize config service

        Args:
            project_root: Project root directory (defaults to the current directory)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.config_path = self.project_root / CONFIG_FILE

    def exists(self) -> bool:
        return self.config_path.is_file()

    def read(self) -> Optional[DKConfig]:
        """Load configuration from file

        Returns:
            Loaded configuration, or None when the file does not exist

        Raises:
            ConfigParseError: if the file is not valid JSON or not a valid config
        """
        if not self.exists():
            return None

        try:
            data = read_json(self.config_path)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise ConfigParseError(self.config_path.name, str(e))
        except OSError as e:
            raise ConfigParseError(self.config_path.name, e.strerror or str(e))

        if not isinstance(data, dict):
            raise ConfigParseError(self.config_path.name, "expected a JSON object")

        try:
            return DKConfig.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigParseError(self.config_path.name, str(e))

    def require(self) -> DKConfig:
        """Load configuration, failing when it does not exist

        Raises:
            ConfigNotFoundError: if there is no dk.config.json
        """
        config = self.read()
        if config is None:
            raise ConfigNotFoundError()
        return config

    def write(self, config: DKConfig) -> DKConfig:
        """Save configuration, stamping the latest schema version

        The file is fully overwritten; nothing is merged from the previous
        content.

        Args:
            config: Configuration to save

        Returns:
            The configuration as written
        """
        stamped = replace(config, version=CONFIG_LATEST_VERSION)
        write_json(self.config_path, stamped.to_dict())
        logger.info("Configuration saved to %s", self.config_path)
        return stamped

    def update(self) -> ConfigUpdateStatus:
        """Migrate an outdated config to the latest schema version

        Every field is kept; only the version is rewritten.

        Returns:
            What happened
        """
        config = self.read()
        if config is None:
            return ConfigUpdateStatus.MISSING

        if not is_outdated(config):
            return ConfigUpdateStatus.UP_TO_DATE

        logger.info(
            "Migrating config from version %s to %s",
            config_version(config), CONFIG_LATEST_VERSION
        )
        self.write(config)
        return ConfigUpdateStatus.UPDATED


def config_version(config: Optional[DKConfig]) -> int:
    """
    Get the schema version of a config

    Args:
        config: Loaded config or None

    Returns:
        The integer version, or 0 when absent or not a number
    """
    if config is None:
        return 0

    version = config.version
    if isinstance(version, bool) or not isinstance(version, (int, float)):
        return 0
    return version


def is_outdated(config: Optional[DKConfig]) -> bool:
    """Check whether config predates the latest schema version"""
    return config_version(config) < CONFIG_LATEST_VERSION
