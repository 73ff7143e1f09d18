"""dev-kit - developer workflow CLI for Node, React Native and Spring Boot projects.

Provides project-type detection, dk.config.json management, build artifact
cleanup and a git-driven dev/production deployment workflow.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Services
from .services import CleanService, ConfigService, ConfigUpdateStatus, DeployService

# Detection
from .core import detect_database_config, detect_project_type

# Data models
from .models import DKConfig, DeployInfo, DeployResult, CleanResult
from .constants import ProjectType, DatabaseType

# Exceptions
from .api.exceptions import (
    DevKitError,
    ConfigError,
    ConfigParseError,
    DeployError,
    CommandFailedError,
    UncommittedChangesError,
    WrongBranchError,
    ManifestNotFoundError,
    MissingVersionError,
    InvalidVersionFormatError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Services
    "CleanService",
    "ConfigService",
    "ConfigUpdateStatus",
    "DeployService",

    # Detection
    "detect_database_config",
    "detect_project_type",

    # Data models
    "DKConfig",
    "DeployInfo",
    "DeployResult",
    "CleanResult",
    "ProjectType",
    "DatabaseType",

    # Exceptions
    "DevKitError",
    "ConfigError",
    "ConfigParseError",
    "DeployError",
    "CommandFailedError",
    "UncommittedChangesError",
    "WrongBranchError",
    "ManifestNotFoundError",
    "MissingVersionError",
    "InvalidVersionFormatError",
]
