"""API layer for dev-kit"""

from .exceptions import (
    DevKitError,
    ConfigError,
    ConfigParseError,
    ConfigNotFoundError,
    DeployError,
    CommandFailedError,
    UncommittedChangesError,
    WrongBranchError,
    ManifestNotFoundError,
    MissingVersionError,
    InvalidVersionFormatError,
)

__all__ = [
    "DevKitError",
    "ConfigError",
    "ConfigParseError",
    "ConfigNotFoundError",
    "DeployError",
    "CommandFailedError",
    "UncommittedChangesError",
    "WrongBranchError",
    "ManifestNotFoundError",
    "MissingVersionError",
    "InvalidVersionFormatError",
]
