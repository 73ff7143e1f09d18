"""Core functionality for dev-kit"""

from .reporter import Reporter
from .project_detector import (
    detect_project_type,
    find_service_directories,
    is_spring_boot_project,
)
from .database_detector import detect_database_config, parse_env_for_database
from .manifest_engine import ManifestEngine
from .deploy_state import DeployStateStore

__all__ = [
    "Reporter",
    "detect_project_type",
    "find_service_directories",
    "is_spring_boot_project",
    "detect_database_config",
    "parse_env_for_database",
    "ManifestEngine",
    "DeployStateStore",
]
