# dev_kit/services/__init__.py
"""Business logic services for dev-kit"""

from .config_service import ConfigService, ConfigUpdateStatus, config_version, is_outdated
from .deploy_service import DeployService, DeployState, ProductionDeployment
from .clean_service import CleanService

__all__ = [
    "ConfigService",
    "ConfigUpdateStatus",
    "config_version",
    "is_outdated",
    "DeployService",
    "DeployState",
    "ProductionDeployment",
    "CleanService",
]
