# dev_kit/models/__init__.py
"""Data models for dev-kit"""

from .config import (
    DKConfig,
    DatabaseConfig,
    SpringBootConfig,
    SpringBootService,
    AssetsTypeGeneratorConfig,
)
from .deploy_info import DeployInfo
from .result import (
    OperationStatus,
    ErrorDetail,
    Result,
    DeployResult,
    CleanEntry,
    CleanResult,
)

__all__ = [
    # Config models
    "DKConfig",
    "DatabaseConfig",
    "SpringBootConfig",
    "SpringBootService",
    "AssetsTypeGeneratorConfig",

    # Deploy-state model
    "DeployInfo",

    # Result models
    "OperationStatus",
    "ErrorDetail",
    "Result",
    "DeployResult",
    "CleanEntry",
    "CleanResult",
]
