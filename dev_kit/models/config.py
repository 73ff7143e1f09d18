"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from ..constants import (
    CONFIG_LATEST_VERSION,
    DatabaseType,
    ImageNameCase,
    InfoComment,
    ProjectType,
)


def _mapping(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be an object")
    return value


@dataclass
class DatabaseConfig:
    """Database section, only meaningful for node-express projects"""

    dumps_dir: Optional[str] = None
    migrations_dir: Optional[str] = None
    db_url_env_name: Optional[str] = None
    db_name: Optional[str] = None
    db_type: Optional[DatabaseType] = None

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting unset fields"""
        data = {}

        if self.dumps_dir:
            data["dumpsDir"] = self.dumps_dir
        if self.migrations_dir:
            data["migrationsDir"] = self.migrations_dir
        if self.db_url_env_name:
            data["dbUrlEnvName"] = self.db_url_env_name
        if self.db_name:
            data["dbName"] = self.db_name
        if self.db_type:
            data["dbType"] = DatabaseType(self.db_type).value

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DatabaseConfig':
        """Create from dictionary"""
        db_type = data.get("dbType")
        return cls(
            dumps_dir=data.get("dumpsDir"),
            migrations_dir=data.get("migrationsDir"),
            db_url_env_name=data.get("dbUrlEnvName"),
            db_name=data.get("dbName"),
            db_type=DatabaseType(db_type) if db_type else None
        )


@dataclass
class SpringBootService:
    """A single Spring Boot service and its launch position"""

    name: str
    path: str
    starting_order_index: int = 0

    def __post_init__(self):
        if not isinstance(self.starting_order_index, int) or self.starting_order_index < 0:
            raise ValueError(
                f"startingOrderIndex for '{self.name}' must be an integer >= 0"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "startingOrderIndex": self.starting_order_index
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpringBootService':
        return cls(
            name=data["name"],
            path=data.get("path", data["name"]),
            starting_order_index=data.get("startingOrderIndex", 0)
        )


@dataclass
class SpringBootConfig:
    """Spring Boot section, only meaningful for microservice projects"""

    services: List[SpringBootService] = field(default_factory=list)

    def launch_order(self) -> List[SpringBootService]:
        """Services ordered by startingOrderIndex.

        Python's sort is stable, so services sharing an index keep their
        configured relative order.
        """
        return sorted(self.services, key=lambda s: s.starting_order_index)

    def to_dict(self) -> Dict[str, Any]:
        return {"services": [s.to_dict() for s in self.services]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpringBootConfig':
        services = data.get("services", [])
        if not isinstance(services, list):
            raise ValueError("springBoot.services must be a list")
        return cls(
            services=[
                SpringBootService.from_dict(_mapping(s, "springBoot.services entry"))
                for s in services
            ]
        )


@dataclass
class AssetsTypeGeneratorConfig:
    """Image asset index generator settings for frontend projects"""

    images_dir: str
    image_name_case: ImageNameCase = ImageNameCase.KEBAB_CASE
    info_comment: InfoComment = InfoComment.SHORT_INFO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "imagesDir": self.images_dir,
            "imageNameCase": ImageNameCase(self.image_name_case).value,
            "infoComment": InfoComment(self.info_comment).value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssetsTypeGeneratorConfig':
        return cls(
            images_dir=data["imagesDir"],
            image_name_case=ImageNameCase(data.get("imageNameCase", ImageNameCase.KEBAB_CASE.value)),
            info_comment=InfoComment(data.get("infoComment", InfoComment.SHORT_INFO.value))
        )


@dataclass
class DKConfig:
    """Contents of dk.config.json"""

    project_type: ProjectType
    version: Any = CONFIG_LATEST_VERSION
    database: Optional[DatabaseConfig] = None
    spring_boot: Optional[SpringBootConfig] = None
    assets_type_generator: Optional[AssetsTypeGeneratorConfig] = None

    # Keys this version of dk does not know about, kept on rewrite
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.project_type = ProjectType(self.project_type)
        # An all-empty database section is the same as no section
        if self.database is not None and self.database.is_empty:
            self.database = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in dk.config.json key order"""
        data = {
            "version": self.version,
            "projectType": self.project_type.value
        }

        if self.database and not self.database.is_empty:
            data["database"] = self.database.to_dict()
        if self.spring_boot:
            data["springBoot"] = self.spring_boot.to_dict()
        if self.assets_type_generator:
            data["assetsTypeGenerator"] = self.assets_type_generator.to_dict()

        for key, value in self.extra.items():
            data.setdefault(key, value)

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DKConfig':
        """Create from dictionary

        Raises:
            ValueError: if projectType is missing or unknown, or a section
                is not an object
        """
        if "projectType" not in data:
            raise ValueError("projectType is required")

        known = {"version", "projectType", "database", "springBoot", "assetsTypeGenerator"}

        return cls(
            project_type=ProjectType(data["projectType"]),
            version=data.get("version"),
            database=(
                DatabaseConfig.from_dict(_mapping(data["database"], "database"))
                if data.get("database") else None
            ),
            spring_boot=(
                SpringBootConfig.from_dict(_mapping(data["springBoot"], "springBoot"))
                if data.get("springBoot") else None
            ),
            assets_type_generator=(
                AssetsTypeGeneratorConfig.from_dict(
                    _mapping(data["assetsTypeGenerator"], "assetsTypeGenerator")
                )
                if data.get("assetsTypeGenerator") else None
            ),
            extra={k: v for k, v in data.items() if k not in known}
        )
