"""Project archetype detection"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..constants import (
    BUILD_TOOL_MARKERS,
    MICROSERVICE_NAME_PATTERNS,
    MIN_SPRING_BOOT_SERVICES,
    PACKAGE_MANIFEST_FILE,
    ProjectType,
)

logger = logging.getLogger(__name__)


def detect_project_type(root_dir: Union[str, Path, None] = None) -> Optional[ProjectType]:
    """
    Classify the project at root_dir

    The structural Spring Boot probe runs first, so a microservice
    repository wins even if it also carries a package.json.

    Args:
        root_dir: Project root (defaults to the current directory)

    Returns:
        Detected project type, or None when nothing matched. Never raises.
    """
    root = Path(root_dir) if root_dir else Path.cwd()

    try:
        if is_spring_boot_project(root):
            return ProjectType.SPRING_BOOT_MICROSERVICE

        deps = read_merged_dependencies(root)
        if deps is None:
            return None

        if deps.get("next"):
            return ProjectType.NEXTJS
        if deps.get("express"):
            return ProjectType.NODE_EXPRESS
        if deps.get("vite") and deps.get("react"):
            return ProjectType.VITE_REACT
        if deps.get("react-native"):
            return ProjectType.REACT_NATIVE_CLI

    except Exception as e:
        logger.debug("Project type detection failed: %s", e)

    return None


def read_merged_dependencies(root: Path) -> Optional[Dict[str, str]]:
    """
    Merge dependencies and devDependencies from package.json

    Args:
        root: Project root

    Returns:
        Merged mapping (devDependencies win on duplicate keys), or None when
        there is no package.json
    """
    manifest_path = root / PACKAGE_MANIFEST_FILE
    if not manifest_path.is_file():
        return None

    with open(manifest_path, 'r', encoding='utf-8') as f:
        pkg = json.load(f)

    if not isinstance(pkg, dict):
        return {}

    merged = {}
    for section in ("dependencies", "devDependencies"):
        value = pkg.get(section)
        if isinstance(value, dict):
            merged.update(value)
    return merged


def has_build_tool_marker(directory: Path) -> bool:
    """Check a directory for a Maven or Gradle build file or wrapper"""
    return any((directory / marker).exists() for marker in BUILD_TOOL_MARKERS)


def find_service_directories(root_dir: Union[str, Path, None] = None) -> List[str]:
    """
    List immediate subdirectories that look like JVM services

    Args:
        root_dir: Project root (defaults to the current directory)

    Returns:
        Sorted directory names; empty if the root cannot be read
    """
    root = Path(root_dir) if root_dir else Path.cwd()

    try:
        return sorted(
            entry.name for entry in root.iterdir()
            if entry.is_dir() and has_build_tool_marker(entry)
        )
    except OSError as e:
        logger.debug("Cannot scan %s for services: %s", root, e)
        return []


def matches_microservice_name(name: str) -> bool:
    lowered = name.lower()
    return any(pattern in lowered for pattern in MICROSERVICE_NAME_PATTERNS)


def is_spring_boot_project(root: Path) -> bool:
    """
    Structural Spring Boot probe

    Args:
        root: Project root

    Returns:
        True with two or more service directories, or a single one whose
        name looks like a microservice
    """
    services = find_service_directories(root)

    if len(services) >= MIN_SPRING_BOOT_SERVICES:
        return True

    return any(matches_microservice_name(name) for name in services)
