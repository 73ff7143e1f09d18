"""package.json access"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..api.exceptions import ManifestNotFoundError, MissingVersionError
from ..constants import PACKAGE_MANIFEST_FILE
from ..utils.file_utils import read_json, write_json


class ManifestEngine:
    """Reads and rewrites the project's package.json

    The whole document is kept in memory so that saving after a version
    bump preserves every other field in its original order.
    """

    def __init__(self, project_root: Path):
        """Initialize manifest engine

        Args:
            project_root: Directory containing package.json
        """
        self.project_root = Path(project_root)
        self.manifest_path = self.project_root / PACKAGE_MANIFEST_FILE
        self._data: Optional[Dict[str, Any]] = None

    @property
    def exists(self) -> bool:
        return self.manifest_path.is_file()

    @property
    def data(self) -> Dict[str, Any]:
        """Get manifest content (lazy load)"""
        if self._data is None:
            self.load()
        return self._data

    def load(self) -> Dict[str, Any]:
        """Load package.json

        Returns:
            Parsed manifest

        Raises:
            ManifestNotFoundError: if the file is missing or unreadable
        """
        if not self.exists:
            raise ManifestNotFoundError()

        try:
            data = read_json(self.manifest_path)
        except (OSError, json.JSONDecodeError) as e:
            raise ManifestNotFoundError(f"Failed to read or parse package.json: {e}")

        if not isinstance(data, dict):
            raise ManifestNotFoundError("package.json does not contain a JSON object.")

        self._data = data
        return self._data

    def get_version(self) -> str:
        """Get the manifest version

        Raises:
            MissingVersionError: if there is no usable version field
        """
        version = self.data.get("version")
        if not version or not isinstance(version, str):
            raise MissingVersionError()
        return version

    def set_version(self, version: str) -> None:
        self.data["version"] = version

    def save(self) -> Path:
        """Write package.json back to disk

        Returns:
            Path to the manifest
        """
        write_json(self.manifest_path, self.data)
        return self.manifest_path
