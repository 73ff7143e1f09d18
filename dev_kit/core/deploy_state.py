"""deploy.json persistence"""

from pathlib import Path
from typing import Optional

from ..constants import DEPLOY_STATE_FILE
from ..models.deploy_info import DeployInfo
from ..utils.file_utils import read_json, write_json


class DeployStateStore:
    """Reads and writes the deploy-state record at the project root"""

    def __init__(self, project_root: Path):
        self.project_root = Path(project_root)
        self.state_path = self.project_root / DEPLOY_STATE_FILE

    def exists(self) -> bool:
        return self.state_path.is_file()

    def read(self) -> Optional[DeployInfo]:
        """Load the last deploy record

        Returns:
            DeployInfo, or None when deploy.json does not exist

        Raises:
            OSError: if the file cannot be read
            ValueError: if the content is not a JSON object
        """
        if not self.exists():
            return None

        data = read_json(self.state_path)
        if not isinstance(data, dict):
            raise ValueError(f"{self.state_path.name} does not contain a JSON object")

        return DeployInfo.from_dict(data)

    def write(self, info: DeployInfo) -> Path:
        """Overwrite deploy.json with info"""
        write_json(self.state_path, info.to_dict())
        return self.state_path
