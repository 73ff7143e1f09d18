"""Deploy-state models"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class DeployInfo:
    """Contents of deploy.json

    ``hash`` is carried over from the previous record on every deploy and
    is never computed by dk itself.
    """
    last_deploy: str = ""
    hash: str = ""
    version: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'last_deploy': self.last_deploy,
            'hash': self.hash,
            'version': self.version
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployInfo':
        """Create from dictionary"""
        return cls(
            last_deploy=str(data.get('last_deploy') or ''),
            hash=str(data.get('hash') or ''),
            version=str(data.get('version') or '')
        )
