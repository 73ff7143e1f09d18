# dev_kit/cli/commands/__init__.py
"""CLI commands"""

from . import init
from . import config
from . import deploy
from . import version
from . import clean
from . import git
from . import doctor

__all__ = [
    "init",
    "config",
    "deploy",
    "version",
    "clean",
    "git",
    "doctor",
]
