# dev_kit/cli/decorators/__init__.py
"""CLI decorators"""

from .project import config_required, config_optional

__all__ = [
    'config_required',
    'config_optional',
]
