# dev_kit/utils/__init__.py
"""Utility functions for dev-kit"""

from .command_runner import (
    CommandResult,
    CommandRunner,
    SubprocessRunner,
)

from .file_utils import (
    read_json,
    write_json,
    is_within,
    get_path_size,
    remove_path,
    format_size,
)

from .git_utils import (
    GitClient,
    parse_porcelain,
)

from .version_utils import (
    parse_version,
    split_version,
    increment_patch,
    is_valid_version,
    compare_versions,
)

__all__ = [
    # Command execution
    'CommandResult',
    'CommandRunner',
    'SubprocessRunner',

    # File utilities
    'read_json',
    'write_json',
    'is_within',
    'get_path_size',
    'remove_path',
    'format_size',

    # Git utilities
    'GitClient',
    'parse_porcelain',

    # Version utilities
    'parse_version',
    'split_version',
    'increment_patch',
    'is_valid_version',
    'compare_versions',
]
