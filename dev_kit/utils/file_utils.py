# dev_kit/utils/file_utils.py
"""File operation utilities"""

import json
import os
import shutil
from pathlib import Path
from typing import Any, Union

from ..constants import JSON_INDENT


def read_json(file_path: Path) -> Any:
    """
    Read and parse a UTF-8 JSON file

    Args:
        file_path: Path to file

    Returns:
        Parsed data

    Raises:
        OSError: if the file cannot be read
        json.JSONDecodeError: if the content is not valid JSON
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(file_path: Path, data: Any) -> None:
    """
    Write data as pretty-printed JSON with a trailing newline.

    The file is fully overwritten.

    Args:
        file_path: Path to file
        data: JSON-serializable data
    """
    content = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(content)


def is_within(root: Path, target: Union[str, Path]) -> bool:
    """
    Check that target resolves strictly inside root

    Args:
        root: Root directory
        target: Path to check (relative paths are taken from root)

    Returns:
        True if target is a descendant of root
    """
    root = Path(root).resolve()
    target = Path(target)
    if not target.is_absolute():
        target = root / target
    resolved = target.resolve()
    return resolved != root and root in resolved.parents


def get_path_size(path: Path) -> int:
    """
    Get size of a file or total size of a directory tree in bytes

    Args:
        path: File or directory

    Returns:
        Size in bytes (unreadable entries are skipped)
    """
    if path.is_symlink() or path.is_file():
        try:
            return path.lstat().st_size
        except OSError:
            return 0

    total = 0
    for dirpath, _, filenames in os.walk(path):
        for name in filenames:
            try:
                total += os.lstat(os.path.join(dirpath, name)).st_size
            except OSError:
                continue
    return total


def remove_path(path: Path) -> None:
    """
    Remove a file, symlink or directory tree

    Args:
        path: Path to remove
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"
