"""Build artifact cleanup service"""

import fnmatch
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..constants import (
    CLEAN_NODE_DEFAULTS,
    CLEAN_RN_ANDROID_DEFAULTS,
    CLEAN_RN_IOS_DEFAULTS,
    CLEAN_SKIP_DIRS,
    CleanMode,
)
from ..core.project_detector import read_merged_dependencies
from ..core.reporter import Reporter
from ..models.result import CleanEntry, CleanResult, OperationStatus
from ..utils.command_runner import CommandRunner, SubprocessRunner
from ..utils.file_utils import get_path_size, is_within, remove_path

logger = logging.getLogger(__name__)

CleanItem = Tuple[str, bool]


class CleanService:
    """Finds and removes build artifacts inside a project"""

    def __init__(
        self,
        project_root: Union[str, Path, None] = None,
        runner: Optional[CommandRunner] = None,
        reporter: Optional[Reporter] = None
    ):
        self.project_root = (Path(project_root) if project_root else Path.cwd()).resolve()
        self.runner = runner or SubprocessRunner()
        self.reporter = reporter or Reporter()

    def is_react_native(self) -> bool:
        """React Native projects have android/ plus app.json or a react-native dependency"""
        if not (self.project_root / "android").is_dir():
            return False
        if (self.project_root / "app.json").exists():
            return True

        try:
            deps = read_merged_dependencies(self.project_root) or {}
        except (OSError, ValueError):
            deps = {}
        return bool(deps.get("react-native"))

    def default_mode(self) -> CleanMode:
        return CleanMode.ALL if self.is_react_native() else CleanMode.NODE

    @staticmethod
    def items_for_mode(mode: Union[CleanMode, str]) -> List[CleanItem]:
        mode = CleanMode(mode)
        if mode is CleanMode.ALL:
            return CLEAN_NODE_DEFAULTS + CLEAN_RN_ANDROID_DEFAULTS + CLEAN_RN_IOS_DEFAULTS
        if mode is CleanMode.RN_ANDROID:
            return list(CLEAN_RN_ANDROID_DEFAULTS)
        if mode is CleanMode.RN_IOS:
            return list(CLEAN_RN_IOS_DEFAULTS)
        return list(CLEAN_NODE_DEFAULTS)

    def expand(self, items: Sequence[CleanItem]) -> List[CleanEntry]:
        """
        Resolve clean patterns to existing paths inside the project

        Args:
            items: (pattern, is_directory) pairs

        Returns:
            Concrete entries, de-duplicated, never outside the project root
        """
        entries = []
        seen = set()

        for pattern, is_dir in items:
            for path in self._match(pattern, is_dir):
                rel = path.relative_to(self.project_root).as_posix()
                if rel in seen or not is_within(self.project_root, path):
                    continue
                seen.add(rel)
                entries.append(CleanEntry(path=rel, is_dir=is_dir, pattern=pattern))

        return entries

    def _match(self, pattern: str, is_dir: bool) -> List[Path]:
        if not any(ch in pattern for ch in "*?["):
            candidate = self.project_root / pattern
            if candidate.is_symlink():
                return []
            if is_dir and candidate.is_dir():
                return [candidate]
            if not is_dir and candidate.is_file():
                return [candidate]
            return []

        # Only file globs use wildcards; match on the file name
        name_pattern = pattern.rsplit("/", 1)[-1]
        matches = []
        for dirpath, dirnames, filenames in os.walk(self.project_root):
            dirnames[:] = [d for d in dirnames if d not in CLEAN_SKIP_DIRS]
            for name in filenames:
                if fnmatch.fnmatch(name, name_pattern):
                    path = Path(dirpath) / name
                    if not path.is_symlink():
                        matches.append(path)
        return sorted(matches)

    def remove_node_modules(self, dry_run: bool = False) -> bool:
        """
        Delete node_modules

        Args:
            dry_run: Only report what would happen

        Returns:
            True if node_modules was removed
        """
        target = self.project_root / "node_modules"
        if dry_run or not target.exists():
            return False

        remove_path(target)
        logger.info("Removed %s", target)
        return True

    def clean(
        self,
        entries: Sequence[CleanEntry],
        mode: Union[CleanMode, str],
        dry_run: bool = False
    ) -> CleanResult:
        """
        Remove the given entries

        Args:
            entries: Paths from :meth:`expand`
            mode: Clean mode; ``all`` and ``rn-android`` also run gradle clean
            dry_run: Only report what would happen

        Returns:
            Clean result with counts and approximate bytes freed
        """
        mode = CleanMode(mode)
        result = CleanResult(
            status=OperationStatus.IN_PROGRESS,
            mode=mode.value,
            dry_run=dry_run,
            entries=list(entries)
        )

        if not dry_run:
            for entry in entries:
                path = self.project_root / entry.path
                if not is_within(self.project_root, path):
                    continue
                try:
                    size = get_path_size(path)
                    remove_path(path)
                except OSError as e:
                    result.add_warning(f"Could not remove {entry.path}: {e}")
                    self.reporter.warning(f"Could not remove {entry.path}", str(e))
                    continue

                result.bytes_freed += size
                if entry.is_dir:
                    result.dirs_removed += 1
                else:
                    result.files_removed += 1

            if mode in (CleanMode.ALL, CleanMode.RN_ANDROID):
                self.run_gradle_clean()

        result.complete(OperationStatus.SUCCESS)
        return result

    def run_gradle_clean(self) -> None:
        """Run the Gradle wrapper's clean task; failures are ignored"""
        android_dir = self.project_root / "android"
        if not android_dir.is_dir():
            return

        wrapper = "gradlew.bat" if sys.platform == "win32" else "./gradlew"
        self.reporter.step("Running Gradle clean...")
        result = self.runner.run([wrapper, "clean"], cwd=android_dir)
        if not result.ok:
            logger.info("Gradle clean exited with %d", result.exit_code)
