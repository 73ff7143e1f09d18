"""Tests for build artifact cleanup"""

import pytest

from dev_kit.constants import CleanMode
from dev_kit.models.result import CleanEntry
from dev_kit.services.clean_service import CleanService
from tests.conftest import write_json_file


def touch(path, content="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestModeSelection:

    def test_plain_node_project(self, project):
        service = CleanService(project)
        assert not service.is_react_native()
        assert service.default_mode() is CleanMode.NODE

    def test_react_native_with_app_json(self, project):
        (project / "android").mkdir()
        touch(project / "app.json", "{}")
        assert CleanService(project).default_mode() is CleanMode.ALL

    def test_react_native_dependency(self, tmp_path):
        (tmp_path / "android").mkdir()
        write_json_file(tmp_path / "package.json", {"dependencies": {"react-native": "0.73.0"}})
        assert CleanService(tmp_path).is_react_native()

    def test_android_dir_alone_is_not_react_native(self, project):
        (project / "android").mkdir()
        assert not CleanService(project).is_react_native()

    def test_all_mode_covers_every_group(self):
        patterns = [p for p, _ in CleanService.items_for_mode(CleanMode.ALL)]
        assert "dist" in patterns
        assert "android/app/build" in patterns
        assert "ios/Pods" in patterns


class TestExpand:

    def test_existing_targets_only(self, project):
        touch(project / "dist" / "bundle.js")
        touch(project / "coverage" / "lcov.info")

        entries = CleanService(project).expand(CleanService.items_for_mode("node"))

        assert [e.path for e in entries] == ["dist", "coverage"]
        assert all(e.is_dir for e in entries)

    def test_log_glob_skips_node_modules(self, project):
        touch(project / "npm-debug.log")
        touch(project / "logs" / "server.log")
        touch(project / "node_modules" / "pkg" / "install.log")

        entries = CleanService(project).expand([("**/*.log", False)])

        assert sorted(e.path for e in entries) == ["logs/server.log", "npm-debug.log"]

    def test_file_pattern_does_not_match_directory(self, project):
        (project / "weird.log").mkdir()
        assert CleanService(project).expand([("**/*.log", False)]) == []

    def test_no_duplicates(self, project):
        touch(project / "dist" / "a.js")
        entries = CleanService(project).expand([("dist", True), ("dist", True)])
        assert len(entries) == 1


class TestClean:

    def test_removes_entries_and_counts(self, project, runner, reporter):
        touch(project / "dist" / "bundle.js", "1234")
        touch(project / "debug.log", "12")
        service = CleanService(project, runner=runner, reporter=reporter)
        entries = service.expand(service.items_for_mode("node"))

        result = service.clean(entries, "node")

        assert result.is_success
        assert result.dirs_removed == 1
        assert result.files_removed == 1
        assert result.bytes_freed == 6
        assert not (project / "dist").exists()
        assert not (project / "debug.log").exists()
        assert (project / "package.json").exists()
        assert runner.calls == []

    def test_dry_run_keeps_files(self, project, runner, reporter):
        touch(project / "build" / "out.js")
        service = CleanService(project, runner=runner, reporter=reporter)
        entries = service.expand(service.items_for_mode("node"))

        result = service.clean(entries, "node", dry_run=True)

        assert result.dry_run
        assert result.dirs_removed == 0
        assert (project / "build" / "out.js").exists()

    def test_android_mode_runs_gradle_clean(self, project, runner, reporter):
        touch(project / "android" / "app" / "build" / "out.apk")
        service = CleanService(project, runner=runner, reporter=reporter)
        entries = service.expand(service.items_for_mode("rn-android"))

        service.clean(entries, CleanMode.RN_ANDROID)

        assert runner.calls[0][-1] == "clean"
        assert not (project / "android" / "app" / "build").exists()

    def test_gradle_failure_is_ignored(self, project, runner, reporter):
        (project / "android").mkdir()
        runner.on("./gradlew", exit_code=1)
        runner.on("gradlew.bat", exit_code=1)
        service = CleanService(project, runner=runner, reporter=reporter)

        result = service.clean([], CleanMode.ALL)

        assert result.is_success


class TestNodeModules:

    def test_remove(self, project):
        touch(project / "node_modules" / "pkg" / "index.js")
        assert CleanService(project).remove_node_modules() is True
        assert not (project / "node_modules").exists()

    def test_dry_run(self, project):
        touch(project / "node_modules" / "pkg" / "index.js")
        assert CleanService(project).remove_node_modules(dry_run=True) is False
        assert (project / "node_modules").exists()

    def test_missing(self, project):
        assert CleanService(project).remove_node_modules() is False


class TestOutsideRoot:

    @pytest.fixture
    def outside(self, tmp_path_factory):
        target = tmp_path_factory.mktemp("outside")
        touch(target / "keep.js")
        touch(target / "keep.log")
        return target

    def test_symlinked_directory_is_not_expanded(self, project, outside):
        (project / "build").symlink_to(outside, target_is_directory=True)

        entries = CleanService(project).expand(CleanService.items_for_mode("node"))

        assert entries == []

    def test_symlinked_log_is_not_expanded(self, project, outside):
        (project / "app.log").symlink_to(outside / "keep.log")

        assert CleanService(project).expand([("**/*.log", False)]) == []

    def test_clean_skips_entry_resolving_outside(self, project, outside, runner, reporter):
        (project / "build").symlink_to(outside, target_is_directory=True)
        service = CleanService(project, runner=runner, reporter=reporter)

        result = service.clean([CleanEntry(path="build", is_dir=True, pattern="build")], "node")

        assert result.dirs_removed == 0
        assert (outside / "keep.js").exists()
        assert (project / "build").is_symlink()

    def test_clean_skips_parent_traversal(self, project, outside, runner, reporter):
        service = CleanService(project, runner=runner, reporter=reporter)
        escape = f"../{outside.name}"

        service.clean([CleanEntry(path=escape, is_dir=True, pattern="build")], "node")

        assert (outside / "keep.js").exists()
