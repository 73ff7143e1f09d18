"""Tests for the dev push and the production deployment state machine"""

from datetime import datetime

import pytest

from dev_kit.api.exceptions import (
    CommandFailedError,
    InvalidVersionFormatError,
    ManifestNotFoundError,
    MissingVersionError,
    UncommittedChangesError,
    WrongBranchError,
)
from dev_kit.services.deploy_service import DeployService, DeployState, ProductionDeployment
from tests.conftest import read_json_file, write_json_file

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53)
STAMP = "2025-03-14 09:26:53"


def make_service(root, runner, reporter):
    return DeployService(
        root,
        runner=runner,
        reporter=reporter,
        clock=lambda: FIXED_NOW,
        npm_command="npm",
        gh_command="gh"
    )


@pytest.fixture
def prod_runner(runner):
    runner.on("git", "branch", "--show-current", stdout="main")
    return runner


class TestDeployDev:

    def test_force_pushes_main_to_dev(self, project, runner, reporter):
        result = make_service(project, runner, reporter).deploy_dev()

        assert runner.calls == [["git", "push", "origin", "main:dev", "--force"]]
        assert result.is_success
        assert result.environment == "dev"

    def test_push_failure_raises_with_stderr(self, project, runner, reporter):
        runner.on("git", "push", exit_code=1, stderr="remote rejected")

        with pytest.raises(CommandFailedError) as exc:
            make_service(project, runner, reporter).deploy_dev()

        assert "Failed to push to dev branch" in str(exc.value)
        assert "remote rejected" in str(exc.value)
        assert exc.value.exit_code == 1

    def test_never_touches_files(self, project, runner, reporter):
        before = (project / "package.json").read_text()
        make_service(project, runner, reporter).deploy_dev()

        assert (project / "package.json").read_text() == before
        assert not (project / "deploy.json").exists()


class TestFirstProductionDeploy:

    def test_records_version_without_increment(self, project, prod_runner, reporter):
        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.version == "1.0.0"
        assert result.version_incremented is False
        assert read_json_file(project / "package.json")["version"] == "1.0.0"
        assert read_json_file(project / "deploy.json") == {
            "last_deploy": STAMP,
            "hash": "",
            "version": "1.0.0",
        }

    def test_command_sequence(self, project, prod_runner, reporter):
        make_service(project, prod_runner, reporter).deploy_prod()

        assert prod_runner.calls == [
            ["git", "pull", "origin", "stable", "--strategy-option=ours", "--no-edit"],
            ["git", "status", "--porcelain"],
            ["git", "branch", "--show-current"],
            ["git", "add", "."],
            ["git", "commit", "-m", f"{STAMP}-V1.0.0 Production Deployment"],
            ["git", "push", "origin", "main"],
            ["gh", "pr", "create", "--base", "stable", "--head", "main",
             "--title", "V1.0.0 Deploy PR", "--body", f"{STAMP}-V1.0.0 Production Deployment"],
            ["gh", "pr", "view", "--web"],
        ]

    def test_no_npm_install_without_increment(self, project, prod_runner, reporter):
        make_service(project, prod_runner, reporter).deploy_prod()
        assert not prod_runner.called("npm")

    def test_state_history(self, project, prod_runner, reporter):
        deployment = ProductionDeployment(make_service(project, prod_runner, reporter))
        deployment.run()

        assert deployment.history == [
            DeployState.IDLE,
            DeployState.PULLING,
            DeployState.VALIDATING_WORKING_TREE,
            DeployState.VALIDATING_BRANCH,
            DeployState.DECIDING_VERSION,
            DeployState.COMMITTING,
            DeployState.PUSHING,
            DeployState.CREATING_PR,
            DeployState.DONE,
        ]


class TestRepeatProductionDeploy:

    def test_same_version_is_incremented(self, project, prod_runner, reporter):
        write_json_file(project / "deploy.json", {
            "last_deploy": "2025-01-01 00:00:00", "hash": "abc123", "version": "1.0.0"
        })

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.version == "1.0.1"
        assert result.previous_version == "1.0.0"
        assert result.version_incremented is True
        assert read_json_file(project / "package.json")["version"] == "1.0.1"
        assert read_json_file(project / "deploy.json") == {
            "last_deploy": STAMP,
            "hash": "abc123",
            "version": "1.0.1",
        }
        assert ["npm", "install"] in prod_runner.calls
        assert ["git", "commit", "-m", f"{STAMP}-V1.0.1 Production Deployment"] in prod_runner.calls

    def test_increment_carries_the_patch(self, project, prod_runner, reporter):
        write_json_file(project / "package.json", {"name": "demo-app", "version": "2.9.9"})
        write_json_file(project / "deploy.json", {"last_deploy": "", "hash": "", "version": "2.9.9"})

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.version == "2.9.10"

    def test_other_manifest_fields_preserved(self, project, prod_runner, reporter):
        write_json_file(project / "deploy.json", {"last_deploy": "", "hash": "", "version": "1.0.0"})

        make_service(project, prod_runner, reporter).deploy_prod()

        manifest = read_json_file(project / "package.json")
        assert list(manifest) == ["name", "version", "scripts", "dependencies"]
        assert manifest["scripts"] == {"start": "node index.js"}

    def test_manually_bumped_version_is_kept(self, project, prod_runner, reporter):
        write_json_file(project / "package.json", {"name": "demo-app", "version": "1.2.0"})
        write_json_file(project / "deploy.json", {"last_deploy": "", "hash": "", "version": "1.1.4"})

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.version == "1.2.0"
        assert result.version_incremented is False
        assert read_json_file(project / "package.json")["version"] == "1.2.0"
        assert read_json_file(project / "deploy.json")["version"] == "1.2.0"
        assert not prod_runner.called("npm")

    def test_lower_manifest_version_warns(self, project, prod_runner, reporter):
        write_json_file(project / "deploy.json", {"last_deploy": "", "hash": "", "version": "1.4.0"})

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.is_success
        assert any("lower than the last deployed version" in w for w in reporter.messages("warning"))

    def test_corrupt_deploy_state_treated_as_first_deploy(self, project, prod_runner, reporter):
        (project / "deploy.json").write_text("{not json", encoding="utf-8")

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.version == "1.0.0"
        assert result.version_incremented is False
        assert "Failed to read deploy.json, treating as first deployment." in reporter.messages("warning")
        assert read_json_file(project / "deploy.json")["version"] == "1.0.0"


class TestProductionDeployAborts:

    def test_dirty_tree_aborts_without_writing(self, project, prod_runner, reporter):
        prod_runner.on("git", "status", "--porcelain", stdout=" M src/index.js")
        before = (project / "package.json").read_text()

        with pytest.raises(UncommittedChangesError):
            make_service(project, prod_runner, reporter).deploy_prod()

        assert (project / "package.json").read_text() == before
        assert not (project / "deploy.json").exists()
        assert not prod_runner.called("git", "commit")
        assert not prod_runner.called("git", "push")

    def test_wrong_branch_aborts(self, project, runner, reporter):
        runner.on("git", "branch", "--show-current", stdout="feature/login")

        with pytest.raises(WrongBranchError) as exc:
            make_service(project, runner, reporter).deploy_prod()

        assert exc.value.current_branch == "feature/login"
        assert not (project / "deploy.json").exists()
        assert not runner.called("git", "add")

    def test_pull_failure_aborts_first(self, project, prod_runner, reporter):
        prod_runner.on("git", "pull", exit_code=1, stderr="merge conflict")

        deployment = ProductionDeployment(make_service(project, prod_runner, reporter))
        with pytest.raises(CommandFailedError):
            deployment.run()

        assert deployment.state is DeployState.FAILED
        assert deployment.history[-2] is DeployState.PULLING
        assert len(prod_runner.calls) == 1
        assert deployment.result.is_failed

    def test_missing_manifest(self, tmp_path, prod_runner, reporter):
        with pytest.raises(ManifestNotFoundError):
            make_service(tmp_path, prod_runner, reporter).deploy_prod()

    def test_missing_version(self, project, prod_runner, reporter):
        write_json_file(project / "package.json", {"name": "demo-app"})

        with pytest.raises(MissingVersionError):
            make_service(project, prod_runner, reporter).deploy_prod()

    def test_non_numeric_version_on_increment(self, project, prod_runner, reporter):
        write_json_file(project / "package.json", {"name": "demo-app", "version": "1.0.0-beta"})
        write_json_file(project / "deploy.json", {"last_deploy": "", "hash": "", "version": "1.0.0-beta"})

        with pytest.raises(InvalidVersionFormatError):
            make_service(project, prod_runner, reporter).deploy_prod()

        assert read_json_file(project / "deploy.json")["version"] == "1.0.0-beta"

    def test_npm_failure_is_fatal(self, project, prod_runner, reporter):
        write_json_file(project / "deploy.json", {"last_deploy": "", "hash": "", "version": "1.0.0"})
        prod_runner.on("npm", "install", exit_code=1, stderr="ERESOLVE")

        with pytest.raises(CommandFailedError):
            make_service(project, prod_runner, reporter).deploy_prod()

        assert not prod_runner.called("git", "commit")

    def test_push_failure_is_fatal(self, project, prod_runner, reporter):
        prod_runner.on("git", "push", exit_code=1, stderr="rejected")

        with pytest.raises(CommandFailedError) as exc:
            make_service(project, prod_runner, reporter).deploy_prod()

        assert "Failed to push to main branch" in str(exc.value)
        assert not prod_runner.called("gh")


class TestPullRequestStep:

    def test_pr_failure_is_only_a_warning(self, project, prod_runner, reporter):
        prod_runner.on("gh", exit_code=127, stderr="gh: command not found")

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.is_success
        assert result.pr_created is False
        assert result.final_state == "done"
        assert any("Pull request creation failed" in w for w in result.warnings)
        assert not prod_runner.called("gh", "pr", "view")

    def test_pr_view_failure_is_only_a_warning(self, project, prod_runner, reporter):
        prod_runner.on("gh", "pr", "view", exit_code=1)

        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.is_success
        assert result.pr_created is False

    def test_pr_created(self, project, prod_runner, reporter):
        result = make_service(project, prod_runner, reporter).deploy_prod()

        assert result.pr_created is True
        assert "Pull request created successfully!" in reporter.messages("success")


class TestBumpVersion:

    def test_bump_sequence(self, project, runner, reporter):
        new_version = make_service(project, runner, reporter).bump_version()

        assert new_version == "1.0.1"
        assert read_json_file(project / "package.json")["version"] == "1.0.1"
        assert runner.calls == [
            ["git", "checkout", "main"],
            ["git", "pull", "origin", "main"],
            ["git", "push", "origin", "main"],
            ["git", "add", "."],
            ["npm", "install"],
            ["git", "commit", "-m", "Increment version to 1.0.1"],
            ["git", "push", "origin", "main"],
            ["git", "pull", "origin", "main", "--no-edit"],
        ]

    def test_checkout_failure_leaves_manifest(self, project, runner, reporter):
        runner.on("git", "checkout", exit_code=1, stderr="pathspec 'main' did not match")

        with pytest.raises(CommandFailedError):
            make_service(project, runner, reporter).bump_version()

        assert read_json_file(project / "package.json")["version"] == "1.0.0"


def test_npm_command_from_environment(project, runner, reporter, monkeypatch):
    monkeypatch.setenv("DK_NPM_COMMAND", "pnpm")
    service = DeployService(project, runner=runner, reporter=reporter)

    service.install_dependencies()

    assert runner.calls == [["pnpm", "install"]]


def test_failed_result_records_error(project, prod_runner, reporter):
    prod_runner.on("git", "status", "--porcelain", stdout="?? scratch.txt")
    deployment = ProductionDeployment(make_service(project, prod_runner, reporter))

    with pytest.raises(UncommittedChangesError):
        deployment.run()

    data = deployment.result.to_dict()
    assert data["status"] == "failed"
    assert data["final_state"] == "failed"
    assert data["errors"][0]["code"] == "DK004"
    assert data["errors"][0]["context"] == {"state": "validating_working_tree"}
