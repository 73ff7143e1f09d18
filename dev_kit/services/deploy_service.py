"""Deploy service: dev push and the production deployment state machine"""

import logging
import os
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..api.exceptions import CommandFailedError, DevKitError, WrongBranchError, UncommittedChangesError
from ..constants import (
    BUMP_COMMIT_TEMPLATE,
    DEFAULT_GH_COMMAND,
    DEFAULT_NPM_COMMAND,
    DEPLOY_COMMIT_TEMPLATE,
    DEPLOY_PR_TITLE_TEMPLATE,
    DEPLOY_TIMESTAMP_FORMAT,
    DEV_BRANCH,
    ENV_GH_COMMAND,
    ENV_NPM_COMMAND,
    ErrorCode,
    MAIN_BRANCH,
    STABLE_BRANCH,
)
from ..core.deploy_state import DeployStateStore
from ..core.manifest_engine import ManifestEngine
from ..core.reporter import Reporter
from ..models.deploy_info import DeployInfo
from ..models.result import DeployResult, OperationStatus
from ..utils.command_runner import CommandResult, CommandRunner, SubprocessRunner
from ..utils.git_utils import GitClient
from ..utils.version_utils import compare_versions, increment_patch

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DeployState(Enum):
    """States of the production deployment"""
    IDLE = "idle"
    PULLING = "pulling"
    VALIDATING_WORKING_TREE = "validating_working_tree"
    VALIDATING_BRANCH = "validating_branch"
    DECIDING_VERSION = "deciding_version"
    COMMITTING = "committing"
    PUSHING = "pushing"
    CREATING_PR = "creating_pr"
    DONE = "done"
    FAILED = "failed"


class ProductionDeployment:
    """One run of the production deployment.

    Each handler performs a single step and returns the next state. Any
    DevKitError raised by a handler moves the run to FAILED and is
    re-raised; only CREATING_PR downgrades its failures to warnings.
    Every external command is attempted exactly once.
    """

    def __init__(self, service: 'DeployService'):
        self.service = service
        self.git = service.git
        self.reporter = service.reporter
        self.state = DeployState.IDLE
        self.history: List[DeployState] = [DeployState.IDLE]
        self.result = DeployResult(status=OperationStatus.IN_PROGRESS, environment="prod")

        self._handlers: Dict[DeployState, Callable[[], DeployState]] = {
            DeployState.IDLE: self._start,
            DeployState.PULLING: self._pull,
            DeployState.VALIDATING_WORKING_TREE: self._validate_working_tree,
            DeployState.VALIDATING_BRANCH: self._validate_branch,
            DeployState.DECIDING_VERSION: self._decide_version,
            DeployState.COMMITTING: self._commit,
            DeployState.PUSHING: self._push,
            DeployState.CREATING_PR: self._create_pr,
        }

    def run(self) -> DeployResult:
        """Drive the state machine until DONE

        Returns:
            Deployment result

        Raises:
            DevKitError: on any fatal step
        """
        while self.state is not DeployState.DONE:
            handler = self._handlers[self.state]
            try:
                next_state = handler()
            except DevKitError as e:
                logger.debug("Production deploy failed in state %s: %s", self.state.value, e)
                self.result.add_error(e.error_code or ErrorCode.DEPLOY_FAILED, str(e), state=self.state.value)
                self._transition(DeployState.FAILED)
                self.result.final_state = self.state.value
                self.result.complete(OperationStatus.FAILED)
                raise
            self._transition(next_state)

        self.result.final_state = self.state.value
        self.result.message = "Production deployment completed successfully!"
        self.result.complete(OperationStatus.SUCCESS)
        return self.result

    def _transition(self, state: DeployState) -> None:
        logger.debug("Deploy state: %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _warn(self, message: str, detail: Optional[str] = None) -> None:
        self.result.add_warning(message)
        self.reporter.warning(message, detail)

    # State handlers

    def _start(self) -> DeployState:
        self.reporter.step("Starting production deployment...")
        return DeployState.PULLING

    def _pull(self) -> DeployState:
        self.reporter.step(f"Pulling changes from {STABLE_BRANCH}...")
        result = self.git.pull(STABLE_BRANCH, strategy_option="ours", no_edit=True)
        self.service.check(result, f"Failed to pull changes from {STABLE_BRANCH} branch")
        return DeployState.VALIDATING_WORKING_TREE

    def _validate_working_tree(self) -> DeployState:
        result = self.git.status_porcelain()
        self.service.check(result, "Failed to check git status")
        if result.stdout.strip():
            raise UncommittedChangesError()
        return DeployState.VALIDATING_BRANCH

    def _validate_branch(self) -> DeployState:
        result = self.git.current_branch()
        self.service.check(result, "Failed to get current git branch")
        branch = result.stdout.strip()
        if branch != MAIN_BRANCH:
            raise WrongBranchError(branch, MAIN_BRANCH)
        return DeployState.DECIDING_VERSION

    def _decide_version(self) -> DeployState:
        manifest = ManifestEngine(self.service.project_root)
        current_version = manifest.get_version()

        previous = self._read_previous_deploy()
        last_version = previous.version if previous else ""

        new_version = current_version
        if current_version == last_version:
            self.reporter.step("Incrementing version...")
            new_version = increment_patch(current_version)
            manifest.set_version(new_version)
            manifest.save()

            self.reporter.step("Installing npm packages...")
            self.service.install_dependencies()

            self.result.version_incremented = True
            self.reporter.success(f"Version incremented from {current_version} to {new_version}")
        else:
            if last_version and compare_versions(current_version, last_version) < 0:
                self._warn(
                    f"package.json version {current_version} is lower than the last "
                    f"deployed version {last_version}"
                )
            self.reporter.info(f"Using manually bumped version {current_version}")

        timestamp = self.service.timestamp()
        self.service.state_store.write(DeployInfo(
            last_deploy=timestamp,
            hash=previous.hash if previous else "",
            version=new_version
        ))

        self.result.previous_version = last_version
        self.result.version = new_version
        self.result.timestamp = timestamp
        return DeployState.COMMITTING

    def _read_previous_deploy(self) -> Optional[DeployInfo]:
        try:
            return self.service.state_store.read()
        except (OSError, ValueError) as e:
            logger.debug("Unreadable deploy state: %s", e)
            self._warn("Failed to read deploy.json, treating as first deployment.")
            return None

    def _commit(self) -> DeployState:
        self.service.check(self.git.add_all(), "Failed to stage changes")

        message = DEPLOY_COMMIT_TEMPLATE.format(
            timestamp=self.result.timestamp,
            version=self.result.version
        )
        self.service.check(self.git.commit(message), "Failed to commit changes")
        return DeployState.PUSHING

    def _push(self) -> DeployState:
        self.reporter.step(f"Pushing to {MAIN_BRANCH}...")
        self.service.check(self.git.push(MAIN_BRANCH), f"Failed to push to {MAIN_BRANCH} branch")
        return DeployState.CREATING_PR

    def _create_pr(self) -> DeployState:
        self.reporter.step("Creating pull request...")
        title = DEPLOY_PR_TITLE_TEMPLATE.format(version=self.result.version)
        body = DEPLOY_COMMIT_TEMPLATE.format(
            timestamp=self.result.timestamp,
            version=self.result.version
        )
        gh = self.service.gh_command

        created = self.service.run([
            gh, "pr", "create",
            "--base", STABLE_BRANCH,
            "--head", MAIN_BRANCH,
            "--title", title,
            "--body", body,
        ])
        if created.ok:
            opened = self.service.run([gh, "pr", "view", "--web"])
            if opened.ok:
                self.result.pr_created = True
                self.reporter.success("Pull request created successfully!")
                return DeployState.DONE
            failed = opened
        else:
            failed = created

        self._warn(
            "Pull request creation failed. Make sure GitHub CLI is installed and authenticated.",
            failed.stderr or None
        )
        return DeployState.DONE


class DeployService:
    """Service for deploying a project through git"""

    def __init__(
        self,
        project_root: Union[str, Path, None] = None,
        runner: Optional[CommandRunner] = None,
        reporter: Optional[Reporter] = None,
        clock: Optional[Callable[[], datetime]] = None,
        npm_command: Optional[str] = None,
        gh_command: Optional[str] = None
    ):
        """Initialize deploy service

        Args:
            project_root: Repository root (defaults to the current directory)
            runner: Command runner for git, npm and gh
            reporter: Receives progress events
            clock: Returns the current time; used for deploy timestamps
            npm_command: Package manager executable (defaults to $DK_NPM_COMMAND or npm)
            gh_command: GitHub CLI executable (defaults to $DK_GH_COMMAND or gh)
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.runner = runner or SubprocessRunner()
        self.reporter = reporter or Reporter()
        self.clock = clock or utc_now
        self.npm_command = npm_command or os.environ.get(ENV_NPM_COMMAND, DEFAULT_NPM_COMMAND)
        self.gh_command = gh_command or os.environ.get(ENV_GH_COMMAND, DEFAULT_GH_COMMAND)

        self.git = GitClient(self.runner, cwd=self.project_root)
        self.state_store = DeployStateStore(self.project_root)

    def run(self, argv: List[str]) -> CommandResult:
        return self.runner.run(argv, cwd=self.project_root)

    @staticmethod
    def check(result: CommandResult, description: str) -> CommandResult:
        """Raise CommandFailedError unless result succeeded"""
        if not result.ok:
            raise CommandFailedError(description, result.argv, result.exit_code, result.stderr)
        return result

    def timestamp(self) -> str:
        return self.clock().strftime(DEPLOY_TIMESTAMP_FORMAT)

    def install_dependencies(self) -> None:
        self.check(self.run([self.npm_command, "install"]), "Failed to install npm packages")

    def deploy_dev(self) -> DeployResult:
        """Force-push local main to the dev branch

        Returns:
            Deployment result

        Raises:
            CommandFailedError: if the push fails
        """
        result = DeployResult(status=OperationStatus.IN_PROGRESS, environment="dev")
        self.reporter.step("Deploying to development environment...")

        self.check(
            self.git.push(f"{MAIN_BRANCH}:{DEV_BRANCH}", force=True),
            f"Failed to push to {DEV_BRANCH} branch"
        )

        result.message = "Successfully deployed to development environment!"
        result.complete(OperationStatus.SUCCESS)
        return result

    def deploy_prod(self) -> DeployResult:
        """Run the production deployment state machine

        Returns:
            Deployment result

        Raises:
            DevKitError: on the first fatal step
        """
        return ProductionDeployment(self).run()

    def bump_version(self) -> str:
        """Increment the patch version on main and push it

        Checks out main, syncs it with the remote, bumps package.json,
        installs dependencies, commits and pushes. Every step is fatal.

        Returns:
            The new version
        """
        self.reporter.step("Incrementing version...")

        self.check(self.git.checkout(MAIN_BRANCH), f"Failed to checkout {MAIN_BRANCH} branch")
        self.check(self.git.pull(MAIN_BRANCH), f"Failed to pull changes from {MAIN_BRANCH} branch")
        self.check(self.git.push(MAIN_BRANCH), f"Failed to push changes to {MAIN_BRANCH} branch")

        manifest = ManifestEngine(self.project_root)
        current_version = manifest.get_version()
        new_version = increment_patch(current_version)
        manifest.set_version(new_version)
        manifest.save()
        self.reporter.success(f"Version incremented from {current_version} to {new_version}")

        self.check(self.git.add_all(), "Failed to stage changes")

        self.reporter.step("Installing npm packages...")
        self.install_dependencies()

        self.check(
            self.git.commit(BUMP_COMMIT_TEMPLATE.format(version=new_version)),
            "Failed to commit changes"
        )
        self.check(self.git.push(MAIN_BRANCH), f"Failed to push changes to {MAIN_BRANCH} branch")
        self.check(
            self.git.pull(MAIN_BRANCH, no_edit=True),
            f"Failed to pull changes from {MAIN_BRANCH} branch"
        )
        return new_version
