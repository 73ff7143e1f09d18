"""Git operation utilities"""

from pathlib import Path
from typing import List, Optional, Union

from .command_runner import CommandResult, CommandRunner, SubprocessRunner
from ..constants import GIT_REMOTE


class GitClient:
    """Thin wrapper issuing git commands through a CommandRunner.

    Methods return the raw CommandResult; deciding whether a failure is
    fatal is left to the caller.
    """

    def __init__(self, runner: Optional[CommandRunner] = None,
                 cwd: Optional[Union[str, Path]] = None,
                 remote: str = GIT_REMOTE):
        self.runner = runner or SubprocessRunner()
        self.cwd = cwd
        self.remote = remote

    def _git(self, *args: str) -> CommandResult:
        return self.runner.run(['git', *args], cwd=self.cwd)

    def is_repository(self) -> bool:
        """
        Check if the working directory is inside a Git repository

        Returns:
            True if it's a Git repository
        """
        return self._git('rev-parse', '--is-inside-work-tree').ok

    def current_branch(self) -> CommandResult:
        """Get current branch name (empty stdout on a detached HEAD)"""
        return self._git('branch', '--show-current')

    def status_porcelain(self) -> CommandResult:
        """Get machine-readable working tree status"""
        return self._git('status', '--porcelain')

    def pull(self, branch: str, strategy_option: Optional[str] = None,
             no_edit: bool = False) -> CommandResult:
        """
        Pull a branch from the remote into the current branch

        Args:
            branch: Remote branch name
            strategy_option: Merge strategy option (e.g. ``ours``)
            no_edit: Accept the auto-generated merge message

        Returns:
            Command result
        """
        args = ['pull', self.remote, branch]
        if strategy_option:
            args.append(f'--strategy-option={strategy_option}')
        if no_edit:
            args.append('--no-edit')
        return self._git(*args)

    def push(self, refspec: str, force: bool = False) -> CommandResult:
        """
        Push a refspec to the remote

        Args:
            refspec: Branch or ``src:dst`` refspec
            force: Force-update the remote ref

        Returns:
            Command result
        """
        args = ['push', self.remote, refspec]
        if force:
            args.append('--force')
        return self._git(*args)

    def checkout(self, branch: str) -> CommandResult:
        return self._git('checkout', branch)

    def add_all(self) -> CommandResult:
        """Stage every change in the working tree"""
        return self._git('add', '.')

    def commit(self, message: str) -> CommandResult:
        return self._git('commit', '-m', message)

    def get_config(self, key: str, global_scope: bool = False) -> Optional[str]:
        """
        Read a git config value

        Args:
            key: Config key
            global_scope: Read from the global config instead of the repository

        Returns:
            Value or None if unset
        """
        args = ['config']
        if global_scope:
            args.append('--global')
        args.append(key)

        result = self._git(*args)
        return result.stdout.strip() if result.ok else None

    def set_config(self, key: str, value: str, global_scope: bool = False) -> bool:
        """
        Write a git config value

        Args:
            key: Config key
            value: New value
            global_scope: Write to the global config instead of the repository

        Returns:
            True if successful
        """
        args = ['config']
        if global_scope:
            args.append('--global')
        args.extend([key, value])
        return self._git(*args).ok


def parse_porcelain(output: str) -> List[str]:
    """
    Extract file paths from ``git status --porcelain`` output

    Args:
        output: Porcelain status text

    Returns:
        List of changed paths
    """
    files = []
    for line in output.splitlines():
        if len(line) > 3:
            files.append(line[3:].strip())
    return files
