# dev_kit/cli/commands/doctor.py
"""System diagnostic command"""

import os
import platform
import sys

import click
from rich import box
from rich.table import Table

from ..decorators import config_optional
from ..utils.output import console
from ...__version__ import __version__
from ...constants import (
    CONFIG_LATEST_VERSION,
    DEFAULT_GH_COMMAND,
    DEFAULT_NPM_COMMAND,
    ENV_GH_COMMAND,
    ENV_NPM_COMMAND,
    PACKAGE_MANIFEST_FILE,
)
from ...core.project_detector import detect_project_type
from ...services.config_service import ConfigService, ConfigUpdateStatus, config_version, is_outdated
from ...utils.command_runner import SubprocessRunner
from ...utils.git_utils import GitClient, parse_porcelain


class DiagnosticCheck:
    """Base class for diagnostic checks"""

    def __init__(self, name: str, description: str, required: bool = True):
        self.name = name
        self.description = description
        self.required = required
        self.passed = False
        self.message = ""
        self.fixes = []

    def run(self, ctx) -> 'DiagnosticCheck':
        """Run the diagnostic check"""
        raise NotImplementedError

    def fix(self, ctx) -> bool:
        """Attempt to fix the issue"""
        return False


class InstallationCheck(DiagnosticCheck):
    """Report the installed dk and interpreter"""

    def __init__(self):
        super().__init__("dk Installation", "Show dk and Python versions")

    def run(self, ctx):
        self.passed = sys.version_info >= (3, 8)
        self.message = f"dk {__version__} on Python {platform.python_version()}"
        if not self.passed:
            self.message += " (Python 3.8+ required)"
        return self


class ToolCheck(DiagnosticCheck):
    """Check that an external executable responds to --version"""

    def __init__(self, name: str, command: str, required: bool = True):
        super().__init__(name, f"Verify '{command}' is available", required=required)
        self.command = command

    def run(self, ctx):
        result = SubprocessRunner().run([self.command, "--version"], cwd=ctx.obj.project_root)
        if result.ok:
            self.passed = True
            self.message = result.stdout.strip().splitlines()[0] if result.stdout.strip() else "available"
        else:
            self.passed = False
            self.message = f"'{self.command}' not found or not working"
        return self


class ProjectCheck(DiagnosticCheck):
    """Check the current directory looks like a supported project"""

    def __init__(self):
        super().__init__("Current Project", "Detect the project type")

    def run(self, ctx):
        root = ctx.obj.project_root
        if not (root / PACKAGE_MANIFEST_FILE).exists():
            self.passed = False
            self.message = f"No {PACKAGE_MANIFEST_FILE} in {root}"
            return self

        project_type = detect_project_type(root)
        self.passed = True
        self.message = f"Detected: {project_type.value}" if project_type else "Project type not detected"
        return self


class GitStatusCheck(DiagnosticCheck):
    """Check Git repository status"""

    def __init__(self):
        super().__init__("Git Status", "Check Git repository health")

    def run(self, ctx):
        client = GitClient(cwd=ctx.obj.project_root)

        if not client.is_repository():
            self.passed = False
            self.message = "Not a Git repository"
            return self

        branch = client.current_branch().stdout.strip() or "detached"
        status = client.status_porcelain()
        changed = parse_porcelain(status.stdout) if status.ok else []

        self.passed = True
        if changed:
            self.message = f"Branch '{branch}', {len(changed)} uncommitted file(s)"
        else:
            self.message = f"Clean working tree on branch '{branch}'"
        return self


class ConfigCheck(DiagnosticCheck):
    """Check dk.config.json exists and is current"""

    def __init__(self):
        super().__init__("Configuration", "Verify dk.config.json is present and up to date")

    def run(self, ctx):
        config = ctx.obj.config

        if config is None:
            self.passed = False
            self.message = "dk.config.json missing or unreadable"
            self.fixes = ["Run 'dk init'"]
        elif is_outdated(config):
            self.passed = False
            self.message = (
                f"Config version {config_version(config)} is older than {CONFIG_LATEST_VERSION}"
            )
            self.fixes = ["Run 'dk config update'"]
        else:
            self.passed = True
            self.message = f"{config.project_type.value}, version {config_version(config)}"
        return self

    def fix(self, ctx):
        if ctx.obj.config is None:
            return False
        return ConfigService(ctx.obj.project_root).update() is ConfigUpdateStatus.UPDATED


@click.command()
@click.option('--fix', is_flag=True, help='Attempt to fix issues automatically')
@click.option('--check', multiple=True,
              type=click.Choice(['all', 'install', 'tools', 'project', 'git', 'config']),
              default=['all'],
              help='Specific checks to run')
@click.pass_context
@config_optional
def doctor(ctx, fix, check):
    """Run system diagnostics

    Checks the dk installation, the external tools dk drives, and the
    health of the current project.

    Examples:

        # Run all checks
        dk doctor

        # Run specific checks
        dk doctor --check tools --check git

        # Attempt automatic fixes
        dk doctor --fix
    """
    console.print("[bold]dk Diagnostics[/bold]\n")

    all_checks = {
        'install': [InstallationCheck()],
        'tools': [
            ToolCheck("Git", "git"),
            ToolCheck("npm", os.environ.get(ENV_NPM_COMMAND, DEFAULT_NPM_COMMAND)),
            ToolCheck("GitHub CLI", os.environ.get(ENV_GH_COMMAND, DEFAULT_GH_COMMAND), required=False),
        ],
        'project': [ProjectCheck()],
        'git': [GitStatusCheck()],
        'config': [ConfigCheck()],
    }

    if 'all' in check:
        checks_to_run = [c for group in all_checks.values() for c in group]
    else:
        checks_to_run = [c for name in check for c in all_checks.get(name, [])]

    failed_checks = []
    for diagnostic_check in checks_to_run:
        diagnostic_check.run(ctx)
        if not diagnostic_check.passed:
            failed_checks.append(diagnostic_check)

    table = Table(title="Diagnostic Results", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for diagnostic_check in checks_to_run:
        if diagnostic_check.passed:
            status = "[green]✓ PASS[/green]"
        elif diagnostic_check.required:
            status = "[red]✗ FAIL[/red]"
        else:
            status = "[yellow]⚠ WARN[/yellow]"
        table.add_row(diagnostic_check.name, status, diagnostic_check.message)

    console.print(table)

    if fix and failed_checks:
        console.print("\n[yellow]Attempting automatic fixes...[/yellow]\n")

        for diagnostic_check in list(failed_checks):
            if not diagnostic_check.fixes:
                continue
            console.print(f"Fixing: {diagnostic_check.name}")
            if diagnostic_check.fix(ctx):
                console.print(f"[green]✓[/green] Fixed: {diagnostic_check.name}")
                failed_checks.remove(diagnostic_check)
            else:
                console.print(f"[red]✗[/red] Could not fix: {diagnostic_check.name}")
                for suggestion in diagnostic_check.fixes:
                    console.print(f"  → {suggestion}")

    blocking = [c for c in failed_checks if c.required]
    if blocking:
        console.print(f"\n[red]{len(blocking)} check(s) failed[/red]")
        if not fix:
            console.print("Run with --fix to attempt automatic fixes")
        ctx.exit(1)

    console.print("\n[green]All checks passed![/green]")
