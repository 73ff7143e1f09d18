"""Git helper commands"""

import click
from rich.prompt import Confirm

from ..utils.interactive import select_from_list
from ..utils.output import console, format_table, print_warning
from ...constants import EMOJI_ERROR, EMOJI_GLOBE, EMOJI_FOLDER, EMOJI_SUCCESS, EMOJI_WRENCH
from ...utils.git_utils import GitClient

IGNORECASE_KEY = "core.ignorecase"


@click.group()
def git():
    """Git configuration helpers"""
    pass


@git.command()
@click.option('--scope', type=click.Choice(['global', 'local', 'both']),
              help='Which configuration to fix (asked interactively when omitted)')
@click.pass_context
def fix(ctx, scope):
    """Set core.ignorecase to false

    Case-insensitive file systems hide renames that only change letter
    case; turning ignorecase off makes git track them.
    """
    console.print(f"\n{EMOJI_WRENCH} [bold]Git Configuration Fix[/bold]")
    client = GitClient(cwd=ctx.obj.project_root)

    is_repo = client.is_repository()
    if not is_repo:
        print_warning("Not in a git repository. Local configuration will be skipped.")

    current_global = client.get_config(IGNORECASE_KEY, global_scope=True)
    current_local = client.get_config(IGNORECASE_KEY) if is_repo else None
    _show_settings(current_global, current_local, is_repo)

    needs_global = current_global != "false"
    needs_local = is_repo and current_local != "false"

    if not needs_global and not needs_local:
        console.print(f"{EMOJI_SUCCESS} No fixes needed! core.ignorecase is already false.")
        return

    available = []
    if needs_global:
        available.append("global")
    if needs_local:
        available.append("local")

    if scope:
        scopes = ["global", "local"] if scope == "both" else [scope]
    elif len(available) == 1:
        if not Confirm.ask(f"Fix {available[0]} git configuration?", default=True, console=console):
            console.print("Cancelled.")
            return
        scopes = available
    else:
        choice = select_from_list(
            console,
            "Which configuration would you like to fix?",
            ["global", "local", "both"],
            [
                f"{EMOJI_GLOBE} Global (affects all repositories)",
                f"{EMOJI_FOLDER} Local (current repository only)",
                "Both global and local",
            ],
            default=3
        )
        scopes = ["global", "local"] if choice == "both" else [choice]

    applied, failed = [], []
    for item in scopes:
        if item == "local" and not is_repo:
            failed.append("local (not in git repository)")
            continue
        if client.set_config(IGNORECASE_KEY, "false", global_scope=(item == "global")):
            applied.append(item)
        else:
            failed.append(item)

    if applied:
        console.print(f"{EMOJI_SUCCESS} core.ignorecase set to false for: {', '.join(applied)}")
    if failed:
        console.print(f"{EMOJI_ERROR} Failed to set configuration for: {', '.join(failed)}")

    final_global = client.get_config(IGNORECASE_KEY, global_scope=True)
    final_local = client.get_config(IGNORECASE_KEY) if is_repo else None
    _show_settings(final_global, final_local, is_repo)

    if not applied:
        ctx.exit(1)


def _show_settings(global_value, local_value, is_repo: bool) -> None:
    rows = [{"scope": "global", "value": global_value or "not set"}]
    if is_repo:
        rows.append({"scope": "local", "value": local_value or "not set"})
    console.print(format_table(rows, [("scope", "Scope"), ("value", "core.ignorecase")]))
