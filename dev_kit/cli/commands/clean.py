"""Clean command for removing build artifacts"""

import click
from rich.prompt import Confirm

from ..utils.interactive import select_from_list
from ..utils.output import ConsoleReporter, console, format_clean_result, print_error
from ...constants import EMOJI_BROOM, EMOJI_FILE, EMOJI_FOLDER, EMOJI_INFO, EMOJI_SUCCESS, CleanMode
from ...services.clean_service import CleanService


@click.command()
@click.argument('target', required=False, type=click.Choice(['nm', 'node_modules']))
@click.option('--mode', '-m', type=click.Choice([m.value for m in CleanMode]),
              help='What to clean (default: all for React Native projects, node otherwise)')
@click.option('--dry-run', is_flag=True, help='Show what would be removed without deleting')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def clean(ctx, target, mode, dry_run, yes):
    """Remove build artifacts and temporary files

    \b
    Examples:
        dk clean
        dk clean nm              # also wipe node_modules
        dk clean --mode rn-android
        dk clean --dry-run
    """
    service = CleanService(ctx.obj.project_root, reporter=ConsoleReporter())
    node_modules_removed = False

    if target:
        console.print(f"\n{EMOJI_BROOM} [bold]Node Modules Cleanup[/bold]")
        try:
            node_modules_removed = service.remove_node_modules(dry_run=dry_run)
        except OSError as e:
            print_error("Error deleting node_modules", e)
            ctx.exit(1)

        if dry_run:
            console.print(f"{EMOJI_SUCCESS} Dry-run: node_modules would be deleted.")
        elif node_modules_removed:
            console.print(f"{EMOJI_SUCCESS} node_modules deleted successfully!")

    console.print(f"\n{EMOJI_BROOM} [bold]Project Cleanup[/bold]")

    rn_detected = service.is_react_native()
    if mode:
        clean_mode = CleanMode(mode)
    elif rn_detected and not yes:
        clean_mode = CleanMode(select_from_list(
            console,
            "React Native project detected. What would you like to clean?",
            [m.value for m in CleanMode],
            [
                "Clean all (Node + RN Android + RN iOS)",
                "Clean Node project only",
                "Clean RN Android only",
                "Clean RN iOS only",
            ]
        ))
    else:
        clean_mode = service.default_mode()

    entries = service.expand(service.items_for_mode(clean_mode))

    if not entries:
        console.print(f"{EMOJI_INFO} Nothing to clean for this mode.")
        return

    console.print(f"{EMOJI_INFO} Found items to clean:\n")
    for entry in entries:
        icon = EMOJI_FOLDER if entry.is_dir else EMOJI_FILE
        console.print(f"  {icon} {entry.path}")
    console.print("")

    if not yes:
        question = (
            "Proceed with dry-run (no files will be deleted)?"
            if dry_run else "Delete the items above?"
        )
        if not Confirm.ask(question, default=True, console=console):
            console.print(f"{EMOJI_INFO} Cancelled.")
            return

    result = service.clean(entries, clean_mode, dry_run=dry_run)
    result.node_modules_removed = node_modules_removed

    if dry_run:
        console.print(f"\n{EMOJI_SUCCESS} Dry-run completed. No files were deleted.")
    else:
        console.print(f"\n{EMOJI_SUCCESS} Cleanup completed successfully!")

    format_clean_result(result)
