"""Initialize command for creating dk.config.json"""

import json
from pathlib import Path
from typing import Optional

import click

from ..utils.interactive import InitWizard
from ..utils.output import console, print_error, print_warning
from ...constants import (
    EMOJI_INFO,
    EMOJI_ROCKET,
    EMOJI_SUCCESS,
    EMOJI_WARNING,
    FRONTEND_PROJECT_TYPES,
    ProjectType,
)
from ...core.project_detector import detect_project_type
from ...models.config import AssetsTypeGeneratorConfig, DKConfig
from ...services.config_service import ConfigService
from ...utils.file_utils import read_json, write_json


@click.command()
@click.option(
    '--type', '-t', 'project_type',
    type=click.Choice([t.value for t in ProjectType]),
    help='Project type to use when it cannot be detected'
)
@click.option(
    '--yes', '-y',
    is_flag=True,
    help='Accept detected values and defaults without prompting'
)
@click.option(
    '--no-vscode',
    is_flag=True,
    help='Do not touch .vscode/settings.json'
)
@click.pass_context
def init(ctx, project_type, yes, no_vscode):
    """Create dk.config.json for the current project

    The project type is detected from package.json dependencies and the
    directory layout. When detection fails you are asked to pick one.

    Examples:
        dk init
        dk init --yes
        dk init --type node-express
    """
    project_root = ctx.obj.project_root
    service = ConfigService(project_root)

    if service.exists():
        console.print(f"{EMOJI_INFO} dk.config.json already exists. No changes made.")
        return

    console.print(f"\n{EMOJI_ROCKET} Initializing dk project...")

    wizard = InitWizard(project_root, console=console, assume_yes=yes)

    selected = detect_project_type(project_root)
    if selected:
        console.print(f"{EMOJI_SUCCESS} Detected project type: {selected.value}")
    elif project_type:
        selected = ProjectType(project_type)
    elif yes:
        print_error("Unable to auto-detect project type. Pass --type to choose one.")
        ctx.exit(1)
    else:
        console.print(f"{EMOJI_WARNING} Unable to auto-detect project type.")
        selected = wizard.select_project_type()

    config = build_config(wizard, selected)

    written = service.write(config)

    if not no_vscode:
        try:
            write_vscode_settings(project_root, config.assets_type_generator)
            console.print(f"{EMOJI_INFO} VS Code settings configured with readonly includes")
        except (OSError, ValueError) as e:
            print_warning(f"Failed to create VS Code settings: {e}. You can configure them manually.")

    console.print(f"\n{EMOJI_SUCCESS} Created dk.config.json")
    console.print(f"Project type: {written.project_type.value}")
    if written.database:
        console.print(f"{EMOJI_INFO} Database configuration detected and added to config.")
    if written.spring_boot:
        console.print(f"{EMOJI_INFO} Spring Boot services detected and added to config.")
    if written.assets_type_generator:
        console.print(f"{EMOJI_INFO} Assets type generator configuration added to config.")


def build_config(wizard: InitWizard, project_type: ProjectType) -> DKConfig:
    """Collect the sections that apply to project_type"""
    config = DKConfig(project_type=project_type)

    if project_type is ProjectType.NODE_EXPRESS:
        config.database = wizard.configure_database()
    elif project_type is ProjectType.SPRING_BOOT_MICROSERVICE:
        config.spring_boot = wizard.configure_spring_boot()
    elif project_type in FRONTEND_PROJECT_TYPES:
        config.assets_type_generator = wizard.configure_assets(project_type)

    return config


def write_vscode_settings(project_root: Path,
                          assets_config: Optional[AssetsTypeGeneratorConfig] = None) -> Path:
    """Mark build output and the generated assets index as read-only in VS Code

    Existing settings are kept; an unparseable settings file is replaced.
    """
    vscode_dir = project_root / ".vscode"
    settings_path = vscode_dir / "settings.json"
    vscode_dir.mkdir(parents=True, exist_ok=True)

    settings = {}
    if settings_path.exists():
        try:
            loaded = read_json(settings_path)
            if isinstance(loaded, dict):
                settings = loaded
        except json.JSONDecodeError:
            pass

    readonly = settings.get("files.readonlyInclude")
    if not isinstance(readonly, dict):
        readonly = {
            "dist/**": True,
            "node_modules/**": True,
        }
        settings["files.readonlyInclude"] = readonly

    if assets_config:
        index_path = f"{assets_config.images_dir.rstrip('/')}/index.ts"
        readonly[index_path] = True

    write_json(settings_path, settings)
    return settings_path
