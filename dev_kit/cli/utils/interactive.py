"""Interactive utilities for CLI commands"""

from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

from ...constants import (
    DEFAULT_IMAGES_DIRS,
    PROJECT_TYPE_LABELS,
    DatabaseType,
    ImageNameCase,
    InfoComment,
    ProjectType,
)
from ...core.database_detector import detect_database_config
from ...core.project_detector import find_service_directories
from ...models.config import (
    AssetsTypeGeneratorConfig,
    DatabaseConfig,
    SpringBootConfig,
    SpringBootService,
)


def select_from_list(console: Console, title: str, options: List[str],
                     labels: Optional[List[str]] = None, default: int = 1) -> str:
    """Show a numbered list and return the chosen option"""
    labels = labels or options
    console.print(f"\n[bold]{title}[/bold]")
    for i, label in enumerate(labels, 1):
        console.print(f"  {i}. {label}")

    choices = [str(i) for i in range(1, len(options) + 1)]
    choice = Prompt.ask("Select", choices=choices, default=str(default), console=console)
    return options[int(choice) - 1]


class InitWizard:
    """Collects the optional config sections for ``dk init``.

    Nothing is written here; the caller persists the answers once every
    prompt has been answered, so an interrupted wizard leaves no files.
    When ``assume_yes`` is set no prompt is shown and defaults are used.
    """

    def __init__(self, project_root: Path, console: Console = None, assume_yes: bool = False):
        self.project_root = project_root
        self.console = console or Console()
        self.assume_yes = assume_yes

    def _confirm(self, question: str, default: bool = True) -> bool:
        if self.assume_yes:
            return default
        return Confirm.ask(question, default=default, console=self.console)

    def select_project_type(self) -> ProjectType:
        types = list(ProjectType)
        return ProjectType(select_from_list(
            self.console,
            "Select your project type:",
            [t.value for t in types],
            [PROJECT_TYPE_LABELS[t] for t in types]
        ))

    def configure_database(self) -> Optional[DatabaseConfig]:
        """Detect database settings and ask for whatever could not be derived"""
        config = detect_database_config(self.project_root)
        if config is None:
            return None

        if config.db_url_env_name and not config.db_type and not self.assume_yes:
            self.console.print("[yellow]Found database URL but couldn't determine database type.[/yellow]")
            config.db_type = DatabaseType(select_from_list(
                self.console,
                "What type of database are you using?",
                [t.value for t in DatabaseType],
                ["MySQL", "PostgreSQL", "SQLite", "MongoDB"]
            ))

        if config.db_url_env_name and not config.db_name and not self.assume_yes:
            db_name = ""
            while not db_name:
                db_name = Prompt.ask("What is your database name?", console=self.console).strip()
                if not db_name:
                    self.console.print("[red]Database name cannot be empty[/red]")
            config.db_name = db_name

        return config

    def configure_spring_boot(self) -> Optional[SpringBootConfig]:
        """Pick services and their starting order"""
        candidates = find_service_directories(self.project_root)
        if not candidates:
            self.console.print("[yellow]No Spring Boot services detected in current directory.[/yellow]")
            return None

        self.console.print(f"Found {len(candidates)} potential Spring Boot services:")
        for name in candidates:
            self.console.print(f"  - {name}")

        if not self._confirm("Would you like to configure these services for management?"):
            return None

        services = []
        for index, name in enumerate(candidates):
            if not self._confirm(f"Include {name} in configuration?"):
                continue

            order = index
            if not self.assume_yes:
                order = IntPrompt.ask(
                    f"Starting order for {name} (0-based index)",
                    default=index,
                    console=self.console
                )
                while order < 0:
                    self.console.print("[red]Starting order must be 0 or greater[/red]")
                    order = IntPrompt.ask(
                        f"Starting order for {name} (0-based index)",
                        default=index,
                        console=self.console
                    )

            services.append(SpringBootService(name=name, path=name, starting_order_index=order))

        if not services:
            return None

        config = SpringBootConfig(services=services)
        config.services = config.launch_order()
        return config

    def configure_assets(self, project_type: ProjectType) -> Optional[AssetsTypeGeneratorConfig]:
        """Ask for image type generator settings"""
        if not self._confirm("Would you like to configure automatic image type generation?"):
            return None

        existing = "src/assets/images"
        if (self.project_root / existing).is_dir():
            default_dir = existing
        else:
            default_dir = DEFAULT_IMAGES_DIRS.get(project_type, existing)

        if self.assume_yes:
            return AssetsTypeGeneratorConfig(images_dir=default_dir)

        images_dir = ""
        while not images_dir:
            images_dir = Prompt.ask(
                "Enter the path to your images directory",
                default=default_dir,
                console=self.console
            ).strip()
            if not images_dir:
                self.console.print("[red]Images directory path cannot be empty[/red]")

        image_name_case = select_from_list(
            self.console,
            "How would you like image files to be named?",
            [c.value for c in ImageNameCase],
            ["kebab-case (my-image.png)", "snake_case (my_image.png)", "any (keep original names)"]
        )
        info_comment = select_from_list(
            self.console,
            "How would you like the info comment in generated index.ts?",
            [InfoComment.SHORT_INFO.value, InfoComment.HIDDEN.value],
            ["Short info comment (default)", "Hidden (no comment)"]
        )

        return AssetsTypeGeneratorConfig(
            images_dir=images_dir,
            image_name_case=ImageNameCase(image_name_case),
            info_comment=InfoComment(info_comment)
        )
