"""External command execution"""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Exit status reported when the executable itself cannot be started
COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Outcome of a single external command"""
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    argv: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandRunner:
    """Interface for running external commands.

    Every git, npm and gh invocation in dk goes through ``run`` so the
    callers can be exercised against a scripted runner in tests.
    """

    def run(self, argv: Sequence[str], cwd: Optional[Union[str, Path]] = None) -> CommandResult:
        raise NotImplementedError


class SubprocessRunner(CommandRunner):
    """Runs commands with :mod:`subprocess`, waiting for each to finish.

    No timeout is applied: long installs block until they complete.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None):
        self.cwd = Path(cwd) if cwd else None

    def run(self, argv: Sequence[str], cwd: Optional[Union[str, Path]] = None) -> CommandResult:
        argv = [str(a) for a in argv]
        work_dir = cwd or self.cwd
        logger.debug("Running %s (cwd=%s)", " ".join(argv), work_dir or ".")

        try:
            completed = subprocess.run(
                argv,
                cwd=work_dir,
                capture_output=True,
                text=True
            )
        except FileNotFoundError:
            logger.debug("Executable not found: %s", argv[0])
            return CommandResult(
                exit_code=COMMAND_NOT_FOUND,
                stderr=f"{argv[0]}: command not found",
                argv=argv
            )
        except OSError as e:
            logger.debug("Failed to start %s: %s", argv[0], e)
            return CommandResult(exit_code=COMMAND_NOT_FOUND, stderr=str(e), argv=argv)

        result = CommandResult(
            exit_code=completed.returncode,
            stdout=(completed.stdout or "").strip(),
            stderr=(completed.stderr or "").strip(),
            argv=argv
        )
        logger.debug("%s exited with %d", argv[0], result.exit_code)
        return result
