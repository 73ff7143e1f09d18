"""Progress reporting interface"""

from typing import Optional


class Reporter:
    """Receives user-facing progress events from core operations.

    The base class discards everything; the CLI passes a console-backed
    subclass and tests pass one that records events.
    """

    def step(self, message: str) -> None:
        """A pipeline step is starting"""

    def info(self, message: str, detail: Optional[str] = None) -> None:
        pass

    def success(self, message: str, detail: Optional[str] = None) -> None:
        pass

    def warning(self, message: str, detail: Optional[str] = None) -> None:
        pass

    def error(self, message: str, detail: Optional[str] = None) -> None:
        pass
