from __future__ import annotations

from pathlib import Path
from typing import Union


class ReportError(Exception):
    """Base class for failures that abort a report run."""


class UsageError(ReportError):
    """Raised when the command line does not match --TASK=<integer>."""


class FileOpenError(ReportError):
    """Raised when an input file cannot be read or the output cannot be created."""

    def __init__(self, path: Union[str, Path], message: str = "") -> None:
        self.path = Path(path)
        super().__init__(message or f"Could not open file {path}")


class InvalidTaskError(ReportError):
    """Raised when a task identifier has no report variant."""

    def __init__(self, task: int) -> None:
        self.task = task
        super().__init__(f"Invalid task number: {task}")
