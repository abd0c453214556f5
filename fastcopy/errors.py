"""Diagnostics raised or reported by the scanner, copier and CLI."""
from pathlib import Path
from typing import Optional, Union


def _reason(cause) -> str:
    if cause is None:
        return "unknown error"
    if isinstance(cause, str):
        return cause
    return getattr(cause, "strerror", None) or type(cause).__name__


class CopyToolError(Exception):
    action = "process"

    def __init__(self, path: Union[str, Path, None] = None, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Unable to {self.action} {self.path}: {_reason(self.cause)}"


class DirectoryUnreadable(CopyToolError):
    action = "read contents of"


class DestinationRootUncreatable(CopyToolError):
    action = "create"


class DestinationParentUncreatable(CopyToolError):
    action = "create"


class SourceEqualsDestination(CopyToolError):
    action = "copy"

    def __str__(self) -> str:
        return f"Unable to {self.action} {self.path}: SOURCE is DEST"


class CopyFailed(CopyToolError):
    action = "copy"


class InvalidArguments(CopyToolError):
    def __str__(self) -> str:
        return "The only allowed parameters are SOURCE and DEST."


def report_error(err: CopyToolError) -> None:
    print(err)
