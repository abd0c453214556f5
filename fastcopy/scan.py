import os
from enum import Enum
from pathlib import Path
from typing import Callable, List

from .errors import CopyToolError, DirectoryUnreadable, report_error
from .extensions import is_allowed

class EntryKind(Enum):
    ELIGIBLE_FILE = "eligible_file"
    INELIGIBLE_FILE = "ineligible_file"
    DIRECTORY = "directory"
    OTHER = "other"

def classify_entry(name: str, is_file: bool, is_dir: bool) -> EntryKind:
    """
    Decision table for one directory entry. Files are judged by extension only;
    directories are always descended into; anything else (broken links,
    sockets, fifos) is ignored.
    """
    if is_file:
        return EntryKind.ELIGIBLE_FILE if is_allowed(name) else EntryKind.INELIGIBLE_FILE
    if is_dir:
        return EntryKind.DIRECTORY
    return EntryKind.OTHER

def _list_dir(dir_path: Path, report: Callable[[CopyToolError], None]) -> List[os.DirEntry]:
    entries = []
    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                entries.append(entry)
    except OSError as e:
        report(DirectoryUnreadable(dir_path, e))
    return sorted(entries, key=lambda e: e.name)

def scan(root, report: Callable[[CopyToolError], None] = report_error) -> List[Path]:
    """Return every eligible file under root, depth-first in name order."""
    found: List[Path] = []
    pending = [Path(root)]
    while pending:
        current = pending.pop()
        subdirs = []
        for entry in _list_dir(current, report):
            path = Path(entry.path)
            # os.path checks follow symlinks and read any stat error as "neither"
            kind = classify_entry(entry.name, os.path.isfile(entry.path), os.path.isdir(entry.path))
            if kind is EntryKind.ELIGIBLE_FILE:
                found.append(path)
            elif kind is EntryKind.DIRECTORY:
                subdirs.append(path)
        pending.extend(reversed(subdirs))
    return found
