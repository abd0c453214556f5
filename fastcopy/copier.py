import shutil
from pathlib import Path
from typing import Callable, Iterable

from .errors import (
    CopyFailed,
    CopyToolError,
    DestinationParentUncreatable,
    DestinationRootUncreatable,
    SourceEqualsDestination,
    report_error,
)


def destination_for(path, source, destination) -> Path:
    """Re-root path (which lies under source) beneath destination."""
    return Path(destination) / Path(path).relative_to(source)


def _same_file(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return a == b


def copy_files(source, destination, files: Iterable,
               report: Callable[[CopyToolError], None] = report_error) -> int:
    """
    Copy each file in files from under source to the same relative location
    under destination. Returns how many copies succeeded; a file that fails is
    reported and skipped. Failing to create destination itself copies nothing.
    """
    source, destination = Path(source), Path(destination)
    copied = 0

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        report(DestinationRootUncreatable(destination, e))
        return copied

    for src in files:
        src = Path(src)
        dst = destination_for(src, source, destination)

        if _same_file(src, dst):
            report(SourceEqualsDestination(src))
            continue

        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            report(DestinationParentUncreatable(dst, e))
            continue

        try:
            shutil.copyfile(src, dst)
        except OSError as e:
            report(CopyFailed(src, e))
            continue
        copied += 1

    return copied
