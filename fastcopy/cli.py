import argparse, os, sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .copier import copy_files
from .errors import CopyToolError, DestinationRootUncreatable, InvalidArguments, report_error
from .scan import scan

PROG = "fastcopy"
DESCRIPTION = (
    "Copy files recursively from SOURCE to DEST as fast as possible. "
    "Preserves directory structure and traverses symlinks."
)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        usage=f"{PROG} SOURCE DEST",
        add_help=False,
    )
    ap.add_argument("source", metavar="SOURCE", help="Directory to copy from")
    ap.add_argument("dest", metavar="DEST", help="Directory to copy into (created if missing)")
    return ap

def parse_cli(argv: List[str]) -> Tuple[Path, Path]:
    """
    Exactly two arguments, both taken as paths even if they start with '-'.
    Relative paths are anchored at the current directory.
    """
    if len(argv) != 2:
        raise InvalidArguments()
    source, destination = argv
    return Path(os.path.abspath(source)), Path(os.path.abspath(destination))

def print_help() -> None:
    print()
    print(build_parser().format_help())

def summary(copied: int, total: int) -> str:
    return f"Copied {copied} of {total} files."

def run(source: Path, destination: Path,
        report: Callable[[CopyToolError], None] = report_error) -> Tuple[int, int]:
    files = scan(source, report)
    copied = copy_files(source, destination, files, report)
    return copied, len(files)

def main(argv: Optional[List[str]] = None) -> int:
    print(f"\nStarting {PROG}")
    try:
        source, destination = parse_cli(sys.argv[1:] if argv is None else argv)
    except InvalidArguments as e:
        print_help()
        print(e)
        return 2

    root_failed = False
    def report(err: CopyToolError) -> None:
        nonlocal root_failed
        if isinstance(err, DestinationRootUncreatable):
            root_failed = True
        report_error(err)

    copied, total = run(source, destination, report)
    print(summary(copied, total) + "\n")
    return 1 if root_failed else 0

if __name__ == "__main__":
    sys.exit(main())
