from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def make_tree(root: Path, files: dict) -> None:
    for rel, data in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)


@pytest.fixture
def source_tree(tmp_path):
    src = tmp_path / "src"
    make_tree(src, {
        "a.txt": b"alpha\n",
        "b.jpg": b"\xff\xd8\xff",
        "sub/c.csv": b"x,y\n1,2\n",
        "sub/deeper/d.json": b'{"k": 1}',
        "sub/deeper/README": b"no extension",
        ".hidden": b"dotfile",
        "e.TXT": b"upper case extension",
        "f.tar.gz": b"\x1f\x8b",
    })
    return src
