#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates / refreshes the fixture tree used by the resub
test-suite.

Idempotent and 100 % Python. Tests call `build(root)` on a temporary
directory; running the script rebuilds ``test-fixtures/`` at the repo root.
"""
from __future__ import annotations

import shutil
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()

# relative path → content
FILES = {
    "a.txt": "foo bar foo",
    "x.txt": "hello x",
    "x.log": "hello log",
    "date.txt": "2023-01-05",
    "crlf.txt": "foo\r\nbar\r\nfoo\r\n",
    "sub/b.txt": "foo in sub",
    "sub/.secret.txt": "foo secret",
    "sub/deeper/c.txt": "foo deep",
    ".hidden/h.txt": "foo hidden",
    ".dot.txt": "foo dot",
}

# Files visible without -a, with their depth below the root.
VISIBLE_DEPTHS = {
    "a.txt": 0,
    "x.txt": 0,
    "x.log": 0,
    "date.txt": 0,
    "crlf.txt": 0,
    "sub/b.txt": 1,
    "sub/deeper/c.txt": 2,
    "bin/latin1.txt": 1,
}


# ────────────────────────── utilities ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(body.encode("utf-8"))


def build(root: Path) -> Path:
    """Populate *root* with the fixture files and return it."""
    for rel, body in FILES.items():
        _write(root / rel, body)
    (root / "bin").mkdir(parents=True, exist_ok=True)
    # Not valid UTF-8: every run must skip it without failing.
    (root / "bin" / "latin1.txt").write_bytes("café foo".encode("latin-1"))
    return root


def snapshot(root: Path) -> dict[str, bytes]:
    """Return {relative posix path: bytes} for every file under *root*."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ──────────────────────────── main ────────────────────────────
def main() -> None:  # pragma: no cover
    if ROOT.exists():
        shutil.rmtree(ROOT)
    print(f"Rebuilding fixture tree → {ROOT}")
    build(ROOT)
    print("Fixture tree READY")


if __name__ == "__main__":  # pragma: no cover
    main()
