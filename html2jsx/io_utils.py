"""Utility helpers for file IO and console messages."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

STDIN_MARKER = "-"


def read_markup(source: PathLike) -> str:
    """Read markup from a file, or from stdin when ``source`` is ``-``."""
    if str(source) == STDIN_MARKER:
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input HTML not found: {path}")
    return path.read_text(encoding="utf-8")


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
