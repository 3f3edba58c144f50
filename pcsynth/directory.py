"""Filesystem helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO


def create_directory_for_path(path: str | os.PathLike[str]) -> None:
    """Create the parent directories of ``path`` if they do not exist yet."""
    parent = Path(path).parent
    if str(parent) in ("", ".") or parent.is_dir():
        return
    parent.mkdir(parents=True, exist_ok=True)


def print_current_dir(stream: TextIO | None = None) -> None:
    """Write the quoted current working directory to ``stream``."""
    out = sys.stdout if stream is None else stream
    out.write(f'"{os.getcwd()}"\n')