"""Locating and reading shader source files."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["find_shader_file", "read_shader_file"]


def find_shader_file(target_file_name: str, start: str | os.PathLike[str] | None = None) -> Path | None:
    """Search ``start`` recursively for a file named ``target_file_name``.

    ``start`` defaults to the parent of the current working directory.
    Returns the first match in a deterministic top-down walk, or None.
    """
    root = Path(start) if start is not None else Path.cwd().parent
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            if name == target_file_name:
                return Path(dirpath) / name
    return None


def read_shader_file(target_file_name: str, start: str | os.PathLike[str] | None = None) -> str:
    """Find a shader file by name under ``start`` and return its text.

    Raises FileNotFoundError when no such file exists.
    """
    path = find_shader_file(target_file_name, start)
    if path is None:
        raise FileNotFoundError(f"Failed to open shader file: {target_file_name}")
    return path.read_text(encoding="utf-8")