"""Filesystem collaborators used by the loader and the evaluator."""

from __future__ import annotations

from pathlib import Path


def directory_exists(path: Path) -> bool:
    return path.is_dir()


def file_exists(path: Path) -> bool:
    return path.is_file()


def list_files_matching(directory: Path, suffix: str) -> list[str]:
    """Return names of regular files in ``directory`` ending with ``suffix``, suffix stripped.

    Names are sorted so discovery order does not depend on the host's
    directory listing order. A file named exactly ``suffix`` is ignored.
    """
    names = [
        path.name[: -len(suffix)]
        for path in directory.iterdir()
        if path.is_file() and path.name.endswith(suffix) and len(path.name) > len(suffix)
    ]
    return sorted(names)


def read_file(path: Path) -> str:
    """Return the UTF-8 text of ``path``; OSError and UnicodeDecodeError propagate unchanged."""
    return path.read_text(encoding="utf-8")


def current_working_directory() -> Path:
    return Path.cwd()
