"""Extract RAR archives next to themselves with the external ``unrar`` tool."""

from __future__ import annotations

import os
import stat
import subprocess
from collections.abc import Iterator

UNRAR_COMMAND = "unrar"


class UnrarError(Exception):
    """Raised when an archive cannot be extracted or the tool is missing."""


def _is_rar(name: str) -> bool:
    return name.lower().endswith(".rar")


def unrar_file(rar_path: str | os.PathLike) -> None:
    """Extract one RAR archive into the directory that holds it."""
    rar_path = os.fspath(rar_path)
    if not os.path.exists(rar_path):
        raise FileNotFoundError(f"file does not exist: {rar_path}")
    if not _is_rar(rar_path):
        raise UnrarError(f"file is not a RAR file: {rar_path}")

    destination = os.path.dirname(rar_path) + "/"
    print(f"Extracting: {rar_path}", flush=True)
    try:
        completed = subprocess.run(
            [UNRAR_COMMAND, "x", "-o+", rar_path, destination], check=False
        )
    except OSError as exc:
        raise UnrarError(f"failed to extract {rar_path}: {exc}") from exc
    if completed.returncode != 0:
        raise UnrarError(
            f"failed to extract {rar_path}: exit status {completed.returncode}"
        )
    print(f"Successfully extracted: {rar_path}")


def _walk_files(root: str) -> Iterator[str]:
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


def _top_level_files(directory: str) -> Iterator[str]:
    with os.scandir(directory) as scan:
        entries = sorted(scan, key=lambda e: e.name)
    for entry in entries:
        if not entry.is_dir(follow_symlinks=False):
            yield os.path.join(directory, entry.name)


def process_directory(dir_path: str | os.PathLike, recursive: bool = False) -> int:
    """Extract the RAR archives in a directory; return how many succeeded.

    Only the directory's own files are looked at unless ``recursive`` is set.
    A failed archive is reported as a warning and does not stop the others.
    """
    dir_path = os.fspath(dir_path)
    paths = _walk_files(dir_path) if recursive else _top_level_files(dir_path)
    count = 0
    for path in paths:
        if not _is_rar(os.path.basename(path)):
            continue
        try:
            unrar_file(path)
        except (UnrarError, OSError) as exc:
            print(f"Warning: {exc}")
        else:
            count += 1
    return count


def check_unrar_installed() -> None:
    """Raise UnrarError if the ``unrar`` command cannot be found."""
    try:
        subprocess.run(
            [UNRAR_COMMAND],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError as exc:
        raise UnrarError("unrar command not found - please install unrar utility") from exc
    except OSError:
        return