"""Rename files by replacing a substring in their names."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator


def _walk_files(root: str) -> Iterator[str]:
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


def replace_in_filenames(
    directory: str | os.PathLike, target: str, replace_with: str = ""
) -> int:
    """Replace ``target`` with ``replace_with`` in every file name below ``directory``.

    Directories keep their names. Returns the number of files renamed.
    """
    count = 0
    for path in _walk_files(os.fspath(directory)):
        filename = os.path.basename(path)
        if target not in filename:
            continue
        new_filename = filename.replace(target, replace_with)
        os.rename(path, os.path.join(os.path.dirname(path), new_filename))
        print(f"Renamed: {filename} -> {new_filename}")
        count += 1
    return count