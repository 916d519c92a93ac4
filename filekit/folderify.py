"""Move each file into a folder named after it, minus its extension."""

from __future__ import annotations

import os


def process_directory(directory: str | os.PathLike, recursive: bool = False) -> int:
    """Folderify the files of a directory and return how many were moved."""
    abs_dir = os.path.abspath(directory)
    if recursive:
        return _process_recursively(abs_dir)
    return _process_files(_list_entries(abs_dir)[1])


def _list_entries(directory: str) -> tuple[list[str], list[str]]:
    dirs: list[str] = []
    files: list[str] = []
    with os.scandir(directory) as scan:
        for entry in sorted(scan, key=lambda e: e.name):
            target = dirs if entry.is_dir(follow_symlinks=False) else files
            target.append(os.path.join(directory, entry.name))
    return dirs, files


def _process_recursively(directory: str) -> int:
    # The listing is taken before any folder is created so new folders are not revisited.
    dirs, files = _list_entries(directory)
    total = _process_files(files)
    for sub_dir in dirs:
        total += _process_recursively(sub_dir)
    return total


def _process_files(files: list[str]) -> int:
    for file_path in files:
        folderify_file(file_path)
    return len(files)


def _extension(filename: str) -> str:
    index = filename.rfind(".")
    return filename[index:] if index >= 0 else ""


def folderify_file(file_path: str | os.PathLike) -> str:
    """Move a file into a new folder named after it; return the new path."""
    file_path = os.fspath(file_path)
    parent = os.path.dirname(file_path)
    filename = os.path.basename(file_path)
    ext = _extension(filename)
    stem = filename[: len(filename) - len(ext)]
    if not stem:
        raise ValueError(f"cannot create folder for file with empty name: {filename}")

    folder_path = os.path.join(parent, stem)
    os.makedirs(folder_path, mode=0o755, exist_ok=True)
    new_path = os.path.join(folder_path, filename)
    os.rename(file_path, new_path)
    print(f"Moved: {file_path} -> {new_path}")
    return new_path