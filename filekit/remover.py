"""Find files by a shell-style name pattern and delete them."""

from __future__ import annotations

import functools
import os
import re
import stat
from collections.abc import Iterable, Iterator


class DeletionError(OSError):
    """Raised when some of the requested files could not be deleted."""

    def __init__(self, deleted: int, failures: list[str]) -> None:
        super().__init__("some files could not be deleted:\n" + "\n".join(failures))
        self.deleted = deleted
        self.failures = failures


def _bad_pattern(pattern: str) -> ValueError:
    return ValueError(f"invalid pattern '{pattern}': syntax error in pattern")


def _class_char(pattern: str, index: int) -> tuple[str, int]:
    if index >= len(pattern) or pattern[index] in "-]":
        raise _bad_pattern(pattern)
    char = pattern[index]
    if char == "\\":
        index += 1
        if index >= len(pattern):
            raise _bad_pattern(pattern)
        char = pattern[index]
    return char, index + 1


def _translate_class(pattern: str, index: int) -> tuple[str, int]:
    negate = index < len(pattern) and pattern[index] == "^"
    if negate:
        index += 1
    ranges: list[str] = []
    seen = 0
    while True:
        if index < len(pattern) and pattern[index] == "]" and seen:
            index += 1
            break
        low, index = _class_char(pattern, index)
        high = low
        if index < len(pattern) and pattern[index] == "-":
            high, index = _class_char(pattern, index + 1)
        seen += 1
        # A reversed range is legal but matches nothing.
        if low <= high:
            ranges.append(f"{re.escape(low)}-{re.escape(high)}")
    if not ranges:
        return ("." if negate else "(?!)"), index
    return f"[{'^' if negate else ''}{''.join(ranges)}]", index


def _translate(pattern: str) -> str:
    parts: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "*":
            parts.append("[^/]*")
            index += 1
        elif char == "?":
            parts.append("[^/]")
            index += 1
        elif char == "[":
            translated, index = _translate_class(pattern, index + 1)
            parts.append(translated)
        elif char == "\\":
            if index + 1 >= len(pattern):
                raise _bad_pattern(pattern)
            parts.append(re.escape(pattern[index + 1]))
            index += 2
        else:
            parts.append(re.escape(char))
            index += 1
    return "".join(parts)


@functools.lru_cache(maxsize=128)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(_translate(pattern), re.DOTALL)


def match_pattern(pattern: str, name: str) -> bool:
    """Report whether ``name`` matches the shell pattern; ValueError if it is malformed.

    ``*`` matches any run of characters except ``/``, ``?`` one such character,
    ``[...]`` a character class with ranges and ``^`` negation, and ``\\`` escapes.
    """
    return _compile(pattern).fullmatch(name) is not None


def _walk_files(root: str) -> Iterator[str]:
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        yield root
        return
    for name in sorted(os.listdir(root)):
        yield from _walk_files(os.path.join(root, name))


def find_matching_files(
    directory: str | os.PathLike, pattern: str, recursive: bool = False
) -> list[str]:
    """Return the paths of files in ``directory`` whose names match ``pattern``."""
    directory = os.fspath(directory)
    if recursive:
        return [
            path
            for path in _walk_files(directory)
            if match_pattern(pattern, os.path.basename(path))
        ]

    matches: list[str] = []
    with os.scandir(directory) as scan:
        for entry in sorted(scan, key=lambda e: e.name):
            if not entry.is_dir(follow_symlinks=False) and match_pattern(pattern, entry.name):
                matches.append(os.path.join(directory, entry.name))
    return matches


def delete_files(files: Iterable[str | os.PathLike]) -> int:
    """Delete every file given and return how many were removed.

    Raises DeletionError, carrying the count, if any deletion failed.
    """
    deleted = 0
    failures: list[str] = []
    for path in files:
        try:
            os.remove(path)
        except OSError as exc:
            failures.append(f"failed to delete {os.fspath(path)}: {exc}")
        else:
            deleted += 1
    if failures:
        raise DeletionError(deleted, failures)
    return deleted