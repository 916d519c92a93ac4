"""Recursive comparison of two directory trees by structure, names and modification times."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field

MOD_TIME_TOLERANCE_NS = 2_000_000_000
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class _Entry:
    is_dir: bool
    mtime_ns: int


@dataclass
class ComparisonResult:
    """Differences found between two directory trees."""

    identical: bool = True
    only_in_dir1: list[str] = field(default_factory=list)
    only_in_dir2: list[str] = field(default_factory=list)
    mod_time_diffs: list[str] = field(default_factory=list)
    total_files: int = 0
    total_dirs: int = 0


def deep_compare(dir1: str | os.PathLike, dir2: str | os.PathLike) -> ComparisonResult:
    """Compare two directories recursively and return what differs."""
    abs_dir1 = os.path.abspath(dir1)
    abs_dir2 = os.path.abspath(dir2)
    for path in (abs_dir1, abs_dir2):
        if not os.path.lexists(path):
            raise FileNotFoundError(f"directory does not exist: {path}")

    result = ComparisonResult()
    _compare_directories(abs_dir1, abs_dir2, "", result)
    result.identical = not (
        result.only_in_dir1 or result.only_in_dir2 or result.mod_time_diffs
    )
    return result


def _read_entries(directory: str) -> dict[str, _Entry]:
    entries: dict[str, _Entry] = {}
    with os.scandir(directory) as scan:
        for entry in scan:
            stat = entry.stat(follow_symlinks=False)
            entries[entry.name] = _Entry(
                is_dir=entry.is_dir(follow_symlinks=False),
                mtime_ns=stat.st_mtime_ns,
            )
    return dict(sorted(entries.items()))


def _format_mtime(mtime_ns: int) -> str:
    return time.strftime(_TIME_FORMAT, time.localtime(mtime_ns / 1e9))


def _compare_directories(
    dir1: str, dir2: str, relative_path: str, result: ComparisonResult
) -> None:
    entries1 = _read_entries(dir1)
    entries2 = _read_entries(dir2)

    for entry in entries1.values():
        if entry.is_dir:
            result.total_dirs += 1
        else:
            result.total_files += 1

    for name, info1 in entries1.items():
        full_path = os.path.join(relative_path, name) if relative_path else name
        info2 = entries2.get(name)
        if info2 is None:
            result.only_in_dir1.append(full_path)
            continue

        if info1.is_dir != info2.is_dir:
            result.only_in_dir1.append(f"{full_path} (type mismatch)")
            result.only_in_dir2.append(f"{full_path} (type mismatch)")
            continue

        if info1.is_dir:
            _compare_directories(
                os.path.join(dir1, name), os.path.join(dir2, name), full_path, result
            )
        elif abs(info1.mtime_ns - info2.mtime_ns) > MOD_TIME_TOLERANCE_NS:
            result.mod_time_diffs.append(
                f"{full_path} (dir1: {_format_mtime(info1.mtime_ns)}, "
                f"dir2: {_format_mtime(info2.mtime_ns)})"
            )

    for name in entries2:
        if name not in entries1:
            full_path = os.path.join(relative_path, name) if relative_path else name
            result.only_in_dir2.append(full_path)


def print_result(result: ComparisonResult) -> None:
    """Print a detailed report of a comparison."""
    totals = f"Total files: {result.total_files}, Total directories: {result.total_dirs}"
    if result.identical:
        print("✅ Directories are identical!")
        print(totals)
        return

    print("❌ Directories have differences:")
    print(totals)
    print()

    sections = (
        ("📁 Files/directories only in first directory:", result.only_in_dir1),
        ("📁 Files/directories only in second directory:", result.only_in_dir2),
        ("⏰ Files with different modification times:", result.mod_time_diffs),
    )
    for heading, items in sections:
        if items:
            print(heading)
            for item in items:
                print(f"  - {item}")
            print()