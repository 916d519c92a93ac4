"""Command-line entry point: dispatches to the file utilities."""

from __future__ import annotations

import functools
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from filekit import compare, folderify, generator, remover, rename, unrar

PROGRAM = "filekit"

_USAGE = f"""\
Usage: {PROGRAM} <cmd> <flags> [directory]

Available commands:
  rename-replace -target="" [-replaceWith=""] [directory]
    Renames all files by replacing target string with replaceWith string (or removes target if replaceWith not specified)

  create-rand-files -depth=num -count=num [directory]
    Creates random txt files with random names in the specified directory

  folderify [-recursive] [directory]
    Creates folders with file names (minus extension) and moves files into them
    Use -recursive to process subdirectories

  deep-compare [-verbose] <directory1> <directory2>
    Compares two directories recursively by structure, file names, and modification times
    Use -verbose for detailed comparison results

  unrar <rar_file_or_directory> [-r]
    Extracts RAR files to their containing directories
    Use -r for recursive processing when target is a directory

  remove-files <directory> -pattern="*.ext" [-recursive]
    Removes files matching the specified pattern
    Shows confirmation before deletion. Use -recursive to process subdirectories"""

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


class _Exit(Exception):
    """Ends a command with the given exit status."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


class _FlagError(Exception):
    pass


class _HelpRequested(Exception):
    pass


@dataclass(frozen=True)
class _Flag:
    name: str
    default: bool | int | str
    usage: str


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(text)


class _FlagSet:
    """Single-dash flags that end at the first positional argument."""

    def __init__(self, command: str, *flags: _Flag) -> None:
        self.command = command
        self.flags = {flag.name: flag for flag in flags}

    def print_usage(self) -> None:
        lines = [f"Usage of {self.command}:"]
        for name in sorted(self.flags):
            flag = self.flags[name]
            if isinstance(flag.default, bool):
                kind, note = "", ""
            elif isinstance(flag.default, int):
                kind = " int"
                note = f" (default {flag.default})" if flag.default else ""
            else:
                kind = " string"
                note = f' (default "{flag.default}")' if flag.default else ""
            separator = "\t" if len(name) <= 1 and not kind else "\n    \t"
            lines.append(f"  -{name}{kind}{separator}{flag.usage}{note}")
        print("\n".join(lines), file=sys.stderr)

    def parse(self, args: Sequence[str]) -> tuple[dict[str, bool | int | str], list[str]]:
        values: dict[str, bool | int | str] = {
            name: flag.default for name, flag in self.flags.items()
        }
        rest = list(args)
        while rest:
            arg = rest[0]
            if len(arg) < 2 or not arg.startswith("-"):
                break
            rest.pop(0)
            if arg == "--":
                break
            body = arg[2:] if arg.startswith("--") else arg[1:]
            if not body or body[0] in "-=":
                raise _FlagError(f"bad flag syntax: {arg}")
            name, has_value, value = body.partition("=")
            flag = self.flags.get(name)
            if flag is None:
                if name in ("h", "help"):
                    raise _HelpRequested
                raise _FlagError(f"flag provided but not defined: -{name}")
            values[name] = self._convert(flag, bool(has_value), value, rest)
        return values, rest

    @staticmethod
    def _convert(
        flag: _Flag, has_value: bool, value: str, rest: list[str]
    ) -> bool | int | str:
        if isinstance(flag.default, bool):
            if not has_value:
                return True
            try:
                return _parse_bool(value)
            except ValueError:
                raise _FlagError(
                    f'invalid boolean value "{value}" for -{flag.name}: parse error'
                ) from None
        if not has_value:
            if not rest:
                raise _FlagError(f"flag needs an argument: -{flag.name}")
            value = rest.pop(0)
        if isinstance(flag.default, int):
            try:
                return int(value, 0)
            except ValueError:
                raise _FlagError(
                    f'invalid value "{value}" for flag -{flag.name}: parse error'
                ) from None
        return value

    def parse_or_exit(
        self, args: Sequence[str]
    ) -> tuple[dict[str, bool | int | str], list[str]]:
        try:
            return self.parse(args)
        except _HelpRequested:
            self.print_usage()
            raise _Exit(0) from None
        except _FlagError as exc:
            print(exc, file=sys.stderr)
            self.print_usage()
            raise _Exit(2) from None


def _fail(*lines: str) -> _Exit:
    for line in lines:
        print(line)
    return _Exit(1)


def _command(func: Callable[[Sequence[str]], int]) -> Callable[[Sequence[str]], int]:
    @functools.wraps(func)
    def wrapper(args: Sequence[str]) -> int:
        try:
            return func(args)
        except _Exit as exc:
            return exc.code

    return wrapper


@_command
def cmd_rename_replace(args: Sequence[str]) -> int:
    """Replace a substring in the names of all files below a directory."""
    flags = _FlagSet(
        "rename-replace",
        _Flag("target", "", "Target string to replace in filenames"),
        _Flag(
            "replaceWith",
            "",
            "String to replace target with (optional, defaults to empty string to remove target)",
        ),
    )
    values, positional = flags.parse_or_exit(args)
    target = str(values["target"])
    if not target:
        print("Error: -target flag is required")
        flags.print_usage()
        raise _Exit(1)

    directory = os.path.abspath(positional[0] if positional else ".")
    try:
        count = rename.replace_in_filenames(directory, target, str(values["replaceWith"]))
    except OSError as exc:
        raise _fail(f"Error: {exc}") from None
    print(f"Successfully renamed {count} files")
    return 0


@_command
def cmd_create_rand_files(args: Sequence[str]) -> int:
    """Create random text files at a given directory depth."""
    flags = _FlagSet(
        "create-rand-files",
        _Flag("depth", 1, "Directory depth for file creation"),
        _Flag("count", 5, "Number of files to create"),
    )
    values, positional = flags.parse_or_exit(args)
    depth = int(values["depth"])
    count = int(values["count"])
    if depth < 1:
        raise _fail("Error: depth must be at least 1")
    if count < 1:
        raise _fail("Error: count must be at least 1")

    directory = positional[0] if positional else "."
    try:
        generator.create_random_files(directory, depth, count)
    except OSError as exc:
        raise _fail(f"Error: {exc}") from None
    print(
        f"Successfully created {count} random files at depth {depth} in directory {directory}"
    )
    return 0


@_command
def cmd_folderify(args: Sequence[str]) -> int:
    """Move each file into a folder named after it."""
    flags = _FlagSet(
        "folderify",
        _Flag("recursive", False, "Process subdirectories recursively"),
    )
    values, positional = flags.parse_or_exit(args)
    directory = positional[0] if positional else "."
    try:
        count = folderify.process_directory(directory, bool(values["recursive"]))
    except (OSError, ValueError) as exc:
        raise _fail(f"Error: {exc}") from None
    print(f"Successfully processed {count} files")
    return 0


@_command
def cmd_deep_compare(args: Sequence[str]) -> int:
    """Compare two directory trees and report the differences."""
    flags = _FlagSet(
        "deep-compare",
        _Flag("verbose", False, "Show detailed comparison results"),
    )
    values, positional = flags.parse_or_exit(args)
    if len(positional) != 2:
        raise _fail(
            "Error: deep-compare requires exactly 2 directories to compare",
            f"Usage: {PROGRAM} deep-compare [-verbose] <directory1> <directory2>",
        )

    try:
        result = compare.deep_compare(positional[0], positional[1])
    except OSError as exc:
        raise _fail(f"Error: {exc}") from None

    if values["verbose"]:
        compare.print_result(result)
    elif result.identical:
        print("✅ Directories are identical!")
    else:
        print("❌ Directories have differences:")
        if result.only_in_dir1:
            print(f"  - {len(result.only_in_dir1)} items only in first directory")
        if result.only_in_dir2:
            print(f"  - {len(result.only_in_dir2)} items only in second directory")
        if result.mod_time_diffs:
            print(f"  - {len(result.mod_time_diffs)} files with different modification times")
        print("Use -verbose flag for detailed comparison")

    print(f"Total files: {result.total_files}, Total directories: {result.total_dirs}")
    return 0


@_command
def cmd_unrar(args: Sequence[str]) -> int:
    """Extract a RAR archive, or the archives in a directory."""
    flags = _FlagSet("unrar", _Flag("r", False, "Process directories recursively"))
    values, positional = flags.parse_or_exit(args)
    recursive = bool(values["r"])

    try:
        unrar.check_unrar_installed()
    except unrar.UnrarError as exc:
        raise _fail(
            f"Error: {exc}",
            "To install unrar on macOS: brew install unrar",
            "To install unrar on Ubuntu/Debian: sudo apt install unrar",
        ) from None

    if not positional:
        raise _fail(
            "Error: Please specify a RAR file or directory containing RAR files",
            f"Usage: {PROGRAM} unrar <rar_file_or_directory> [-r]",
        )

    target = positional[0]
    if not os.path.exists(target):
        raise _fail(f"Error: Target does not exist: {target}")

    if os.path.isdir(target):
        print(f"Processing directory: {target}")
        if recursive:
            print("Recursive mode enabled")
        try:
            count = unrar.process_directory(target, recursive)
        except OSError as exc:
            raise _fail(f"Error: error processing directory: {exc}") from None
        if count == 0:
            print("No RAR files found to extract")
        else:
            print(f"Successfully extracted {count} RAR file(s)")
        return 0

    try:
        unrar.unrar_file(os.path.abspath(target))
    except (unrar.UnrarError, OSError) as exc:
        raise _fail(f"Error: {exc}") from None
    print("Extraction completed successfully")
    return 0


@_command
def cmd_remove_files(args: Sequence[str]) -> int:
    """Delete files matching a pattern after asking for confirmation."""
    flags = _FlagSet(
        "remove-files",
        _Flag("pattern", "", "File pattern to match (e.g., '*.rar', '*.tmp')"),
        _Flag("recursive", False, "Process directories recursively"),
    )
    values, positional = flags.parse_or_exit(args)
    pattern = str(values["pattern"])
    recursive = bool(values["recursive"])
    if not pattern:
        raise _fail(
            "Error: -pattern flag is required",
            f'Usage: {PROGRAM} remove-files <directory> -pattern="*.rar" [-recursive]',
        )

    directory = os.path.abspath(positional[0] if positional else ".")
    if not os.path.exists(directory):
        raise _fail(f"Error: Directory does not exist: {directory}")

    print(f"Searching for files matching pattern '{pattern}' in directory: {directory}")
    if recursive:
        print("Recursive mode enabled")

    try:
        files = remover.find_matching_files(directory, pattern, recursive)
    except (OSError, ValueError) as exc:
        raise _fail(f"Error finding files: {exc}") from None

    if not files:
        print(f"No files found matching pattern '{pattern}'")
        return 0

    print(f"\nFound {len(files)} file(s) matching pattern '{pattern}':")
    for path in files[:10]:
        print(f"  {path}")
    if len(files) > 10:
        print(f"  ... and {len(files) - 10} more files")

    print(
        f"\nAre you sure you want to delete these {len(files)} file(s)? (y/N): ",
        end="",
        flush=True,
    )
    response = sys.stdin.readline()
    if not response.endswith("\n"):
        raise _fail("Error reading input: EOF")
    if response.strip().lower() not in ("y", "yes"):
        print("Operation cancelled")
        return 0

    try:
        deleted = remover.delete_files(files)
    except remover.DeletionError as exc:
        raise _fail(f"Error during deletion: {exc}") from None
    print(f"Successfully deleted {deleted} file(s)")
    return 0


_COMMANDS: dict[str, Callable[[Sequence[str]], int]] = {
    "rename-replace": cmd_rename_replace,
    "create-rand-files": cmd_create_rand_files,
    "folderify": cmd_folderify,
    "deep-compare": cmd_deep_compare,
    "unrar": cmd_unrar,
    "remove-files": cmd_remove_files,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named by the first argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_USAGE)
        return 1

    command, rest = args[0], args[1:]
    handler = _COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        print(_USAGE)
        return 1
    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())