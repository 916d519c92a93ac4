# filekit

A small command-line toolkit for everyday batch file chores: renaming files,
generating test files, moving files into their own folders, comparing directory
trees, extracting RAR archives and deleting files by pattern.

## Installation

```
pip install .
```

This installs the `filekit` command. No third-party libraries are required.

## Usage

```
filekit <command> [flags] [directory]
```

Flags take a single dash (`-recursive`, `-pattern="*.tmp"`) and must come
**before** the directory arguments: flag parsing stops at the first argument
that is not a flag, so anything after it is treated as a positional argument.
`-h` or `-help` after a command prints its flags. A bad flag ends the command
with exit status 2; other errors end it with status 1.

Running `filekit` with no command, or with an unknown one, prints the list of
commands and exits with status 1.

### rename-replace

Walks the whole tree below a directory (default: the current directory) and
replaces every occurrence of `-target` in each file name with `-replaceWith`.
Directory names are left unchanged. If `-replaceWith` is omitted the target is
removed. `-target` is required.

```
filekit rename-replace -target="draft_" -replaceWith="final_" ./docs
```

### create-rand-files

Creates `-count` (default 5) text files with names such as `quick_cat_42.txt`
and a few random sentences under a timestamp line. With `-depth` (default 1)
greater than 1, nested `level_1/level_2/...` directories are created and the
files are placed in the deepest one. Both values must be at least 1.

```
filekit create-rand-files -depth=3 -count=10 ./sandbox
```

### folderify

Moves each file into a new folder named after the file without its extension
(`report.pdf` goes to `report/report.pdf`). With `-recursive`, subdirectories
that existed before the run are processed as well. A file whose name is empty
without its extension, such as `.bashrc`, stops the run with an error.

```
filekit folderify -recursive ./photos
```

### deep-compare

Compares two directory trees by structure, entry names and file modification
times; a difference of up to 2 seconds is tolerated. File contents are not
compared. An entry that is a file on one side and a directory on the other is
reported on both sides as a type mismatch. Without `-verbose` only counts of
the differences are printed.

```
filekit deep-compare -verbose ./backup ./original
```

### unrar

Extracts RAR archives into the directory that holds them, overwriting existing
files. The target may be a single `.rar` file or a directory; for a directory,
only its own files are examined unless `-r` is given. An archive that fails to
extract is reported as a warning and the others are still processed.

This command runs the external `unrar` program, which must be installed and on
the `PATH`; filekit does not read RAR archives by itself.

```
filekit unrar -r ./downloads
filekit unrar ./downloads/archive.rar
```

### remove-files

Lists the files in a directory whose names match a shell-style `-pattern`
(required), shows up to ten of them, and deletes them after you answer `y` or
`yes`. With `-recursive`, subdirectories are searched too. In patterns, `*`
matches any run of characters, `?` one character, `[...]` a character class
with ranges and `^` negation, and `\` escapes the next character.

```
filekit remove-files -pattern="*.rar" -recursive ./downloads
```

## Library use

The operations are also available as functions:

- `filekit.compare.deep_compare(dir1, dir2)` returns a `ComparisonResult` with
  `identical`, `only_in_dir1`, `only_in_dir2`, `mod_time_diffs`, `total_files`
  and `total_dirs`; `filekit.compare.print_result(result)` prints a report.
- `filekit.folderify.process_directory(directory, recursive)` and
  `filekit.folderify.folderify_file(file_path)`.
- `filekit.generator.create_random_files(base_dir, depth, count)` returns the
  paths it wrote.
- `filekit.remover.find_matching_files(directory, pattern, recursive)`,
  `filekit.remover.match_pattern(pattern, name)` and
  `filekit.remover.delete_files(files)`, which raises `DeletionError` (carrying
  `deleted` and `failures`) if some files could not be removed.
- `filekit.rename.replace_in_filenames(directory, target, replace_with)`.
- `filekit.unrar.unrar_file(rar_path)`,
  `filekit.unrar.process_directory(dir_path, recursive)` and
  `filekit.unrar.check_unrar_installed()`, which raise `UnrarError` on failure.
- `filekit.cli.main(argv)` runs a command and returns its exit status.

## Running the tests

```
pip install .[test]
pytest
```