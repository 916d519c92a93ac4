[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "filekit"
version = "0.1.0"
description = "Small command-line toolkit for batch file operations: renaming, folderifying, comparing, extracting and removing files"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "rename", "compare", "directories", "cli", "unrar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filekit = "filekit.cli:main"

[tool.setuptools.packages.find]
include = ["filekit*"]

[tool.pytest.ini_options]
addopts = "-ra"
