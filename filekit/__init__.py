"""Batch file utilities: renaming, random file generation, folderifying, tree comparison, RAR extraction and pattern removal."""

__version__ = "0.1.0"