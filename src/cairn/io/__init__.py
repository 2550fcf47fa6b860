"""Shared file I/O helpers."""

from .files import current_working_directory, directory_exists, file_exists, list_files_matching, read_file

__all__ = ["current_working_directory", "directory_exists", "file_exists", "list_files_matching", "read_file"]
