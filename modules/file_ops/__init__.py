"""
File operations module for FileKit.

Read, write, create, delete, copy and open files, with soft failures.
"""

from .file_ops import (
    read_bytes,
    read_lines,
    read_internal_data,
    read_external_data,
    read_internal_lines,
    read_external_lines,
    write_bytes,
    write_lines,
    create_file,
    delete_file,
    create_directory,
    execute_file,
    copy_file,
)
from .operations import Source
from .desktop import DesktopOpener, SystemDesktopOpener
from .resources import ResourceStore

__all__ = [
    'read_bytes',
    'read_lines',
    'read_internal_data',
    'read_external_data',
    'read_internal_lines',
    'read_external_lines',
    'write_bytes',
    'write_lines',
    'create_file',
    'delete_file',
    'create_directory',
    'execute_file',
    'copy_file',
    'Source',
    'DesktopOpener',
    'SystemDesktopOpener',
    'ResourceStore',
]
