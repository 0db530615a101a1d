"""Utility helpers for docsniff."""

from .fileio import read_yaml_file
from .dump import TokenDumpError, load_token_dump
from .code import iter_dump_files

__all__ = [
    "read_yaml_file",
    "TokenDumpError",
    "load_token_dump",
    "iter_dump_files",
]
