"""
Utils Package
=============

Leaf helpers for debut_runner.
"""
from .args import FlagMap, get_args
from .file import load_json_store, parse_json, read_file
from .module_loader import load_fresh

__all__ = [
    'FlagMap',
    'get_args',
    'load_json_store',
    'parse_json',
    'read_file',
    'load_fresh',
]
