"""Utility functions for devcert."""

from devcert.utils.cmd import run_cmd, set_show_commands
from devcert.utils.paths import default_cache_root

__all__ = [
    "default_cache_root",
    "run_cmd",
    "set_show_commands",
]
