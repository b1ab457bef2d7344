"""Utility modules for mdscriptfilter.

This module exports commonly used utility functions.
"""

from mdscriptfilter.utils.formatting import err_console, print_error
from mdscriptfilter.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "err_console",
    "print_error",
    "run_command",
]
