"""
Shell module - interactive command shell over the file indexer.
"""

from .commands import COMMANDS, Command
from .session import ShellSession

__all__ = [
    "COMMANDS",
    "Command",
    "ShellSession",
]
