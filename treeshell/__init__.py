"""
treeshell - An in-memory hierarchical filesystem driven by shell-like commands

This package provides a tree of named directories and files, a session cursor
over that tree, and a small terminal (cd, mkdir, touch, ls, print, exit).
"""

__version__ = "0.1.0"

from .treestore import (
    TreeStore,
    Directory,
    File,
    Listing,
    TreeError,
    AlreadyExists,
    NotFound,
    AlreadyAtRoot,
)

from .session import Session

from .command_parser import (
    Command,
    CommandParser,
)

from .terminal import (
    TerminalSession,
    TerminalConfig,
    CommandExecutor,
    CommandHistory,
    CommandResult,
    main,
)

__all__ = [
    # Tree store
    "TreeStore",
    "Directory",
    "File",
    "Listing",

    # Errors
    "TreeError",
    "AlreadyExists",
    "NotFound",
    "AlreadyAtRoot",

    # Session
    "Session",

    # Command parser
    "Command",
    "CommandParser",

    # Terminal
    "TerminalSession",
    "TerminalConfig",
    "CommandExecutor",
    "CommandHistory",
    "CommandResult",
    "main",

    # Version info
    "__version__",
]
