#!/usr/bin/env python3
"""
Session state for treeshell.

A Session is a cursor into a TreeStore. Every operation is applied relative
to the current directory, except print_all which always starts at the root.
"""

import logging
from typing import Optional

from .treestore import (
    TreeStore, Directory, File, Listing,
    AlreadyAtRoot, NotFound,
)


logger = logging.getLogger(__name__)

PARENT = '..'


class Session:
    """Current-directory cursor over a TreeStore."""

    def __init__(self, store: Optional[TreeStore] = None):
        self.store = store or TreeStore()
        self.root = self.store.root
        self.current = self.root

    @property
    def cwd(self) -> str:
        """Absolute path of the current directory."""
        return self.store.path_of(self.current)

    def change_directory(self, name: str) -> Directory:
        """
        Move the cursor to a subdirectory, or to the parent for '..'.

        Raises:
            AlreadyAtRoot: '..' was requested at the root.
            NotFound: no subdirectory called ``name``.
        """
        if name == PARENT:
            if self.current is self.root:
                raise AlreadyAtRoot()
            target = self.current.parent
        else:
            target = self.store.find_child(self.current, name)
            if target is None:
                raise NotFound(name)

        self.current = target
        logger.debug("cursor moved to %s", self.cwd)
        return target

    def make_directory(self, name: str) -> Directory:
        return self.store.create_subdirectory(self.current, name)

    def touch_file(self, name: str) -> File:
        return self.store.create_file(self.current, name)

    def list(self) -> Listing:
        return self.store.list_contents(self.current)

    def print_all(self) -> str:
        return self.store.print_tree(self.root)
