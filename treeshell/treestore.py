#!/usr/bin/env python3
"""
treestore - the in-memory directory tree behind treeshell.

Core philosophy:
- Each directory owns its children, keyed by name
- The parent link is a weak back-reference used only for navigation
- Every mutation is check-then-insert, so a failure never leaves partial state
"""

import logging
import weakref
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)


class TreeError(Exception):
    """Base class for tree store errors."""


class AlreadyExists(TreeError):
    """A directory or file with the given name is already present."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind} '{name}' already exists")
        self.kind = kind
        self.name = name


class NotFound(TreeError):
    """No subdirectory with the given name."""

    def __init__(self, name: str):
        super().__init__(f"no subdirectory '{name}'")
        self.name = name


class AlreadyAtRoot(TreeError):
    """Attempted to move above the root directory."""

    def __init__(self):
        super().__init__("already at root directory")


@dataclass(frozen=True)
class File:
    """A file is a name-only marker."""
    name: str


@dataclass(eq=False)
class Directory:
    """
    Directory node.

    Children are owned through the ``subdirectories`` and ``files`` mappings.
    The parent is held through a weak reference so that ownership only ever
    flows downward from the root.
    """
    name: str
    subdirectories: Dict[str, 'Directory'] = field(default_factory=dict)
    files: Dict[str, File] = field(default_factory=dict)
    _parent_ref: Optional[weakref.ref] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional['Directory']:
        """Owning directory, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def is_root(self) -> bool:
        return self._parent_ref is None

    def __repr__(self) -> str:
        return (f"Directory(name={self.name!r}, "
                f"subdirectories={list(self.subdirectories)}, "
                f"files={list(self.files)})")


@dataclass(frozen=True)
class Listing:
    """Direct contents of a directory."""
    directories: Tuple[str, ...]
    files: Tuple[str, ...]

    def is_empty(self) -> bool:
        return not self.directories and not self.files


class TreeStore:
    """
    In-memory hierarchical filesystem.

    The store owns a single root directory; every other directory is
    reachable from it through ``subdirectories`` edges.
    """

    def __init__(self, root_name: str = 'root'):
        self.root = Directory(root_name)

    # Lookup

    def find_child(self, directory: Directory, name: str) -> Optional[Directory]:
        """Return the direct subdirectory called ``name``, or None."""
        return directory.subdirectories.get(name)

    def path_of(self, directory: Directory) -> str:
        """Absolute path of a directory, with the root shown as '/'."""
        parts: List[str] = []
        node = directory
        while node is not None and not node.is_root():
            parts.append(node.name)
            node = node.parent
        return '/' + '/'.join(reversed(parts))

    # Mutation

    def create_subdirectory(self, directory: Directory, name: str) -> Directory:
        """
        Create a subdirectory of ``directory``.

        Raises:
            AlreadyExists: a subdirectory with that name is already present.
        """
        if self.find_child(directory, name) is not None:
            raise AlreadyExists('directory', name)

        child = Directory(name, _parent_ref=weakref.ref(directory))
        directory.subdirectories[name] = child
        logger.debug("created directory %s", self.path_of(child))
        return child

    def create_file(self, directory: Directory, name: str) -> File:
        """
        Create a file in ``directory``.

        Raises:
            AlreadyExists: a file with that name is already present.
        """
        if name in directory.files:
            raise AlreadyExists('file', name)

        new_file = File(name)
        directory.files[name] = new_file
        logger.debug("created file %s in %s", name, self.path_of(directory))
        return new_file

    # Traversal

    def list_contents(self, directory: Directory) -> Listing:
        """Names of the direct subdirectories and files, in creation order."""
        return Listing(
            directories=tuple(directory.subdirectories),
            files=tuple(directory.files),
        )

    def print_tree(self, root: Optional[Directory] = None) -> str:
        """
        Render the tree below ``root`` (the store's root by default).

        Each directory's subtree is rendered in full before its own files.
        """
        root = root if root is not None else self.root
        lines = [f"Root Directory: {root.name}"]
        self._render(root, 1, lines)
        return '\n'.join(lines)

    def _render(self, directory: Directory, depth: int, lines: List[str]):
        indent = '  ' * depth
        for child in directory.subdirectories.values():
            lines.append(f"{indent}Directory: {child.name}")
            self._render(child, depth + 1, lines)
        for name in directory.files:
            lines.append(f"{indent}File: {name}")
