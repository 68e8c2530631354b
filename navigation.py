# --- navigation.py ---

from typing import Optional

from errors import NavigationError
from models import FileNode

PARENT_TOKEN = ".."


def resolve(current: FileNode, token: str) -> Optional[FileNode]:
    """
    Resolve token relative to current, without touching the tree.

    ".." gives the parent, which is None at the root. Any other token is
    matched exactly (case-sensitive) against the names of the direct
    children. Returns None when nothing matches.
    """
    if token == PARENT_TOKEN:
        return current.parent

    if not current.is_dir:
        return None

    for child in current.children:
        if child.name == token:
            return child
    return None


def find_child(current: FileNode, token: str) -> FileNode:
    """Like resolve() for a child name, but raises NavigationError on a miss."""
    if token != PARENT_TOKEN:
        node = resolve(current, token)
        if node is not None:
            return node
    raise NavigationError(token)
