# --- models.py ---

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(Enum):
    """What kind of filesystem object a node was at scan time."""
    PLAIN = "plain"
    DIRECTORY = "directory"
    UNLISTABLE_DIRECTORY = "unlistable"  # exists, but could not be enumerated
    OTHER = "other"  # symlinks, devices, sockets... sized like plain files


@dataclass
class FileNode:
    """
    Represents a single file or directory node found during the scan.

    Sizes come from one lstat() snapshot and are never re-read from disk.
    A directory's size_bytes is its own footprint plus the aggregate size
    of its children.
    """
    path: str
    name: str
    kind: NodeKind
    self_size: int = 0
    size_bytes: int = 0

    # Tree structure. parent is a back reference only: it is cleared as soon
    # as the node is unlinked, and never used to release anything.
    parent: Optional['FileNode'] = field(default=None, repr=False)
    children: List['FileNode'] = field(default_factory=list, repr=False)

    # Error handling
    scan_error: Optional[str] = None  # e.g., "Permission Denied"

    # Sorted view cache, see views.sorted_children()
    _sorted: Optional[List['FileNode']] = field(default=None, repr=False)
    _sorted_dirty: bool = field(default=True, repr=False)

    def __post_init__(self):
        if not self.size_bytes:
            self.size_bytes = self.self_size + sum(c.size_bytes for c in self.children)

    def __hash__(self):
        # Enable adding FileNode objects to sets or dict keys
        return hash(self.path)

    def __eq__(self, other):
        # Define equality based on the unique path
        if not isinstance(other, FileNode):
            return False
        return self.path == other.path

    @property
    def is_dir(self) -> bool:
        return self.kind in (NodeKind.DIRECTORY, NodeKind.UNLISTABLE_DIRECTORY)

    @property
    def is_listable(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_root(self) -> bool:
        return self.parent is None

    # --- Mutation ---

    def mark_dirty(self):
        """Invalidate the sorted view; it is rebuilt on next display."""
        self._sorted_dirty = True

    def add_child(self, node: 'FileNode'):
        """Link a freshly scanned child and account for its size."""
        node.parent = self
        self.children.append(node)
        self.size_bytes += node.size_bytes
        self.mark_dirty()

    def remove_child(self, node: 'FileNode'):
        """
        Unlink a child. The caller is responsible for re-aggregating this
        directory (and its ancestors) afterwards.
        """
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                break
        else:
            raise ValueError(f"{node.path} is not a child of {self.path}")
        node.parent = None
        self.mark_dirty()

    def update_size(self):
        """Re-aggregate this directory from its current children."""
        self.size_bytes = self.self_size + sum(c.size_bytes for c in self.children)
        self.mark_dirty()

    def ancestors(self) -> Iterator['FileNode']:
        """Yield the parent chain, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def release(self):
        """Drop the whole subtree. Walks children only, never parent."""
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(node.children)
            for child in node.children:
                child.parent = None
            node.children = []
            node._sorted = None
            node._sorted_dirty = True


@dataclass
class ScanResult:
    """
    Holds the complete result of a directory scan.
    """
    root_node: FileNode  # The root node of the scanned tree

    # Summary statistics
    total_files_count: int = 0
    total_dirs_count: int = 0

    # Errors encountered during the scan
    scan_errors: List[str] = field(default_factory=list)  # One line per skipped path

    @property
    def total_size_bytes(self) -> int:
        return self.root_node.size_bytes
