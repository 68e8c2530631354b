# --- scanner.py ---

import os
import stat
from typing import Callable, List, Optional, Tuple

from errors import FatalScanError
from models import FileNode, NodeKind, ScanResult
from utils import get_file_name


class Scanner:
    """
    Walks the filesystem once and builds the FileNode tree.

    Symlinks are never followed (lstat only), so the walk cannot loop.
    Problems with single paths are reported through on_warning and the
    scan carries on with the siblings.
    """

    def __init__(self,
                 root_path: str,
                 on_progress: Optional[Callable[[str], None]] = None,
                 on_warning: Optional[Callable[[str], None]] = None):
        self.root_path = root_path

        # Callbacks
        self.on_progress = on_progress
        self.on_warning = on_warning

    def scan(self) -> ScanResult:
        """Build the tree for root_path. Raises FatalScanError on failure."""
        warnings = []
        counts = {NodeKind.PLAIN: 0, NodeKind.DIRECTORY: 0}
        root_node = self.build_tree(self.root_path, warnings, counts)
        if root_node is None:
            raise FatalScanError(f"failed to build a tree for {self.root_path}, check path")

        return ScanResult(
            root_node=root_node,
            total_files_count=counts[NodeKind.PLAIN],
            total_dirs_count=counts[NodeKind.DIRECTORY],
            scan_errors=warnings,
        )

    def build_tree(self, path: str, warnings: list, counts: dict) -> Optional[FileNode]:
        """
        Build the node for path and, for directories, its whole subtree.
        Returns None when path cannot be stat'ed.

        The walk keeps its own stack of open directories, so the depth of
        the tree is only limited by the filesystem. A directory is linked
        to its parent once all of its entries were visited, so the parent
        adds its final aggregate size.
        """
        root, entry_paths = self._visit(path, warnings, counts)
        if root is None or entry_paths is None:
            return root

        stack = [(root, iter(entry_paths))]
        while stack:
            node, entries = stack[-1]
            entry_path = next(entries, None)

            if entry_path is None:
                stack.pop()
                if stack:
                    stack[-1][0].add_child(node)
                continue

            child, child_entries = self._visit(entry_path, warnings, counts)
            if child is None:
                continue
            if child_entries is None:
                node.add_child(child)
            else:
                stack.append((child, iter(child_entries)))

        return root

    def _visit(self, path: str, warnings: list, counts: dict
               ) -> Tuple[Optional[FileNode], Optional[List[str]]]:
        """
        Stat one path. Returns the new node and, for a listable directory,
        the paths of its entries (None when there is nothing to walk).
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            # Could be deleted since the listing, or EPERM on the path itself
            self._warn(warnings, f"stat failed: {path} ({e.strerror or e})")
            return None, None

        name = get_file_name(path)

        if not stat.S_ISDIR(st.st_mode):
            kind = NodeKind.PLAIN if stat.S_ISREG(st.st_mode) else NodeKind.OTHER
            counts[NodeKind.PLAIN] += 1
            return FileNode(path=path, name=name, kind=kind, self_size=st.st_size), None

        node = FileNode(path=path, name=name, kind=NodeKind.DIRECTORY,
                        self_size=st.st_size)
        counts[NodeKind.DIRECTORY] += 1
        if self.on_progress:
            self.on_progress(path)

        try:
            # scandir never yields '.' and '..'
            with os.scandir(path) as it:
                entry_paths = [entry.path for entry in it]
        except OSError as e:
            node.kind = NodeKind.UNLISTABLE_DIRECTORY
            node.scan_error = e.strerror or str(e)
            self._warn(warnings, f"cannot list directory: {path} ({node.scan_error})")
            return node, None

        return node, entry_paths

    def _warn(self, warnings: list, message: str):
        warnings.append(message)
        if self.on_warning:
            self.on_warning(message)
