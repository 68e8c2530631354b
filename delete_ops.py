# --- delete_ops.py ---

import os
from send2trash import send2trash
from typing import List, Callable, Optional
from models import FileNode

# Define a type for the progress callback
# Callback(current_path: str, is_error: bool, message: str)
DeleteProgressCallback = Callable[[str, bool, str], None]

class DeleteResult:
    """Holds the summary of the delete operation."""
    def __init__(self):
        self.files_deleted: int = 0
        self.dirs_deleted: int = 0
        self.total_size_freed: int = 0
        self.errors: List[str] = []

        # True when the requested node is gone from disk and from the tree
        self.success: bool = False
        # The requested node's parent at the time of the call
        self.parent: Optional[FileNode] = None

    def add_success(self, node: FileNode):
        """Record a successful deletion."""
        if node.is_dir:
            self.dirs_deleted += 1
        else:
            self.files_deleted += 1
        # Children are recorded on their own, so only count the node's
        # own footprint here.
        self.total_size_freed += node.self_size

    def add_error(self, path: str, error):
        """Record a failed deletion."""
        self.errors.append(f"cannot remove {path}: {error}")


def delete_node(
    target: FileNode,
    use_trash: bool = False,
    progress_callback: DeleteProgressCallback = None
) -> DeleteResult:
    """
    Deletes a node from disk and from the tree.

    Directories are emptied first, child by child. A child that cannot be
    removed stays in the tree, and then its directory is kept too. A
    failure never stops the removal of unrelated siblings.

    Whatever the outcome, every ancestor of target has its size
    re-aggregated afterwards, because some descendants may be gone even
    when target itself is not.

    Args:
        target: The node to delete. May be the root.
        use_trash: If True, entries go to the trash via send2trash.
        progress_callback: A function to call with progress updates.

    Returns:
        A DeleteResult object summarizing the operation.
    """
    result = DeleteResult()
    parent = target.parent
    result.parent = parent

    result.success = _delete_tree(target, result, use_trash, progress_callback)

    if result.success:
        if parent is not None:
            parent.remove_child(target)
        target.release()

    if parent is not None:
        parent.update_size()
        for ancestor in parent.ancestors():
            ancestor.update_size()

    return result


def _delete_tree(
    target: FileNode,
    result: DeleteResult,
    use_trash: bool,
    progress_callback: Optional[DeleteProgressCallback]
) -> bool:
    """
    Removes target, children first. Returns True if target is gone from disk.

    Open directories are kept on an explicit stack of
    [directory, remaining children, all children removed so far] frames,
    so deep trees do not exhaust the interpreter stack. A directory is
    only attempted once its frame is done and every child went away.
    """
    if not target.is_dir:
        return _remove_one(target, result, use_trash, progress_callback)

    stack = [[target, iter(list(target.children)), True]]
    while stack:
        frame = stack[-1]
        child = next(frame[1], None)

        if child is not None and child.is_dir:
            stack.append([child, iter(list(child.children)), True])
            continue

        if child is not None:
            removed = _remove_one(child, result, use_trash, progress_callback)
        else:
            # Every entry of this directory was handled
            stack.pop()
            child = frame[0]
            removed = _finish_directory(child, frame[2], result, use_trash, progress_callback)
            if not stack:
                return removed
            frame = stack[-1]

        if removed:
            frame[0].remove_child(child)
            child.release()
        else:
            frame[2] = False

    return False


def _finish_directory(
    node: FileNode,
    all_removed: bool,
    result: DeleteResult,
    use_trash: bool,
    progress_callback: Optional[DeleteProgressCallback]
) -> bool:
    node.update_size()
    if not all_removed:
        message = "skipping; not all children removed"
        result.add_error(node.path, message)
        if progress_callback:
            progress_callback(node.path, True, f"Skipping {node.path}; not all children removed")
        return False
    return _remove_one(node, result, use_trash, progress_callback)


def _remove_one(
    node: FileNode,
    result: DeleteResult,
    use_trash: bool,
    progress_callback: Optional[DeleteProgressCallback]
) -> bool:
    """Removes a single entry and records the outcome."""
    try:
        _remove_entry(node, use_trash)
    except OSError as e:
        result.add_error(node.path, e.strerror or e)
        if progress_callback:
            progress_callback(node.path, True, f"Error deleting {node.path}: {e.strerror or e}")
        return False

    result.add_success(node)
    if progress_callback:
        progress_callback(node.path, False, f"Deleted {node.name}")
    return True


def _remove_entry(node: FileNode, use_trash: bool):
    """
    Private helper to remove one filesystem entry. Directories must be
    empty by the time this is called.
    """
    if use_trash:
        send2trash(node.path)
    elif node.is_dir:
        os.rmdir(node.path)
    else:
        try:
            os.remove(node.path)
        except IsADirectoryError:
            # Was replaced by a directory after the scan
            os.rmdir(node.path)
