# --- views.py ---

from typing import Iterator, List, Optional, Tuple

from config import Settings
from models import FileNode, NodeKind
from utils import calculate_percentage, format_bytes

NAME_WIDTH = 64
RULER_WIDTH = 80


# --- Sorted View ---

def sorted_children(node: FileNode) -> List[FileNode]:
    """
    Returns the direct children of a directory, largest first.

    The ordering is memoized on the node and only rebuilt after the child
    set (or a child's size) changed. Ties keep scan order: list.sort() is
    stable, also with reverse=True.
    """
    if not node.is_dir:
        return []

    if node._sorted_dirty or node._sorted is None:
        ordered = list(node.children)
        ordered.sort(key=lambda x: x.size_bytes, reverse=True)
        node._sorted = ordered
        node._sorted_dirty = False
    return node._sorted


def visible_children(node: FileNode,
                     max_printed: Optional[int] = None,
                     min_percentage: Optional[float] = None
                     ) -> Iterator[Tuple[FileNode, float]]:
    """
    Yields (child, percentage of node) for the rows worth showing.

    Stops after max_printed rows, or once what was shown already explains
    more than 100 - min_percentage of the node. This only trims the
    display; the tree keeps every child.
    """
    if max_printed is None or min_percentage is None:
        defaults = Settings()
        if max_printed is None:
            max_printed = defaults.max_printed
        if min_percentage is None:
            min_percentage = defaults.min_percentage

    printed = 0
    explained = 0.0
    for child in sorted_children(node):
        if printed >= max_printed or explained > 100.0 - min_percentage:
            break
        percentage = calculate_percentage(child.size_bytes, node.size_bytes)
        explained += percentage
        printed += 1
        yield child, percentage


def display_name(node: FileNode) -> str:
    # The root keeps its full path, everything below is shown by name.
    if node.is_root:
        return node.path
    return node.name


def render_node(node: FileNode, settings: Optional[Settings] = None) -> List[str]:
    """Format a node and its largest children as output lines."""
    if settings is None:
        settings = Settings()

    lines = [f"{display_name(node)}: {format_bytes(node.size_bytes)}"]

    if node.kind is NodeKind.UNLISTABLE_DIRECTORY:
        lines.append(f"(contents not listable: {node.scan_error or 'unknown error'})")
        return lines

    if not node.is_listable:
        return lines

    lines.append(f"{'file name':>{NAME_WIDTH}} {'size':>8} {'%':>6}")
    lines.append("-" * RULER_WIDTH)
    for child, percentage in visible_children(
            node, settings.max_printed, settings.min_percentage):
        lines.append(
            f"{child.name:>{NAME_WIDTH}} {format_bytes(child.size_bytes):>8} "
            f"{percentage:5.1f}%")
    return lines
