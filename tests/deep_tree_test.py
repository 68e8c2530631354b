# --- tests/deep_tree_test.py ---

import os
import sys
import tempfile
import unittest
from unittest import mock

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import delete_ops
from delete_ops import delete_node
from scanner import Scanner

DEPTH = 1200  # deeper than the default interpreter recursion limit
LEAF_SIZE = 10


@unittest.skipUnless(os.mkdir in os.supports_dir_fd, "needs mkdir(dir_fd=...)")
class TestDeepTree(unittest.TestCase):
    """
    deep/a/a/.../a/leaf, DEPTH directories named 'a' below deep/.
    """

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.top = os.path.join(self._tmp.name, 'deep')
        os.mkdir(self.top)

        # Each level is created relative to its parent's descriptor
        fd = os.open(self.top, os.O_RDONLY)
        try:
            for _ in range(DEPTH):
                os.mkdir('a', dir_fd=fd)
                child_fd = os.open('a', os.O_RDONLY, dir_fd=fd)
                os.close(fd)
                fd = child_fd
            leaf_fd = os.open('leaf', os.O_WRONLY | os.O_CREAT, 0o644, dir_fd=fd)
            try:
                os.write(leaf_fd, b'x' * LEAF_SIZE)
            finally:
                os.close(leaf_fd)
        finally:
            os.close(fd)

        self.dirs = [self.top]
        for _ in range(DEPTH):
            self.dirs.append(os.path.join(self.dirs[-1], 'a'))
        self.leaf = os.path.join(self.dirs[-1], 'leaf')
        # Runs before the temporary directory cleanup
        self.addCleanup(self._remove_bottom_up)

    def _remove_bottom_up(self):
        if os.path.exists(self.leaf):
            os.remove(self.leaf)
        for path in reversed(self.dirs):
            if os.path.isdir(path):
                os.rmdir(path)

    def test_scan(self):
        result = Scanner(self.top).scan()

        self.assertEqual(result.total_dirs_count, DEPTH + 1)
        self.assertEqual(result.total_files_count, 1)
        self.assertEqual(result.scan_errors, [])

        node = result.root_node
        depth = 0
        footprints = 0
        while node.children:
            self.assertEqual(len(node.children), 1)
            self.assertEqual(node.size_bytes,
                             node.self_size + node.children[0].size_bytes)
            footprints += node.self_size
            node = node.children[0]
            depth += 1

        self.assertEqual(depth, DEPTH + 1)
        self.assertEqual(node.path, self.leaf)
        self.assertEqual(node.size_bytes, LEAF_SIZE)
        self.assertEqual(result.root_node.size_bytes, footprints + LEAF_SIZE)

    def test_delete(self):
        root = Scanner(self.top).scan().root_node

        result = delete_node(root)

        self.assertTrue(result.success)
        self.assertFalse(os.path.exists(self.top))
        self.assertEqual(result.files_deleted, 1)
        self.assertEqual(result.dirs_deleted, DEPTH + 1)
        self.assertEqual(result.errors, [])

    def test_delete_with_rejected_leaf(self):
        root = Scanner(self.top).scan().root_node
        real_remove = delete_ops._remove_entry

        def fake_remove(node, use_trash):
            if node.path == self.leaf:
                raise PermissionError(1, 'Operation not permitted', node.path)
            return real_remove(node, use_trash)

        with mock.patch('delete_ops._remove_entry', side_effect=fake_remove):
            result = delete_node(root)

        # The leaf error, then one skip per enclosing directory
        self.assertFalse(result.success)
        self.assertEqual(len(result.errors), DEPTH + 2)
        self.assertTrue(os.path.exists(self.leaf))
        self.assertEqual(root.size_bytes,
                         sum(os.lstat(path).st_size for path in self.dirs) + LEAF_SIZE)
