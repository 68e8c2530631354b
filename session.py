# --- session.py ---

import sys
from typing import Callable, Optional, TextIO

import commands
from config import Settings
from delete_ops import delete_node
from errors import CommandError, NavigationError
from models import FileNode
from navigation import PARENT_TOKEN, find_child, resolve
from views import render_node

# Reads one line for a prompt. Returns None or raises EOFError at end of input.
ReadLine = Callable[[str], Optional[str]]


class Session:
    """
    The interactive loop: show the current node, read a line, act on it.

    The current node is the only state. Paths are taken from the nodes
    themselves, so the process working directory is never changed.
    """

    def __init__(self,
                 root: FileNode,
                 settings: Optional[Settings] = None,
                 read_line: ReadLine = input,
                 out: TextIO = None,
                 err: TextIO = None):
        self.root = root
        self.current: Optional[FileNode] = root
        self.settings = settings or Settings()
        self.read_line = read_line
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    # --- Output helpers ---

    def _print(self, text: str = ""):
        self.out.write(text + "\n")

    def _report(self, level: str, message: str):
        self.err.write(f"[{level}] {message}\n")

    def _on_delete_progress(self, path: str, is_error: bool, message: str):
        if is_error:
            self._report("ERROR", message)

    # --- Main loop ---

    def run(self) -> int:
        """Run until end of input or until the tree is gone. Returns 0."""
        try:
            while self.current is not None:
                self.render()
                try:
                    line = self.read_line(self.settings.prompt)
                except EOFError:
                    line = None
                if line is None:
                    break
                self.current = self.handle_line(line)
        finally:
            self.terminate()
        return 0

    def render(self):
        for text in render_node(self.current, self.settings):
            self._print(text)

    def terminate(self):
        """Release the tree; nothing can be navigated afterwards."""
        self.current = None
        if self.root is not None:
            self.root.release()
            self.root = None

    def handle_line(self, line: str) -> Optional[FileNode]:
        """Dispatch one input line. Returns the next current node."""
        try:
            command = commands.parse_line(line, self.settings.command_prefix)
        except CommandError as e:
            self._report("ERROR", str(e))
            return self.current

        if command.action == commands.NAVIGATE:
            return self.navigate(command.argument)
        if command.action == commands.HELP:
            for text in commands.help_lines(self.settings.command_prefix):
                self._print(text)
            return self.current
        return self.remove(command.argument)

    def navigate(self, token: str) -> Optional[FileNode]:
        if token == PARENT_TOKEN:
            # Stepping above the root ends the session
            return resolve(self.current, token)
        try:
            return find_child(self.current, token)
        except NavigationError as e:
            self._report("ERROR", str(e))
            return self.current

    def remove(self, name: str) -> Optional[FileNode]:
        """Delete the named child, or the current node when name is empty."""
        if name:
            try:
                target = find_child(self.current, name)
            except NavigationError as e:
                self._report("ERROR", str(e))
                return self.current
        else:
            target = self.current

        result = delete_node(target, use_trash=self.settings.use_trash,
                             progress_callback=self._on_delete_progress)

        if target is not self.current or not result.success:
            return self.current

        if result.parent is None:
            self._report("INFO", "removed root directory; exiting")
            self.root = None
        return result.parent
