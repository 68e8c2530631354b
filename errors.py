# --- errors.py ---


class DiskExplorerError(Exception):
    """Base class for errors reported to the user."""


class FatalScanError(DiskExplorerError):
    """The root path itself could not be scanned."""


class NavigationError(DiskExplorerError):
    """A name did not resolve relative to the current node."""

    def __init__(self, token: str):
        super().__init__(f"no such file: {token}")
        self.token = token


class CommandError(DiskExplorerError):
    """Unrecognized command keyword or bad command argument."""
