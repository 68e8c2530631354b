# --- utils.py ---

import os

SIZE_PREFIXES = " kMGTPEZY"


def format_bytes(size_bytes: int) -> str:
    """
Signature: `format_bytes(size_bytes: int) -> str`

Converts a size in bytes to a human-readable string (B, kB, MB, ... YB).
Uses decimal (1000) instead of binary (1024) for storage representation.
Bytes keep a blank in place of the prefix so the unit column lines up:
"300.00 B", "1.50kB".
"""
    if size_bytes < 0:
        size_bytes = 0

    power = 1000.0  # Use decimal (base 1000)
    value = float(size_bytes)

    i = 0
    while value > power and i < len(SIZE_PREFIXES) - 1:
        value /= power
        i += 1

    return f"{value:.2f}{SIZE_PREFIXES[i]}B"


def calculate_percentage(part: int, whole: int) -> float:
    """
Signature: `calculate_percentage(part: int, whole: int) -> float`

Calculates what percentage 'part' is of 'whole'.
Returns 0.0 if 'whole' is 0 to avoid division by zero.
"""
    if whole == 0:
        return 0.0
    return (part / whole) * 100.0


def get_file_name(path: str) -> str:
    """
Signature: `get_file_name(path: str) -> str`

Returns the last component of a path, ignoring trailing separators.
The root path ("/") is returned unchanged.
"""
    stripped = path.rstrip(os.sep)
    if not stripped:
        return path
    return stripped.rsplit(os.sep, 1)[-1]
