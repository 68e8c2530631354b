# --- main.py ---

import argparse
import os
import sys
from typing import List, Optional

from config import Settings
from errors import FatalScanError
from scanner import Scanner
from session import Session
import utils


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _percentage(value: str) -> float:
    """argparse type for a percentage in [0, 100)."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if not 0.0 <= parsed < 100.0:
        raise argparse.ArgumentTypeError("value must be in [0, 100)")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    defaults = Settings()
    parser = argparse.ArgumentParser(
        prog="disk-explorer",
        description="Browse a directory tree by size and remove what takes up space.",
    )
    parser.add_argument("path", nargs="?", help="directory to scan (default: current directory)")
    parser.add_argument("--max-entries", type=_positive_int, default=defaults.max_printed,
                        help="maximum number of children listed per directory")
    parser.add_argument("--min-percentage", type=_percentage, default=defaults.min_percentage,
                        help="stop listing once the remaining entries cover less than this")
    parser.add_argument("--trash", action="store_true",
                        help="move removed entries to the trash instead of deleting them")
    return parser


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def _enable_line_editing():
    # History and cursor keys for input(); not available on every platform.
    try:
        import readline  # noqa: F401
    except ImportError:
        pass


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits with 2 on usage errors
        return 0 if e.code == 0 else 1

    if args.path is None:
        try:
            base_path = os.getcwd()
        except OSError as e:
            print(f"[ERROR] can't determine current directory: {e}", file=sys.stderr)
            return 1
    else:
        base_path = os.path.realpath(args.path)

    settings = Settings.from_args(args)

    def on_warning(message: str):
        print(f"[WARNING] {message}", file=sys.stderr)

    print("[INFO] building tree, please wait")
    try:
        scan_result = Scanner(base_path, on_warning=on_warning).scan()
    except FatalScanError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    print(f"[INFO] {scan_result.total_files_count} files, "
          f"{scan_result.total_dirs_count} directories, "
          f"{utils.format_bytes(scan_result.total_size_bytes)}")
    if scan_result.scan_errors:
        print(f"[INFO] {len(scan_result.scan_errors)} paths skipped", file=sys.stderr)

    _enable_line_editing()
    session = Session(scan_result.root_node, settings, read_line=_read_line)
    try:
        return session.run()
    except KeyboardInterrupt:
        print()
        return 1


# --- Entry Point ---
if __name__ == "__main__":
    sys.exit(main())
