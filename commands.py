# --- commands.py ---

from dataclasses import dataclass
from typing import List

from errors import CommandError

# --- Actions ---

NAVIGATE = "navigate"
REMOVE = "rm"
HELP = "help"

COMMANDS = (REMOVE, HELP)


@dataclass
class Command:
    """One parsed input line."""
    action: str
    argument: str = ""


def extract_name(line: str) -> str:
    """Strip surrounding whitespace from a navigation token."""
    return line.strip()


def parse_line(line: str, prefix: str = "/") -> Command:
    """
    Split an input line into an action and its argument.

    Lines starting with prefix are commands: the keyword runs up to the
    first whitespace, the rest (trimmed) is the argument. Everything else
    is a name to navigate to.
    """
    if not line.startswith(prefix):
        return Command(NAVIGATE, extract_name(line))

    parts = line[len(prefix):].split(None, 1)
    keyword = parts[0] if parts else ""
    argument = parts[1].strip() if len(parts) > 1 else ""

    if keyword not in COMMANDS:
        raise CommandError(f"command not recognized: {prefix}{keyword}")
    if keyword == HELP and argument:
        raise CommandError(f"wrong command: {prefix}{HELP} {argument}")
    return Command(keyword, argument)


def help_lines(prefix: str = "/") -> List[str]:
    return [
        "Enter file name to go to this directory or .. to go up one level",
        f"{prefix}{REMOVE} [file] to remove file or current directory if not stated",
        f"{prefix}{HELP} to display this message",
    ]
