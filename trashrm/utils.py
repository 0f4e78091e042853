import os
from enum import Enum

from rich.console import Console
from rich.markup import escape

# soft_wrap keeps long paths on a single line.
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


class Color(Enum):
    NONE = 0
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    WHITE = 97


def colored(color: Color, text: str) -> str:
    return f"\033[{color.value}m{text}\033[{Color.NONE.value}m"


def display_path(path: os.PathLike) -> str:
    """Path as printable text; undecodable bytes become U+FFFD."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def print_error(msg: str):
    """Print a single failure line to stderr."""
    err_console.print(f"[red]{escape(msg)}[/red]")
