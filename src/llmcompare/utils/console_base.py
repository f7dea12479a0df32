"""Themed console output for the terminal UI.

Wraps a Rich console with a small set of retro terminal themes and the
status-line helpers the comparison flow prints with.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
import os
import sys

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success")
    ERROR = ("[x]", "error")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    error: str
    success: str
    highlight: str
    header: str
    prompt: str
    dim: str
    accent: str


THEMES = {
    'manhattan': ThemeColors(
        error='red',
        success='green',
        highlight='bright_cyan',
        header='bold bright_cyan',
        prompt='bright_cyan',
        dim='bright_black',
        accent='cyan',
    ),
    'green': ThemeColors(
        error='red',
        success='bright_green',
        highlight='bold green',
        header='bold green',
        prompt='bright_green',
        dim='green',
        accent='bright_green',
    ),
    'sunset': ThemeColors(
        error='red3',
        success='green',
        highlight='bold orange1',
        header='bold orange1',
        prompt='orange1',
        dim='grey50',
        accent='dark_orange3',
    ),
}


class ConsoleManager:
    """Console output with theme support.

    Regular output goes to ``file`` (stdout by default); errors go to
    ``err_file`` (stderr by default).
    """

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 err_file: Optional[Any] = None, force_terminal: Optional[bool] = None):
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout
        self.err_file = err_file or sys.stderr

        rich_theme = self._create_rich_theme()
        no_color = bool(os.environ.get('NO_COLOR'))
        self.console = Console(theme=rich_theme, file=self.file, highlight=False,
                               force_terminal=force_terminal, no_color=no_color)
        self.err_console = Console(theme=rich_theme, file=self.err_file, highlight=False,
                                   force_terminal=force_terminal, no_color=no_color)

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        return Theme({
            'error': self.theme_colors.error,
            'success': self.theme_colors.success,
            'highlight': self.theme_colors.highlight,
            'header': self.theme_colors.header,
            'prompt': self.theme_colors.prompt,
            'dim': self.theme_colors.dim,
            'accent': self.theme_colors.accent,
        })

    def print(self, *args, **kwargs):
        """Print with Rich formatting."""
        self.console.print(*args, **kwargs)

    def print_banner(self, title: str):
        """Print the welcome banner."""
        width = max(len(title) + 8, 60)
        self.console.print("═" * width, style="highlight")
        self.console.print(title.center(width), style="header")
        self.console.print("═" * width, style="highlight")
        self.console.print()

    def print_section(self, title: str):
        """Print a section header such as the LLM response markers."""
        self.console.print(f"\n--- {title} ---\n", style="accent", markup=False)

    def print_status(self, status: StatusType, message: str, err: bool = False):
        """Print a status line with icon."""
        icon, style = status.value
        status_text = Text()
        status_text.append(f"{icon} ", style=style)
        status_text.append(message)
        (self.err_console if err else self.console).print(status_text)

    def print_error(self, message: str):
        """Print an error message to the error stream."""
        self.print_status(StatusType.ERROR, message, err=True)

    def print_success(self, message: str):
        """Print a success message."""
        self.print_status(StatusType.SUCCESS, message)

    def print_exception(self):
        """Print the active exception's traceback."""
        self.err_console.print_exception()
