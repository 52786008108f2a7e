"""Console output for the fileroute CLI.

Thin wrapper around a Rich console with a small set of named themes,
status lines and tables. Colours are dropped automatically when the
output is not a terminal or NO_COLOR is set.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    SUCCESS = ("[✓]", "success", "green")
    ERROR = ("[x]", "error", "red")
    WARNING = ("[!]", "warning", "yellow")
    INFO = ("[!]", "info", "cyan")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    info: str
    warning: str
    error: str
    success: str
    highlight: str
    path: str
    number: str
    dim: str


THEMES = {
    'manhattan': ThemeColors(
        info='cyan',
        warning='yellow',
        error='red',
        success='green',
        highlight='bright_cyan',
        path='white',
        number='bright_blue',
        dim='bright_black',
    ),
    'green': ThemeColors(
        info='green',
        warning='yellow',
        error='red',
        success='bright_green',
        highlight='bold green',
        path='bright_green',
        number='green',
        dim='green',
    ),
    'sunset': ThemeColors(
        info='orange3',
        warning='yellow',
        error='red3',
        success='green',
        highlight='bold orange1',
        path='wheat1',
        number='orange1',
        dim='grey50',
    ),
}


class ConsoleManager:
    """Console with theme support, status lines and tables."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None,
                 force_plain: bool = False):
        """
        Initialize console manager.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
            force_plain: Disable colours even on a terminal
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        no_color = force_plain or bool(os.environ.get('NO_COLOR'))
        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            no_color=no_color,
            highlight=False,
            soft_wrap=True,
        )

    def _create_rich_theme(self) -> Theme:
        """Create Rich theme from our theme colors."""
        colors = self.theme_colors
        return Theme({
            'info': colors.info,
            'warning': colors.warning,
            'error': colors.error,
            'success': colors.success,
            'highlight': colors.highlight,
            'path': colors.path,
            'number': colors.number,
            'dim': colors.dim,
        })

    def print_status(self, status: StatusType, message: str, prefix: str = ""):
        """Print a status line with icon."""
        icon, _, color = status.value
        status_text = Text()
        if prefix:
            status_text.append(prefix + " ")
        status_text.append(f"{icon} ", style=color)
        status_text.append(message)
        self.console.print(status_text)

    def print_error(self, message: str):
        self.print_status(StatusType.ERROR, message)

    def print_warning(self, message: str):
        self.print_status(StatusType.WARNING, message)

    def print_table(self, headers: List[str], rows: List[List[str]],
                    title: Optional[str] = None, caption: Optional[str] = None):
        """Print a formatted table."""
        table = Table(title=title, caption=caption, show_header=True,
                      header_style="highlight")
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*[Text(str(cell)) for cell in row])
        self.console.print(table)

    def print_exception(self):
        self.console.print_exception()
