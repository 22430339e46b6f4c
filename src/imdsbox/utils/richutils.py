#!/usr/bin/env python3


from typing import Any, Iterable, Literal, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class RichUtils:
    """
    RichUtils 类。

    Console output helpers for the command line.
    """
    def __init__(self, console: Optional[Console] = None):
        """
        初始化对象。

        Args:
            console: Console to write to. Defaults to stdout with the app theme.
        """
        self.theme = Theme({
            "info": "bold blue",
            "warning": "bold yellow",
            "danger": "bold red",
        })
        self.console = console or Console(theme=self.theme)

    def print(self, msg: str, style: Literal['info', 'warning', 'danger']='info'):
        """
        打印。

        Args:
            msg: msg 参数。
            style: style 参数。
        """
        self.console.print(msg, style=style)

    def print_fields(self, title: str, rows: Iterable[Tuple[str, Any]]):
        """
        Print key/value pairs as a two-column table.

        List values are shown one item per line.

        Args:
            title: Table title.
            rows: ``(field, value)`` pairs.
        """
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("field", style="bold")
        table.add_column("value", overflow="fold")
        for key, value in rows:
            if isinstance(value, (list, tuple)):
                value = "\n".join(str(item) for item in value)
            table.add_row(key, Text(str(value)))
        self.console.print(table)
