# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, override

from rich.console import Console, ConsoleRenderable, RenderableType
from rich.containers import Renderables
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .handlers import is_simple


if TYPE_CHECKING:
    import logging

    from rich.traceback import Traceback


class CustomRichHandler(RichHandler):
    """Rich TTY handler printing ``[L:logger.name] message``, with the source location right-aligned.

    Records logged with ``extra={"simple": True}`` are printed as the bare message.
    """

    def __init__(self, *args: Any, show_path: bool = True, show_level: bool = True, show_name: bool = True, **kwargs: Any) -> None:
        kwargs.setdefault("rich_tracebacks", True)
        super().__init__(*args, console=Console(stderr=True), enable_link_path=False, **kwargs)

        # RichHandler renders its own level and path columns, which this handler replaces
        self.show_path = show_path
        self.show_level = show_level
        self.show_name = show_name

    @staticmethod
    def level_style(record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    def prefix(self, record: logging.LogRecord) -> Text | None:
        if is_simple(record):
            return None

        parts: list[tuple[str, str]] = []
        if self.show_level:
            parts.append((record.levelname[0], self.level_style(record)))
        if self.show_name:
            parts.append((record.name, "dim"))
        if not parts:
            return None

        text = Text("[", style="dim")
        for i, (part, style) in enumerate(parts):
            if i:
                text.append(":", style="dim")
            text.append(part, style=style)
        text.append("] ", style="dim")
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = self.prefix(record) or Text()
        text.append(message)
        return text

    @override
    def render(self, *, record: logging.LogRecord, traceback: Traceback | None, message_renderable: ConsoleRenderable) -> ConsoleRenderable:
        if is_simple(record):
            return message_renderable

        body: list[RenderableType] = [message_renderable] if traceback is None else [message_renderable, traceback]

        grid = Table.grid(padding=(0, 1), expand=True)
        grid.add_column(ratio=1, style=self.level_style(record), overflow="fold")
        cells: list[RenderableType] = [Renderables(body)]

        if self.show_path and (filename := Path(record.pathname).name):
            grid.add_column(style="log.path")
            cells.append(Text(f"{filename}:{record.lineno}" if record.lineno else filename))

        grid.add_row(*cells)
        return grid
