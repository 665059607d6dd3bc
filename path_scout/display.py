# File: path_scout/display.py
"""path_scout.display: Политика вывода результатов на консоль и в журнал сканирования."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

import click

from path_scout.models import ProbeResult

__all__ = ["DisplayMode", "ResultPrinter"]

_OK = 200


class DisplayMode(str, Enum):
    """Какие результаты печатать."""

    QUIET = "quiet"  # только URL найденных (200)
    FOUND = "found"  # "<url> <status>" для 200
    ALL = "all"  # "<url> <status>" для всех


class ResultPrinter:
    """Приёмник результатов: печатает по режиму и пишет каждый результат в журнал."""

    def __init__(
        self,
        mode: DisplayMode = DisplayMode.FOUND,
        echo: Callable[[str], None] = click.echo,
        scan_log: Optional[logging.Logger] = None,
    ) -> None:
        self.mode = mode
        self.echo = echo
        self.scan_log = scan_log

    def render(self, result: ProbeResult) -> Optional[str]:
        """Строка для консоли или None, если результат скрыт режимом."""
        if self.mode is DisplayMode.QUIET:
            return result.url if result.status == _OK else None
        if result.status == _OK or self.mode is DisplayMode.ALL:
            return f"{result.url} {result.status}"
        return None

    def __call__(self, result: ProbeResult) -> None:
        line = self.render(result)
        if line is not None:
            self.echo(line)
        if self.scan_log is not None:
            self.scan_log.info("%s %d", result.url, result.status)
