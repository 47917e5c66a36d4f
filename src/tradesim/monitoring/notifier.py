"""Notification backends."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

COLORS = {
    "default": "\033[0m",
    "success": "\033[0;32m",
    "error": "\033[0;31m",
    "info": "\033[0;36m",
}


class Notifier:
    def notify(self, level: str, message: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class ConsoleNotifier(Notifier):
    color: bool = True
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def notify(self, level: str, message: str) -> None:
        if not self.color:
            self.stream.write(message + "\n")
            return
        prefix = COLORS.get(level, COLORS["default"])
        self.stream.write(f"{prefix}{message}{COLORS['default']}\n")
