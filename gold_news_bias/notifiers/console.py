"""Notifier that prints the message instead of delivering it."""

from __future__ import annotations

from datetime import date

from ..models import AnalysisResult
from .base import BaseNotifier


def print_preview(message: str) -> None:
    print("\n--- MESSAGE PREVIEW ---\n")
    print(message)
    print("\n--- END PREVIEW ---\n")


class ConsoleNotifier(BaseNotifier):

    @property
    def name(self) -> str:
        return "console"

    def send(
        self,
        message: str,
        *,
        result: AnalysisResult | None = None,
        day: date | None = None,
    ) -> bool:
        print_preview(message)
        return True
