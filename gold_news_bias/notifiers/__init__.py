"""Outbound delivery channels for the gold bias brief."""

from __future__ import annotations

from .base import BaseNotifier
from .console import ConsoleNotifier
from .discord import DiscordNotifier
from .gcal import GoogleCalendarNotifier

__all__ = [
    "BaseNotifier",
    "ConsoleNotifier",
    "DiscordNotifier",
    "GoogleCalendarNotifier",
    "get_notifier",
]

# Registry of available notifiers – add new channels here.
_NOTIFIERS: dict[str, type[BaseNotifier]] = {
    "discord": DiscordNotifier,
    "console": ConsoleNotifier,
    "gcal": GoogleCalendarNotifier,
}


def get_notifier(name: str) -> BaseNotifier:
    """Return a notifier instance by name.

    Raises ``KeyError`` if *name* is not registered.
    """
    try:
        cls = _NOTIFIERS[name]
    except KeyError:
        available = ", ".join(sorted(_NOTIFIERS))
        raise KeyError(
            f"Unknown notifier '{name}'. Available: {available}"
        ) from None
    return cls()
