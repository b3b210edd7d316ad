"""Post messages to a Discord channel through an incoming webhook.

The webhook URL comes from ``NEWS_WEBHOOK_URL``.  Without it the message is
printed as a preview so a dry run never fails.
"""

from __future__ import annotations

import json
import os
import time
import urllib.request
from datetime import date

from ..formatting import DISCORD_CHUNK_SIZE, split_message
from ..models import AnalysisResult
from .base import BaseNotifier
from .console import print_preview

REQUEST_TIMEOUT = 15
CHUNK_DELAY_SECONDS = 0.5


class DiscordNotifier(BaseNotifier):
    """Send chat text to a Discord webhook, split into 1900-char chunks."""

    def __init__(
        self,
        webhook_url: str | None = None,
        *,
        chunk_size: int = DISCORD_CHUNK_SIZE,
        delay: float = CHUNK_DELAY_SECONDS,
    ) -> None:
        self.webhook_url = webhook_url or os.environ.get("NEWS_WEBHOOK_URL", "")
        self.chunk_size = chunk_size
        self.delay = delay

    @property
    def name(self) -> str:
        return "discord"

    def send(
        self,
        message: str,
        *,
        result: AnalysisResult | None = None,
        day: date | None = None,
    ) -> bool:
        if not self.webhook_url:
            print("[discord] NEWS_WEBHOOK_URL not set – printing preview.")
            print_preview(message)
            return False

        # Discord rejects empty content; blank chunks only carry spacing.
        chunks = [c for c in split_message(message, self.chunk_size) if c.strip()]
        try:
            for i, chunk in enumerate(chunks):
                if i:
                    time.sleep(self.delay)
                self._post(chunk)
        except Exception as exc:  # noqa: BLE001
            print(f"[discord] Webhook delivery failed: {exc}")
            return False

        print(f"[discord] Sent {len(chunks)} message(s).")
        return True

    def _post(self, content: str) -> None:
        body = json.dumps({"content": content}).encode("utf-8")
        req = urllib.request.Request(
            self.webhook_url,
            data=body,
            headers={
                "Content-Type": "application/json",
                "User-Agent": "gold-news-bias",
            },
            method="POST",
        )
        with urllib.request.urlopen(req, timeout=REQUEST_TIMEOUT):  # noqa: S310
            pass
