"""Fetcher that replays a calendar feed saved on disk."""

from __future__ import annotations

import os

from .base import BaseFetcher


class FileFetcher(BaseFetcher):
    """Read the feed from ``NEWS_FEED_PATH`` (or an explicit *path*)."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path or os.environ.get("NEWS_FEED_PATH", "")

    @property
    def name(self) -> str:
        return "file"

    def fetch(self) -> str:
        if not self.path:
            print("[file] NEWS_FEED_PATH not set – skipping.")
            return ""
        try:
            with open(self.path, encoding="utf-8", errors="replace") as fh:
                return fh.read()
        except OSError as exc:
            print(f"[file] Could not read {self.path}: {exc}")
            return ""
