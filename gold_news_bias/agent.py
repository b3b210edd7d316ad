"""Gold news bias agent.

Fetches the week's USD calendar, derives a gold bias and delivers it.

Modes (first CLI argument, default ``auto``):

``morning``  pre-release brief for today; on Mondays a weekly preview first
``update``   post-release update, skipped until something has been released
``weekly``   day-by-day preview of the whole week
``auto``     picks ``morning`` or ``update`` from the current UTC hour

Data source and delivery channel are pluggable via ``EVENT_SOURCE``
(default: ``forexfactory``) and ``NOTIFIER`` (default: ``discord``).
"""

from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime, timezone

from .engine import analyze
from .feed import filter_today, group_by_date, has_released, parse
from .fetchers import BaseFetcher, get_fetcher
from .formatting import (
    format_morning_message,
    format_post_release_message,
    format_weekly_preview,
)
from .models import MODE_POST, MODE_PRE, AnalysisResult, NewsEvent
from .notifiers import BaseNotifier, get_notifier

# ---------------------------------------------------------------------------
# Configuration constants
# ---------------------------------------------------------------------------
DEFAULT_SOURCE = "forexfactory"
DEFAULT_NOTIFIER = "discord"

RUN_MODES = ("auto", "morning", "update", "weekly")

# UTC hour windows used by ``auto``; most US releases land 12:30–14:00 UTC.
MORNING_HOURS = range(6, 8)
UPDATE_HOURS = range(13, 16)

MONDAY = 0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def display_date(now: datetime) -> str:
    """e.g. ``Mon, 19 Oct 2026``."""
    return now.strftime("%a, %d %b %Y")


def resolve_mode(mode: str, now: datetime) -> str:
    """Turn ``auto`` into a concrete mode based on the UTC hour."""
    if mode != "auto":
        return mode
    if now.hour in MORNING_HOURS:
        return "morning"
    if now.hour in UPDATE_HOURS:
        return "update"
    return "morning"


def fetch_events(fetcher: BaseFetcher) -> list[NewsEvent]:
    """Fetch and parse the week; transport failures yield ``[]``."""
    events = parse(fetcher.fetch())
    print(f"[agent] {fetcher.name}: {len(events)} USD high/medium events this week.")
    return events


# ---------------------------------------------------------------------------
# Run modes
# ---------------------------------------------------------------------------

def run_weekly(
    fetcher: BaseFetcher,
    notifier: BaseNotifier,
    now: datetime,
    events: list[NewsEvent] | None = None,
) -> str:
    if events is None:
        events = fetch_events(fetcher)
    day_results = {
        day: analyze(day_events, MODE_PRE)
        for day, day_events in group_by_date(events).items()
    }
    message = format_weekly_preview(day_results, display_date(now))
    notifier.send(message)
    return message


def run_morning(
    fetcher: BaseFetcher,
    notifier: BaseNotifier,
    now: datetime,
    *,
    with_weekly: bool | None = None,
) -> AnalysisResult:
    week = fetch_events(fetcher)

    if with_weekly is None:
        with_weekly = now.weekday() == MONDAY
    if with_weekly:
        print("[agent] Monday – sending weekly preview first.")
        run_weekly(fetcher, notifier, now, events=week)

    today = filter_today(week, now.date())
    result = analyze(today, MODE_PRE)
    print(f"[agent] Bias: {result.bias} | Confidence: {result.confidence}")
    print(
        f"[agent] USD bullish: {result.bullish_usd_score} | "
        f"USD bearish: {result.bearish_usd_score}"
    )

    message = format_morning_message(result, display_date(now))
    notifier.send(message, result=result, day=now.date())
    return result


def run_update(
    fetcher: BaseFetcher,
    notifier: BaseNotifier,
    now: datetime,
) -> AnalysisResult | None:
    today = filter_today(fetch_events(fetcher), now.date())
    if not has_released(today):
        print("[agent] No actual data released yet – skipping update.")
        return None

    result = analyze(today, MODE_POST)
    print(f"[agent] Updated bias: {result.bias} | Confidence: {result.confidence}")

    message = format_post_release_message(result, display_date(now))
    notifier.send(message, result=result, day=now.date())
    return result


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gold-news-bias",
        description="Derive a gold bias from today's USD economic calendar.",
    )
    parser.add_argument("mode", nargs="?", default="auto", choices=RUN_MODES)
    parser.add_argument(
        "--source",
        default=os.environ.get("EVENT_SOURCE", DEFAULT_SOURCE),
        help="feed source (forexfactory, file)",
    )
    parser.add_argument(
        "--notifier",
        default=os.environ.get("NOTIFIER", DEFAULT_NOTIFIER),
        help="delivery channel (discord, console, gcal)",
    )
    return parser


def main(argv: list[str] | None = None, *, now: datetime | None = None) -> int:
    args = build_parser().parse_args(argv)
    now = now or _utc_now()

    try:
        fetcher = get_fetcher(args.source)
        notifier = get_notifier(args.notifier)
        mode = resolve_mode(args.mode, now)
        print(f"[agent] Mode: {mode} | source: {fetcher.name} | notifier: {notifier.name}")

        if mode == "morning":
            run_morning(fetcher, notifier, now)
        elif mode == "update":
            run_update(fetcher, notifier, now)
        else:
            run_weekly(fetcher, notifier, now)
    except Exception as exc:  # noqa: BLE001
        print(f"[agent] Fatal error: {exc!r}")
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
