"""Turn an :class:`AnalysisResult` into chat text or JSON.

Formatters only read the result; swapping one out never touches the engine.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date

from .models import (
    BIAS_BUY,
    BIAS_NEUTRAL,
    BIAS_SLIGHT_BUY,
    GOLD_BUY,
    GOLD_SELL,
    AnalysisResult,
    AnalyzedEvent,
    NewsEvent,
)

# Discord rejects messages above 2000 characters.
DISCORD_CHUNK_SIZE = 1900

SEPARATOR = "━━━━━━━━━━━━━━━━━━━━━━━━"

_BIAS_EMOJI: dict[str, str] = {
    "BUY": "🟢",
    "SLIGHT BUY": "🟡",
    "NEUTRAL": "⚪",
    "SLIGHT SELL": "🟡",
    "SELL": "🔴",
}

_CONFIDENCE_BARS: dict[str, str] = {
    "LOW": "▰▱▱",
    "MEDIUM": "▰▰▱",
    "HIGH": "▰▰▰",
}


def _impact_icon(event: NewsEvent) -> str:
    return "🔴" if event.is_high_impact else "🟠"


def _gold_arrow(gold_bias: str) -> str:
    if gold_bias == GOLD_BUY:
        return "⬆️ Gold"
    if gold_bias == GOLD_SELL:
        return "⬇️ Gold"
    return "➡️ Gold"


def _bias_line(result: AnalysisResult, *, when: str = "today") -> str:
    if result.bias == BIAS_NEUTRAL:
        return f"⚪ **NEUTRAL** — No clear direction from news {when}"
    emoji = _BIAS_EMOJI.get(result.bias, "⚪")
    if result.bias in (BIAS_BUY, BIAS_SLIGHT_BUY):
        leaning = "weakness in USD"
    else:
        leaning = "strength in USD"
    return f"{emoji} **{result.bias} GOLD** — News favors {leaning}"


def _score_lines(result: AnalysisResult) -> list[str]:
    bars = _CONFIDENCE_BARS.get(result.confidence, "")
    return [
        f"📊 Confidence: **{result.confidence}** {bars}".rstrip(),
        f"📈 USD Bullish Score: {result.bullish_usd_score} | "
        f"USD Bearish Score: {result.bearish_usd_score} | Net: {result.net_score:+.1f}",
    ]


def _event_lines(item: AnalyzedEvent, *, show_actual: bool) -> list[str]:
    ev = item.event
    when = ev.time or "All Day"
    lines = [f"   {_impact_icon(ev)} **{when}** — {ev.title or ''}"]
    values = []
    if show_actual and ev.actual:
        values.append(f"Actual: {ev.actual}")
    if ev.forecast:
        values.append(f"Forecast: {ev.forecast}")
    if ev.previous:
        values.append(f"Prev: {ev.previous}")
    values.append(_gold_arrow(item.gold_bias))
    lines.append("      " + " | ".join(values))
    if show_actual and item.note:
        lines.append(f"      _{item.note}_")
    return lines


# ---------------------------------------------------------------------------
# Chat messages
# ---------------------------------------------------------------------------

def format_morning_message(result: AnalysisResult, date_str: str) -> str:
    """Pre-release brief for the day."""
    lines = [
        f"📰 **GOLD NEWS BIAS — {date_str}**",
        SEPARATOR,
        _bias_line(result),
        *_score_lines(result),
        "",
        "🗓️ **Today's Key Events (UTC):**",
    ]
    if not result.events:
        lines.append(f"   {result.reason or 'No high-impact USD news today'}")
    else:
        for item in result.events:
            lines.extend(_event_lines(item, show_actual=False))

    lines.append("")
    lines.append("⚠️ *Bias is pre-release estimate. Always wait for actual data before trading.*")
    lines.append("🕐 *Check back after releases for confirmation*")
    return "\n".join(lines)


def format_post_release_message(result: AnalysisResult, date_str: str) -> str:
    """Update after actual figures are out."""
    released = [item for item in result.events if item.event.is_released]
    pending = [item for item in result.events if not item.event.is_released]

    lines = [
        f"📊 **GOLD NEWS UPDATE — {date_str}**",
        SEPARATOR,
        _bias_line(result, when="releases"),
        *_score_lines(result),
        "",
        "✅ **Released (UTC):**",
    ]
    if not released:
        lines.append("   Nothing released yet")
    for item in released:
        lines.extend(_event_lines(item, show_actual=True))

    if pending:
        lines.append("")
        lines.append("⏳ **Still pending:**")
        for item in pending:
            lines.extend(_event_lines(item, show_actual=False))

    lines.append("")
    lines.append("⚠️ *Post-release read of actual vs forecast. Not a price prediction.*")
    return "\n".join(lines)


def format_weekly_preview(day_results: Mapping[date, AnalysisResult], date_str: str) -> str:
    """Day-by-day outlook for the week from per-day pre-release results."""
    lines = [
        f"📆 **GOLD WEEKLY NEWS PREVIEW — week of {date_str}**",
        SEPARATOR,
    ]
    if not day_results:
        lines.append("No high-impact USD news this week")
        return "\n".join(lines)

    for day, result in sorted(day_results.items()):
        emoji = _BIAS_EMOJI.get(result.bias, "⚪")
        lines.append("")
        lines.append(
            f"**{day.strftime('%A %d %b')}** — {emoji} {result.bias} "
            f"({result.confidence}, net {result.net_score:+.1f})"
        )
        for item in result.events:
            ev = item.event
            forecast = f" (F: {ev.forecast})" if ev.forecast else ""
            lines.append(
                f"   {_impact_icon(ev)} {ev.time or 'All Day'} — {ev.title or ''}{forecast} {_gold_arrow(item.gold_bias)}"
            )

    lines.append("")
    lines.append("⚠️ *Weekly outlook from the calendar only. Re-check each morning.*")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Machine-readable
# ---------------------------------------------------------------------------

def result_to_dict(result: AnalysisResult, date_str: str = "") -> dict:
    return {
        "date": date_str,
        "mode": result.mode,
        "bias": result.bias,
        "confidence": result.confidence,
        "bullish_usd_score": result.bullish_usd_score,
        "bearish_usd_score": result.bearish_usd_score,
        "net_score": result.net_score,
        "reason": result.reason,
        "events": [
            {
                "title": item.event.title or "",
                "date": item.event.date.isoformat() if item.event.date else None,
                "time": item.event.time or "",
                "impact": item.event.impact or "",
                "forecast": item.event.forecast or "",
                "previous": item.event.previous or "",
                "actual": item.event.actual or "",
                "indicator": item.rule.keyword if item.rule else None,
                "gold_bias": item.gold_bias,
                "weight": item.weight,
                "note": item.note,
            }
            for item in result.events
        ],
    }


def format_json(result: AnalysisResult, date_str: str = "") -> str:
    return json.dumps(result_to_dict(result, date_str), ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# Chunking
# ---------------------------------------------------------------------------

def split_message(message: str, max_len: int = DISCORD_CHUNK_SIZE) -> list[str]:
    """Split *message* on line boundaries into chunks of at most *max_len*.

    Blank lines are preserved.  A single line longer than *max_len* is
    hard-wrapped.
    """
    if len(message) <= max_len:
        return [message]

    chunks: list[str] = []
    current: str | None = None      # None → no chunk in progress
    for line in message.split("\n"):
        while len(line) > max_len:
            if current is not None:
                chunks.append(current)
                current = None
            chunks.append(line[:max_len])
            line = line[max_len:]
        if current is None:
            current = line
        elif len(current) + 1 + len(line) > max_len:
            chunks.append(current)
            current = line
        else:
            current = f"{current}\n{line}"
    if current is not None:
        chunks.append(current)
    return chunks
