"""Tests for the run modes and entry point, with fake collaborators."""

from __future__ import annotations

from datetime import date, datetime, timezone
from unittest.mock import patch

import pytest

from gold_news_bias import agent
from gold_news_bias.fetchers import BaseFetcher
from gold_news_bias.notifiers import BaseNotifier

WEEK_FEED = """<weeklyevents>
<event><title>Bank Holiday</title><country>USD</country><date>10-12-2026</date><impact>Holiday</impact></event>
<event><title>Core CPI m/m</title><country>USD</country><date>10-14-2026</date><time>12:30pm</time>
<impact>High</impact><forecast>0.4%</forecast><previous>0.3%</previous></event>
<event><title>Unemployment Claims</title><country>USD</country><date>10-15-2026</date><time>12:30pm</time>
<impact>Medium</impact><forecast>225K</forecast><previous>231K</previous><actual>245K</actual></event>
<event><title>Retail Sales m/m</title><country>USD</country><date>10-15-2026</date><time>12:30pm</time>
<impact>High</impact><forecast>0.4%</forecast><previous>0.2%</previous></event>
</weeklyevents>"""

WEDNESDAY = datetime(2026, 10, 14, 6, 5, tzinfo=timezone.utc)
THURSDAY_PM = datetime(2026, 10, 15, 14, 0, tzinfo=timezone.utc)
MONDAY = datetime(2026, 10, 12, 6, 0, tzinfo=timezone.utc)


class FakeFetcher(BaseFetcher):

    def __init__(self, text: str = WEEK_FEED) -> None:
        self.text = text

    @property
    def name(self) -> str:
        return "fake"

    def fetch(self) -> str:
        return self.text


class FakeNotifier(BaseNotifier):

    def __init__(self) -> None:
        self.sent: list[tuple[str, object, object]] = []

    @property
    def name(self) -> str:
        return "fake"

    def send(self, message, *, result=None, day=None) -> bool:
        self.sent.append((message, result, day))
        return True


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


class TestResolveMode:

    @pytest.mark.parametrize(
        "hour, expected",
        [(6, "morning"), (7, "morning"), (13, "update"), (15, "update"), (16, "morning"), (2, "morning")],
    )
    def test_auto(self, hour: int, expected: str) -> None:
        now = datetime(2026, 10, 14, hour, 0, tzinfo=timezone.utc)
        assert agent.resolve_mode("auto", now) == expected

    def test_explicit_mode_kept(self) -> None:
        assert agent.resolve_mode("weekly", WEDNESDAY) == "weekly"


class TestRunMorning:

    def test_sends_todays_brief(self, notifier: FakeNotifier) -> None:
        result = agent.run_morning(FakeFetcher(), notifier, WEDNESDAY)
        assert [item.title for item in result.events] == ["Core CPI m/m"]
        assert result.mode == "pre"
        assert result.bias == "SELL"
        assert len(notifier.sent) == 1
        message, sent_result, day = notifier.sent[0]
        assert "GOLD NEWS BIAS — Wed, 14 Oct 2026" in message
        assert sent_result is result
        assert day == date(2026, 10, 14)

    def test_monday_sends_weekly_preview_first(self, notifier: FakeNotifier) -> None:
        result = agent.run_morning(FakeFetcher(), notifier, MONDAY)
        assert len(notifier.sent) == 2
        assert "WEEKLY NEWS PREVIEW" in notifier.sent[0][0]
        assert "GOLD NEWS BIAS" in notifier.sent[1][0]
        # Only a holiday on Monday, which is filtered out.
        assert result.events == []
        assert result.bias == "NEUTRAL"

    def test_fetch_failure_gives_neutral_brief(self, notifier: FakeNotifier) -> None:
        result = agent.run_morning(FakeFetcher(""), notifier, WEDNESDAY)
        assert result.bias == "NEUTRAL"
        assert result.confidence == "LOW"
        assert "No high-impact USD news today" in notifier.sent[0][0]


class TestRunUpdate:

    def test_skips_when_nothing_released(self, notifier: FakeNotifier) -> None:
        assert agent.run_update(FakeFetcher(), notifier, WEDNESDAY) is None
        assert notifier.sent == []

    def test_post_release_analysis(self, notifier: FakeNotifier) -> None:
        result = agent.run_update(FakeFetcher(), notifier, THURSDAY_PM)
        assert result is not None
        assert result.mode == "post"
        claims, retail = result.events
        # Claims above forecast → dollar-bearish.
        assert claims.gold_bias == "BUY"
        # Retail sales not released yet → pre-release treatment.
        assert retail.gold_bias == "SELL"
        assert "GOLD NEWS UPDATE" in notifier.sent[0][0]


class TestRunWeekly:

    def test_preview_covers_week(self, notifier: FakeNotifier) -> None:
        message = agent.run_weekly(FakeFetcher(), notifier, MONDAY)
        assert "Wednesday 14 Oct" in message
        assert "Thursday 15 Oct" in message
        assert notifier.sent[0][1] is None


class TestMain:

    def test_runs_selected_mode(self, notifier: FakeNotifier) -> None:
        with patch.object(agent, "get_fetcher", return_value=FakeFetcher()), \
             patch.object(agent, "get_notifier", return_value=notifier):
            code = agent.main(["weekly"], now=MONDAY)
        assert code == 0
        assert "WEEKLY NEWS PREVIEW" in notifier.sent[0][0]

    def test_auto_mode_uses_clock(self, notifier: FakeNotifier) -> None:
        with patch.object(agent, "get_fetcher", return_value=FakeFetcher()), \
             patch.object(agent, "get_notifier", return_value=notifier):
            assert agent.main([], now=THURSDAY_PM) == 0
        assert "GOLD NEWS UPDATE" in notifier.sent[0][0]

    def test_unknown_source_exits_non_zero(self, capsys) -> None:
        assert agent.main(["morning", "--source", "nope", "--notifier", "console"], now=WEDNESDAY) == 1
        assert "Fatal error" in capsys.readouterr().out

    def test_unexpected_exception_exits_non_zero(self, notifier: FakeNotifier) -> None:
        fetcher = FakeFetcher()
        with patch.object(agent, "get_fetcher", return_value=fetcher), \
             patch.object(agent, "get_notifier", return_value=notifier), \
             patch.object(fetcher, "fetch", side_effect=RuntimeError("boom")):
            assert agent.main(["morning"], now=WEDNESDAY) == 1
