"""Data shapes shared by the parser, the bias engine and the formatters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

# Feed impact levels kept after parsing (Low / Non-Economic / Holiday are dropped).
IMPACT_HIGH = "High"
IMPACT_MEDIUM = "Medium"
KEPT_IMPACTS = frozenset({IMPACT_HIGH, IMPACT_MEDIUM})

TARGET_CURRENCY = "USD"

# Per-event gold bias labels.
GOLD_BUY = "BUY"
GOLD_SELL = "SELL"
GOLD_NEUTRAL = "NEUTRAL"
GOLD_UNKNOWN = "UNKNOWN"

# Aggregate bias labels.
BIAS_BUY = "BUY"
BIAS_SLIGHT_BUY = "SLIGHT BUY"
BIAS_NEUTRAL = "NEUTRAL"
BIAS_SLIGHT_SELL = "SLIGHT SELL"
BIAS_SELL = "SELL"

CONFIDENCE_LOW = "LOW"
CONFIDENCE_MEDIUM = "MEDIUM"
CONFIDENCE_HIGH = "HIGH"

MODE_PRE = "pre"
MODE_POST = "post"
MODES = (MODE_PRE, MODE_POST)


@dataclass(frozen=True, slots=True)
class NewsEvent:
    """One USD calendar entry extracted from the feed.

    Every text field defaults to ``""`` when the feed does not carry it.
    """

    title: str
    date: date | None                # UTC calendar date (None → unparseable)
    time: str = ""                   # e.g. "1:30pm"; empty for all-day entries
    impact: str = ""                 # "High" or "Medium"
    currency: str = ""               # always "USD" after parsing
    forecast: str = ""
    previous: str = ""
    actual: str = ""                 # present only once released

    @property
    def is_high_impact(self) -> bool:
        return self.impact == IMPACT_HIGH

    @property
    def is_released(self) -> bool:
        return bool((self.actual or "").strip())


@dataclass(frozen=True, slots=True)
class IndicatorRule:
    """Maps a title keyword to its expected effect on the dollar."""

    keyword: str                     # case-insensitive substring of the title
    usd_positive: bool               # True → a strong reading lifts USD
    weight: int                      # salience
    description: str = ""
    category: str = ""               # inflation, employment, growth, ...


@dataclass(frozen=True, slots=True)
class AnalyzedEvent:
    """A :class:`NewsEvent` with the engine's verdict attached."""

    event: NewsEvent
    rule: IndicatorRule | None       # None → no keyword matched
    gold_bias: str                   # BUY / SELL / NEUTRAL / UNKNOWN
    weight: float                    # effective weight, rounded to 0.1
    note: str = ""

    @property
    def title(self) -> str:
        return self.event.title

    @property
    def matched(self) -> bool:
        return self.rule is not None


@dataclass(frozen=True, slots=True)
class BiasThresholds:
    """Calibration constants for the aggregate label and confidence tier.

    All comparisons are strict (``>`` / ``<``).
    """

    strong: float = 4.0              # |net| above → BUY / SELL
    slight: float = 2.0              # |net| above → SLIGHT BUY / SLIGHT SELL
    high_confidence: float = 6.0
    medium_confidence: float = 3.0


DEFAULT_THRESHOLDS = BiasThresholds()


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Aggregate gold bias for one batch of events.

    ``net_score`` is ``bullish_usd_score - bearish_usd_score``: positive means
    the dollar is favoured, which is bearish for gold.
    """

    bias: str
    confidence: str
    bullish_usd_score: float
    bearish_usd_score: float
    net_score: float
    mode: str
    events: list[AnalyzedEvent] = field(default_factory=list)
    reason: str = ""                 # set when there was nothing to analyse
