"""Gold bias engine.

Each USD event is matched against the indicator table and turned into a
directional weight.  Weights for dollar-positive outcomes are summed into
the bullish-USD score, dollar-negative ones into the bearish-USD score, and
the difference (net score) decides the gold bias:

* net > 0 → dollar favoured → bearish gold (SELL side)
* net < 0 → dollar pressured → bullish gold (BUY side)

Two modes are supported:

``pre``
    Before release.  Direction comes from the rule's polarity alone; the
    forecast vs. previous comparison only scales the weight.
``post``
    After release.  Actual vs. forecast decides the direction.  Events not
    yet released fall back to the ``pre`` treatment.

The engine is a pure function of its inputs: no I/O, no state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from .indicators import INDICATOR_RULES, match_rule
from .models import (
    BIAS_BUY,
    BIAS_NEUTRAL,
    BIAS_SELL,
    BIAS_SLIGHT_BUY,
    BIAS_SLIGHT_SELL,
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MEDIUM,
    DEFAULT_THRESHOLDS,
    GOLD_BUY,
    GOLD_NEUTRAL,
    GOLD_SELL,
    GOLD_UNKNOWN,
    MODE_POST,
    MODE_PRE,
    MODES,
    AnalysisResult,
    AnalyzedEvent,
    BiasThresholds,
    IndicatorRule,
    NewsEvent,
)
from .numbers import parse_number

HIGH_IMPACT_MULTIPLIER = 1.5
IMPROVING_MULTIPLIER = 1.2
WEAKENING_MULTIPLIER = 0.9
IN_LINE_MULTIPLIER = 0.3
UNMATCHED_WEIGHT = 1

NO_NEWS_REASON = "No high-impact USD news today"


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

def classify_bias(net_score: float, thresholds: BiasThresholds = DEFAULT_THRESHOLDS) -> str:
    """Map a net USD score to a gold bias label (strict comparisons)."""
    if net_score > thresholds.strong:
        return BIAS_SELL
    if net_score < -thresholds.strong:
        return BIAS_BUY
    if net_score > thresholds.slight:
        return BIAS_SLIGHT_SELL
    if net_score < -thresholds.slight:
        return BIAS_SLIGHT_BUY
    return BIAS_NEUTRAL


def classify_confidence(net_score: float, thresholds: BiasThresholds = DEFAULT_THRESHOLDS) -> str:
    magnitude = abs(net_score)
    if magnitude > thresholds.high_confidence:
        return CONFIDENCE_HIGH
    if magnitude > thresholds.medium_confidence:
        return CONFIDENCE_MEDIUM
    return CONFIDENCE_LOW


# ---------------------------------------------------------------------------
# Per-event scoring
# ---------------------------------------------------------------------------

def _polarity_bias(rule: IndicatorRule) -> str:
    # Dollar-positive data → stronger USD → weaker gold.
    return GOLD_SELL if rule.usd_positive else GOLD_BUY


def _score_pre(event: NewsEvent, rule: IndicatorRule, weight: float) -> tuple[str, float, str]:
    """Direction from polarity; forecast vs. previous only scales *weight*."""
    forecast = parse_number(event.forecast)
    previous = parse_number(event.previous)

    if forecast is None or previous is None:
        note = f"{rule.description}: no forecast/previous comparison"
    else:
        if rule.usd_positive:
            improving = forecast > previous
        else:
            improving = forecast < previous
        if improving:
            weight *= IMPROVING_MULTIPLIER
            note = f"{rule.description}: expected to improve ({event.forecast} vs {event.previous})"
        else:
            weight *= WEAKENING_MULTIPLIER
            note = f"{rule.description}: expected to weaken ({event.forecast} vs {event.previous})"

    if rule.usd_positive:
        note += " - data favours USD"
    else:
        note += " - data weakens USD"
    return _polarity_bias(rule), weight, note


def _surprise_pct(actual: float, forecast: float) -> float | None:
    if forecast == 0:
        return None
    return (actual - forecast) / abs(forecast) * 100


def _score_post(event: NewsEvent, rule: IndicatorRule, weight: float) -> tuple[str, float, str]:
    """Direction from the surprise of actual vs. forecast."""
    actual = parse_number(event.actual)
    forecast = parse_number(event.forecast)

    if actual is None or forecast is None:
        note = (
            f"{rule.description}: released {event.actual or 'n/a'}, "
            f"numeric comparison unavailable - using indicator polarity"
        )
        return _polarity_bias(rule), weight, note

    if actual == forecast:
        note = f"{rule.description}: in line with forecast ({event.actual})"
        return GOLD_NEUTRAL, weight * IN_LINE_MULTIPLIER, note

    beat = actual > forecast
    pct = _surprise_pct(actual, forecast)
    verb = "beat" if beat else "missed"
    note = f"{rule.description}: {event.actual} {verb} forecast {event.forecast}"
    if pct is not None:
        note += f" ({pct:+.1f}%)"

    # A beat on a dollar-negative indicator (e.g. higher unemployment) hurts USD.
    usd_stronger = beat == rule.usd_positive
    if usd_stronger:
        return GOLD_SELL, weight, note + " - USD stronger"
    return GOLD_BUY, weight, note + " - USD weaker"


def _analyze_event(
    event: NewsEvent,
    mode: str,
    rules: Sequence[IndicatorRule],
) -> AnalyzedEvent:
    rule = match_rule(event.title, rules)
    if rule is None:
        return AnalyzedEvent(
            event=event,
            rule=None,
            gold_bias=GOLD_UNKNOWN,
            weight=UNMATCHED_WEIGHT,
            note="No matching indicator - informational only",
        )

    weight = rule.weight * (HIGH_IMPACT_MULTIPLIER if event.is_high_impact else 1.0)
    if mode == MODE_POST and event.is_released:
        gold_bias, weight, note = _score_post(event, rule, weight)
    else:
        gold_bias, weight, note = _score_pre(event, rule, weight)

    return AnalyzedEvent(event=event, rule=rule, gold_bias=gold_bias, weight=weight, note=note)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def analyze(
    events: Iterable[NewsEvent] | None,
    mode: str = MODE_PRE,
    *,
    thresholds: BiasThresholds = DEFAULT_THRESHOLDS,
    rules: Sequence[IndicatorRule] = INDICATOR_RULES,
) -> AnalysisResult:
    """Aggregate *events* into a single gold bias.

    Raises ``ValueError`` only for an unknown *mode*; malformed event fields
    degrade to polarity-only or UNKNOWN classifications.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode '{mode}'. Available: {', '.join(MODES)}")

    events = list(events or [])
    if not events:
        return AnalysisResult(
            bias=BIAS_NEUTRAL,
            confidence=CONFIDENCE_LOW,
            bullish_usd_score=0.0,
            bearish_usd_score=0.0,
            net_score=0.0,
            mode=mode,
            events=[],
            reason=NO_NEWS_REASON,
        )

    bullish = 0.0   # bullish USD = bearish gold
    bearish = 0.0   # bearish USD = bullish gold
    analyzed: list[AnalyzedEvent] = []

    for event in events:
        result = _analyze_event(event, mode, rules)
        if result.gold_bias == GOLD_SELL:
            bullish += result.weight
        elif result.gold_bias == GOLD_BUY:
            bearish += result.weight
        analyzed.append(replace(result, weight=round(result.weight, 1)))

    net = bullish - bearish
    return AnalysisResult(
        bias=classify_bias(net, thresholds),
        confidence=classify_confidence(net, thresholds),
        bullish_usd_score=round(bullish, 1),
        bearish_usd_score=round(bearish, 1),
        net_score=round(net, 1),
        mode=mode,
        events=analyzed,
    )
