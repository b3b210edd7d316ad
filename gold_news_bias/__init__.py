"""Gold trading bias from scheduled USD economic releases."""

from __future__ import annotations

from .engine import analyze, classify_bias, classify_confidence
from .feed import filter_today, group_by_date, has_released, parse
from .indicators import INDICATOR_RULES, match_rule
from .models import (
    DEFAULT_THRESHOLDS,
    AnalysisResult,
    AnalyzedEvent,
    BiasThresholds,
    IndicatorRule,
    NewsEvent,
)
from .numbers import parse_number

__all__ = [
    "DEFAULT_THRESHOLDS",
    "INDICATOR_RULES",
    "AnalysisResult",
    "AnalyzedEvent",
    "BiasThresholds",
    "IndicatorRule",
    "NewsEvent",
    "analyze",
    "classify_bias",
    "classify_confidence",
    "filter_today",
    "group_by_date",
    "has_released",
    "match_rule",
    "parse",
    "parse_number",
]
