"""Keyword table mapping USD calendar titles to their effect on the dollar.

A strong reading of a USD-positive indicator lifts the dollar and weighs on
gold; a strong reading of a USD-negative one (unemployment, claims, trade
deficit) does the opposite.

Matching is a linear scan in declaration order and the first keyword found
in the title wins.  Order is therefore part of the table's meaning: a
keyword must be declared before any broader keyword it contains
("Core CPI" before "CPI", "ADP" before "Non-Farm").
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import IndicatorRule

INDICATOR_RULES: tuple[IndicatorRule, ...] = (
    # --- Inflation ---------------------------------------------------------
    IndicatorRule("Core CPI", True, 3, "Core inflation", "inflation"),
    IndicatorRule("CPI", True, 3, "Inflation data", "inflation"),
    IndicatorRule("PPI", True, 2, "Producer prices", "inflation"),
    IndicatorRule("Core PCE", True, 3, "Core PCE", "inflation"),
    IndicatorRule("PCE", True, 3, "Fed preferred inflation", "inflation"),

    # --- Employment --------------------------------------------------------
    IndicatorRule("ADP", True, 2, "ADP employment", "employment"),
    IndicatorRule("NFP", True, 3, "Non-Farm Payrolls", "employment"),
    IndicatorRule("Non-Farm", True, 3, "Non-Farm Payrolls", "employment"),
    IndicatorRule("Unemployment Claims", False, 2, "Weekly jobless claims", "employment"),
    IndicatorRule("Unemployment", False, 2, "Unemployment rate", "employment"),
    IndicatorRule("Jobless Claims", False, 2, "Weekly jobless claims", "employment"),

    # --- Growth ------------------------------------------------------------
    IndicatorRule("GDP", True, 3, "Economic growth", "growth"),
    IndicatorRule("Retail Sales", True, 2, "Consumer spending", "growth"),
    IndicatorRule("ISM", True, 2, "Business activity", "growth"),
    IndicatorRule("PMI", True, 2, "Business activity", "growth"),

    # --- Central bank / rates ---------------------------------------------
    IndicatorRule("FOMC", True, 3, "Fed rate decision", "rates"),
    IndicatorRule("Fed", True, 2, "Fed speech/statement", "rates"),
    IndicatorRule("Powell", True, 2, "Fed Chair speech", "rates"),
    IndicatorRule("Interest Rate", True, 3, "Rate decision", "rates"),

    # --- Housing -----------------------------------------------------------
    IndicatorRule("Housing", True, 1, "Housing data", "housing"),
    IndicatorRule("Building Permits", True, 1, "Building activity", "housing"),

    # --- Trade -------------------------------------------------------------
    IndicatorRule("Trade Balance", False, 2, "Trade deficit/surplus", "trade"),
    IndicatorRule("Current Account", False, 1, "Current account", "trade"),
)


def match_rule(
    title: str,
    rules: Sequence[IndicatorRule] = INDICATOR_RULES,
) -> IndicatorRule | None:
    """Return the first rule whose keyword occurs in *title*, or ``None``."""
    lowered = (title or "").lower()
    for rule in rules:
        if rule.keyword.lower() in lowered:
            return rule
    return None
