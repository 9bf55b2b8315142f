# app/core/aggregation/aggregator.py
from __future__ import annotations

from sqlalchemy import case, func, literal
from sqlalchemy.sql.elements import ColumnElement

NUDGE_POINTS = 5.0
MIN_PERCENT = 0.0
MAX_PERCENT = 100.0


def nudge_for(label: str, step: float = NUDGE_POINTS) -> float:
    if label == "positive":
        return step
    if label == "negative":
        return -step
    return 0.0


def clamp_percent(value: float) -> float:
    return max(MIN_PERCENT, min(MAX_PERCENT, value))


def nudge_positive_percent(current: float | None, label: str) -> float:
    """Return the new positive percent after folding in one label.

    Only the positive share moves; neutral and negative are left as they are.
    """
    return clamp_percent((current or 0.0) + nudge_for(label))


def nudged_column(column: ColumnElement, label: str) -> ColumnElement:
    """Same rule as nudge_positive_percent, as an SQL expression over the stored value.

    Evaluated by the database inside the UPDATE, so concurrent writers each apply their delta.
    """
    shifted = func.coalesce(column, literal(0.0)) + literal(nudge_for(label))
    return case(
        (shifted > MAX_PERCENT, literal(MAX_PERCENT)),
        (shifted < MIN_PERCENT, literal(MIN_PERCENT)),
        else_=shifted,
    )
