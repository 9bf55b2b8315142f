import asyncio

import pytest

from app.core.aggregation.aggregator import (
    clamp_percent,
    nudge_for,
    nudge_positive_percent,
)
from app.core.keywords.extractor import KeywordExtractor
from app.core.sentiment.analyzer import analyzer_for
from app.models.db.sentiment_data import SentimentData
from app.services.sentiment_service import SentimentService


def test_positive_nudge_from_fifty():
    assert nudge_positive_percent(50, "positive") == 55


def test_negative_and_neutral_nudge():
    assert nudge_positive_percent(50, "negative") == 45
    assert nudge_positive_percent(50, "neutral") == 50


def test_ten_positive_updates_saturate_at_100():
    value = 50.0
    for _ in range(10):
        value = nudge_positive_percent(value, "positive")
    assert value == 100


def test_negative_updates_floor_at_zero():
    value = 3.0
    for _ in range(3):
        value = nudge_positive_percent(value, "negative")
    assert value == 0


def test_missing_value_starts_from_zero():
    assert nudge_positive_percent(None, "positive") == 5


@pytest.mark.parametrize("value,expected", [(-4, 0), (0, 0), (42.5, 42.5), (130, 100)])
def test_clamp(value, expected):
    assert clamp_percent(value) == expected


def test_unknown_label_does_not_move():
    assert nudge_for("mixed") == 0


def test_read_modify_write_from_same_snapshot_loses_an_update(
    test_db, add_rows, get_row, sentiment_row
):
    row = sentiment_row(positive=50.0)
    add_rows(row)

    async def interleaved():
        async with test_db._SessionLocal() as a, test_db._SessionLocal() as b:
            # both writers read 50 before either one writes
            seen_a = await a.get(SentimentData, row.id)
            seen_b = await b.get(SentimentData, row.id)

            seen_a.positive_percent = nudge_positive_percent(
                seen_a.positive_percent, "positive"
            )
            await a.commit()
            seen_b.positive_percent = nudge_positive_percent(
                seen_b.positive_percent, "positive"
            )
            await b.commit()

    asyncio.run(interleaved())
    # last write wins: one of the two updates is lost
    assert get_row(SentimentData, row.id).positive_percent == 55.0


# -------------------------------------
# Persisted update (single UPDATE statement)
# -------------------------------------
def _service() -> SentimentService:
    return SentimentService(analyzer=analyzer_for("lexicon"), keywords=KeywordExtractor())


def test_persisted_update_applies_both_interleaved_writers(
    test_db, add_rows, get_row, sentiment_row
):
    row = sentiment_row(positive=50.0)
    add_rows(row)
    service = _service()

    async def interleaved():
        async with test_db._SessionLocal() as a, test_db._SessionLocal() as b:
            # both writers load the same snapshot first
            seen_a = await a.get(SentimentData, row.id)
            seen_b = await b.get(SentimentData, row.id)
            assert seen_a.positive_percent == seen_b.positive_percent == 50.0

            await service.apply_to_latest(a, row.sector_id, "positive")
            await a.commit()
            await service.apply_to_latest(b, row.sector_id, "positive")
            await b.commit()

    asyncio.run(interleaved())
    assert get_row(SentimentData, row.id).positive_percent == 60.0


def test_persisted_update_clamps_and_leaves_other_percents(
    test_db, add_rows, get_row, sentiment_row
):
    row = sentiment_row(positive=98.0, neutral=1.0, negative=1.0)
    add_rows(row)
    service = _service()

    async def nudge():
        async with test_db._SessionLocal() as session:
            await service.apply_to_latest(session, row.sector_id, "positive")
            await session.commit()

    asyncio.run(nudge())
    stored = get_row(SentimentData, row.id)
    assert stored.positive_percent == 100.0
    assert stored.neutral_percent == 1.0
    assert stored.negative_percent == 1.0


def test_only_latest_row_is_updated(test_db, add_rows, get_row, sentiment_row):
    old = sentiment_row(positive=50.0, days_ago=3)
    new = sentiment_row(positive=50.0, days_ago=0)
    add_rows(old, new)
    service = _service()

    async def nudge():
        async with test_db._SessionLocal() as session:
            updated = await service.apply_to_latest(session, new.sector_id, "negative")
            await session.commit()
            return updated

    assert asyncio.run(nudge()) == new.id
    assert get_row(SentimentData, new.id).positive_percent == 45.0
    assert get_row(SentimentData, old.id).positive_percent == 50.0


def test_no_prior_row_means_no_update(test_db):
    service = _service()

    async def nudge():
        async with test_db._SessionLocal() as session:
            return await service.apply_to_latest(session, "sector-telecom", "positive")

    assert asyncio.run(nudge()) is None
