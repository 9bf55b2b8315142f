# app/core/sentiment/lexicon.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


POSITIVE_WORDS: Tuple[str, ...] = (
    "growth",
    "increase",
    "profit",
    "success",
    "positive",
    "strong",
    "improvement",
    "expansion",
    "opportunity",
    "boom",
    "surge",
    "gain",
    "rise",
    "up",
    "good",
    "excellent",
    "great",
)

NEGATIVE_WORDS: Tuple[str, ...] = (
    "decline",
    "loss",
    "decrease",
    "negative",
    "weak",
    "crisis",
    "problem",
    "issue",
    "risk",
    "fail",
    "down",
    "drop",
    "fall",
    "recession",
    "inflation",
    "unemployment",
    "shortage",
)


@dataclass(frozen=True)
class SentimentLexicon:
    """Positive/negative word lists matched by substring containment.

    A token matches a list when any entry occurs inside it, so "rising" does
    not match "rise" but "uptrend" matches "up".
    """

    positive: Tuple[str, ...] = POSITIVE_WORDS
    negative: Tuple[str, ...] = NEGATIVE_WORDS

    def matches_positive(self, token: str) -> bool:
        return any(w in token for w in self.positive)

    def matches_negative(self, token: str) -> bool:
        return any(w in token for w in self.negative)


DEFAULT_LEXICON = SentimentLexicon()
