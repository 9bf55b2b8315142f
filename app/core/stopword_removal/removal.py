from __future__ import annotations
from typing import FrozenSet, Iterable, List, Tuple, Set

from app.core.stopword_removal.base import StopwordRemover
from app.core.stopword_removal.config import StopwordConfig


STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "from",
        "as",
        "is",
        "was",
        "are",
        "were",
        "been",
        "be",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "could",
        "should",
        "may",
        "might",
        "must",
        "shall",
        "can",
        "need",
        "this",
        "that",
        "these",
        "those",
        "it",
        "its",
        "they",
        "them",
        "their",
    }
)


class DefaultStopwordRemover(StopwordRemover):
    def __init__(self, config: StopwordConfig | None = None):
        self.cfg = config or StopwordConfig()
        self._stopset = self._build_stopset()

    def _build_stopset(self) -> Set[str]:
        base: Set[str] = set(STOPWORDS)
        base |= {w.lower() for w in self.cfg.custom_stopwords}
        base -= {w.lower() for w in self.cfg.exclude_stopwords}
        return base

    def is_kept(self, token: str) -> bool:
        return len(token) >= self.cfg.min_token_len and token not in self._stopset

    def remove(self, tokens: Iterable[str]) -> Tuple[List[str], List[str]]:
        cleaned: List[str] = []
        removed: List[str] = []
        for t in tokens:
            if not self.is_kept(t):
                removed.append(t)
                continue
            cleaned.append(t)
        return cleaned, removed
