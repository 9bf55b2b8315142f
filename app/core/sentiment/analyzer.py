# app/core/sentiment/analyzer.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Literal, Protocol, Union

from app.core.sentiment.config import SentimentConfig
from app.core.sentiment.lexicon import DEFAULT_LEXICON, SentimentLexicon
from app.core.tokenization.base import Tokenizer
from app.core.tokenization.tokenizer import WhitespaceTokenizer

SentimentLabel = Literal["positive", "neutral", "negative"]


@dataclass(frozen=True)
class SentimentScore:
    score: float
    label: SentimentLabel
    positive_count: int = 0
    negative_count: int = 0

    def as_dict(self) -> Dict[str, Union[float, str]]:
        return {"score": self.score, "label": self.label}


class SentimentAnalyzer(Protocol):
    def score(self, text: str) -> SentimentScore: ...


# ----------------------------
# Lexicon (bag of words)
# ----------------------------


class LexiconAnalyzer:
    def __init__(
        self,
        cfg: SentimentConfig,
        lexicon: SentimentLexicon | None = None,
        tokenizer: Tokenizer | None = None,
    ):
        self.cfg = cfg
        self.lexicon = lexicon or DEFAULT_LEXICON
        self.tokenizer = tokenizer or WhitespaceTokenizer()

    def _label(self, sc: float) -> SentimentLabel:
        if sc > self.cfg.positive_threshold:
            return "positive"
        if sc < self.cfg.negative_threshold:
            return "negative"
        return "neutral"

    def score(self, text: str) -> SentimentScore:
        pos = 0
        neg = 0
        # one token may count toward both tallies
        for token in self.tokenizer.iter_tokens(text):
            if self.lexicon.matches_positive(token):
                pos += 1
            if self.lexicon.matches_negative(token):
                neg += 1

        total = (pos + neg) or 1
        sc = (pos - neg) / total
        return SentimentScore(
            score=sc, label=self._label(sc), positive_count=pos, negative_count=neg
        )


# ----------------------------
# Factory with caching
# ----------------------------

_analyzer_cache: Dict[str, SentimentAnalyzer] = {}


def analyzer_for(method_or_cfg: Union[str, SentimentConfig]) -> SentimentAnalyzer:
    if isinstance(method_or_cfg, str):
        cfg = SentimentConfig(method=method_or_cfg.lower())
    else:
        cfg = method_or_cfg

    key = f"{cfg.method}|{cfg.positive_threshold}|{cfg.negative_threshold}"
    if key in _analyzer_cache:
        return _analyzer_cache[key]

    m = cfg.method.lower()
    if m == "lexicon":
        inst: SentimentAnalyzer = LexiconAnalyzer(cfg)
    else:
        raise ValueError(f"Unsupported sentiment method: {cfg.method}")

    _analyzer_cache[key] = inst
    return inst
