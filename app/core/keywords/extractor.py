from __future__ import annotations
from collections import Counter
from typing import List, Tuple

from app.core.keywords.config import KeywordConfig
from app.core.stopword_removal.base import StopwordRemover
from app.core.stopword_removal.removal import DefaultStopwordRemover
from app.core.tokenization.base import Tokenizer
from app.core.tokenization.tokenizer import LetterTokenizer


class KeywordExtractor:
    """Frequency-ranked keywords: letters-only tokens, stopwords and short tokens dropped.

    Equal counts keep the order in which the tokens were first seen.
    """

    def __init__(
        self,
        config: KeywordConfig | None = None,
        tokenizer: Tokenizer | None = None,
        remover: StopwordRemover | None = None,
    ):
        self.cfg = config or KeywordConfig()
        self.tokenizer = tokenizer or LetterTokenizer()
        self.remover = remover or DefaultStopwordRemover()

    def ranked(self, text: str) -> List[Tuple[str, int]]:
        kept, _ = self.remover.remove(self.tokenizer.iter_tokens(text))
        return Counter(kept).most_common(self.cfg.top_n)

    def extract(self, text: str) -> List[str]:
        return [word for word, _ in self.ranked(text)]
