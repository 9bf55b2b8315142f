from __future__ import annotations
import re
from typing import Iterator

from app.core.tokenization.base import Tokenizer
from app.core.tokenization.config import TokenizationConfig


class WhitespaceTokenizer(Tokenizer):
    """Adapter: case-folds and splits on whitespace, punctuation kept.

    Used by the sentiment path, where "growth," still has to match "growth".
    """

    def __init__(self, config: TokenizationConfig | None = None):
        self.cfg = config or TokenizationConfig()
        self._strip = re.compile(self.cfg.letters_pattern)

    def _normalize(self, text: str) -> str:
        s = text or ""
        if self.cfg.lowercase:
            s = s.lower()
        if self.cfg.letters_only:
            s = self._strip.sub("", s)
        return s

    def iter_tokens(self, text: str) -> Iterator[str]:
        for t in self._normalize(text).split():
            yield t


class LetterTokenizer(WhitespaceTokenizer):
    """Adapter for the keyword path: letters and whitespace only, then split."""

    def __init__(self, config: TokenizationConfig | None = None):
        super().__init__(config or TokenizationConfig(letters_only=True))
