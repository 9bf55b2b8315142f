from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple


class StopwordRemover(ABC):
    """Port: remove stopwords and too-short tokens from a token stream."""

    @abstractmethod
    def remove(self, tokens: Iterable[str]) -> Tuple[List[str], List[str]]:
        """
        Returns (cleaned_tokens, removed_tokens)
        """
        ...
