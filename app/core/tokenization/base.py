from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator, List


class Tokenizer(ABC):
    """Port: split raw text into a lazy stream of tokens."""

    @abstractmethod
    def iter_tokens(self, text: str) -> Iterator[str]: ...

    def tokenize(self, text: str) -> List[str]:
        return list(self.iter_tokens(text))
