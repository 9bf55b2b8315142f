from __future__ import annotations
from dataclasses import dataclass, field
from typing import Set, Iterable


def _to_set(x: Iterable[str] | None) -> Set[str]:
    return set(map(str, x or []))


@dataclass(frozen=True)
class StopwordConfig:
    custom_stopwords: Set[str] = field(default_factory=set)  # extra words to remove
    exclude_stopwords: Set[str] = field(
        default_factory=set
    )  # words to keep even if in list
    min_token_len: int = 4  # tokens of 3 chars or fewer never become keywords

    @classmethod
    def from_lists(
        cls,
        custom: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
        min_token_len: int = 4,
    ) -> "StopwordConfig":
        return cls(
            custom_stopwords=_to_set(custom),
            exclude_stopwords=_to_set(exclude),
            min_token_len=min_token_len,
        )
