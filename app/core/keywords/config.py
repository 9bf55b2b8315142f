from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordConfig:
    top_n: int = 10
