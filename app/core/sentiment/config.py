from __future__ import annotations
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SentimentConfig:
    method: Literal["lexicon"] = "lexicon"
    # Thresholds on the balance score in [-1, 1]
    positive_threshold: float = 0.2
    negative_threshold: float = -0.2
