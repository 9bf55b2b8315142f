from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizationConfig:
    lowercase: bool = True
    # Keyword path only: drop everything that is not a letter or whitespace
    letters_only: bool = False
    letters_pattern: str = r"[^a-z\s]"
