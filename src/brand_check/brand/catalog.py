# src/brand_check/brand/catalog.py
from __future__ import annotations
import re
from typing import List
from unidecode import unidecode

# \w est Unicode en Python 3 : lettres accentuées / non latines conservées
_PUNCT = re.compile(r"[^\w\s]|_")
_SPACES = re.compile(r"\s+")


def normalize(s: str, fold_accents: bool = False) -> str:
    """minuscules, sans ponctuation (underscore inclus), espaces compactés."""
    if not isinstance(s, str):
        return ""
    if fold_accents:
        s = unidecode(s)
    s = _PUNCT.sub("", s.lower())
    return _SPACES.sub(" ", s).strip()


def tokenize(normalized: str) -> List[str]:
    return [w for w in normalized.split(" ") if w]
