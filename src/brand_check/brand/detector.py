# src/brand_check/brand/detector.py
from __future__ import annotations
import logging
from typing import Any, List

from brand_check.brand.brand_models import MatchResult
from brand_check.brand.catalog import normalize, tokenize
from brand_check.brand.distance import levenshtein

logger = logging.getLogger(__name__)

# au-delà, on considère la sortie du modèle comme une hallucination
MAX_TOKENS = 2000

BRAND_MISSING = "Brand name is missing or invalid."
OUTPUT_MISSING = "Model output is missing or invalid."
OUTPUT_EMPTY = "Model output contains no usable text."
OUTPUT_TOO_LONG = "Text too long to analyze safely."
INTERNAL_ERROR = "Internal error while checking brand mention."


def threshold_for(brand_normalized: str) -> int:
    """Seuil de distance selon la longueur de la marque normalisée."""
    n = len(brand_normalized)
    if n <= 4:
        return 1  # marques courtes : on évite les faux positifs
    if n >= 10:
        return 3
    return 2


def check_brand_mention(text: Any, brand: Any, fold_accents: bool = False) -> MatchResult:
    """
    Cherche la marque dans la réponse du modèle, token par token, à une
    distance de Levenshtein près.

    Ne lève jamais : toute erreur est renvoyée dans MatchResult.error.
    """
    try:
        if not isinstance(brand, str) or not brand.strip():
            return MatchResult.failure(BRAND_MISSING)
        if not isinstance(text, str):
            return MatchResult.failure(OUTPUT_MISSING)

        cleaned = normalize(text, fold_accents=fold_accents)
        brand_cleaned = normalize(brand, fold_accents=fold_accents)

        if not cleaned:
            return MatchResult.failure(OUTPUT_EMPTY)

        words = tokenize(cleaned)
        if len(words) > MAX_TOKENS:
            return MatchResult.failure(OUTPUT_TOO_LONG)

        threshold = threshold_for(brand_cleaned)
        positions: List[int] = []
        for i, word in enumerate(words, start=1):
            if len(word) <= 1:
                continue  # "a", "i", ... jamais candidats
            if levenshtein(word, brand_cleaned) <= threshold:
                positions.append(i)

        return MatchResult(
            mentioned=bool(positions),
            position=positions[0] if positions else None,
            error=None,
        )
    except Exception:
        logger.exception("❌ Échec de la détection de marque")
        return MatchResult.failure(INTERNAL_ERROR)
