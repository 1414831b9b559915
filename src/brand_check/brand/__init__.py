# src/brand_check/brand/__init__.py
from __future__ import annotations

from .brand_models import MatchResult
from .detector import check_brand_mention, threshold_for
from .distance import levenshtein

__all__ = ["MatchResult", "check_brand_mention", "threshold_for", "levenshtein"]
