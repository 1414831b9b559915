# src/brand_check/brand/brand_models.py
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class MatchResult(BaseModel):
    mentioned: bool = False
    position: Optional[int] = Field(default=None, ge=1)  # index 1-based du 1er token qui matche
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "MatchResult":
        if self.mentioned != (self.position is not None):
            raise ValueError("position doit être renseignée si et seulement si mentioned est vrai")
        if self.error and self.mentioned:
            raise ValueError("un résultat en erreur ne peut pas être une mention")
        return self

    @classmethod
    def failure(cls, error: str) -> "MatchResult":
        return cls(mentioned=False, position=None, error=error)
