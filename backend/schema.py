# backend/schema.py
from __future__ import annotations
from typing import Any, Optional
from pydantic import BaseModel, Field


class CheckRequest(BaseModel):
    # volontairement permissif : la validation renvoie un 400 au format CheckResponse
    prompt: Any = Field(None, description="Prompt envoyé au modèle")
    brand: Any = Field(None, description="Marque à rechercher dans la réponse")


class CheckResponse(BaseModel):
    prompt: Any = ""
    mentioned: bool = False
    position: Optional[int] = None
    error: Optional[str] = None


class HealthOut(BaseModel):
    status: str = "ok"
    timestamp: str
