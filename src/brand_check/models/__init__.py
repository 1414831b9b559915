# src/brand_check/models/__init__.py
from __future__ import annotations
from typing import Optional

from .base import BaseLLMClient
from .gemini_client import GeminiClient


def get_llm_client(provider: str = "gemini", model: Optional[str] = None) -> BaseLLMClient:
    """
    Factory des clients LLM. Seul Gemini est branché pour l'instant.
    Retourne une instance exposant .answer(prompt, temperature=?).
    """
    p = (provider or "gemini").lower()
    if p == "gemini":
        return GeminiClient(model=model)
    raise ValueError(f"Provider inconnu: {provider}")


__all__ = ["BaseLLMClient", "GeminiClient", "get_llm_client"]
