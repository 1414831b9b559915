# src/brand_check/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional, Tuple
from dotenv import load_dotenv

# Charger le .env depuis la racine du projet
load_dotenv()


def _as_bool(x: Optional[str]) -> bool:
    return str(x).strip().lower() in {"true", "1", "yes", "y", "t"}


def _as_list(x: Optional[str]) -> Tuple[str, ...]:
    return tuple(p.strip() for p in (x or "").split(",") if p.strip())


DEFAULT_ORIGINS = "https://gemini-brand.vercel.app,http://localhost:3000"


@dataclass(frozen=True)
class Settings:
    # Gemini
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite")
    TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0"))
    LLM_TIMEOUT_S: float = float(os.getenv("LLM_TIMEOUT_S", "60"))

    # Serveur
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))
    ALLOWED_ORIGINS: Tuple[str, ...] = _as_list(os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGINS))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Détection
    FOLD_ACCENTS: bool = _as_bool(os.getenv("FOLD_ACCENTS", "false"))


settings = Settings()
