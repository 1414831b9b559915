# backend/routes/check.py
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from brand_check.brand.detector import check_brand_mention
from brand_check.config import settings
from brand_check.models import BaseLLMClient, get_llm_client

from backend.error_handler import API_KEY_MESSAGE, classify_model_error, log_model_call
from backend.schema import CheckRequest, CheckResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["check"])

PROMPT_MISSING = "Invalid or missing prompt"
BRAND_MISSING = "Invalid or missing brand name"


@lru_cache(maxsize=1)
def _default_client() -> BaseLLMClient:
    return get_llm_client("gemini", settings.GEMINI_MODEL)


def get_model_client() -> Optional[BaseLLMClient]:
    """Client partagé entre les requêtes ; None si la clé API manque."""
    try:
        return _default_client()
    except ValueError as e:
        logger.error(f"❌ Client Gemini indisponible: {e}")
        return None


def _is_blank(x) -> bool:
    return not isinstance(x, str) or not x.strip()


def bad_request(prompt, error: str) -> JSONResponse:
    body = CheckResponse(prompt=prompt, mentioned=False, position=None, error=error)
    return JSONResponse(status_code=400, content=body.model_dump())


@log_model_call
def _ask_model(client: BaseLLMClient, prompt: str) -> str:
    return client.answer(prompt, temperature=settings.TEMPERATURE)


@router.post("/check", response_model=CheckResponse)
def check(body: CheckRequest, client: Optional[BaseLLMClient] = Depends(get_model_client)):
    """
    ➜ 1 prompt → 1 réponse du modèle → détection floue de la marque.
    """
    if _is_blank(body.prompt):
        return bad_request(body.prompt or "", PROMPT_MISSING)
    if _is_blank(body.brand):
        return bad_request(body.prompt, BRAND_MISSING)

    logger.info(f'🔎 Vérification du prompt pour la marque: "{body.brand}"')

    if client is None:
        return CheckResponse(prompt=body.prompt, mentioned=False, position=None, error=API_KEY_MESSAGE)

    try:
        text = _ask_model(client, body.prompt)
    except Exception as e:
        return CheckResponse(prompt=body.prompt, mentioned=False, position=None, error=classify_model_error(e))

    logger.info(f"📝 Longueur de la réponse du modèle: {len(text)} caractères")

    match = check_brand_mention(text, body.brand, fold_accents=settings.FOLD_ACCENTS)
    return CheckResponse(
        prompt=body.prompt,
        mentioned=match.mentioned,
        position=match.position,
        error=match.error,
    )
