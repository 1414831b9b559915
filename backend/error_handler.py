"""
Gestion des erreurs côté service : classification des échecs du modèle
et journalisation des appels au modèle.
"""
import time
from typing import Callable
from functools import wraps
import logging

logger = logging.getLogger(__name__)

API_KEY_MESSAGE = "Invalid API key configuration"
QUOTA_MESSAGE = "API quota exceeded"
FALLBACK_MESSAGE = "Model unavailable, returning fallback result."


def classify_model_error(exc: BaseException) -> str:
    """Traduit une exception du provider en message lisible pour le client."""
    msg = str(exc) if exc is not None else ""
    if "API key" in msg:
        return API_KEY_MESSAGE
    if "quota" in msg:
        return QUOTA_MESSAGE
    if msg:
        return msg
    return FALLBACK_MESSAGE


def log_model_call(func: Callable) -> Callable:
    """Journalise durée et issue d'un appel au modèle, puis relance l'erreur éventuelle."""
    @wraps(func)
    def wrapper(client, *args, **kwargs):
        label = f"{getattr(client, 'name', type(client).__name__)}:{getattr(client, 'model', '?')}"
        start = time.time()
        try:
            result = func(client, *args, **kwargs)
        except Exception as e:
            logger.error(f"❌ Appel {label} échoué après {time.time() - start:.2f}s ({type(e).__name__}): {e}")
            raise
        logger.info(f"✅ Appel {label} réussi en {time.time() - start:.2f}s")
        return result

    return wrapper
