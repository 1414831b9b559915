# src/brand_check/models/gemini_client.py
from typing import Optional

import google.generativeai as genai

from brand_check.config import settings
from brand_check.models.base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    name = "gemini"

    def __init__(self, model: Optional[str] = None, api_key: Optional[str] = None):
        self.model = model or settings.GEMINI_MODEL
        self.api_key = api_key or settings.GEMINI_API_KEY
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY or GOOGLE_API_KEY environment variable is required")

        genai.configure(api_key=self.api_key)
        self.client = genai.GenerativeModel(self.model)

    def answer(self, prompt: str, temperature: float = 0.0) -> str:
        """Un seul tour utilisateur, renvoie uniquement le texte."""
        response = self.client.generate_content(
            [{"role": "user", "parts": [prompt]}],
            generation_config={"temperature": temperature},
            request_options={"timeout": settings.LLM_TIMEOUT_S},
        )
        return response.text or ""
