# career_advisor/services/gemini.py
import logging
from typing import Any, Dict, Optional

import requests

from career_advisor.config import DEFAULT_GEMINI_BASE_URL, DEFAULT_GEMINI_MODEL
from career_advisor.errors import GenerationError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Minimal client for the Gemini `generateContent` REST call.

    One POST per prompt, no retry. `timeout=None` leaves the transport
    default in place.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        if not api_key:
            raise ValueError("api_key is required")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate_content(self, prompt: str) -> Dict[str, Any]:
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            res = self.session.post(
                self.endpoint,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout,
            )
            res.raise_for_status()
            data = res.json()
        except requests.RequestException as e:
            logger.warning("Gemini request to model %s failed: %s", self.model, e)
            raise GenerationError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            logger.warning("Gemini model %s returned a non-JSON body", self.model)
            raise GenerationError("Gemini returned a non-JSON body") from e

        if not isinstance(data, dict):
            logger.warning("Gemini model %s returned a %s body", self.model, type(data).__name__)
            raise GenerationError("Gemini returned an unexpected body")
        return data
