"""
Handles Gemini API interactions and retry/backoff logic.
"""
from typing import Optional, Dict, Any
import os
import time
import random
import logging
import requests

from Discovery.Exception.DiscoveryError import UpstreamFailure

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class AIClient:
    def __init__(self, api_key: Optional[str] = None, endpoint: Optional[str] = None, model: Optional[str] = None, session: Optional[requests.Session] = None):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        self.endpoint = (endpoint or os.environ.get("GEMINI_API_ENDPOINT") or DEFAULT_ENDPOINT).rstrip("/")
        self.model = model or os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL
        self.session = session or requests.Session()
        self.source = "Gemini"
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY environment variable is not set")

    def _gemini_request(self, prompt: str, max_tokens: int):
        url = f"{self.endpoint}/models/{self.model}:generateContent"
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": 0.2, "maxOutputTokens": max_tokens},
        }
        return url, headers, payload

    def _openai_request(self, prompt: str, max_tokens: int):
        headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": 0.2,
            "max_tokens": max_tokens,
        }
        return self.endpoint, headers, payload

    def _switch_to_secondary(self) -> bool:
        key = os.environ.get("OpenAI_API_KEY")
        endpoint = os.environ.get("OpenAI_API_ENDPOINT")
        if self.source != "Gemini" or not key or not endpoint:
            return False
        self.api_key = key
        self.endpoint = endpoint
        self.model = os.environ.get("OpenAI_MODEL") or self.model
        self.source = "Open AI"
        return True

    def generate(self, prompt: str, max_tokens: int = 2048, attempts: int = 3, timeout: int = 30) -> Dict[str, Any]:
        last_error: Optional[str] = None
        last_status: Optional[int] = None
        for attempt in range(attempts):
            if self.source == "Gemini":
                url, headers, payload = self._gemini_request(prompt, max_tokens)
            else:
                url, headers, payload = self._openai_request(prompt, max_tokens)
            try:
                logger.info("Sending prompt to %s (attempt %d)", self.source, attempt + 1)
                response = self.session.post(url, headers=headers, json=payload, timeout=timeout)
            except requests.exceptions.RequestException as exc:
                logger.debug("AI request error: %s", exc)
                last_error = str(exc)
                if attempt + 1 < attempts:
                    time.sleep(min(2 ** attempt, 30))
                continue

            last_status = response.status_code
            if response.status_code in (401, 403):
                if self._switch_to_secondary():
                    logger.warning("Gemini auth failed, attempting secondary credentials")
                    continue
                raise UpstreamFailure("AI authentication failed", status_code=response.status_code)
            if response.status_code == 429 or response.status_code >= 500:
                last_error = f"HTTP {response.status_code}"
                if attempt + 1 < attempts:
                    wait_time = min(2 ** attempt, 60) + random.uniform(0, 1)
                    logger.info("AI endpoint returned %d, backing off %.1fs", response.status_code, wait_time)
                    time.sleep(wait_time)
                continue
            if response.status_code != 200:
                raise UpstreamFailure(f"AI endpoint error: {response.status_code}", status_code=response.status_code)
            return {"text": response.text, "status_code": response.status_code, "source": self.source}
        raise UpstreamFailure(f"AI endpoint failed after {attempts} attempts: {last_error}", status_code=last_status)
