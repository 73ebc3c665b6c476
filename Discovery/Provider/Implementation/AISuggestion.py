from __future__ import annotations
from typing import Optional

from Discovery.Provider.Interface.ISuggestionProvider import ISuggestionProvider
from Discovery.Provider.Implementation.FallbackSuggestion import generate_fallback
from Discovery.AI.ai_client import AIClient
from Discovery.AI.prompt_builder import build_discovery_prompt
from Discovery.AI.response_parser import extract_text_from_response, normalize_response
from Discovery.Model.DiscoveryResult import DiscoveryResult

import logging
logger = logging.getLogger(__name__)


class AISuggestion(ISuggestionProvider):
    def __init__(self, api_key: Optional[str] = None, endpoint: Optional[str] = None, model: Optional[str] = None, client: Optional[AIClient] = None):
        self.client = client or AIClient(api_key=api_key, endpoint=endpoint, model=model)

    def GenerateSuggestions(self, description: str) -> DiscoveryResult:
        prompt = build_discovery_prompt(description)
        try:
            resp = self.client.generate(prompt)
            text = extract_text_from_response(resp["text"])
        except Exception as e:
            # upstream failures degrade exactly like a parse failure
            logger.warning("AI discovery call failed, using fallback: %s", e)
            return generate_fallback(description)
        return normalize_response(text, description)
