"""Provider selection for celebrity discovery.
Registers the built-in providers and picks the AI provider when credentials
are available, the offline fallback provider otherwise.
"""

from __future__ import annotations
from typing import Optional
from Discovery.Provider.Implementation.AISuggestion import AISuggestion
from Discovery.Provider.Implementation.FallbackSuggestion import FallbackSuggestion
from Discovery.Provider.Interface.ISuggestionProvider import ISuggestionProvider
from Discovery.Provider.ProviderFactory import ProviderFactory

import logging
logger = logging.getLogger(__name__)

# Register built-in providers
ProviderFactory.register("ai", lambda api_key=None: AISuggestion(api_key=api_key))
ProviderFactory.register("fallback", lambda: FallbackSuggestion())

class SuggestionProvider:
    """Facade over `ProviderFactory` so callers never deal with keys directly."""

    @staticmethod
    def InitializeProvider(ai_key: Optional[str] = None, use_ai: bool = True) -> ISuggestionProvider:
        if not use_ai:
            return ProviderFactory.create("fallback")
        try:
            return ProviderFactory.create("ai", ai_key)
        except (KeyError, ValueError) as e:
            logger.warning("AI provider unavailable (%s), falling back to keyword rules", e)
            return ProviderFactory.create("fallback")
