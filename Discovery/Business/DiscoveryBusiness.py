from typing import Optional

from Discovery.Model.DiscoveryResult import DiscoveryResult
from Discovery.Provider.Interface.ISuggestionProvider import ISuggestionProvider
from Discovery.Provider.Implementation.FallbackSuggestion import generate_fallback
from Discovery.Provider.SuggestionProvider import SuggestionProvider
from Discovery.Utility.auth import get_ai_key
from Discovery.Events.event_dispatcher import EventDispatcher

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


class DiscoveryBusiness:

    """Entry point for celebrity discovery.
    Always answers with a usable `DiscoveryResult`: AI-derived when the AI
    provider succeeds, keyword fallback otherwise. Emits `discovery_started`,
    `discovery_fallback` (fallback results only) and `discovery_completed`
    via `EventDispatcher`.
    """
    def __init__(self, provider: Optional[ISuggestionProvider] = None, dispatcher: Optional[EventDispatcher] = None, ai_key: Optional[str] = None):
        if provider is None:
            ai_key = ai_key or get_ai_key()
            provider = SuggestionProvider.InitializeProvider(ai_key, use_ai=bool(ai_key))
        self.provider = provider
        self.dispatcher = dispatcher or EventDispatcher()

    def discover(self, description: str) -> DiscoveryResult:
        self.dispatcher.dispatch("discovery_started", description=description)
        try:
            result = self.provider.GenerateSuggestions(description)
        except Exception as e:
            logger.exception("Suggestion provider %s failed: %s", type(self.provider).__name__, e)
            result = generate_fallback(description)

        logger.info("Discovery for %r returned %d suggestions (source=%s)", description, result.total_found, result.source)
        if result.source == "fallback":
            self.dispatcher.dispatch("discovery_fallback", description=description, result=result)
        self.dispatcher.dispatch("discovery_completed", description=description, result=result, source=result.source)
        return result
