"""
Suggestion provider abstraction.
This module defines the pluggable interface ISuggestionProvider, which allows
different discovery backends (the AI service, the offline keyword fallback,
or test doubles) to be swapped behind the same call. Implementations turn a
free-text description into a `DiscoveryResult` and must not raise.
"""

from abc import ABC, abstractmethod

from Discovery.Model.DiscoveryResult import DiscoveryResult

class ISuggestionProvider(ABC):
    """Abstract suggestion provider interface."""

    @abstractmethod
    def GenerateSuggestions(self, description: str) -> DiscoveryResult:
        """Generate celebrity suggestions for the given description."""
        pass
