from __future__ import annotations
import copy
from typing import Any, Dict, List

from Discovery.Model.CelebritySuggestion import CelebritySuggestion
from Discovery.Model.DiscoveryResult import DiscoveryResult
from Discovery.Provider.Interface.ISuggestionProvider import ISuggestionProvider
from Discovery.Utility.RuleConfiguration import (
    DEFAULT_FALLBACK_SUGGESTION,
    FALLBACK_INTERPRETATION,
    FALLBACK_RULES,
)

import logging
logger = logging.getLogger(__name__)


def _rule_matches(rule: Dict[str, Any], text: str) -> bool:
    any_of = rule.get("any_of")
    all_of = rule.get("all_of")
    if any_of and not any(keyword in text for keyword in any_of):
        return False
    if all_of and not all(keyword in text for keyword in all_of):
        return False
    return bool(any_of or all_of)


def _build(record: Dict[str, Any]) -> CelebritySuggestion:
    # deep copy so callers cannot mutate the shared rule table
    return CelebritySuggestion(**copy.deepcopy(record))


def generate_fallback(description: str) -> DiscoveryResult:
    """Deterministic offline result. Every matching keyword rule contributes
    one suggestion; when none match a single generic record is returned.
    """
    text = (description or "").lower()
    suggestions: List[CelebritySuggestion] = [
        _build(rule["suggestion"]) for rule in FALLBACK_RULES if _rule_matches(rule, text)
    ]
    if not suggestions:
        suggestions.append(_build(DEFAULT_FALLBACK_SUGGESTION))
    logger.info("Fallback produced %d suggestions", len(suggestions))
    return DiscoveryResult(
        suggestions=suggestions,
        query_interpretation=FALLBACK_INTERPRETATION.format(description=description),
        source="fallback",
    )


"""Offline provider used when no AI key is configured and in tests.
    Answers from the keyword rule table only, so it never calls a remote API.
"""
class FallbackSuggestion(ISuggestionProvider):
    def GenerateSuggestions(self, description: str) -> DiscoveryResult:
        return generate_fallback(description)
