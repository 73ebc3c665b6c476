from dataclasses import dataclass, field
from typing import List, Dict, Any

from Discovery.Model.CelebritySuggestion import CelebritySuggestion

"""Outcome of a single discovery request.
    `total_found` is derived from `suggestions` so the two can never disagree.
"""
@dataclass
class DiscoveryResult:
    suggestions: List[CelebritySuggestion] = field(default_factory=list)
    query_interpretation: str = ""
    source: str = "ai"

    @property
    def total_found(self) -> int:
        return len(self.suggestions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "suggestions": [s.to_dict() for s in self.suggestions],
            "query_interpretation": self.query_interpretation,
            "total_found": self.total_found,
        }
