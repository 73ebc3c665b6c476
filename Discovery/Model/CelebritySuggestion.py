from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any

"""One candidate celebrity returned by discovery (AI-derived or fallback)."""
@dataclass
class CelebritySuggestion:
    name: str
    category: str = "Entertainment"
    country: str = "Unknown"
    confidence_score: float = 0.5
    bio: str = "No biography available"
    estimated_fanbase: int = 10000
    instagram_handle: Optional[str] = None
    youtube_channel: Optional[str] = None
    spotify_artist: Optional[str] = None
    image_url: Optional[str] = None
    notable_works: List[str] = field(default_factory=list)
    genres: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
