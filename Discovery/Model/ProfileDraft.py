from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any

"""Celebrity profile prepared from an accepted suggestion (not persisted here)."""
@dataclass
class ProfileDraft:
    name: str
    category: str
    country: str
    bio: str
    fanbase_count: int
    fanbase_display: str
    instagram_url: Optional[str] = None
    youtube_url: Optional[str] = None
    spotify_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    notable_works: List[str] = field(default_factory=list)
    genres: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
