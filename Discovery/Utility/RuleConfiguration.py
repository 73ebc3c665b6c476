
from typing import Any, Dict, List

# Keyword rules for the offline fallback. A rule fires when the lower-cased
# description contains any of `any_of` (if given) and all of `all_of` (if given).
FALLBACK_RULES: List[Dict[str, Any]] = [
    {
        "any_of": ["punjabi", "indian singer"],
        "suggestion": {
            "name": "Diljit Dosanjh",
            "category": "Singer",
            "country": "India",
            "confidence_score": 0.8,
            "bio": "Popular Punjabi singer and actor who has performed internationally including at Coachella",
            "estimated_fanbase": 15000000,
            "instagram_handle": "diljitdosanjh",
            "youtube_channel": "DiljitDosanjh",
            "spotify_artist": "Diljit Dosanjh",
            "image_url": None,
            "notable_works": ["G.O.A.T.", "Born to Shine", "Coachella Performance"],
            "genres": ["Punjabi Pop", "Bhangra", "Hip Hop"],
        },
    },
    {
        "all_of": ["british", "rock"],
        "suggestion": {
            "name": "Coldplay",
            "category": "Band",
            "country": "United Kingdom",
            "confidence_score": 0.9,
            "bio": "British rock band formed in London, known for alternative rock and pop music",
            "estimated_fanbase": 50000000,
            "instagram_handle": "coldplay",
            "youtube_channel": "ColdplayOfficial",
            "spotify_artist": "Coldplay",
            "image_url": None,
            "notable_works": ["Yellow", "Fix You", "Viva La Vida", "Paradise"],
            "genres": ["Alternative Rock", "Pop Rock", "Post-Britpop"],
        },
    },
]

# used when no keyword rule matches
DEFAULT_FALLBACK_SUGGESTION: Dict[str, Any] = {
    "name": "Global Celebrity",
    "category": "Entertainment",
    "country": "International",
    "confidence_score": 0.5,
    "bio": "Internationally recognized celebrity in the entertainment industry",
    "estimated_fanbase": 1000000,
    "instagram_handle": None,
    "youtube_channel": None,
    "spotify_artist": None,
    "image_url": None,
    "notable_works": ["Various acclaimed works"],
    "genres": ["Entertainment"],
}

FALLBACK_INTERPRETATION = "Fallback search results for: {description}"
