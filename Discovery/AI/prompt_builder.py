"""
Small utilities to build celebrity discovery prompts for the AI provider.
"""
import json
from typing import Dict, Any


SUGGESTION_SCHEMA: Dict[str, Any] = {
    "suggestions": [
        {
            "name": "Celebrity Full Name",
            "category": "Singer|Actor|Speaker|Comedian|etc",
            "country": "Primary Country",
            "confidence_score": 0.95,
            "bio": "Brief professional bio (50-100 words)",
            "estimated_fanbase": 1000000,
            "instagram_handle": "username_without_@",
            "youtube_channel": "channel_name",
            "spotify_artist": "artist_name",
            "image_url": None,
            "notable_works": ["work1", "work2", "work3"],
            "genres": ["genre1", "genre2"],
        }
    ],
    "query_interpretation": "How you interpreted the user's description",
    "total_found": 1,
}


def build_discovery_prompt(description: str) -> str:
    return (
        f'Based on this description: "{description}"\n\n'
        "Find 3-5 matching celebrities and return them in this exact JSON format:\n\n"
        f"{json.dumps(SUGGESTION_SCHEMA, indent=2)}\n\n"
        "Rules:\n"
        "1. Order by confidence_score (highest first)\n"
        "2. Only include real, well-known celebrities\n"
        "3. Use null for unknown social media handles\n"
        "4. total_found must equal the number of suggestions\n"
        "5. Return only valid JSON, no additional text\n\n"
        "Examples:\n"
        '- For "Punjabi singer from India who performed at Coachella": Include Diljit Dosanjh\n'
        '- For "British rock band": Include Coldplay, Queen, etc.\n'
    )
