"""
Turns an accepted discovery suggestion into the profile a celebrity account
would save: social handles become profile URLs.
"""
from typing import Optional
from urllib.parse import quote

from Discovery.Model.CelebritySuggestion import CelebritySuggestion
from Discovery.Model.ProfileDraft import ProfileDraft
from Discovery.Utility.url import normalize_handle, format_count

INSTAGRAM_URL = "https://instagram.com/{handle}"
YOUTUBE_URL = "https://youtube.com/@{handle}"
SPOTIFY_URL = "https://open.spotify.com/artist/{handle}"


def _social_url(template: str, value: Optional[str]) -> Optional[str]:
    handle = normalize_handle(value)
    return template.format(handle=quote(handle)) if handle else None


def build_profile_draft(suggestion: CelebritySuggestion) -> ProfileDraft:
    return ProfileDraft(
        name=suggestion.name,
        category=suggestion.category,
        country=suggestion.country,
        bio=suggestion.bio,
        fanbase_count=suggestion.estimated_fanbase,
        fanbase_display=format_count(suggestion.estimated_fanbase),
        instagram_url=_social_url(INSTAGRAM_URL, suggestion.instagram_handle),
        youtube_url=_social_url(YOUTUBE_URL, suggestion.youtube_channel),
        spotify_url=_social_url(SPOTIFY_URL, suggestion.spotify_artist),
        profile_image_url=suggestion.image_url or None,
        notable_works=list(suggestion.notable_works),
        genres=list(suggestion.genres),
    )
