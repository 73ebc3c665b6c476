"""
Parser and normalizer for AI discovery replies.

The AI reply is untrusted free text that usually contains a JSON object,
sometimes wrapped in prose or a ```json fence. `normalize_response` turns it
into a fully-populated `DiscoveryResult` and never raises: every failure is
logged and replaced by the offline fallback result.
"""
import json
import math
import re
from typing import Any, Dict, Iterator, List, Optional
import logging

from Discovery.Exception.DiscoveryError import (
    DiscoveryError,
    InvalidShape,
    MalformedJson,
    NoJsonFound,
    UpstreamFailure,
)
from Discovery.Model.CelebritySuggestion import CelebritySuggestion
from Discovery.Model.DiscoveryResult import DiscoveryResult
from Discovery.Provider.Implementation.FallbackSuggestion import generate_fallback

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)

MIN_CONFIDENCE = 0.0
MAX_CONFIDENCE = 1.0
DEFAULT_CONFIDENCE = 0.5
MIN_FANBASE = 1000
DEFAULT_FANBASE = 10000


def extract_text_from_response(raw_body: str) -> str:
    """Pull the completion text out of the upstream HTTP body.

    Understands the Gemini `generateContent` envelope and the OpenAI-compatible
    chat envelope; a body that is not an envelope is returned as-is.
    """
    logger.info("Extracting completion text from AI response")
    try:
        envelope = json.loads(raw_body)
    except (TypeError, ValueError):
        envelope = None

    try:
        if isinstance(envelope, dict) and envelope.get("candidates"):
            parts = envelope["candidates"][0].get("content", {}).get("parts", [])
            text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
        elif isinstance(envelope, dict) and envelope.get("choices"):
            text = envelope["choices"][0]["message"]["content"]
        else:
            text = raw_body
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise UpstreamFailure(f"Unexpected AI response envelope: {e}")

    if not isinstance(text, str) or not text.strip():
        raise UpstreamFailure("AI response contained no text")
    return text


def _balanced_objects(text: str) -> Iterator[str]:
    """Yield each top-level `{...}` span, honouring JSON string literals."""
    depth = 0
    start = 0
    in_string = False
    escaped = False
    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"' and depth > 0:
            in_string = True
        elif ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                yield text[start:i + 1]


def locate_json(text: str) -> str:
    """Return the substring of `text` most likely to hold the discovery object.

    Prefers a balanced object carrying `suggestions`, then any balanced object
    that parses, then the greedy first-`{`-to-last-`}` span, then the body of a
    ```json fence.
    """
    first_parsed: Optional[str] = None
    for candidate in _balanced_objects(text):
        try:
            value = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(value, dict) and "suggestions" in value:
            return candidate
        if first_parsed is None:
            first_parsed = candidate
    if first_parsed is not None:
        return first_parsed

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return text[start:end + 1]

    match = _FENCE_RE.search(text)
    if match:
        return match.group(1)
    raise NoJsonFound()


def parse_discovery_payload(text: str) -> Dict[str, Any]:
    if not isinstance(text, str) or not text.strip():
        raise NoJsonFound("Empty AI response")
    located = locate_json(text)
    try:
        parsed = json.loads(located)
    except ValueError as e:
        raise MalformedJson(f"Malformed JSON in response: {e}")
    if not isinstance(parsed, dict) or not isinstance(parsed.get("suggestions"), list):
        raise InvalidShape()
    return parsed


def _text(value: Any, default: str) -> str:
    if value is None or isinstance(value, (bool, dict, list)):
        return default
    text = str(value).strip()
    return text or default


def _optional_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    return str(value).strip() or None


def _number(value: Any, default: float) -> float:
    # zero counts as missing, like an absent field
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number) or number == 0:
        return default
    return number


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and not isinstance(item, (dict, list))]


def coerce_suggestion(raw: Any) -> CelebritySuggestion:
    """Repair one untrusted suggestion record; never rejects it."""
    if not isinstance(raw, dict):
        logger.debug("Suggestion is not an object, using defaults: %r", raw)
        raw = {}
    confidence = _number(raw.get("confidence_score"), DEFAULT_CONFIDENCE)
    fanbase = _number(raw.get("estimated_fanbase"), DEFAULT_FANBASE)
    return CelebritySuggestion(
        name=_text(raw.get("name"), "Unknown Celebrity"),
        category=_text(raw.get("category"), "Entertainment"),
        country=_text(raw.get("country"), "Unknown"),
        confidence_score=min(max(confidence, MIN_CONFIDENCE), MAX_CONFIDENCE),
        bio=_text(raw.get("bio"), "No biography available"),
        estimated_fanbase=int(max(fanbase, MIN_FANBASE)),
        instagram_handle=_optional_text(raw.get("instagram_handle")),
        youtube_channel=_optional_text(raw.get("youtube_channel")),
        spotify_artist=_optional_text(raw.get("spotify_artist")),
        image_url=_optional_text(raw.get("image_url")),
        notable_works=_string_list(raw.get("notable_works")),
        genres=_string_list(raw.get("genres")),
    )


def normalize_response(text: str, description: str) -> DiscoveryResult:
    try:
        payload = parse_discovery_payload(text)
        suggestions = [coerce_suggestion(raw) for raw in payload["suggestions"]]
        interpretation = _text(payload.get("query_interpretation"), f"Search for: {description}")
        logger.info("Normalized %d AI suggestions", len(suggestions))
        return DiscoveryResult(suggestions=suggestions, query_interpretation=interpretation, source="ai")
    except DiscoveryError as e:
        logger.warning("Failed to parse AI response (%s): %s", e.kind, e.message)
        logger.debug("AI response text (truncated): %s", str(text)[:1000])
    except Exception as e:
        logger.exception("Unexpected error normalizing AI response: %s", e)
    return generate_fallback(description)
