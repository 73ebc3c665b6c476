from typing import Dict, Any, List

MAX_DESCRIPTION_LENGTH = 500


def validate_discover_payload(data: Dict[str, Any]) -> str:
    description = data.get("description")
    if description is None:
        raise ValueError("Field 'description' is required")
    if not isinstance(description, str):
        raise ValueError("Field 'description' must be a string")
    description = description.strip()
    if not description:
        raise ValueError("Field 'description' must not be empty")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValueError(f"Field 'description' must be at most {MAX_DESCRIPTION_LENGTH} characters")
    return description


def validate_profile_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    suggestion = data.get("suggestion")
    if not isinstance(suggestion, dict):
        raise ValueError("Field 'suggestion' must be an object")
    return suggestion


def map_suggestions(result) -> List[Dict[str, Any]]:
    return [s.to_dict() for s in result.suggestions]
