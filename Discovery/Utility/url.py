"""Social handle and display helpers for celebrity profiles."""
from typing import Any, Optional
from urllib.parse import urlparse


def normalize_handle(value: Any) -> Optional[str]:
    """Reduce '@name', ' name ' or a pasted profile URL to the bare handle."""
    if value is None:
        return None
    handle = str(value).strip()
    if "://" in handle:
        parsed = urlparse(handle)
        segments = [s for s in parsed.path.split("/") if s]
        handle = segments[-1] if segments else ""
    handle = handle.lstrip("@").strip("/")
    return handle or None


def format_count(num: int) -> str:
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)
