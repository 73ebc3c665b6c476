"""AI credential helpers"""
import os
from typing import Optional


def get_ai_key() -> Optional[str]:
    return os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
