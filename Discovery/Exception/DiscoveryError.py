
"""Discovery pipeline error base class."""
from typing import Optional


class DiscoveryError(Exception):

    def __init__(self, message: str, kind: Optional[str] = None):
        self.message = message
        self.kind = kind or self.__class__.__name__
        super().__init__(self.message)

"""Raised when no JSON object can be located in the AI reply."""
class NoJsonFound(DiscoveryError):
    def __init__(self, message: str = "No JSON found in response"):
        super().__init__(message)

"""Raised when the located JSON text fails to parse."""
class MalformedJson(DiscoveryError):
    def __init__(self, message: str = "Malformed JSON in response"):
        super().__init__(message)

"""Raised when the parsed value has no array-shaped 'suggestions' field."""
class InvalidShape(DiscoveryError):
    def __init__(self, message: str = "Invalid response structure"):
        super().__init__(message)

"""Raised when the AI endpoint fails or returns no text.
        Attributes:
            status_code: last HTTP status seen (if any)
"""
class UpstreamFailure(DiscoveryError):
    def __init__(self, message: str = "Failed to get AI response", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
