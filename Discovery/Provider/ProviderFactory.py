"""
Factory for suggestion providers. Providers register a creator under a key and
callers request fresh instances via `create`.
"""
from typing import Callable, Dict, List
from Discovery.Provider.Interface.ISuggestionProvider import ISuggestionProvider


class ProviderFactory:
    _registry: Dict[str, Callable[..., ISuggestionProvider]] = {}

    @classmethod
    def register(cls, key: str, creator: Callable[..., ISuggestionProvider]) -> None:
        cls._registry[key] = creator

    @classmethod
    def unregister(cls, key: str) -> None:
        cls._registry.pop(key, None)

    @classmethod
    def create(cls, key: str, *args, **kwargs) -> ISuggestionProvider:
        creator = cls._registry.get(key)
        if not creator:
            raise KeyError(f"Provider not registered: {key}")
        return creator(*args, **kwargs)

    @classmethod
    def registered_keys(cls) -> List[str]:
        return list(cls._registry.keys())
