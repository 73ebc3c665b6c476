"""
Observer-style event hub for discovery lifecycle notifications
(discovery_started, discovery_completed, discovery_fallback).
"""
import logging
from threading import Lock
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[..., None]


class EventDispatcher:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}
        self._lock = Lock()

    def subscribe(self, event_name: str, callback: Listener) -> None:
        with self._lock:
            self._listeners.setdefault(event_name, []).append(callback)

    def unsubscribe(self, event_name: str, callback: Listener) -> None:
        with self._lock:
            callbacks = self._listeners.get(event_name, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def listener_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._listeners.get(event_name, []))

    def dispatch(self, event_name: str, **payload) -> None:
        """Notify listeners in subscription order. A failing listener is logged
        and does not stop the others.
        """
        with self._lock:
            listeners = list(self._listeners.get(event_name, []))
        for listener in listeners:
            try:
                listener(**payload)
            except Exception:
                logger.exception("Listener for '%s' failed", event_name)
