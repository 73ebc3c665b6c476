from Discovery.Events.event_dispatcher import EventDispatcher
from Discovery.Provider.ProviderFactory import ProviderFactory
from Discovery.Provider.SuggestionProvider import SuggestionProvider
from Discovery.Provider.Implementation.AISuggestion import AISuggestion
from Discovery.Provider.Implementation.FallbackSuggestion import FallbackSuggestion


def test_provider_factory_register_and_create():
    ProviderFactory.register("tmp", lambda: FallbackSuggestion())
    try:
        assert "tmp" in ProviderFactory.registered_keys()
        assert isinstance(ProviderFactory.create("tmp"), FallbackSuggestion)
    finally:
        ProviderFactory.unregister("tmp")
    assert "tmp" not in ProviderFactory.registered_keys()


def test_initialize_provider_without_key_falls_back(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert isinstance(SuggestionProvider.InitializeProvider(None), FallbackSuggestion)


def test_initialize_provider_with_key():
    assert isinstance(SuggestionProvider.InitializeProvider("key"), AISuggestion)
    assert isinstance(SuggestionProvider.InitializeProvider("key", use_ai=False), FallbackSuggestion)


def test_event_dispatcher_subscribe_dispatch():
    disp = EventDispatcher()
    events = []

    def on_started(**kwargs):
        events.append(("started", kwargs.get("description")))

    disp.subscribe("discovery_started", on_started)
    disp.dispatch("discovery_started", description="british rock")
    assert events == [("started", "british rock")]

    disp.unsubscribe("discovery_started", on_started)
    disp.dispatch("discovery_started", description="ignored")
    assert disp.listener_count("discovery_started") == 0
    assert len(events) == 1


def test_event_dispatcher_isolates_failing_listener():
    disp = EventDispatcher()
    seen = []

    def broken(**kwargs):
        raise RuntimeError("broken listener")

    disp.subscribe("discovery_completed", broken)
    disp.subscribe("discovery_completed", lambda **kw: seen.append(kw["source"]))
    disp.dispatch("discovery_completed", source="ai")
    assert seen == ["ai"]
