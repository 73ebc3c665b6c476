from Discovery.Business.DiscoveryBusiness import DiscoveryBusiness
from Discovery.Provider.Implementation.FallbackSuggestion import FallbackSuggestion
from Discovery.Routes.DiscoveryRoute import CreateApp


def make_client():
    app = CreateApp({"DISCOVERY_BUSINESS": DiscoveryBusiness(provider=FallbackSuggestion())})
    return app.test_client()


def test_health_check():
    res = make_client().get("/api/health-check")
    assert res.status_code == 200
    assert res.get_json()["status"] == "healthy"


def test_discover_celebrity():
    res = make_client().post("/api/ai/discover-celebrity", json={"description": "Punjabi singer and British rock fan"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["total_found"] == 2 == len(data["suggestions"])
    assert [s["name"] for s in data["suggestions"]] == ["Diljit Dosanjh", "Coldplay"]
    assert data["query_interpretation"] == "Fallback search results for: Punjabi singer and British rock fan"
    assert data["suggestions"][0]["image_url"] is None


def test_discover_rejects_invalid_description():
    client = make_client()
    for payload in ({}, {"description": ""}, {"description": "   "}, {"description": 42}, {"description": "x" * 501}):
        res = client.post("/api/ai/discover-celebrity", json=payload)
        assert res.status_code == 400
        assert res.get_json()["error"] == "invalid_parameter"


def test_discover_accepts_max_length():
    res = make_client().post("/api/ai/discover-celebrity", json={"description": "x" * 500})
    assert res.status_code == 200


def test_discover_without_json_body():
    res = make_client().post("/api/ai/discover-celebrity", data="not json", content_type="text/plain")
    assert res.status_code == 400


def test_profile_draft():
    payload = {"suggestion": {"name": "Coldplay", "instagram_handle": "@coldplay", "estimated_fanbase": 50000000, "confidence_score": 3}}
    res = make_client().post("/api/ai/profile-draft", json=payload)
    assert res.status_code == 200
    data = res.get_json()
    assert data["name"] == "Coldplay"
    assert data["instagram_url"] == "https://instagram.com/coldplay"
    assert data["youtube_url"] is None
    assert data["fanbase_count"] == 50000000
    assert data["fanbase_display"] == "50.0M"


def test_profile_draft_requires_object():
    res = make_client().post("/api/ai/profile-draft", json={"suggestion": "Coldplay"})
    assert res.status_code == 400


def test_unknown_route_and_wrong_method():
    client = make_client()
    assert client.get("/api/nope").status_code == 404
    res = client.get("/api/ai/discover-celebrity")
    assert res.status_code == 405
    assert res.get_json()["error"] == "method_not_allowed"
