from Discovery.Provider.Implementation.FallbackSuggestion import FallbackSuggestion, generate_fallback


def test_unrelated_description_yields_generic_record():
    result = generate_fallback("xyz completely unrelated text")
    assert result.total_found == 1
    s = result.suggestions[0]
    assert s.name == "Global Celebrity"
    assert s.category == "Entertainment"
    assert s.country == "International"
    assert s.confidence_score == 0.5
    assert s.estimated_fanbase == 1000000
    assert s.instagram_handle is None and s.youtube_channel is None and s.spotify_artist is None


def test_punjabi_rule():
    result = generate_fallback("Looking for an INDIAN SINGER")
    assert [s.name for s in result.suggestions] == ["Diljit Dosanjh"]
    s = result.suggestions[0]
    assert s.country == "India"
    assert s.confidence_score == 0.8
    assert s.estimated_fanbase == 15000000
    assert s.instagram_handle == "diljitdosanjh"


def test_british_rock_requires_both_keywords():
    assert [s.name for s in generate_fallback("rock band").suggestions] == ["Global Celebrity"]
    assert [s.name for s in generate_fallback("british actor").suggestions] == ["Global Celebrity"]
    result = generate_fallback("British Rock band")
    assert [s.name for s in result.suggestions] == ["Coldplay"]
    assert result.suggestions[0].estimated_fanbase == 50000000


def test_rules_are_additive():
    result = generate_fallback("Punjabi singer and British rock fan")
    assert [s.name for s in result.suggestions] == ["Diljit Dosanjh", "Coldplay"]
    assert result.total_found == 2
    assert result.query_interpretation == "Fallback search results for: Punjabi singer and British rock fan"


def test_results_do_not_share_state():
    first = generate_fallback("punjabi")
    first.suggestions[0].genres.append("Mutated")
    second = generate_fallback("punjabi")
    assert "Mutated" not in second.suggestions[0].genres


def test_fallback_provider():
    result = FallbackSuggestion().GenerateSuggestions("british rock")
    assert result.source == "fallback"
    assert result.total_found == len(result.suggestions) == 1
