import json

from Discovery.AI.prompt_builder import build_discovery_prompt, SUGGESTION_SCHEMA


def test_prompt_restates_description_verbatim():
    description = 'Punjabi singer from India who performed at "Coachella"'
    prompt = build_discovery_prompt(description)
    assert f'"{description}"' in prompt


def test_prompt_describes_output_shape_and_rules():
    prompt = build_discovery_prompt("British rock band")
    assert json.dumps(SUGGESTION_SCHEMA, indent=2) in prompt
    for key in ("suggestions", "query_interpretation", "total_found", "confidence_score", "estimated_fanbase"):
        assert key in prompt
    assert "highest first" in prompt
    assert "Return only valid JSON" in prompt


def test_prompt_is_deterministic():
    assert build_discovery_prompt("stand-up comedian") == build_discovery_prompt("stand-up comedian")
