import pytest

from gtm_studio.schemas.contracts import GTMInput
from gtm_studio.services.normalizer import InvalidPayload, decode_payload, normalize_payload


def test_empty_object_uses_defaults():
    result = normalize_payload({})
    assert result.product_name == "Your Product"
    assert result.stage == "beta"
    assert result.budget_level == "balanced"
    assert result.launch_timeline == "quarter"
    assert result.focus_areas == ()


@pytest.mark.parametrize("payload", [None, 0, 3.5, "plan", [], [{"stage": "ga"}], True])
def test_non_object_payload_is_rejected(payload):
    with pytest.raises(InvalidPayload, match="Invalid payload"):
        normalize_payload(payload)


def test_whitespace_only_text_falls_back_to_default():
    assert normalize_payload({"productName": "  "}).product_name == "Your Product"


def test_text_fields_are_trimmed():
    result = normalize_payload({"productName": "  Atlas  ", "adoptionGoal": "\t100 teams\n"})
    assert result.product_name == "Atlas"
    assert result.adoption_goal == "100 teams"


def test_non_string_text_falls_back_to_default():
    result = normalize_payload({"targetAudience": 12, "brandVoice": ["bold"]})
    assert result.target_audience == GTMInput().target_audience
    assert result.brand_voice == GTMInput().brand_voice


def test_focus_areas_keep_only_strings():
    result = normalize_payload({"focusAreas": ["positioning", 42, None]})
    assert result.focus_areas == ("positioning",)


def test_focus_areas_drop_duplicates_in_order():
    result = normalize_payload({"focusAreas": ["lifecycle", "positioning", "lifecycle"]})
    assert result.focus_areas == ("lifecycle", "positioning")


def test_focus_areas_non_list_is_empty():
    assert normalize_payload({"focusAreas": "positioning"}).focus_areas == ()


def test_unknown_enum_values_fall_back_leniently():
    result = normalize_payload({"stage": "seed", "budgetLevel": 5, "launchTimeline": None})
    assert result.stage == "beta"
    assert result.budget_level == "balanced"
    assert result.launch_timeline == "quarter"


def test_strict_mode_rejects_unknown_enum_values():
    with pytest.raises(InvalidPayload, match="budgetLevel"):
        normalize_payload({"budgetLevel": "unlimited"}, strict=True)


def test_strict_mode_still_defaults_missing_enums():
    assert normalize_payload({}, strict=True).stage == "beta"


def test_snake_case_keys_are_accepted():
    result = normalize_payload({"product_name": "Atlas", "budget_level": "lean"})
    assert result.product_name == "Atlas"
    assert result.budget_level == "lean"


def test_normalize_is_idempotent():
    first = normalize_payload({"productName": " Atlas ", "stage": "ga", "focusAreas": ["enablement", 1]})
    assert normalize_payload(first) == first
    assert normalize_payload(first.model_dump(by_alias=True)) == first


def test_decode_payload_rejects_malformed_json():
    with pytest.raises(InvalidPayload, match="Malformed JSON"):
        decode_payload(b"{not json")


def test_decode_payload_returns_raw_value():
    assert decode_payload(b'[1, 2]') == [1, 2]


def test_decode_payload_rejects_deeply_nested_json():
    with pytest.raises(InvalidPayload, match="Malformed JSON"):
        decode_payload(b"[" * 100000 + b"]" * 100000)
