from shared.utils import blank_to_none, config, generate_short_id, title_from_request, validate_text_length


def test_config_env_loading() -> None:
    # Keys should resolve even when not explicitly configured
    assert config.get("openai_api_key") in (None, "") or isinstance(config.get("openai_api_key"), str)
    assert isinstance(config.get("database_url"), str)
    assert isinstance(config.get("allowed_origins"), list)
    assert config.get("placeholder_image_url").startswith("https://")


def test_config_default_for_missing_key() -> None:
    assert config.get("not_a_setting", "fallback") == "fallback"


def test_generate_short_id() -> None:
    first = generate_short_id("ann")
    second = generate_short_id("ann")
    assert first.startswith("ann_")
    assert len(first.split("_")) == 3
    assert first != second


def test_validate_text_length() -> None:
    assert validate_text_length("abc", 10) == "abc"
    assert validate_text_length("a" * 20, 10) == "a" * 10


def test_blank_to_none() -> None:
    assert blank_to_none(None) is None
    assert blank_to_none("   ") is None
    assert blank_to_none(" #fff ") == "#fff"


def test_title_from_request() -> None:
    assert title_from_request("explain THE warranty terms in detail") == "Explain the warranty terms"
    assert title_from_request("   ") == "New Slide"
