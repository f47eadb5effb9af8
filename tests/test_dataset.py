import logging

from core.dataset import (
    find_variation,
    load_dataset,
    resolve_tone_key,
    strip_tone_modifiers,
    unified_to_emoji,
)


def test_bundled_dataset_drops_emoji_without_apple_image():
    data = load_dataset()
    names = {r["short_name"] for r in data}
    assert "grinning" in names
    assert "shaking_face" not in names


def test_people_and_body_sort_after_smileys():
    data = {r["short_name"]: r for r in load_dataset()}
    assert data["+1"]["sort_order"] == 1196
    assert data["grinning"]["sort_order"] == 1
    assert data["100"]["sort_order"] < data["wave"]["sort_order"]


def test_small_dataset(small_dataset):
    data = load_dataset(str(small_dataset))
    assert [r["short_name"] for r in data] == ["grinning", "wave"]
    assert data[1]["sort_order"] == 1005


def test_missing_file_gives_empty_list(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="core.dataset"):
        assert load_dataset(str(tmp_path / "nope.json")) == []
    assert "emoji JSON読込エラー" in caplog.text


def test_malformed_file_gives_empty_list(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_dataset(str(broken)) == []

    not_list = tmp_path / "dict.json"
    not_list.write_text('{"a": 1}', encoding="utf-8")
    assert load_dataset(str(not_list)) == []


def test_unified_to_emoji():
    assert unified_to_emoji("1F600") == "\U0001F600"
    assert unified_to_emoji("1F44D-1F3FB") == "\U0001F44D\U0001F3FB"
    assert unified_to_emoji("2764-FE0F") == "\u2764\ufe0f"
    assert unified_to_emoji("") == ""


def test_resolve_tone_key():
    assert resolve_tone_key(1) == "1F3FB"
    assert resolve_tone_key(5) == "1F3FF"
    assert resolve_tone_key("1F3FD") == "1F3FD"
    assert resolve_tone_key(0) is None
    assert resolve_tone_key(None) is None
    assert resolve_tone_key("") is None
    assert resolve_tone_key(6) is None
    assert resolve_tone_key(True) is None


def test_find_variation_falls_back_to_same_tone_pair():
    record = {
        "skin_variations": {
            "1F3FB": {"unified": "A"},
            "1F3FC-1F3FC": {"unified": "B"},
        }
    }
    assert find_variation(record, "1F3FB") == {"unified": "A"}
    assert find_variation(record, "1F3FC") == {"unified": "B"}
    assert find_variation(record, "1F3FF") is None
    assert find_variation(record, None) is None
    assert find_variation({}, "1F3FB") is None


def test_strip_tone_modifiers():
    assert strip_tone_modifiers("\U0001F44D\U0001F3FD") == "\U0001F44D"
    assert strip_tone_modifiers("\u2764\ufe0f") == "\u2764"
    assert strip_tone_modifiers("abc") == "abc"
    assert strip_tone_modifiers("") == ""

