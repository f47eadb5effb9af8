import json

import pytest

import config
from core.index import reset_index
from utils.images import clear_preloaded_images


@pytest.fixture(autouse=True)
def emoji_env(monkeypatch):
    monkeypatch.setattr(config, "EMOJI_ROOT_PATH", "")
    monkeypatch.setattr(config, "EMOJI_IMAGE_DIR", "img/")
    reset_index()
    clear_preloaded_images()
    yield
    reset_index()
    clear_preloaded_images()


SMALL_DATASET = [
    {
        "name": "GRINNING FACE",
        "unified": "1F600",
        "non_qualified": None,
        "image": "1f600.png",
        "short_name": "grinning",
        "short_names": ["grinning"],
        "category": "Smileys & Emotion",
        "sort_order": 1,
        "has_img_apple": True,
    },
    {
        "name": "WAVING HAND SIGN",
        "unified": "1F44B",
        "non_qualified": None,
        "image": "1f44b.png",
        "short_name": "wave",
        "short_names": ["wave"],
        "category": "People & Body",
        "sort_order": 5,
        "has_img_apple": True,
        "skin_variations": {
            "1F3FB": {
                "unified": "1F44B-1F3FB",
                "non_qualified": None,
                "image": "1f44b-1f3fb.png",
                "has_img_apple": True,
            },
        },
    },
    {
        "name": "SHAKING FACE",
        "unified": "1FAE8",
        "non_qualified": None,
        "image": "1fae8.png",
        "short_name": "shaking_face",
        "short_names": ["shaking_face"],
        "category": "Smileys & Emotion",
        "sort_order": 2,
        "has_img_apple": False,
    },
]


@pytest.fixture
def small_dataset(tmp_path, monkeypatch):
    path = tmp_path / "emoji.json"
    path.write_text(json.dumps(SMALL_DATASET), encoding="utf-8")
    monkeypatch.setattr(config, "EMOJI_JSON_PATH", str(path))
    reset_index()
    return path
