"""
CHATEMOJI Configファイル
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()


def _getenv_int(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def _getenv_float(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


debug = os.getenv("DEBUG", "").lower() in ("1", "true", "yes", "on")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

EMOJI_JSON_PATH = os.getenv("EMOJI_JSON_PATH") or os.path.join(
    os.path.dirname(__file__), "core", "emoji.json"
)

EMOJI_ROOT_PATH = os.getenv("EMOJI_ROOT_PATH", "")
EMOJI_IMAGE_SET = os.getenv("EMOJI_IMAGE_SET", "apple")
EMOJI_IMAGE_SIZE = _getenv_int("EMOJI_IMAGE_SIZE", 64)
EMOJI_IMAGE_DIR = os.getenv(
    "EMOJI_IMAGE_DIR",
    f"node_modules/emoji-datasource-{EMOJI_IMAGE_SET}/img/{EMOJI_IMAGE_SET}/{EMOJI_IMAGE_SIZE}/",
)

PRELOAD_CONCURRENCY = _getenv_int("PRELOAD_CONCURRENCY", 10)
PRELOAD_IMAGE_TIMEOUT = _getenv_float("PRELOAD_IMAGE_TIMEOUT", 5.0)

SEARCH_THRESHOLD = _getenv_float("SEARCH_THRESHOLD", 0.2)
SEARCH_MAX_PATTERN_LENGTH = _getenv_int("SEARCH_MAX_PATTERN_LENGTH", 32)

SKIN_TONES = ["1F3FB", "1F3FC", "1F3FD", "1F3FE", "1F3FF"]

TONE_MODIFIER_RANGE = range(0x1F3FB, 0x1F400)

# 絵文字表示用のVS16
VARIATION_SELECTOR_16 = 0xFE0F

# UIでは Smileys & Emotion の後ろに People & Body を並べる
PEOPLE_SORT_OFFSET = 1000

CATEGORY_KEYS = {
    "Activities": "activity",
    "Animals & Nature": "animal",
    "Flags": "flag",
    "Food & Drink": "food",
    "Objects": "object",
    "Travel & Places": "travel",
    "Smileys & Emotion": "emoji",
    "People & Body": "emoji",
    "Symbols": "symbol",
}

DEFAULT_CATEGORY_KEY = "misc"

SIZE_CLASSES = {
    1: "max",
    2: "extra-large",
    3: "large",
    4: "medium",
    5: "small",
}

TOKEN_SEPARATOR_RE = re.compile(r"[-_\s]+")
