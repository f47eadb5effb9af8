"""
絵文字データセット
emoji-datasource形式のJSON読み込みとコードポイント変換
"""

import json
import logging

import config
from core.log import get_error_summary

logger = logging.getLogger(__name__)


def _adjust_record(record: dict) -> dict:
    if record.get("category") == "People & Body":
        return {
            **record,
            "sort_order": int(record.get("sort_order") or 0)
            + config.PEOPLE_SORT_OFFSET,
        }
    return record


def load_dataset(path: str | None = None) -> list[dict]:
    """
    データセットを読み込み、Apple画像のある絵文字だけを返す

    People & Body の sort_order は Smileys & Emotion の後ろに来るよう
    PEOPLE_SORT_OFFSET だけずらす。

    Args:
        path (str | None, optional): JSONファイルのパス。デフォルトはconfig.EMOJI_JSON_PATH

    Returns:
        list[dict]: 絵文字レコードのリスト。読み込み失敗時は空リスト
    """
    path = path or config.EMOJI_JSON_PATH

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("emoji JSON読込エラー: %s: %s", path, get_error_summary(e))
        return []

    if not isinstance(raw, list):
        logger.error("emoji JSONの形式が不正です: %s", path)
        return []

    return [
        _adjust_record(record)
        for record in raw
        if isinstance(record, dict) and record.get("has_img_apple")
    ]


def unified_to_emoji(unified: str) -> str:
    """
    unified形式(例: "1F44D-1F3FB")を絵文字文字列に変換

    Args:
        unified (str): ハイフン区切りの16進コードポイント

    Returns:
        str: 絵文字文字列
    """
    if not unified:
        return ""
    return "".join(chr(int(c, 16)) for c in unified.split("-"))


def make_image_path(image: str) -> str:
    """画像ファイル名からプリロード・表示用のパスを組み立てる"""
    return f"{config.EMOJI_ROOT_PATH}{config.EMOJI_IMAGE_DIR}{image}"


def find_variation(record: dict, tone_key: str | None) -> dict | None:
    """
    レコードからスキントーンのバリエーションを探す

    2人組の絵文字は "1F3FB-1F3FB" のようなキーを持つため、
    単独キーで見つからなければ同じトーン同士のキーで探す。

    Args:
        record (dict): 絵文字レコード
        tone_key (str | None): トーンキー

    Returns:
        dict | None: バリエーション、見つからない場合はNone
    """
    variations = record.get("skin_variations") or {}
    if not tone_key or not variations:
        return None
    return variations.get(tone_key) or variations.get(f"{tone_key}-{tone_key}")


def resolve_tone_key(skin_tone: int | str | None) -> str | None:
    """
    スキントーン指定をskin_variationsのキーに変換

    1..5 の数値は config.SKIN_TONES の該当キー、文字列はそのまま返す。

    Args:
        skin_tone: 1..5 の数値、"1F3FB" のようなキー、または None

    Returns:
        str | None: トーンキー、指定なし・範囲外はNone
    """
    if not skin_tone or isinstance(skin_tone, bool):
        return None
    if isinstance(skin_tone, int):
        if 1 <= skin_tone <= len(config.SKIN_TONES):
            return config.SKIN_TONES[skin_tone - 1]
        return None
    return str(skin_tone).upper()


def strip_tone_modifiers(s: str) -> str:
    """
    トーン修飾子とVS16を除去

    Args:
        s (str): 入力文字列

    Returns:
        str: トーン修飾子を除去した文字列
    """
    return "".join(
        ch
        for ch in s or ""
        if ord(ch) not in config.TONE_MODIFIER_RANGE
        and ord(ch) != config.VARIATION_SELECTOR_16
    )
