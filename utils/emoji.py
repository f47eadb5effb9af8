"""
絵文字処理
ショートネーム・スキントーン・絵文字文字列からのデータ参照
"""

from config import SKIN_TONES
from core.dataset import (
    find_variation,
    resolve_tone_key,
    strip_tone_modifiers,
    unified_to_emoji,
)
from core.index import load_index


def get_emoji_data(short_name: str, skin_tone: int | str | None = None) -> dict | None:
    """
    ショートネームから絵文字データを取得

    スキントーン指定があり、バリエーションを持つ絵文字の場合は
    バリエーション(unified, image など)のみを返す。

    Args:
        short_name (str): ショートネーム（例: "+1", "thumbsup"）
        skin_tone (int | str | None, optional): 1..5 またはトーンキー。デフォルトはNone

    Returns:
        dict | None: レコードまたはバリエーション。見つからない場合はNone
    """
    base = load_index()["by_short_name"].get(short_name)
    if base is None:
        return None

    if skin_tone and base.get("skin_variations"):
        return find_variation(base, resolve_tone_key(skin_tone))

    return base


def convert_short_name_to_data(
    short_name: str, skin_tone: int | str | None = 0
) -> dict | None:
    """
    ショートネームから、スキントーンを反映したレコードを取得

    2人組の絵文字は "1F3FB-1F3FC" のような組み合わせキーを指定する。
    キーに一致するバリエーションがなければベースのレコードを返す。

    Args:
        short_name (str): ショートネーム
        skin_tone (int | str | None, optional): 1..5 またはトーンキー。デフォルトは0(なし)

    Returns:
        dict | None: バリエーションをマージしたレコード。見つからない場合はNone
    """
    base = load_index()["by_short_name"].get(short_name)
    if base is None:
        return None

    tone_key = resolve_tone_key(skin_tone)
    variations = base.get("skin_variations") or {}
    variation = variations.get(tone_key) if tone_key else None
    if variation:
        return {**base, **variation}

    return base


def convert_short_name(short_name: str, skin_tone: int | str | None = 0) -> str:
    """
    ショートネームをUnicode絵文字文字列に変換する

    Args:
        short_name (str): ショートネーム（例: "grin", "joy"）
        skin_tone (int | str | None, optional): 1..5 またはトーンキー

    Returns:
        str: Unicode絵文字文字列（例: "😁"）、見つからない場合は空文字
    """
    data = convert_short_name_to_data(short_name, skin_tone)
    if not data:
        return ""
    return unified_to_emoji(data.get("unified", ""))


def is_short_name(name: str) -> bool:
    """
    登録済みのショートネームか判定

    Args:
        name (str): ショートネーム（エイリアスを含む）

    Returns:
        bool: 登録されていればTrue
    """
    return name in load_index()["short_names"]


def emoji_to_data(emoji: str) -> dict | None:
    """
    絵文字文字列からレコードを取得

    トーン付きの絵文字もベースのレコードを返す。完全一致しない場合は
    トーン修飾子とVS16を除去して再照合する。

    Args:
        emoji (str): 絵文字文字列

    Returns:
        dict | None: レコード、見つからない場合はNone
    """
    by_emoji = load_index()["by_emoji"]
    if emoji in by_emoji:
        return by_emoji[emoji]

    stripped = strip_tone_modifiers(emoji)
    if stripped and stripped != emoji:
        return by_emoji.get(stripped)
    return None


def emoji_to_image(emoji: str) -> str | None:
    """絵文字文字列(トーン込み)に対応する画像パス"""
    return load_index()["image_by_emoji"].get(emoji)


def get_category(key: str) -> list[dict]:
    """
    UIカテゴリキーの絵文字をsort_order順で返す

    Args:
        key (str): "emoji", "animal", "food" など

    Returns:
        list[dict]: レコードのリスト、存在しないカテゴリは空リスト
    """
    return list(load_index()["by_category"].get(key, []))


def get_categories() -> list[str]:
    """
    絵文字を1つ以上含むUIカテゴリキーの一覧

    Returns:
        list[str]: カテゴリキーのソート済みリスト
    """
    return sorted(load_index()["by_category"])
