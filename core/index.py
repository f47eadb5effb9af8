"""
絵文字インデックス
データセットから検索用テーブルを一度だけ構築してキャッシュする
"""

import logging

import config
from core.dataset import load_dataset, make_image_path, unified_to_emoji

logger = logging.getLogger(__name__)


# インデックスキャッシュ

_INDEX_CACHE = {
    "data": None,
    "by_short_name": None,
    "by_emoji": None,
    "image_by_emoji": None,
    "by_category": None,
    "short_names": None,
    "path": None,
}


def category_key(category: str | None) -> str:
    """データセットのカテゴリ名をUIのカテゴリキーに変換"""
    return config.CATEGORY_KEYS.get(category or "", config.DEFAULT_CATEGORY_KEY)


def _add_emoji(by_emoji: dict, image_by_emoji: dict, entry: dict, record: dict):
    image = make_image_path(entry.get("image", ""))
    qualified = unified_to_emoji(entry.get("unified", ""))
    if qualified:
        by_emoji[qualified] = record
        image_by_emoji[qualified] = image

    # 完全修飾形を優先し、非修飾形は未登録の場合のみ追加
    non_qualified = unified_to_emoji(entry.get("non_qualified") or "")
    if non_qualified and non_qualified not in by_emoji:
        by_emoji[non_qualified] = record
        image_by_emoji[non_qualified] = image


def _build_index(data: list[dict]) -> dict:
    by_short_name = {}
    by_emoji = {}
    image_by_emoji = {}
    by_category = {}
    short_names = set()

    for record in data:
        short_name = record.get("short_name")
        if short_name:
            by_short_name[short_name] = record
            short_names.add(short_name)

    for record in data:
        # エイリアスは他の絵文字のshort_nameを上書きしない
        for name in record.get("short_names") or []:
            by_short_name.setdefault(name, record)
            short_names.add(name)

        _add_emoji(by_emoji, image_by_emoji, record, record)
        for variation in (record.get("skin_variations") or {}).values():
            _add_emoji(by_emoji, image_by_emoji, variation, record)

        by_category.setdefault(category_key(record.get("category")), []).append(record)

    for key, records in by_category.items():
        by_category[key] = sorted(records, key=lambda r: r.get("sort_order", 0))

    return {
        "data": data,
        "by_short_name": by_short_name,
        "by_emoji": by_emoji,
        "image_by_emoji": image_by_emoji,
        "by_category": by_category,
        "short_names": short_names,
    }


def load_index(path: str | None = None) -> dict:
    """
    インデックスの構築とキャッシュ

    構築済みの場合は path を無視してキャッシュを返す。別のデータセットを
    読み込むには先に reset_index() を呼ぶ。

    Args:
        path (str | None, optional): データセットのパス。デフォルトはconfig.EMOJI_JSON_PATH

    Returns:
        dict: data, by_short_name, by_emoji, image_by_emoji, by_category, short_names, path
    """
    path = path or config.EMOJI_JSON_PATH

    if _INDEX_CACHE["data"] is not None:
        if path != _INDEX_CACHE["path"]:
            logger.debug(
                "emoji index already built from %s, ignoring %s",
                _INDEX_CACHE["path"],
                path,
            )
        return _INDEX_CACHE

    data = load_dataset(path)
    _INDEX_CACHE.update(_build_index(data), path=path)
    logger.debug(
        "emoji index built: %d records, %d short names",
        len(data),
        len(_INDEX_CACHE["short_names"]),
    )
    return _INDEX_CACHE


def reset_index() -> None:
    """キャッシュを破棄する。次のload_indexで再構築される"""
    for key in _INDEX_CACHE:
        _INDEX_CACHE[key] = None
