"""
ユーティリティモジュール
絵文字の参照、検索、表示サイズ判定、画像プリロード機能を提供
"""

from .emoji import (
    SKIN_TONES,
    get_emoji_data,
    convert_short_name_to_data,
    convert_short_name,
    is_short_name,
    emoji_to_data,
    emoji_to_image,
    get_category,
    get_categories,
)

from .search import search

from .sizing import (
    get_emoji_count,
    get_size_class,
)

from .images import (
    make_image_path,
    get_image_path,
    iter_image_paths,
    preload_images,
    start_preload,
    get_preloaded_image,
    clear_preloaded_images,
)

__all__ = [
    "SKIN_TONES",
    "get_emoji_data",
    "convert_short_name_to_data",
    "convert_short_name",
    "is_short_name",
    "emoji_to_data",
    "emoji_to_image",
    "get_category",
    "get_categories",
    "search",
    "get_emoji_count",
    "get_size_class",
    "make_image_path",
    "get_image_path",
    "iter_image_paths",
    "preload_images",
    "start_preload",
    "get_preloaded_image",
    "clear_preloaded_images",
]
