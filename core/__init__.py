"""
コアロジック
データセット読み込み、インデックス構築、ログ設定
"""

from .dataset import (
    load_dataset,
    unified_to_emoji,
    resolve_tone_key,
    find_variation,
    strip_tone_modifiers,
)

from .index import (
    load_index,
    reset_index,
    category_key,
)

from .log import (
    setup_logging,
    get_error_summary,
)

__all__ = [
    "load_dataset",
    "unified_to_emoji",
    "resolve_tone_key",
    "find_variation",
    "strip_tone_modifiers",
    "load_index",
    "reset_index",
    "category_key",
    "setup_logging",
    "get_error_summary",
]
