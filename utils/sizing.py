"""
絵文字のみのメッセージの表示サイズ判定
"""

import emoji

import config


def get_emoji_count(text: str) -> int:
    """
    文字列に含まれる絵文字の数を数える

    ZWJシーケンス、国旗、トーン付き絵文字はそれぞれ1つとして数える。

    Args:
        text (str): 入力文字列

    Returns:
        int: 絵文字の数
    """
    if not text:
        return 0
    return len(emoji.emoji_list(text))


def get_size_class(text: str) -> str:
    """
    絵文字だけのメッセージのサイズクラスを返す

    Args:
        text (str): メッセージ本文

    Returns:
        str: "max", "extra-large", "large", "medium", "small" のいずれか。
            絵文字以外の文字を含む場合や6個以上の場合は空文字
    """
    if not text:
        return ""

    # 絵文字以外の文字があれば通常サイズ
    if emoji.replace_emoji(text, replace="").strip():
        return ""

    return config.SIZE_CLASSES.get(get_emoji_count(text), "")
