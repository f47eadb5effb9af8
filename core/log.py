"""
ログ設定
"""

import logging

import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """
    ルートロガーを設定する

    Args:
        level (str | None, optional): ログレベル名。デフォルトはNone(configから決定)
    """
    if level is None:
        level = "DEBUG" if config.debug else config.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_error_summary(error: Exception) -> str:
    """
    エラーの概要を取得する（ログ用）

    Args:
        error: 例外オブジェクト

    Returns:
        str: エラーの概要（最大200文字）
    """
    error_type = type(error).__name__
    error_msg = str(error)
    summary = f"{error_type}: {error_msg}" if error_msg else error_type
    return summary[:200]
