"""
絵文字検索
short_name と name に対するあいまい検索
"""

from rapidfuzz import fuzz

import config
from core.index import load_index

SEARCH_KEYS = ("short_name", "name")


def _tokenize(text: str) -> list[str]:
    return [t for t in config.TOKEN_SEPARATOR_RE.split(text) if t]


def _match(pattern: str, text: str) -> float:
    # パターンより短いテキストは部分一致させない
    if len(text) < len(pattern):
        return fuzz.ratio(pattern, text)
    return fuzz.partial_ratio(pattern, text)


def _score_text(query: str, query_tokens: list[str], text: str) -> float:
    """
    クエリと1つのキー値のスコア(0..100)

    文字列全体の部分一致と、クエリの各トークンが最もよく一致する
    テキストトークンとのスコア平均の大きい方を採用する。
    """
    text = (text or "").lower()
    if not text:
        return 0.0

    whole = _match(query, text)

    text_tokens = _tokenize(text)
    if not query_tokens or not text_tokens:
        return whole

    per_token = [
        max(_match(q, t) for t in text_tokens) for q in query_tokens
    ]
    return max(whole, sum(per_token) / len(per_token))


def search(query: str, count: int = 0) -> list[dict]:
    """
    絵文字をあいまい検索する

    Args:
        query (str): 検索文字列（SEARCH_MAX_PATTERN_LENGTH 文字で切り詰め）
        count (int, optional): 最大件数。0なら全件。デフォルトは0

    Returns:
        list[dict]: 一致度の高い順のレコード
    """
    query = (query or "")[: config.SEARCH_MAX_PATTERN_LENGTH].strip().lower()
    if not query:
        return []

    query_tokens = _tokenize(query)
    cutoff = (1.0 - config.SEARCH_THRESHOLD) * 100

    scored = []
    for record in load_index()["data"]:
        values = [record.get(key) or "" for key in SEARCH_KEYS]
        score = max(_score_text(query, query_tokens, v) for v in values)
        if score < cutoff:
            continue
        exact = max(fuzz.ratio(query, v.lower()) for v in values)
        scored.append((-score, -exact, record.get("sort_order", 0), record))

    scored.sort(key=lambda item: item[:3])
    results = [item[3] for item in scored]

    if count:
        return results[:count]

    return results
