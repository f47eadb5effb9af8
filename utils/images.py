"""
絵文字画像
画像パスの組み立てと、同時実行数を制限したプリロード
"""

import asyncio
import io
import logging
import time

import aiohttp
from PIL import Image

import config
from core.dataset import make_image_path
from core.index import load_index
from core.log import get_error_summary
from utils.emoji import get_emoji_data

logger = logging.getLogger(__name__)


# プリロード済み画像 {パス: Image}
_IMAGES: dict[str, Image.Image] = {}

# 実行中のプリロードタスク(GCで消えないよう参照を保持)
_PRELOAD_TASKS: set[asyncio.Task] = set()


def get_image_path(short_name: str, skin_tone: int | str | None = None) -> str | None:
    """
    ショートネームとスキントーンから画像パスを取得

    Args:
        short_name (str): ショートネーム
        skin_tone (int | str | None, optional): 1..5 またはトーンキー

    Returns:
        str | None: 画像パス、該当なしの場合はNone
    """
    data = get_emoji_data(short_name, skin_tone)
    if not data or not data.get("image"):
        return None
    return make_image_path(data["image"])


def iter_image_paths() -> list[str]:
    """全絵文字とスキントーンバリエーションの画像パス"""
    paths = []
    for record in load_index()["data"]:
        entries = [record, *(record.get("skin_variations") or {}).values()]
        paths.extend(make_image_path(e["image"]) for e in entries if e.get("image"))
    return paths


def get_preloaded_image(path: str) -> Image.Image | None:
    """
    プリロード済みの画像を取得

    Args:
        path (str): get_image_path などで得た画像パス

    Returns:
        Image.Image | None: 読み込み済みの画像、未読込の場合はNone
    """
    return _IMAGES.get(path)


def clear_preloaded_images() -> None:
    """プリロード済み画像のキャッシュを破棄する"""
    _IMAGES.clear()


def _decode_image(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def _open_local_image(path: str) -> Image.Image:
    with Image.open(path) as image:
        image.load()
        return image.copy()


async def _load_image(session: aiohttp.ClientSession, src: str) -> Image.Image:
    if src.startswith(("http://", "https://")):
        async with session.get(src) as response:
            response.raise_for_status()
            data = await response.read()
        return await asyncio.to_thread(_decode_image, data)
    return await asyncio.to_thread(_open_local_image, src)


async def _preload(
    session: aiohttp.ClientSession, semaphore: asyncio.Semaphore, src: str
) -> bool:
    async with semaphore:
        try:
            async with asyncio.timeout(config.PRELOAD_IMAGE_TIMEOUT):
                _IMAGES[src] = await _load_image(session, src)
            return True
        except (OSError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("emoji画像の読み込み失敗: %s: %s", src, get_error_summary(e))
            return False


async def preload_images() -> int:
    """
    全絵文字画像をプリロードする

    同時実行数は PRELOAD_CONCURRENCY、1枚あたりのタイムアウトは
    PRELOAD_IMAGE_TIMEOUT 秒。失敗した画像はスキップする。

    Returns:
        int: 今回新たに読み込めた画像の数
    """
    logger.info("Preloading emoji images")
    start = time.monotonic()

    sources = [src for src in dict.fromkeys(iter_image_paths()) if src not in _IMAGES]
    semaphore = asyncio.Semaphore(max(1, config.PRELOAD_CONCURRENCY))

    async with aiohttp.ClientSession() as session:
        results = await asyncio.gather(
            *(_preload(session, semaphore, src) for src in sources)
        )

    loaded = sum(1 for ok in results if ok)
    elapsed = int((time.monotonic() - start) * 1000)
    logger.info("Done preloading emoji images in %dms", elapsed)
    if loaded < len(sources):
        logger.warning(
            "emoji画像 %d/%d 件の読み込みに失敗しました",
            len(sources) - loaded,
            len(sources),
        )
    return loaded


def _on_preload_done(task: asyncio.Task) -> None:
    _PRELOAD_TASKS.discard(task)
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("emoji画像のプリロードが異常終了しました: %s", get_error_summary(error))


def start_preload() -> asyncio.Task:
    """
    プリロードを実行中のイベントループでバックグラウンド開始する

    タスクが例外で終了した場合はエラーログに残す。

    Returns:
        asyncio.Task: プリロードタスク
    """
    task = asyncio.get_running_loop().create_task(preload_images())
    _PRELOAD_TASKS.add(task)
    task.add_done_callback(_on_preload_done)
    return task
