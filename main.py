import asyncio
import logging

from core.index import load_index
from core.log import setup_logging
from utils.images import preload_images

logger = logging.getLogger(__name__)


async def main():
    """
    エントリー関数
    インデックスを構築し、絵文字画像をプリロードする
    """
    setup_logging()
    index = load_index()
    logger.info("絵文字 %d 件を読み込みました", len(index["data"]))
    await preload_images()


if __name__ == "__main__":
    asyncio.run(main())
