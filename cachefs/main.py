"""
Demo of the cache-addressed in-memory file system.

Walks through create, read, write and delete against a small store so the
cache behaviour can be followed in the log output.

Usage:
    python -m cachefs --cache-size 3 --policies lru,lfu --log-level DEBUG
"""

import argparse
import logging
from typing import List, Optional

from .config import settings
from .exceptions import CacheFSError
from .services.cached_store import CacheAddressedStore

logger = logging.getLogger(__name__)


def run_demo(store: CacheAddressedStore) -> List[str]:
    """Run the demo scenario and return the final listing."""
    logger.info("--- Step 1: CREATE files ---")
    store.create("file1.txt", "content1")
    store.create("file2.txt", "content2")
    store.create("file3.txt", "content3")
    logger.info(f"Files: {store.list()}")

    logger.info("--- Step 2: READ files to populate cache ---")
    store.read("file1.txt")
    store.read("file2.txt")

    logger.info("--- Step 3: WRITE to an existing file ---")
    store.write("file1.txt", "new_content1")
    logger.info(f"file1.txt now reads {store.read('file1.txt')!r}")

    logger.info("--- Step 4: DELETE a file ---")
    store.delete("file2.txt")
    try:
        store.read("file2.txt")
    except CacheFSError as e:
        logger.info(f"Expected failure: {e}")

    files = store.list()
    logger.info(f"Files: {files}")
    return files


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="In-memory file system with LRU and LFU caching"
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        default=settings.cache_size,
        help="Capacity of each cache",
    )
    parser.add_argument(
        "--policies",
        type=str,
        default=",".join(settings.cache_policies),
        help="Comma-separated cache policies in probe order",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    demo_settings = settings.model_copy(update={
        "cache_size": args.cache_size,
        "cache_policies": [p for p in args.policies.split(",") if p.strip()],
    })
    try:
        store = CacheAddressedStore.from_settings(demo_settings)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    run_demo(store)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
