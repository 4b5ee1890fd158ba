"""TTL 캐시 (공유)

키별 asyncio.Lock 으로 동시에 하나의 계산만 수행한다.
"""

import asyncio
import logging
import time
from collections import OrderedDict
from typing import Any, Awaitable, Callable, Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

_MISSING = object()


class LockCache:
    """asyncio 락 LRU 캐시 (무한 증가 방지)"""

    def __init__(self, maxsize: int = 1000) -> None:
        self._locks: "OrderedDict[str, asyncio.Lock]" = OrderedDict()
        self._maxsize = maxsize

    def get(self, key: str) -> asyncio.Lock:
        if key in self._locks:
            self._locks.move_to_end(key)
        else:
            self._locks[key] = asyncio.Lock()
            if len(self._locks) > self._maxsize:
                self._locks.popitem(last=False)
        return self._locks[key]


class AsyncTTLCache:
    """짧은 수명의 비동기 계산 결과 캐시 (cachetools.TTLCache 저장)

    사용 예시:
        cache = AsyncTTLCache(ttl_seconds=60)
        stats = await cache.get_or_compute("stats", compute_stats)
    """

    def __init__(
        self,
        ttl_seconds: float,
        maxsize: int = 128,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl_seconds: 캐시 유효 시간 (초)
            maxsize: 최대 키 수 (초과 시 LRU 제거)
            clock: 시간 함수 (테스트용 주입)
        """
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds, timer=clock)
        self._locks = LockCache()

    def __len__(self) -> int:
        self._entries.expire()
        return len(self._entries)

    async def get_or_compute(
        self,
        key: str,
        factory: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        캐시 값 반환, 만료 시 factory 로 재계산

        동일 키에 대한 동시 호출은 락에서 대기 후 첫 계산 결과를 공유한다.
        factory 예외는 캐시되지 않고 호출자에게 전파된다.
        """
        value = self._entries.get(key, _MISSING)
        if value is not _MISSING:
            return value

        async with self._locks.get(key):
            value = self._entries.get(key, _MISSING)
            if value is not _MISSING:
                return value

            logger.debug(f"캐시 재계산: {key}")
            value = await factory()
            self._entries[key] = value
            return value

    def invalidate(self, key: Optional[str] = None) -> None:
        """캐시 무효화 (key 없으면 전체)"""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
