"""카탈로그 통계 서비스 (TTL 캐시)"""

import asyncio
import logging
from typing import Dict, List, Optional

from shared.utils import AsyncTTLCache
from exercise_catalog.config import settings
from exercise_catalog.models import CatalogStats
from exercise_catalog.repository import ExerciseRepository, any_of, not_null

logger = logging.getLogger(__name__)

STATS_CACHE_KEY = "catalog_stats"


def _sorted_values(counts: Dict[Optional[str], int]) -> List[str]:
    return sorted(value for value in counts if value)


class ExerciseStatsService:
    """카탈로그 통계 (집계 쿼리는 캐시 만료 시에만, 동시 호출은 1회로 합침)"""

    def __init__(
        self,
        repository: ExerciseRepository,
        cache: Optional[AsyncTTLCache] = None,
    ):
        self._repository = repository
        self._cache = cache or AsyncTTLCache(ttl_seconds=settings.stats_cache_ttl_seconds)

    async def get_stats(self) -> CatalogStats:
        return await self._cache.get_or_compute(STATS_CACHE_KEY, self._compute)

    async def _compute(self) -> CatalogStats:
        repo = self._repository
        total, with_media, body_parts, equipments, targets = await asyncio.gather(
            repo.count(),
            repo.count(any_of(not_null("gif_url"), not_null("image_url"))),
            repo.group_counts("body_part"),
            repo.group_counts("equipment"),
            repo.group_counts("target"),
        )
        logger.debug(f"통계 재계산: total={total} with_media={with_media}")
        return CatalogStats(
            total=total,
            with_media=with_media,
            body_parts=_sorted_values(body_parts),
            equipments=_sorted_values(equipments),
            targets=_sorted_values(targets),
            body_parts_count=len(body_parts),
            equipments_count=len(equipments),
            targets_count=len(targets),
        )

    def invalidate(self) -> None:
        self._cache.invalidate(STATS_CACHE_KEY)
