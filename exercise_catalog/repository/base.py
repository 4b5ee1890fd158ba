"""운동 저장소 인터페이스 (Port)

관계형 DB 등 어떤 백엔드든 이 계약만 만족하면 된다.
모든 메서드는 읽기 전용이며 실패는 그대로 호출자에게 전파된다.
"""

from typing import Dict, List, Optional, Protocol

from shared.models import Exercise
from exercise_catalog.repository.predicates import Predicate


class ExerciseRepository(Protocol):
    """운동 조회 저장소"""

    async def find_many(
        self,
        predicate: Optional[Predicate] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        order_by: Optional[str] = "name",
    ) -> List[Exercise]:
        """
        조건에 맞는 운동 목록

        Args:
            predicate: 조건 트리 (None 이면 전체)
            limit: 최대 개수 (None 이면 제한 없음)
            offset: 건너뛸 개수
            order_by: 정렬 필드 (오름차순, None 이면 저장 순서)
        """
        ...

    async def count(self, predicate: Optional[Predicate] = None) -> int:
        """조건에 맞는 운동 수"""
        ...

    async def find_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """ID 조회 (없으면 None)"""
        ...

    async def list_ids(self, predicate: Optional[Predicate] = None) -> List[str]:
        """조건에 맞는 운동 ID 목록"""
        ...

    async def group_counts(self, field: str) -> Dict[str, int]:
        """필드 값별 운동 수"""
        ...

    async def ping(self) -> None:
        """연결 확인 (실패 시 예외)"""
        ...
