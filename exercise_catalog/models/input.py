"""운동 검색 입력 모델

쿼리 파라미터를 그대로 받아 방어적으로 정리한다 (거부 대신 보정).
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from exercise_catalog.config import settings
from shared.utils import split_query_words


def clamp_page(page: Optional[int]) -> int:
    """페이지 번호 보정 (최소 1)"""
    if page is None or page < 1:
        return 1
    return page


def clamp_size(size: Optional[int], maximum: Optional[int] = None) -> int:
    """페이지 크기 보정 [1, maximum]"""
    maximum = maximum or settings.max_page_size
    if size is None:
        size = settings.default_page_size
    return max(1, min(size, maximum))


class ExerciseSearchInput(BaseModel):
    """운동 검색 입력

    API 엔드포인트: GET /exercises

    예시:
        ?q=supino&bodyPart=peito&page=1&size=20
        ?ids=0001,0002,0003
    """

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(default=1, description="페이지 번호 (1부터)")
    size: int = Field(default_factory=lambda: settings.default_page_size, description="페이지 크기")
    q: Optional[str] = Field(default=None, description="자유 텍스트 검색어")
    body_part: Optional[str] = Field(default=None, alias="bodyPart", description="신체 부위 필터")
    equipment: Optional[str] = Field(default=None, description="장비 필터")
    target: Optional[str] = Field(default=None, description="타겟 근육 필터")
    ids: Optional[str] = Field(default=None, description="ID 목록 (쉼표 구분)")

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, v):
        return clamp_page(None if v is None else int(v))

    @field_validator("size", mode="before")
    @classmethod
    def _clamp_size(cls, v):
        return clamp_size(None if v is None else int(v))

    @field_validator("q", "body_part", "equipment", "target", "ids")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def is_id_lookup(self) -> bool:
        """ID 목록 조회 여부 (다른 필터/검색어 무시)"""
        return self.ids is not None

    @property
    def id_list(self) -> List[str]:
        """정리된 ID 목록 (공백 제거, 빈 값 제외, 최대 max_id_list 개)"""
        if self.ids is None:
            return []
        cleaned = [part.strip() for part in self.ids.split(",")]
        return [part for part in cleaned if part][: settings.max_id_list]

    @property
    def has_text_query(self) -> bool:
        """관련도 랭킹/추천 대상 텍스트 검색 여부"""
        return self.q is not None and not self.is_id_lookup

    @property
    def query_words(self) -> List[str]:
        """검색어 단어 목록"""
        return split_query_words(self.q) if self.q else []

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size
