"""운동 검색 출력 모델"""

import math
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import Exercise


class PageMeta(BaseModel):
    """페이지 메타데이터"""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., ge=0, description="전체 매칭 수")
    page: int = Field(..., ge=1, description="현재 페이지")
    size: int = Field(..., ge=1, description="페이지 크기 (보정 후)")
    total_pages: int = Field(..., alias="totalPages", ge=0, description="전체 페이지 수")

    @classmethod
    def build(cls, total: int, page: int, size: int) -> "PageMeta":
        return cls(
            total=total,
            page=page,
            size=size,
            total_pages=math.ceil(total / size),
        )


class SuggestionBlock(BaseModel):
    """관련 운동 추천 블록 (검색 결과가 적을 때만)"""

    message: str = Field(..., description="사용자 안내 메시지 (PT-BR)")
    keywords: List[str] = Field(default_factory=list, description="관련 키워드 (최대 5)")
    exercises: List[Exercise] = Field(default_factory=list, description="관련 운동 (최대 6)")


class ExercisePage(BaseModel):
    """페이지 단위 운동 목록 (+ 선택적 추천)

    API 응답: GET /exercises
    """

    data: List[Exercise] = Field(default_factory=list, description="현재 페이지 운동")
    meta: PageMeta = Field(..., description="페이지 메타데이터")
    suggestions: Optional[SuggestionBlock] = Field(default=None, description="관련 운동 추천")

    @property
    def has_suggestions(self) -> bool:
        return self.suggestions is not None

    def to_app(self) -> dict:
        """앱 응답용 dict (추천이 없으면 suggestions 키 자체를 생략)"""
        payload = self.model_dump(by_alias=True)
        if self.suggestions is None:
            payload.pop("suggestions")
        return payload


class CatalogStats(BaseModel):
    """카탈로그 통계

    API 응답: GET /exercises/stats
    """

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(..., description="전체 운동 수")
    with_media: int = Field(..., alias="withMedia", description="미디어 보유 운동 수")
    body_parts: List[str] = Field(default_factory=list, alias="bodyParts")
    equipments: List[str] = Field(default_factory=list)
    targets: List[str] = Field(default_factory=list)
    body_parts_count: int = Field(default=0, alias="bodyPartsCount")
    equipments_count: int = Field(default=0, alias="equipmentsCount")
    targets_count: int = Field(default=0, alias="targetsCount")
