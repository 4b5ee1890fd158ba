"""Exercise Catalog 설정

환경 변수:
- DATA_DIR: 데이터 디렉토리 (기본값: <repo>/data)
- CATALOG_FILE: 카탈로그 JSON 파일명 (기본값: exercises-pt-br.json)
- MEDIA_BASE_URL: 미디어 URL 접두사 (기본값: /media/exercises)
- LOG_LEVEL: 로그 레벨 (기본값: INFO)
"""

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field


class CatalogSettings(BaseSettings):
    """운동 카탈로그 설정"""

    # 데이터 경로
    data_dir: Path = Field(
        default=Path(__file__).parent.parent.parent / "data",
        description="데이터 디렉토리"
    )
    catalog_file: str = Field(
        default="exercises-pt-br.json",
        description="카탈로그 JSON 파일명 (data_dir 기준)"
    )
    media_base_url: str = Field(
        default="/media/exercises",
        description="최적화 미디어 URL 접두사"
    )

    # 페이지네이션
    default_page_size: int = Field(default=20, description="기본 페이지 크기")
    max_page_size: int = Field(default=100, description="최대 페이지 크기")
    max_id_list: int = Field(default=100, description="ID 목록 조회 최대 개수")

    # 랭킹
    ranking_pool_limit: int = Field(default=500, description="랭킹 후보 최대 개수")
    ranking_pool_factor: int = Field(
        default=10,
        description="페이지 크기 대비 랭킹 후보 배수"
    )

    # 추천 (suggestions)
    suggestion_threshold: int = Field(
        default=5,
        description="검색 결과가 이 값 미만이면 관련 운동 추천"
    )
    suggestion_keyword_limit: int = Field(default=5, description="추천 키워드 수")
    suggestion_exercise_limit: int = Field(default=6, description="추천 운동 수")
    related_overfetch_factor: int = Field(
        default=3,
        description="관련 운동 후보 over-fetch 배수"
    )

    # 통계 / 랜덤
    stats_cache_ttl_seconds: float = Field(default=60.0, description="통계 캐시 유효 시간 (초)")
    random_default_count: int = Field(default=10, description="랜덤 운동 기본 개수")

    # 서버 설정
    log_level: str = Field(default="INFO", description="로그 레벨")
    host: str = Field(default="0.0.0.0", description="호스트")
    port: int = Field(default=3001, description="포트")

    @property
    def catalog_path(self) -> Path:
        """카탈로그 JSON 전체 경로"""
        return self.data_dir / self.catalog_file

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"


settings = CatalogSettings()
