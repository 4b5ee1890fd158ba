"""Gateway Service - 운동 카탈로그 REST API

사용법:
    PYTHONPATH=. python -m gateway.main

포트: 3001 (기본)
"""

from contextlib import asynccontextmanager
from datetime import datetime
import logging
import time
from typing import List, Optional

from dotenv import load_dotenv
load_dotenv(override=True)

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from gateway.models import (
    AppErrorDetail,
    AppErrorResponse,
    AppHealthResponse,
    AppProbeResponse,
)
from exercise_catalog.config import settings
from exercise_catalog.exceptions import ExerciseNotFoundError
from exercise_catalog.models import CatalogStats, ExercisePage, ExerciseSearchInput
from exercise_catalog.repository import ExerciseRepository, JsonExerciseRepository
from exercise_catalog.services import ExerciseSearchService, ExerciseStatsService
from shared.models import Exercise
from shared.utils import setup_logging

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# 서비스 (싱글톤, lifespan 에서 초기화)
repository: Optional[ExerciseRepository] = None
search_service: Optional[ExerciseSearchService] = None
stats_service: Optional[ExerciseStatsService] = None

_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 라이프사이클 관리"""
    global repository, search_service, stats_service
    logger.info("Gateway Service 시작 중...")
    repository = JsonExerciseRepository.from_file(settings.catalog_path)
    search_service = ExerciseSearchService(repository)
    stats_service = ExerciseStatsService(repository)
    logger.info("Gateway Service 준비 완료")
    yield
    logger.info("Gateway Service 종료")


app = FastAPI(
    title="Exercise Catalog API",
    description=(
        "PT-BR 운동 카탈로그 API\n\n"
        "`q` 파라미터: 관련도 정렬 + 결과가 적을 때 관련 운동 추천"
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 최적화 미디어 (WebP)
_media_dir = settings.data_dir / "media"
if _media_dir.is_dir():
    app.mount(settings.media_base_url, StaticFiles(directory=_media_dir), name="media")


def get_repository() -> ExerciseRepository:
    if repository is None:
        raise RuntimeError("저장소가 초기화되지 않았습니다")
    return repository


def get_search_service() -> ExerciseSearchService:
    if search_service is None:
        raise RuntimeError("검색 서비스가 초기화되지 않았습니다")
    return search_service


def get_stats_service() -> ExerciseStatsService:
    if stats_service is None:
        raise RuntimeError("통계 서비스가 초기화되지 않았습니다")
    return stats_service


def _error_payload(error: Exception, hint: str = None) -> dict:
    """오류 응답용 페이로드 (디버깅 도움용)"""
    return AppErrorDetail(error=str(error), type=type(error).__name__, hint=hint).model_dump()


def _internal_error(error: Exception) -> HTTPException:
    logger.error(f"요청 처리 실패: {error}", exc_info=True)
    return HTTPException(
        status_code=500,
        detail=_error_payload(error, hint="카탈로그 파일 또는 저장소 연결 상태를 확인하세요."),
    )


_ERROR_RESPONSES = {
    400: {"model": AppErrorResponse, "description": "잘못된 요청"},
    500: {"model": AppErrorResponse, "description": "저장소/내부 오류"},
}


def _utc_now() -> str:
    return datetime.utcnow().isoformat()


@app.get("/health", response_model=AppHealthResponse)
async def health_check(repo: ExerciseRepository = Depends(get_repository)):
    """헬스 체크 (저장소 ping 포함)"""
    start = time.perf_counter()
    try:
        await repo.ping()
    except Exception as e:
        logger.warning(f"저장소 ping 실패: {e}")
        return {
            "status": "unhealthy",
            "timestamp": _utc_now(),
            "database": {"status": "disconnected", "error": str(e)},
        }

    latency_ms = int((time.perf_counter() - start) * 1000)
    return {
        "status": "healthy",
        "timestamp": _utc_now(),
        "uptime": round(time.monotonic() - _started_at, 3),
        "database": {"status": "connected", "latency": f"{latency_ms}ms"},
    }


@app.get("/health/live", response_model=AppProbeResponse)
async def liveness():
    """Liveness probe"""
    return {"status": "ok", "timestamp": _utc_now()}


@app.get(
    "/health/ready",
    response_model=AppProbeResponse,
    responses={503: {"model": AppProbeResponse, "description": "저장소 미준비"}},
)
async def readiness(repo: ExerciseRepository = Depends(get_repository)):
    """Readiness probe (저장소 ping 실패 시 503)"""
    try:
        await repo.ping()
    except Exception as e:
        logger.warning(f"readiness 실패: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "timestamp": _utc_now()},
        )
    return {"status": "ready", "timestamp": _utc_now()}


@app.get("/exercises", response_model=ExercisePage, responses=_ERROR_RESPONSES)
async def list_exercises(
    page: Optional[int] = Query(None, description="페이지 번호 (기본 1)"),
    size: Optional[int] = Query(None, description="페이지 크기 (기본 20, 최대 100)"),
    q: Optional[str] = Query(None, description="검색어", examples=["supino"]),
    body_part: Optional[str] = Query(None, alias="bodyPart", description="신체 부위"),
    equipment: Optional[str] = Query(None, description="장비"),
    target: Optional[str] = Query(None, description="타겟 근육"),
    ids: Optional[str] = Query(None, description="ID 목록 (쉼표 구분, 최대 100)"),
    service: ExerciseSearchService = Depends(get_search_service),
):
    """운동 목록/검색

    - `ids` 가 있으면 다른 필터와 검색어는 무시
    - `q` 검색 결과가 5개 미만이면 `suggestions` 블록 추가
    """
    try:
        search = ExerciseSearchInput(
            page=page,
            size=size,
            q=q,
            body_part=body_part,
            equipment=equipment,
            target=target,
            ids=ids,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=_error_payload(e))

    try:
        result = await service.search(search)
    except Exception as e:
        raise _internal_error(e)

    # suggestions 가 없으면 키 자체를 생략해야 하므로 직접 직렬화
    return JSONResponse(content=result.to_app())


@app.get("/exercises/stats", response_model=CatalogStats, responses={500: _ERROR_RESPONSES[500]})
async def get_stats(service: ExerciseStatsService = Depends(get_stats_service)):
    """카탈로그 통계 (1분 캐시)"""
    try:
        return await service.get_stats()
    except Exception as e:
        raise _internal_error(e)


@app.get("/exercises/random", response_model=List[Exercise], responses={500: _ERROR_RESPONSES[500]})
async def get_random(
    count: Optional[int] = Query(None, description="개수 (기본 10, 최대 100)"),
    body_part: Optional[str] = Query(None, alias="bodyPart"),
    equipment: Optional[str] = Query(None),
    service: ExerciseSearchService = Depends(get_search_service),
):
    """랜덤 운동"""
    try:
        return await service.random_exercises(count, body_part=body_part, equipment=equipment)
    except Exception as e:
        raise _internal_error(e)


async def _browse(
    service: ExerciseSearchService,
    field: str,
    value: str,
    page: Optional[int],
    size: Optional[int],
) -> ExercisePage:
    try:
        return await service.list_by_field(field, value, page=page or 1, size=size)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=_error_payload(e))
    except Exception as e:
        raise _internal_error(e)


@app.get("/exercises/body-part/{body_part}", response_model=ExercisePage, responses=_ERROR_RESPONSES)
async def get_by_body_part(
    body_part: str,
    page: Optional[int] = Query(None),
    size: Optional[int] = Query(None),
    service: ExerciseSearchService = Depends(get_search_service),
):
    """신체 부위별 운동"""
    result = await _browse(service, "body_part", body_part, page, size)
    return JSONResponse(content=result.to_app())


@app.get("/exercises/equipment/{equipment}", response_model=ExercisePage, responses=_ERROR_RESPONSES)
async def get_by_equipment(
    equipment: str,
    page: Optional[int] = Query(None),
    size: Optional[int] = Query(None),
    service: ExerciseSearchService = Depends(get_search_service),
):
    """장비별 운동"""
    result = await _browse(service, "equipment", equipment, page, size)
    return JSONResponse(content=result.to_app())


@app.get("/exercises/target/{target}", response_model=ExercisePage, responses=_ERROR_RESPONSES)
async def get_by_target(
    target: str,
    page: Optional[int] = Query(None),
    size: Optional[int] = Query(None),
    service: ExerciseSearchService = Depends(get_search_service),
):
    """타겟 근육별 운동"""
    result = await _browse(service, "target", target, page, size)
    return JSONResponse(content=result.to_app())


@app.get(
    "/exercises/{exercise_id}",
    response_model=Exercise,
    responses={
        404: {"model": AppErrorResponse, "description": "운동 없음"},
        500: _ERROR_RESPONSES[500],
    },
)
async def get_exercise(
    exercise_id: str,
    service: ExerciseSearchService = Depends(get_search_service),
):
    """ID 로 운동 조회 (없으면 404)"""
    try:
        return await service.get_exercise(exercise_id)
    except ExerciseNotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail=_error_payload(e, hint="ID 목록은 GET /exercises?ids=... 로 조회하세요."),
        )
    except Exception as e:
        raise _internal_error(e)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Gateway Service 시작: http://{settings.host}:{settings.port}")
    uvicorn.run(
        "gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
