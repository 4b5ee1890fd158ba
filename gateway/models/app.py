"""App-facing response models for Gateway endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AppErrorDetail(BaseModel):
    """오류 응답 상세 (디버깅 도움용)"""

    error: str = Field(..., description="오류 메시지")
    type: str = Field(..., description="예외 타입")
    hint: Optional[str] = Field(default=None, description="확인 포인트")


class AppDatabaseStatus(BaseModel):
    """저장소 연결 상태"""

    status: str = Field(..., description="connected | disconnected")
    latency: Optional[str] = Field(default=None, description="ping 지연 (예: 3ms)")
    error: Optional[str] = Field(default=None, description="연결 실패 사유")


class AppHealthResponse(BaseModel):
    """헬스 체크 응답"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-01-11T10:00:00",
                "uptime": 12.5,
                "database": {"status": "connected", "latency": "1ms"},
            }
        },
    )

    status: str = Field(..., description="healthy | unhealthy")
    timestamp: str = Field(..., description="ISO 시각 (UTC)")
    uptime: Optional[float] = Field(default=None, description="가동 시간 (초)")
    database: AppDatabaseStatus = Field(..., description="저장소 상태")


class AppProbeResponse(BaseModel):
    """liveness / readiness 응답"""

    status: str = Field(..., description="ok | ready | not_ready")
    timestamp: str = Field(..., description="ISO 시각 (UTC)")


class AppErrorResponse(BaseModel):
    """오류 응답 (HTTPException detail 래핑)"""

    detail: AppErrorDetail
