"""Gateway Models - 앱 응답 모델"""

from .app import (
    AppErrorDetail,
    AppErrorResponse,
    AppDatabaseStatus,
    AppHealthResponse,
    AppProbeResponse,
)

__all__ = [
    "AppErrorDetail",
    "AppErrorResponse",
    "AppDatabaseStatus",
    "AppHealthResponse",
    "AppProbeResponse",
]
