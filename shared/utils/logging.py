"""공유 로깅 유틸리티

게이트웨이/스크립트 진입점에서 setup_logging 을 한 번 호출하고,
각 모듈은 logging.getLogger(__name__) 으로 하위 로거를 쓴다.
"""

import logging
import sys
from typing import Iterable, List, Optional, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 진입점에서 설정하는 최상위 로거
PROJECT_LOGGERS = ("gateway", "exercise_catalog", "shared")


def resolve_level(level: Optional[Union[int, str]]) -> int:
    """"DEBUG" / 10 / None → 로그 레벨 (알 수 없는 값은 INFO)"""
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
    if isinstance(level, int) and level > 0:
        return level
    return logging.INFO


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """로거 인스턴스 반환 (핸들러는 한 번만 추가)

    Args:
        name: 로거 이름
        level: 로그 레벨 (기본값: INFO, "DEBUG" 같은 문자열도 허용)

    Returns:
        logging.Logger 인스턴스
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(resolve_level(level))
    return logger


def setup_logging(
    level: Optional[Union[int, str]] = None,
    names: Iterable[str] = PROJECT_LOGGERS,
) -> List[logging.Logger]:
    """프로젝트 최상위 로거 일괄 설정"""
    return [get_logger(name, level) for name in names]
