from __future__ import annotations
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{line} | {message}"


def setup_logging(
    level: str = "INFO",
    *,
    json_logs: bool = False,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    API 프로세스 로그 싱크 구성.
    - stdout: 사람이 읽는 포맷, json_logs=True 면 loguru 직렬화(JSON 한 줄)
    - log_file 지정 시 같은 레벨로 회전 파일 싱크 추가
    """
    logger.remove()
    level = level.upper()
    if json_logs:
        logger.add(sys.stdout, level=level, enqueue=True, backtrace=True, diagnose=False, serialize=True)
    else:
        logger.add(sys.stdout, level=level, enqueue=True, backtrace=True, diagnose=False, format=LOG_FORMAT)

    if log_file:
        logger.add(
            log_file,
            level=level,
            enqueue=True,
            diagnose=False,
            format=LOG_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )


def setup_logging_from(settings) -> None:
    setup_logging(
        settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON,
        log_file=settings.LOG_FILE,
        rotation=settings.LOG_ROTATION,
        retention=settings.LOG_RETENTION,
    )
