"""로깅 설정 모듈.

Application logging configuration.
Modules obtain loggers with logging.getLogger(__name__); configure_logging()
is called once from app.main at start-up.
"""

import logging.config
from typing import Any

from app.config import settings


def build_logging_config(level: str) -> dict[str, Any]:
    """dictConfig 설정 딕셔너리를 생성합니다.

    Args:
        level: "app" 로거 레벨 (Level for the "app" logger, e.g. "INFO")

    Returns:
        dict[str, Any]: logging.config.dictConfig 입력 (dictConfig-compatible mapping)
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s:     %(asctime)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "app": {"handlers": ["default"], "level": level.upper(), "propagate": True},
        },
    }


def configure_logging() -> None:
    """설정값(LOG_LEVEL)으로 애플리케이션 로거를 구성합니다."""
    logging.config.dictConfig(build_logging_config(settings.LOG_LEVEL))
