# identity/logger.py
import logging
import sys
from typing import Optional

import structlog

from identity.config import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    stdlib logging과 structlog를 함께 설정합니다.
    애플리케이션(또는 db_init) 시작 시 한 번 호출합니다.

    Args:
        level: 로그 레벨 이름. 생략하면 설정값(log_level)을 사용합니다.
        fmt: 'console' 또는 'json'. 생략하면 설정값(log_format)을 사용합니다.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    renderer_name = fmt or settings.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if renderer_name == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """모듈 이름으로 structlog 로거를 가져옵니다."""
    return structlog.get_logger(name)
