"""日誌設定（由使用本套件的應用程式在啟動時呼叫一次）"""

import logging
from typing import Optional

import structlog

from simple_config import settings


def configure_logging(debug: Optional[bool] = None) -> None:
    """
    設定 structlog

    Args:
        debug: True 時使用 ConsoleRenderer，否則輸出 JSON；預設取自 settings.debug
    """
    if debug is None:
        debug = settings.debug

    logging.basicConfig(format="%(message)s", level=logging.DEBUG if debug else logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
