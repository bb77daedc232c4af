"""
Structured logging для combinat.

Модули получают логгер через get_logger(__name__): он привязан к
пакету (package="combinat") и к модулю (component). Вывод задаётся
один раз через configure_logging() на стороне приложения; до этого
действуют настройки structlog по умолчанию.

События пакета:
- pole_result            (debug)  точный ноль в знаменателе → POLE
- stirling_table_filled  (debug)  заполнена таблица Стирлинга
- contract_violation     (debug)  payload нарушил JSON Schema
- evaluation_completed   (info)   вычисление по имени завершено
- evaluation_rejected    (info)   InvalidArgument из ядра
"""

import logging
from typing import Any, Dict, Final, List

import structlog

LOGGER_NAME: Final[str] = "combinat"


def default_processors() -> List[Any]:
    """Цепочка processors для JSON вывода событий combinat."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(sort_keys=True),
    ]


def configure_logging(service_name: str = LOGGER_NAME, level: int = logging.INFO) -> None:
    """
    Настройка structlog поверх stdlib логгера LOGGER_NAME.

    События ниже level отбрасываются до рендеринга. service_name
    привязывается к контексту и попадает в каждое событие.
    """
    logging.getLogger(LOGGER_NAME).setLevel(level)
    logging.basicConfig(format="%(message)s", level=level)

    structlog.configure(
        processors=default_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(service=service_name)
    get_logger(__name__).info("logging_configured", threshold=logging.getLevelName(level))


def log_event(logger: Any, event_type: str, payload: Dict[str, Any]) -> None:
    logger.info(event_type, **payload)


def get_logger(component: str) -> Any:
    return structlog.get_logger(LOGGER_NAME, package=LOGGER_NAME, component=component)
