"""
Logging setup for the PokéDex API.

Records go to the console and, when ``LOG_FILE`` is set, to a file.
Each request is logged once by the middleware in ``main`` under
``pokedex_api.requests`` and each upstream call once by the source
adapter, so the per-request chatter from uvicorn's access log and from
httpx is raised to ``WARNING``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

REQUEST_LOGGER = "pokedex_api.requests"

# Loggers whose INFO records duplicate our own request and upstream logs.
DUPLICATE_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def quiet_duplicate_loggers(level: int = logging.INFO) -> None:
    for name in DUPLICATE_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the service.

    ``level`` is a level name, case insensitive, falling back to INFO.
    Handlers are attached to the root logger only if it has none yet,
    so repeated ``create_app`` calls do not duplicate output.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    quiet_duplicate_loggers(numeric_level)
    logging.getLogger(REQUEST_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
