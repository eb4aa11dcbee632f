"""Logging setup shared by the API, the split script and the simulation."""

import logging
from typing import Optional

from groupsplit.config.settings import settings

QUIET_LOGGERS = ("httpx", "faker", "uvicorn.access")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Log to stderr, tagged with the service name and environment so output
    from several deployments can share one collector.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=f"%(asctime)s {settings.service_name}[{settings.ENV}] %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
