import logging
from pathlib import Path
from typing import Optional, Union

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(name: Union[str, int, None]) -> int:
    if isinstance(name, int):
        return name
    name = (name or "").strip().upper()
    numeric = getattr(logging, name, None)
    if isinstance(numeric, int):
        return numeric
    try:
        return int(name)
    except (TypeError, ValueError):
        return logging.INFO


def setup_logging(
    level: Union[str, int, None] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> int:
    """Configure root logging for an application embedding the client.

    Returns the numeric level in effect. Existing root handlers are left alone,
    as with :func:`logging.basicConfig`.
    """
    resolved = resolve_log_level(LOG_LEVEL if level is None else level)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
    logging.getLogger("strikers").setLevel(resolved)
    logging.getLogger(__name__).info(
        "Logging initialised at level %s", logging.getLevelName(resolved)
    )
    return resolved
