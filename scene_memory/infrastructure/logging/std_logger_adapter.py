import logging
from typing import Optional

from scene_memory.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    """LoggerPort backed by a standard library logger.

    An optional prefix tags every line, e.g. "[identify] Returning 3 candidates".
    """

    def __init__(self, name: Optional[str] = None, prefix: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self._prefix = f"{prefix} " if prefix else ""

    def _log(self, level: int, msg: str, *args, **kwargs) -> None:
        self._logger.log(level, self._prefix + msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)
