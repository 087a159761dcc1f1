from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seen from the application layer.

    Implementations must never raise: log calls sit on the request path.
    """

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        """Log at error level with the active exception's traceback"""
        pass
