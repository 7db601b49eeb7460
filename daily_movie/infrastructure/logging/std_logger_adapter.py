from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.infrastructure.logging.logger import Logger

ROOT_LOGGER_NAME = "daily_movie"


class StdLoggerAdapter(LoggerPort):
    """LoggerPort backed by a standard library logger under `daily_movie`"""

    def __init__(self, name: str = ROOT_LOGGER_NAME):
        self.name = name
        self._logger = Logger.get_logger(name)

    def child(self, suffix: str) -> "StdLoggerAdapter":
        return StdLoggerAdapter(f"{self.name}.{suffix}")

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self._logger.exception(msg, *args, **kwargs)
