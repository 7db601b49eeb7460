from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging sink handed to services and use cases.

    `child` derives a sink for one component (onboarding, notifications...) so
    log lines can be filtered per component without touching the callers.
    """

    @abstractmethod
    def child(self, suffix: str) -> "LoggerPort":
        pass

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
        pass
