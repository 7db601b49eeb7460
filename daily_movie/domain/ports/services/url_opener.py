from abc import ABC, abstractmethod


class UrlOpener(ABC):
    @abstractmethod
    def open(self, url: str) -> bool:
        pass
