from abc import ABC, abstractmethod
from typing import Optional, Union

DefaultsValue = Union[str, int, float, bool]


class SharedDefaultsRepository(ABC):
    """Flat key-value area shared between the app and the widget host.

    Every key is an independent overwrite; there is no transaction across keys.
    """

    @abstractmethod
    async def set(self, key: str, value: DefaultsValue) -> None:
        pass

    @abstractmethod
    async def get_string(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def get_int(self, key: str) -> Optional[int]:
        pass
