from abc import ABC, abstractmethod


class WidgetCenter(ABC):
    @abstractmethod
    async def reload_all_timelines(self) -> None:
        """Tell the widget host its timeline is stale. Best effort only."""
        pass
