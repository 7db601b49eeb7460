from datetime import datetime, timezone

from daily_movie.domain.ports.repositories.shared_defaults_repository import SharedDefaultsRepository
from daily_movie.domain.ports.services.widget_center import WidgetCenter

RELOAD_REQUESTED_KEY = "widgetReloadRequestedAt"


class SharedDefaultsWidgetCenter(WidgetCenter):
    """Flags the widget timeline as stale through a marker in the shared suite.

    The widget host polls the marker and re-renders when it is newer than its
    last render.
    """

    def __init__(self, shared_defaults: SharedDefaultsRepository):
        self.shared_defaults = shared_defaults

    async def reload_all_timelines(self) -> None:
        await self.shared_defaults.set(RELOAD_REQUESTED_KEY, datetime.now(timezone.utc).isoformat())
