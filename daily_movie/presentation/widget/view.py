from typing import List

from pydantic import BaseModel

from daily_movie.domain.models.widget_entry import WidgetEntry
from daily_movie.domain.services.deep_link import build_deep_link


class WidgetCard(BaseModel):
    headline: str
    caption: str
    footnote: str
    widget_url: str

    def lines(self) -> List[str]:
        return [self.headline, self.caption, self.footnote]


def render_card(entry: WidgetEntry) -> WidgetCard:
    return WidgetCard(
        headline=f"🎬 {entry.title}",
        caption=f"{entry.year} · Dir. {entry.original_director}",
        footnote=f"Recommended by {entry.recommending_director}",
        widget_url=build_deep_link(entry.letterboxd_url),
    )
