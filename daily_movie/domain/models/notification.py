from typing import Optional

from pydantic import BaseModel

from daily_movie.domain.models.film import Film

FALLBACK_NOTIFICATION_TITLE = "🎬 Daily Movie Recommendation"
FALLBACK_NOTIFICATION_BODY = "Check out today's director-picked movie!"


class NotificationContent(BaseModel):
    title: str
    body: str

    @classmethod
    def for_film(cls, film: Optional[Film]) -> "NotificationContent":
        if film is None:
            return cls(title=FALLBACK_NOTIFICATION_TITLE, body=FALLBACK_NOTIFICATION_BODY)
        return cls(
            title=f"🎬 {film.recommending_director_name} recommends {film.title}",
            body=f"{film.title} ({film.release_year}), directed by {film.original_director}.",
        )

    def as_message(self) -> str:
        return f"{self.title}\n{self.body}"
