from typing import Optional

from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.url_opener import UrlOpener
from daily_movie.domain.services.deep_link import parse_deep_link


class OpenDeepLinkUseCase:
    def __init__(self, url_opener: UrlOpener, logger: LoggerPort):
        self.url_opener = url_opener
        self.logger = logger

    def execute(self, url: str) -> Optional[str]:
        movie_url = parse_deep_link(url)
        if movie_url is None:
            self.logger.debug(f"Ignoring deep link {url}")
            return None

        self.url_opener.open(movie_url)
        return movie_url
