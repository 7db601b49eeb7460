import webbrowser

from daily_movie.domain.ports.services.url_opener import UrlOpener


class WebbrowserUrlOpener(UrlOpener):
    def open(self, url: str) -> bool:
        return webbrowser.open(url)
