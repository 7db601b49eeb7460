from typing import Optional
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

DEEP_LINK_SCHEME = "movierecs"
DEEP_LINK_HOST = "recommendation"
MOVIE_URL_PARAM = "movieURL"


def build_deep_link(movie_url: str) -> str:
    query = urlencode({MOVIE_URL_PARAM: movie_url})
    return urlunsplit((DEEP_LINK_SCHEME, DEEP_LINK_HOST, "", query, ""))


def parse_deep_link(url: str) -> Optional[str]:
    """Return the external film URL carried by a deep link, or None when the link is not usable."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if parts.scheme != DEEP_LINK_SCHEME:
        return None

    values = parse_qs(parts.query).get(MOVIE_URL_PARAM)
    if not values:
        return None

    movie_url = values[0]
    if not is_web_url(movie_url):
        return None
    return movie_url


def is_web_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)
