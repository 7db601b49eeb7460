import pytest

from daily_movie.domain.services.deep_link import build_deep_link, is_web_url, parse_deep_link


class TestDeepLink:
    def test_build_encodes_movie_url(self):
        link = build_deep_link("https://letterboxd.com/film/seven-samurai/")

        assert link == "movierecs://recommendation?movieURL=https%3A%2F%2Fletterboxd.com%2Ffilm%2Fseven-samurai%2F"

    def test_parse_returns_movie_url(self):
        link = build_deep_link("https://letterboxd.com/film/parasite-2019/")

        assert parse_deep_link(link) == "https://letterboxd.com/film/parasite-2019/"

    def test_parse_accepts_unencoded_query(self):
        assert parse_deep_link("movierecs://recommendation?movieURL=https://letterboxd.com") == "https://letterboxd.com"

    @pytest.mark.parametrize(
        "link",
        [
            "",
            "movierecs://recommendation",
            "movierecs://recommendation?other=https://letterboxd.com",
            "movierecs://recommendation?movieURL=",
            "movierecs://recommendation?movieURL=letterboxd.com/film/ran",
            "movierecs://recommendation?movieURL=ftp://letterboxd.com/film/ran",
            "https://letterboxd.com/film/ran/",
            "http://[::1",
        ],
    )
    def test_parse_rejects_unusable_links(self, link):
        assert parse_deep_link(link) is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("https://letterboxd.com", True),
            ("http://letterboxd.com/film/ran/", True),
            ("letterboxd.com", False),
            ("not a url", False),
            ("https://", False),
        ],
    )
    def test_is_web_url(self, value, expected):
        assert is_web_url(value) is expected
