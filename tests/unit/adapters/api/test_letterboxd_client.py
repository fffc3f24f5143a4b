"""
Tests for LetterboxdClient - rating list scraper.

Uses respx to mock httpx calls and verifies:
- Page count is read from the first page's pagination block
- Every page is fetched and parsed into title -> rating
- ":" in titles is replaced like release folder names
- Malformed pagination and HTTP errors abort the fetch
"""

import httpx
import pytest
import respx

from src.adapters.api.letterboxd_client import (
    LetterboxdClient,
    parse_page_count,
    parse_posters,
    sanitize_title,
)
from src.core.errors import RatingSourceError
from src.core.ports.api_clients import IRatingSource
from tests.fixtures.letterboxd_pages import (
    BROKEN_PAGINATION_HTML,
    DUPLICATE_TITLE_HTML,
    FIRST_PAGE_HTML,
    LIST_URL,
    PAGE_1_HTML,
    PAGE_2_HTML,
    SINGLE_PAGE_HTML,
)


@pytest.fixture
def client() -> LetterboxdClient:
    """LetterboxdClient on the test list."""
    return LetterboxdClient(base_url=LIST_URL, max_attempts=2)


class TestLetterboxdClientInterface:
    """Test LetterboxdClient implements IRatingSource correctly."""

    def test_implements_interface(self, client: LetterboxdClient) -> None:
        """LetterboxdClient should implement IRatingSource."""
        assert isinstance(client, IRatingSource)

    def test_source_property(self, client: LetterboxdClient) -> None:
        """source property should return 'letterboxd'."""
        assert client.source == "letterboxd"

    def test_trailing_slash_added(self) -> None:
        """base_url always ends with a slash."""
        client = LetterboxdClient(base_url="https://letterboxd.com/cinephile/films")
        assert client.base_url == LIST_URL

    def test_page_url(self, client: LetterboxdClient) -> None:
        """Pages are addressed as {base}page/{n}."""
        assert client.page_url(3) == f"{LIST_URL}page/3"


class TestParsing:
    """Tests for the HTML parsing helpers."""

    def test_sanitize_title(self) -> None:
        """":" becomes " -"."""
        assert sanitize_title("Mission: Impossible") == "Mission - Impossible"

    def test_page_count_from_pagination(self) -> None:
        """Last word of the pagination block is the page count."""
        assert parse_page_count(FIRST_PAGE_HTML) == 2

    def test_page_count_without_pagination(self) -> None:
        """A single-page list has no pagination block."""
        assert parse_page_count(SINGLE_PAGE_HTML) == 1

    def test_broken_pagination_raises(self) -> None:
        """A pagination block not ending with a number is an error."""
        with pytest.raises(RatingSourceError):
            parse_page_count(BROKEN_PAGINATION_HTML)

    def test_empty_pagination_raises(self) -> None:
        """An empty pagination block is an error."""
        with pytest.raises(RatingSourceError):
            parse_page_count('<div class="pagination"></div>')

    def test_parse_posters(self) -> None:
        """Each poster yields (sanitized title, rating text)."""
        assert parse_posters(PAGE_1_HTML) == [
            ("Heat", "★★★★½"),
            ("Mission - Impossible", "★★★"),
        ]

    def test_unrated_poster_has_empty_rating(self) -> None:
        """An unrated film keeps an empty rating."""
        assert parse_posters(PAGE_2_HTML)[1] == ("Zodiac", "")

    def test_poster_without_alt_raises(self) -> None:
        """A poster without title is an error."""
        with pytest.raises(RatingSourceError):
            parse_posters('<li class="poster-container"><img src="x.jpg"/></li>')


class TestFetchRatings:
    """Tests for LetterboxdClient.fetch_ratings()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetches_every_page(self, client: LetterboxdClient) -> None:
        """All pages are fetched and merged."""
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, text=FIRST_PAGE_HTML))
        page_1 = respx.get(f"{LIST_URL}page/1").mock(
            return_value=httpx.Response(200, text=PAGE_1_HTML)
        )
        page_2 = respx.get(f"{LIST_URL}page/2").mock(
            return_value=httpx.Response(200, text=PAGE_2_HTML)
        )

        ratings = await client.fetch_ratings()
        await client.close()

        assert ratings == {
            "Heat": "★★★★½",
            "Mission - Impossible": "★★★",
            "Alien": "★★★★★",
            "Zodiac": "",
        }
        assert page_1.call_count == 1
        assert page_2.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_single_page_list(self, client: LetterboxdClient) -> None:
        """Without pagination, only page 1 is fetched after the first page."""
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, text=SINGLE_PAGE_HTML))
        respx.get(f"{LIST_URL}page/1").mock(
            return_value=httpx.Response(200, text=SINGLE_PAGE_HTML)
        )

        assert await client.fetch_ratings() == {"Heat": "★★★★"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_duplicate_title_keeps_last(self, client: LetterboxdClient) -> None:
        """A title listed twice keeps the last rating read."""
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, text=DUPLICATE_TITLE_HTML))
        respx.get(f"{LIST_URL}page/1").mock(
            return_value=httpx.Response(200, text=DUPLICATE_TITLE_HTML)
        )

        assert await client.fetch_ratings() == {"Dune": "★★★★"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error_aborts(self, client: LetterboxdClient) -> None:
        """A server error is propagated immediately."""
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, text=FIRST_PAGE_HTML))
        respx.get(f"{LIST_URL}page/1").mock(return_value=httpx.Response(500))

        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_ratings()

    @pytest.mark.asyncio
    @respx.mock
    async def test_persistent_rate_limit_is_rating_source_error(
        self, client: LetterboxdClient
    ) -> None:
        """A 429 that outlasts every attempt surfaces as a RatingSourceError."""
        route = respx.get(LIST_URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "0"})
        )

        with pytest.raises(RatingSourceError, match="Rate limit"):
            await client.fetch_ratings()
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_broken_pagination_aborts(self, client: LetterboxdClient) -> None:
        """Malformed pagination aborts before any page is fetched."""
        respx.get(LIST_URL).mock(
            return_value=httpx.Response(200, text=BROKEN_PAGINATION_HTML)
        )
        page_1 = respx.get(f"{LIST_URL}page/1").mock(
            return_value=httpx.Response(200, text=PAGE_1_HTML)
        )

        with pytest.raises(RatingSourceError):
            await client.fetch_ratings()
        assert page_1.call_count == 0

    @pytest.mark.asyncio
    async def test_close_without_request(self, client: LetterboxdClient) -> None:
        """close() is safe before any request."""
        await client.close()
