"""
Client Letterboxd pour la recuperation des notes d'une liste de films.

Implemente l'interface IRatingSource en parcourant les pages d'une liste
"films" Letterboxd (ex: https://letterboxd.com/<user>/films/) :

1. La premiere page donne le nombre total de pages (bloc .pagination)
2. Chaque page /page/N est telechargee sequentiellement
3. Chaque .poster-container fournit le titre (attribut alt) et la note (texte)

Usage:
    client = LetterboxdClient(base_url="https://letterboxd.com/user/films/")
    ratings = await client.fetch_ratings()
    await client.close()
"""

from typing import Optional

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from src.adapters.api.retry import RateLimitError, request_with_retry
from src.core.errors import RatingSourceError
from src.core.ports.api_clients import IRatingSource


def sanitize_title(raw_title: str) -> str:
    """
    Aligne un titre Letterboxd sur la graphie des noms de dossiers.

    Les ":" ne sont pas autorises dans les noms de fichiers : les releases
    les remplacent par " -", on fait de meme pour que la recherche aboutisse.
    """
    return raw_title.replace(":", " -")


def parse_page_count(html: str) -> int:
    """
    Extrait le nombre de pages depuis le bloc de pagination.

    Le dernier mot du bloc est le numero de la derniere page. Une liste tenant
    sur une seule page n'a pas de bloc de pagination.

    Raises:
        RatingSourceError: Si le bloc existe mais ne se termine pas par un entier
    """
    soup = BeautifulSoup(html, "html.parser")
    pagination = soup.select_one(".pagination")
    if pagination is None:
        return 1

    words = pagination.get_text().split()
    if not words:
        raise RatingSourceError("Bloc de pagination vide")
    try:
        page_count = int(words[-1])
    except ValueError:
        raise RatingSourceError(f"Pagination illisible: {words[-1]!r}") from None
    if page_count < 1:
        raise RatingSourceError(f"Nombre de pages invalide: {page_count}")
    return page_count


def parse_posters(html: str) -> list[tuple[str, str]]:
    """
    Extrait les couples (titre, note) d'une page de liste.

    Returns:
        Couples dans l'ordre de la page ; la note est le texte du poster,
        eventuellement vide si le film n'est pas note.

    Raises:
        RatingSourceError: Si un poster n'a pas d'attribut alt
    """
    soup = BeautifulSoup(html, "html.parser")
    entries: list[tuple[str, str]] = []
    for poster in soup.select(".poster-container"):
        image = poster.find(attrs={"alt": True})
        if image is None:
            raise RatingSourceError("Poster sans titre (attribut alt absent)")
        title = sanitize_title(str(image["alt"]))
        rating = poster.get_text().strip()
        entries.append((title, rating))
    return entries


class LetterboxdClient(IRatingSource):
    """
    Client de scraping des notes Letterboxd.

    Implemente IRatingSource avec:
    - Decouverte du nombre de pages depuis la premiere page
    - Telechargement sequentiel des pages (aucun parallelisme)
    - Retry automatique sur rate limiting (429)

    Attributes:
        DEFAULT_TIMEOUT: Timeout des requetes HTTP en secondes
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(self, base_url: str, max_attempts: int = 5) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de la liste de films (terminee par "/")
            max_attempts: Tentatives maximum par page en cas de 429
        """
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient configure pour Letterboxd
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "text/html"},
                timeout=self.DEFAULT_TIMEOUT,
                follow_redirects=True,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source."""
        return "letterboxd"

    @property
    def base_url(self) -> str:
        """URL de la liste de films."""
        return self._base_url

    def page_url(self, page: int) -> str:
        """URL de la page N de la liste."""
        return f"{self._base_url}page/{page}"

    async def _fetch_html(self, url: str) -> str:
        try:
            response = await request_with_retry(
                self._get_client(), "GET", url, max_attempts=self._max_attempts
            )
        except RateLimitError as e:
            raise RatingSourceError(
                f"Rate limit persistant apres {self._max_attempts} tentatives: {url}"
            ) from e
        return response.text

    async def fetch_ratings(self) -> dict[str, str]:
        """
        Recupere l'integralite du catalogue titre -> note.

        Un titre present plusieurs fois garde la derniere note lue ;
        un avertissement est emis si les notes different.

        Returns:
            Dictionnaire titre -> note

        Raises:
            RatingSourceError: Si la pagination ou un poster est mal forme,
                ou si le rate limiting persiste apres max_attempts tentatives
            httpx.HTTPError: Si une page est injoignable
        """
        first_page = await self._fetch_html(self._base_url)
        page_count = parse_page_count(first_page)
        logger.info(f"Letterboxd: {page_count} page(s) a parcourir")

        catalogue: dict[str, str] = {}
        for page in range(1, page_count + 1):
            html = await self._fetch_html(self.page_url(page))
            for title, rating in parse_posters(html):
                previous = catalogue.get(title)
                if previous is not None and previous != rating:
                    logger.warning(
                        f"Titre en double '{title}': note '{previous}' remplacee par '{rating}'"
                    )
                catalogue[title] = rating
            logger.debug(f"Letterboxd: page {page}/{page_count} lue")

        logger.info(f"Letterboxd: {len(catalogue)} titres recuperes")
        return catalogue

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
