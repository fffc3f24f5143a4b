"""
Relance des pages de notes sur rate limiting (429).

Letterboxd limite le nombre de requetes par client. Une page refusee par
un 429 est redemandee apres le delai indique par Retry-After, ou a defaut
apres un backoff exponentiel avec jitter. Toute autre erreur HTTP remonte
immediatement : la liste de notes est un prerequis du run.

Usage:
    response = await request_with_retry(client, "GET", page_url, max_attempts=5)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Page refusee par un 429 Too Many Requests.

    Attributes:
        retry_after: Delai demande par la source en secondes, None si absent
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Le header Retry-After peut aussi etre une date HTTP : ignoree."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class _WaitRetryAfter:
    """Attente tenacity : Retry-After s'il est fourni (plafonne), backoff sinon."""

    def __init__(self, max_wait: int) -> None:
        self._max_wait = max_wait
        self._fallback = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return float(min(error.retry_after, self._max_wait))
        return self._fallback(retry_state)


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        f"Rate limit atteint, tentative {retry_state.attempt_number} "
        f"(attente {retry_state.next_action.sleep:.0f}s)"
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur relancant une coroutine tant qu'elle leve RateLimitError.

    Args:
        max_attempts: Nombre total de tentatives
        max_wait: Attente maximale entre deux tentatives, en secondes

    Returns:
        Decorateur tenacity ; la derniere RateLimitError est relevee telle quelle
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=_WaitRetryAfter(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Envoie une requete et la relance sur 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL de la page
        max_attempts: Nombre total de tentatives
        max_wait: Attente maximale entre deux tentatives, en secondes
        **kwargs: Transmis a client.request()

    Returns:
        Reponse 2xx

    Raises:
        RateLimitError: 429 persistant apres max_attempts tentatives
        httpx.HTTPStatusError: Toute autre reponse en erreur, sans relance
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _send()
