"""
Service d'association d'une note externe a un titre extrait.

RatingMatcher compare un titre extrait du nom de release a toutes les cles
du catalogue de notes et retient au plus une correspondance : la meilleure
au-dessus du seuil de similarite.

Les titres de release different souvent du titre canonique (ponctuation,
sous-titres, graphies alternatives) : la similarite floue tolere ces
variations sans lister chaque variante.
"""

from typing import Iterable, Mapping, Optional

from loguru import logger
from rapidfuzz import fuzz, utils

# Seuil de similarite par defaut (0-1)
DEFAULT_THRESHOLD = 0.8


def title_similarity(query_title: str, candidate_title: str) -> float:
    """
    Calculate title similarity score (0-100).

    Uses token_sort_ratio for word-order independence.
    Normalized via default_process (lowercase, strip punctuation),
    rounded to 2 decimals so that threshold comparisons are stable.
    """
    score = fuzz.token_sort_ratio(
        query_title, candidate_title, processor=utils.default_process
    )
    return round(score, 2)


class RatingMatcher:
    """
    Matcher flou titre -> note.

    Contrat : au plus un resultat. Les candidats dont le score atteint le seuil
    sont retenus ; le plus haut score gagne et, a egalite, le premier candidat
    rencontre dans l'ordre d'iteration est conserve.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD) -> None:
        """
        Initialise le matcher.

        Args:
            threshold: Similarite minimale (0-1) pour accepter une correspondance
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Seuil hors de [0, 1]: {threshold}")
        self._cutoff = round(threshold * 100, 2)

    @property
    def cutoff(self) -> float:
        """Seuil exprime sur l'echelle 0-100 des scores."""
        return self._cutoff

    def best_match(
        self, title: str, candidates: Iterable[str]
    ) -> Optional[tuple[str, float]]:
        """
        Retourne le candidat le plus proche du titre, s'il atteint le seuil.

        Args:
            title: Titre extrait du nom de release
            candidates: Titres du catalogue externe

        Returns:
            (candidat, score) ou None si aucun candidat n'atteint le seuil
        """
        best: Optional[tuple[str, float]] = None
        for candidate in candidates:
            score = title_similarity(title, candidate)
            if score < self._cutoff:
                continue
            if best is None or score > best[1]:
                best = (candidate, score)
        return best

    def match(self, title: str, ratings: Mapping[str, str]) -> Optional[str]:
        """
        Retourne la note associee au titre, ou None sans correspondance fiable.

        Args:
            title: Titre extrait du nom de release
            ratings: Catalogue titre -> note

        Returns:
            Note du meilleur candidat, None si aucun n'atteint le seuil
        """
        found = self.best_match(title, ratings.keys())
        if found is None:
            logger.debug(f"Aucune note pour '{title}'")
            return None

        candidate, score = found
        if candidate != title:
            logger.debug(f"Note de '{candidate}' associee a '{title}' ({score:.0f}%)")
        return ratings[candidate]
