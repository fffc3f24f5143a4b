"""
Implementation du parser de noms de release a convention fixe.

Ce module fournit ReleaseNameParser qui implemente INameParser pour
la convention "<prefixe><Titre> (<Annee>) [...]" utilisee par la videotheque,
ou le prefixe est la racine du lecteur (ex: "M:/").

Exemple:
    "M:/Heat (1995) [1080p x264 8bit DTS-5.1 FraMeSToR]/Heat.mkv"
    -> titre "Heat", annee 1995, encodeur "FraMeSToR", remux False
"""

import re
from typing import Optional, Sequence

from src.core.entities.movie import YEAR_MAX, YEAR_MIN
from src.core.errors import MalformedName
from src.core.ports.parser import INameParser
from src.core.value_objects.parsed_info import ParsedName

# Longueur par defaut du prefixe ignore avant le titre ("M:/")
DEFAULT_PREFIX_LENGTH = 3

# Annee entiere, signe optionnel, sans espace ni separateur
_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


class ReleaseNameParser(INameParser):
    """
    Parser de noms suivant la convention "<prefixe><Titre> (<Annee>)".

    Le titre commence apres le prefixe et s'arrete avant l'espace qui
    precede la premiere parenthese ouvrante. L'annee est l'entier entre
    la premiere parenthese ouvrante et la premiere parenthese fermante.
    Aucune autre heuristique n'est tentee.
    """

    def __init__(
        self,
        encoder_tags: Sequence[str] = (),
        prefix_length: int = DEFAULT_PREFIX_LENGTH,
    ) -> None:
        """
        Initialise le parser.

        Args:
            encoder_tags: Groupes de release reconnus, par ordre de priorite
            prefix_length: Nombre de caracteres ignores en debut de nom
        """
        self._encoder_tags = tuple(encoder_tags)
        self._prefix_length = prefix_length

    def parse(self, name: str) -> ParsedName:
        """
        Extrait titre, annee, groupe de release et indicateur remux.

        Args:
            name: Nom ou chemin complet a analyser

        Returns:
            ParsedName avec les informations extraites

        Raises:
            MalformedName: Si une parenthese manque, si le titre est vide
                           ou si l'annee n'est pas un entier valide
        """
        title, year = self.extract_title_year(name)
        return ParsedName(
            title=title,
            year=year,
            encoder=self.find_encoder(name),
            remux=self.is_remux(name),
        )

    def extract_title_year(self, name: str) -> tuple[str, int]:
        """
        Extrait le titre et l'annee selon la convention a position fixe.

        Args:
            name: Nom a analyser

        Returns:
            (titre, annee)
        """
        open_paren = name.find("(")
        close_paren = name.find(")")

        if open_paren == -1 or close_paren == -1:
            raise MalformedName(name, "parentheses absentes")
        if close_paren < open_paren:
            raise MalformedName(name, "parenthese fermante avant l'ouvrante")

        # Le caractere precedant "(" (l'espace separateur) est exclu du titre
        title_end = open_paren - 1
        if title_end <= self._prefix_length:
            raise MalformedName(name, "titre vide")
        title = name[self._prefix_length:title_end]

        year_text = name[open_paren + 1:close_paren]
        if not _YEAR_PATTERN.fullmatch(year_text):
            raise MalformedName(name, f"annee invalide {year_text!r}")
        year = int(year_text)
        if not YEAR_MIN <= year <= YEAR_MAX:
            raise MalformedName(name, f"annee hors limites {year}")

        return title, year

    def find_encoder(self, name: str) -> Optional[str]:
        """
        Retourne le premier groupe de release contenu dans le nom.

        La recherche est sensible a la casse ; en cas de plusieurs
        correspondances, l'ordre de la liste configuree fait foi.
        """
        for tag in self._encoder_tags:
            if tag in name:
                return tag
        return None

    @staticmethod
    def is_remux(name: str) -> bool:
        """Detecte un remux, sans tenir compte de la casse."""
        return "remux" in name.lower()
