"""
Tests unitaires pour ReleaseNameParser.

Tests pour valider l'extraction titre / annee a position fixe,
la detection de l'encodeur et du remux, et les noms mal formes.
"""

import pytest

from src.core.errors import MalformedName
from src.core.ports.parser import INameParser
from src.adapters.parsing.release_name_parser import ReleaseNameParser

ENCODERS = ["Tigole", "FraMeSToR", "Joy", "HANDS"]


@pytest.fixture
def parser() -> ReleaseNameParser:
    """Parser avec une liste d'encodeurs reduite et le prefixe par defaut."""
    return ReleaseNameParser(encoder_tags=ENCODERS)


class TestReleaseNameParserInterface:
    """Tests de conformite a INameParser."""

    def test_implements_interface(self, parser: ReleaseNameParser) -> None:
        """ReleaseNameParser implemente INameParser."""
        assert isinstance(parser, INameParser)


class TestTitleYear:
    """Tests pour l'extraction du titre et de l'annee."""

    def test_documented_example(self, parser: ReleaseNameParser) -> None:
        """"M: Title Name (2020) [2160p]" -> ("Title Name", 2020)."""
        assert parser.extract_title_year("M: Title Name (2020) [2160p]") == ("Title Name", 2020)

    def test_full_path(self, parser: ReleaseNameParser) -> None:
        """Le chemin complet est analyse, la premiere parenthese fait foi."""
        parsed = parser.parse(
            "M:/Heat (1995) [1080p x264 8bit DTS-5.1 FraMeSToR]/Heat (1995).mkv"
        )

        assert parsed.title == "Heat"
        assert parsed.year == 1995

    def test_title_with_dash(self, parser: ReleaseNameParser) -> None:
        """Les titres avec " - " (anciens ":") sont conserves."""
        title, year = parser.extract_title_year("M:/Mission - Impossible (1996) [1080p]")

        assert title == "Mission - Impossible"
        assert year == 1996

    def test_custom_prefix_length(self) -> None:
        """La longueur du prefixe est configurable."""
        parser = ReleaseNameParser(prefix_length=0)

        assert parser.extract_title_year("Alien (1979)") == ("Alien", 1979)

    def test_negative_year_accepted(self, parser: ReleaseNameParser) -> None:
        """Toute annee entiere dans les bornes est acceptee."""
        assert parser.extract_title_year("M:/Quest (-500)")[1] == -500


class TestMalformedNames:
    """Tests pour les noms ne respectant pas la convention."""

    @pytest.mark.parametrize(
        "name",
        [
            "M:/Heat [1080p]/Heat.mkv",
            "M:/Heat (1995/Heat.mkv",
            "M:/Heat 1995)/Heat.mkv",
        ],
    )
    def test_missing_parenthesis(self, parser: ReleaseNameParser, name: str) -> None:
        """Sans paire de parentheses, le nom est refuse."""
        with pytest.raises(MalformedName):
            parser.parse(name)

    def test_close_before_open(self, parser: ReleaseNameParser) -> None:
        """Une fermante avant l'ouvrante est refusee."""
        with pytest.raises(MalformedName, match="fermante"):
            parser.parse("M:/Heat) (1995")

    def test_empty_title(self, parser: ReleaseNameParser) -> None:
        """Un titre vide est refuse."""
        with pytest.raises(MalformedName, match="titre vide"):
            parser.parse("M:/(1995)")

    @pytest.mark.parametrize("year", ["abcd", "19 95", "", "1995.0"])
    def test_non_integer_year(self, parser: ReleaseNameParser, year: str) -> None:
        """L'annee doit etre un entier."""
        with pytest.raises(MalformedName, match="annee invalide"):
            parser.parse(f"M:/Heat ({year})")

    def test_year_out_of_range(self, parser: ReleaseNameParser) -> None:
        """L'annee doit tenir sur 16 bits signes."""
        with pytest.raises(MalformedName, match="hors limites"):
            parser.parse("M:/Heat (40000)")

    def test_error_keeps_name(self, parser: ReleaseNameParser) -> None:
        """L'erreur conserve le nom analyse."""
        with pytest.raises(MalformedName) as exc_info:
            parser.parse("M:/Heat")
        assert exc_info.value.name == "M:/Heat"


class TestEncoder:
    """Tests pour la detection de l'encodeur."""

    def test_known_encoder(self, parser: ReleaseNameParser) -> None:
        """Un groupe de la liste est detecte."""
        assert parser.find_encoder("M:/Heat (1995) [1080p Tigole]") == "Tigole"

    def test_case_sensitive(self, parser: ReleaseNameParser) -> None:
        """La recherche respecte la casse."""
        assert parser.find_encoder("M:/Heat (1995) [1080p tigole]") is None

    def test_list_order_wins(self, parser: ReleaseNameParser) -> None:
        """Avec plusieurs correspondances, l'ordre de la liste fait foi."""
        assert parser.find_encoder("M:/Heat (1995) [Joy FraMeSToR]") == "FraMeSToR"

    def test_no_encoder(self, parser: ReleaseNameParser) -> None:
        """Aucun groupe connu -> None."""
        assert parser.parse("M:/Heat (1995) [1080p]").encoder is None


class TestRemux:
    """Tests pour la detection du remux."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("M:/Heat (1995) [REMUX]", True),
            ("M:/Heat (1995) [Remux]", True),
            ("M:/Heat (1995) [1080p]", False),
        ],
    )
    def test_remux(self, parser: ReleaseNameParser, name: str, expected: bool) -> None:
        """La detection du remux ignore la casse."""
        assert parser.parse(name).remux is expected
