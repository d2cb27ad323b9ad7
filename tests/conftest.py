"""
Fixtures pytest partagees pour les tests etvdb.

Ce module contient les fixtures communes utilisees dans les tests:
- Tokenizer, constructeur d'entites et partitionneur reels
- Mock de l'interface IDocumentFetcher
- Fabriques d'episodes et de series de test
"""

from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from etvdb.adapters.xml.lxml_tokenizer import LxmlTokenizer
from etvdb.core.entities.media import Episode, Series
from etvdb.core.ports.transport import IDocumentFetcher
from etvdb.services.entity_builder import EntityBuilder
from etvdb.services.season_partitioner import SeasonPartitioner


@pytest.fixture
def tokenizer() -> LxmlTokenizer:
    """Tokenizer lxml reel."""
    return LxmlTokenizer()


@pytest.fixture
def builder(tokenizer: LxmlTokenizer) -> EntityBuilder:
    """Constructeur d'entites branche sur le tokenizer lxml."""
    return EntityBuilder(tokenizer)


@pytest.fixture
def partitioner() -> SeasonPartitioner:
    """Partitionneur de saisons."""
    return SeasonPartitioner()


@pytest.fixture
def mock_fetcher() -> MagicMock:
    """
    Mock de IDocumentFetcher pour les tests.

    Les documents retournes doivent etre configures dans chaque test
    (fetch.return_value ou fetch.side_effect).
    """
    return MagicMock(spec=IDocumentFetcher)


@pytest.fixture
def make_episode() -> Callable[..., Episode]:
    """Fabrique d'episodes de test."""

    def _make(
        season: int,
        number: int = 1,
        first_aired: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Episode:
        return Episode(
            id=season * 100 + number,
            name=name or f"Episode {season}x{number}",
            season=season,
            number=number,
            first_aired=first_aired,
        )

    return _make


@pytest.fixture
def series() -> Series:
    """Serie de test avec identifiant, sans episodes."""
    return Series(id="81189", name="Breaking Bad")
