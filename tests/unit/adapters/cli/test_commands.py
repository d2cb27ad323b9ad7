"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- languages, time, find: affichage des resultats du client TVDB
- episodes, episode, schedule: serie peuplee et episodes
- conversion des TVDBError en code de sortie 1
- info, version
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from etvdb import __version__
from etvdb.core.entities.media import Episode, LanguageEntry, Series
from etvdb.core.errors import TransportError
from etvdb.main import app
from etvdb.services.season_partitioner import SeasonPartitioner

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_client():
    """Mock le client TVDB fourni par le Container.

    Patche Container dans helpers.py car c'est la que tvdb_session
    l'importe et l'instancie.
    """
    with patch("etvdb.adapters.cli.helpers.Container") as mock_cls:
        client = MagicMock()
        mock_cls.return_value.tvdb_client.return_value = client
        yield client


@pytest.fixture
def populated_series() -> Series:
    """Serie peuplee avec deux saisons et un special."""
    series = Series(id="81189", name="Breaking Bad")
    episodes = [
        Episode(id=1, name="Special", season=0, number=1, first_aired="2007-12-01"),
        Episode(id=2, name="Pilot", season=1, number=1, first_aired="2008-01-20"),
        Episode(id=3, name="Second", season=1, number=2, first_aired="2008-01-27"),
        Episode(id=4, name="Season two", season=2, number=1, first_aired="2099-03-08"),
    ]
    return SeasonPartitioner().partition(series, episodes)


# ============================================================================
# Commandes d'infrastructure
# ============================================================================


class TestLanguagesCommand:
    """Tests pour la commande languages."""

    def test_lists_languages(self, mock_client):
        mock_client.languages_get.return_value = {
            "en": LanguageEntry("en", "English"),
            "fr": LanguageEntry("fr", "Français"),
        }

        result = runner.invoke(app, ["languages"])

        assert result.exit_code == 0
        assert "English" in result.output
        assert "Français" in result.output
        mock_client.close.assert_called_once()


class TestTimeCommand:
    """Tests pour la commande time."""

    def test_prints_server_time(self, mock_client):
        mock_client.server_time_get.return_value = datetime.fromtimestamp(
            1364497200, tz=timezone.utc
        )

        result = runner.invoke(app, ["time"])

        assert result.exit_code == 0
        assert "1364497200" in result.output

    def test_transport_error_exits_with_code_1(self, mock_client):
        mock_client.server_time_get.side_effect = TransportError(
            "http://thetvdb.com/api/Updates.php", "HTTP 503", status_code=503
        )

        result = runner.invoke(app, ["time"])

        assert result.exit_code == 1
        assert "Erreur TVDB" in result.output
        mock_client.close.assert_called_once()


# ============================================================================
# Series et episodes
# ============================================================================


class TestFindCommand:
    """Tests pour la commande find."""

    def test_lists_results(self, mock_client):
        mock_client.series_find.return_value = [
            Series(id="81189", name="Breaking Bad", imdb_id="tt0903747"),
        ]

        result = runner.invoke(app, ["find", "Breaking Bad"])

        assert result.exit_code == 0
        mock_client.series_find.assert_called_once_with("Breaking Bad")
        assert "81189" in result.output
        assert "tt0903747" in result.output

    def test_no_results(self, mock_client):
        mock_client.series_find.return_value = []

        result = runner.invoke(app, ["find", "zzzz"])

        assert result.exit_code == 0
        assert "Aucune serie" in result.output


class TestEpisodesCommand:
    """Tests pour la commande episodes."""

    def test_season_summary(self, mock_client, populated_series):
        mock_client.series_by_id_get.return_value = populated_series
        mock_client.series_populate.return_value = populated_series

        result = runner.invoke(app, ["episodes", "81189"])

        assert result.exit_code == 0
        assert "Breaking Bad" in result.output
        assert "2 saison(s)" in result.output
        assert "Specials" in result.output

    def test_details(self, mock_client, populated_series):
        mock_client.series_by_id_get.return_value = populated_series
        mock_client.series_populate.return_value = populated_series

        result = runner.invoke(app, ["episodes", "81189", "--details"])

        assert result.exit_code == 0
        assert "S01E02" in result.output
        assert "S00E01" in result.output

    def test_unknown_series(self, mock_client):
        mock_client.series_by_id_get.return_value = None

        result = runner.invoke(app, ["episodes", "1"])

        assert result.exit_code == 1
        assert "introuvable" in result.output
        mock_client.series_populate.assert_not_called()


class TestEpisodeCommand:
    """Tests pour la commande episode."""

    def test_prints_episode(self, mock_client):
        mock_client.episode_by_number_get.return_value = Episode(
            id=2, name="Pilot", season=1, number=1, first_aired="2008-01-20"
        )

        result = runner.invoke(app, ["episode", "81189", "1", "1"])

        assert result.exit_code == 0
        assert "S01E01" in result.output
        assert "2008-01-20" in result.output
        series, season, number = mock_client.episode_by_number_get.call_args.args
        assert series.id == "81189"
        assert (season, number) == (1, 1)

    def test_not_found(self, mock_client):
        mock_client.episode_by_number_get.return_value = None

        result = runner.invoke(app, ["episode", "81189", "9", "9"])

        assert result.exit_code == 1
        assert "S09E09" in result.output


class TestScheduleCommand:
    """Tests pour la commande schedule."""

    def test_latest_and_next(self, mock_client, populated_series):
        mock_client.series_by_id_get.return_value = populated_series
        mock_client.series_populate.return_value = populated_series

        result = runner.invoke(app, ["schedule", "81189", "--date", "2008-02-01"])

        assert result.exit_code == 0
        assert "S01E02" in result.output
        assert "S02E01" in result.output


# ============================================================================
# Commandes generales
# ============================================================================


class TestGeneralCommands:
    """Tests pour info et version."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self):
        with patch("etvdb.main.get_config") as mock_config:
            mock_config.return_value = MagicMock(
                base_url="http://thetvdb.com/api",
                has_project_api_key=False,
                language="en",
                request_timeout=30.0,
                languages_file=None,
                log_level="INFO",
            )

            result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "http://thetvdb.com/api" in result.output
        assert "Langue : en" in result.output
