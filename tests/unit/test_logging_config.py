"""
Tests unitaires pour la configuration du logging loguru.
"""

import pytest
from loguru import logger

from etvdb.core.entities.media import Episode, Series
from etvdb.core.errors import MissingIdentifier
from etvdb.logging_config import configure_logging
from etvdb.services.season_partitioner import SeasonPartitioner


@pytest.fixture(autouse=True)
def reset_loguru():
    """Remet loguru dans l'etat d'une bibliotheque importee."""
    yield
    logger.remove()
    logger.disable("etvdb")


def _log_partition_error() -> None:
    """Declenche un logger.error depuis le package etvdb."""
    with pytest.raises(MissingIdentifier):
        SeasonPartitioner().partition(Series(), [Episode(season=1)])


class TestConfigureLogging:
    """Tests de configure_logging."""

    def test_creates_log_directory_and_file(self, tmp_path):
        log_file = tmp_path / "logs" / "etvdb.log"

        configure_logging(log_level="WARNING", log_file=log_file)
        _log_partition_error()
        logger.complete()
        logger.remove()

        assert log_file.parent.is_dir()
        assert "Passed series data is not valid." in log_file.read_text(encoding="utf-8")

    def test_console_only(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(log_file=None)

        assert not (tmp_path / "logs").exists()


class TestPackageLogger:
    """Les logs de etvdb sont silencieux tant que l'hote ne les active pas."""

    def test_disabled_library_is_silent(self):
        messages: list[str] = []
        logger.disable("etvdb")
        logger.add(messages.append, level="DEBUG", format="{message}")

        _log_partition_error()

        assert messages == []

    def test_configure_logging_enables_package(self):
        messages: list[str] = []
        logger.disable("etvdb")

        configure_logging(log_level="ERROR", log_file=None)
        logger.add(messages.append, level="DEBUG", format="{message}")
        _log_partition_error()

        assert any("Passed series data is not valid." in m for m in messages)
