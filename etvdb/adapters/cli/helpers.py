"""
Utilitaires partages pour les commandes CLI de etvdb.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- tvdb_session : context manager fournissant un client TVDB du container
- format_episode_code : code SxxEyy d'un episode
"""

from contextlib import contextmanager
from typing import Iterator

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from etvdb.adapters.api.tvdb_client import TVDBClient
from etvdb.container import Container
from etvdb.core.entities.media import Episode
from etvdb.core.errors import TVDBError

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("etvdb")
    try:
        yield
    finally:
        loguru_logger.enable("etvdb")


@contextmanager
def tvdb_session() -> Iterator[TVDBClient]:
    """
    Fournit un client TVDB et convertit les erreurs etvdb en sortie CLI.

    Le client est ferme a la sortie du bloc. Une TVDBError affiche un
    message et termine la commande avec le code 1.

    Usage:
        with tvdb_session() as client:
            series_list = client.series_find("Lost")
    """
    container = Container()
    client = container.tvdb_client()
    try:
        with suppress_loguru():
            yield client
    except TVDBError as e:
        console.print(f"[red]Erreur TVDB:[/red] {e}")
        raise typer.Exit(code=1) from e
    finally:
        client.close()


def format_episode_code(episode: Episode) -> str:
    """Retourne le code SxxEyy d'un episode (ex: S01E02)."""
    return f"S{episode.season:02d}E{episode.number:02d}"
