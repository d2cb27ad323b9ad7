"""
Point d'entrée CLI de etvdb.

Configure le logging et fournit les commandes de consultation de TVDB.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    episode,
    episodes,
    find,
    languages,
    schedule,
    server_time,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="etvdb",
    help="Consultation de l'API XML de TheTVDB",
)
container = Container()

app.command()(languages)
app.command(name="time")(server_time)
app.command()(find)
app.command()(episodes)
app.command()(episode)
app.command()(schedule)


def get_config() -> Settings:
    """Récupère les paramètres depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration etvdb")
    typer.echo(f"API : {config.base_url}")
    typer.echo(f"Clé API : {'projet' if config.has_project_api_key else 'etvdb'}")
    typer.echo(f"Langue : {config.language}")
    typer.echo(f"Timeout : {config.request_timeout}s")
    typer.echo(f"Fichier des langues : {config.languages_file or 'fourni par etvdb'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"etvdb v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de etvdb", version=__version__)

    app()


if __name__ == "__main__":
    main()
