"""
Commandes CLI de consultation de TVDB.

Chaque commande ouvre une session TVDB (tvdb_session), interroge l'API et
affiche le resultat avec Rich.
"""

from typing import Annotated, Optional

import typer
from rich.table import Table

from etvdb.adapters.cli.helpers import console, format_episode_code, tvdb_session
from etvdb.core.entities.media import Episode, Series
from etvdb.services.episode_finder import (
    episode_airs_next_get,
    episode_latest_aired_get,
)


def languages() -> None:
    """Affiche les langues supportees par TVDB."""
    with tvdb_session() as client:
        table_data = client.languages_get()

    table = Table(title=f"Langues TVDB ({len(table_data)})")
    table.add_column("Code", style="cyan")
    table.add_column("Langue", style="green")
    for code in sorted(table_data):
        table.add_row(code, table_data[code].name)
    console.print(table)


def server_time() -> None:
    """Affiche l'heure des serveurs TVDB."""
    with tvdb_session() as client:
        now = client.server_time_get()

    console.print(f"Heure serveur TVDB : [bold]{now.isoformat()}[/bold] ({int(now.timestamp())})")


def find(
    name: Annotated[str, typer.Argument(help="Nom, ID IMDB (tt...) ou ID zap2it (SH...)")],
) -> None:
    """Recherche des series par nom ou identifiant externe."""
    with tvdb_session() as client:
        results = client.series_find(name)

    if not results:
        console.print(f"[yellow]Aucune serie trouvee pour '{name}'.[/yellow]")
        return

    table = Table(title=f"Series trouvees ({len(results)})")
    table.add_column("ID", style="cyan")
    table.add_column("Nom", style="green")
    table.add_column("IMDB", style="dim")
    for series in results:
        table.add_row(series.id or "", series.name or "", series.imdb_id or "")
    console.print(table)


def _load_populated_series(client, series_id: str) -> Series:
    """Recupere une serie et ses episodes, quitte si elle est inconnue."""
    series = client.series_by_id_get(series_id)
    if series is None:
        console.print(f"[yellow]Serie {series_id} introuvable sur TVDB.[/yellow]")
        raise typer.Exit(code=1)
    return client.series_populate(series)


def _episode_row(episode: Episode) -> tuple[str, str, str]:
    return (
        format_episode_code(episode),
        episode.name or "",
        episode.first_aired or "",
    )


def episodes(
    series_id: Annotated[str, typer.Argument(help="ID TVDB de la serie")],
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="Lister chaque episode"),
    ] = False,
) -> None:
    """Affiche les saisons d'une serie, et optionnellement ses episodes."""
    with tvdb_session() as client:
        series = _load_populated_series(client, series_id)

    console.print(f"[bold cyan]{series.name}[/bold cyan] ({series.id})")

    table = Table(title=f"{len(series.seasons)} saison(s), {len(series.specials)} special(s)")
    if details:
        table.add_column("Episode", style="cyan")
        table.add_column("Titre", style="green")
        table.add_column("Diffusion", style="dim")
        for season in series.seasons:
            for episode in season:
                table.add_row(*_episode_row(episode))
        for episode in series.specials:
            table.add_row(*_episode_row(episode))
    else:
        table.add_column("Saison", style="cyan")
        table.add_column("Episodes", style="green")
        for index, season in enumerate(series.seasons, start=1):
            table.add_row(str(index), str(len(season)))
        if series.specials:
            table.add_row("Specials", str(len(series.specials)))
    console.print(table)


def episode(
    series_id: Annotated[str, typer.Argument(help="ID TVDB de la serie")],
    season: Annotated[int, typer.Argument(help="Numero de saison (0 pour les specials)")],
    number: Annotated[int, typer.Argument(help="Numero de l'episode dans la saison")],
) -> None:
    """Affiche un episode par numero de saison et d'episode."""
    with tvdb_session() as client:
        found = client.episode_by_number_get(Series(id=series_id), season, number)

    if found is None:
        console.print(f"[yellow]Episode S{season:02d}E{number:02d} introuvable.[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"[bold cyan]{format_episode_code(found)}[/bold cyan] {found.name or ''}")
    if found.first_aired:
        console.print(f"Diffusion : {found.first_aired}")
    if found.overview:
        console.print(found.overview)


def schedule(
    series_id: Annotated[str, typer.Argument(help="ID TVDB de la serie")],
    date: Annotated[
        Optional[str],
        typer.Option("--date", help="Date de reference ISO (defaut: aujourd'hui)"),
    ] = None,
) -> None:
    """Affiche le dernier episode diffuse et le prochain a diffuser."""
    with tvdb_session() as client:
        series = _load_populated_series(client, series_id)

    latest = episode_latest_aired_get(series, date)
    upcoming = episode_airs_next_get(series, date)

    if latest:
        code, name, aired = _episode_row(latest)
        console.print(f"Dernier episode : [green]{code}[/green] {name} ({aired})")
    else:
        console.print("[dim]Aucun episode diffuse.[/dim]")

    if upcoming:
        code, name, aired = _episode_row(upcoming)
        console.print(f"Prochain episode : [cyan]{code}[/cyan] {name} ({aired})")
    else:
        console.print("[dim]Aucun episode a venir.[/dim]")
