"""
Recherche d'episodes dans une serie deja partitionnee.

Ces fonctions ne telechargent rien: la serie doit avoir ete peuplee au
prealable (TVDBClient.series_populate). Les dates sont des chaines ISO 8601
limitees a la date (ex: "2013-03-28") et se comparent lexicographiquement.
"""

from datetime import date as date_type
from typing import Iterator, Optional

from loguru import logger

from etvdb.core.entities.media import Episode, Series
from etvdb.core.errors import MissingIdentifier


def _iso_date(value: Optional[str]) -> str:
    """Retourne la date demandee, ou la date du jour au format ISO."""
    if value:
        logger.debug(f"Requested Date: {value}")
        return value[: len("2013-03-28")]
    return date_type.today().isoformat()


def _regular_episodes(series: Series) -> Iterator[Episode]:
    for season in series.seasons:
        yield from season


def episode_from_series_get(series: Series, season: int, number: int) -> Optional[Episode]:
    """
    Retourne un episode d'une serie peuplee, par saison et numero.

    Args:
        series: Serie peuplee
        season: Numero de saison, 0 pour les specials
        number: Position de l'episode dans la saison (a partir de 1)

    Returns:
        L'episode, ou None si la saison ou la position n'existe pas
    """
    if number < 1 or season < 0:
        return None

    if season == 0:
        episodes = series.specials
    elif season <= len(series.seasons):
        episodes = series.seasons[season - 1]
    else:
        return None

    if number > len(episodes):
        return None
    return episodes[number - 1]


def episode_by_date_get(series: Series, date: str) -> Optional[Episode]:
    """
    Retourne le premier episode diffuse a une date donnee.

    Les saisons regulieres sont parcourues avant les specials.

    Raises:
        MissingIdentifier: Si la serie n'a pas d'identifiant
    """
    if not series.id:
        logger.error("Passed series data is not valid.")
        raise MissingIdentifier(series)

    target = _iso_date(date)
    for episodes in (_regular_episodes(series), iter(series.specials)):
        for episode in episodes:
            if not episode.first_aired:
                logger.debug(f"Episode {episode.name} has no date in TVDB.")
                continue
            if episode.first_aired == target:
                logger.debug(f"Episode {episode.name} aired on {target}")
                return episode
    return None


def episode_airs_next_get(series: Series, date: Optional[str] = None) -> Optional[Episode]:
    """
    Retourne le premier episode diffuse apres une date (aujourd'hui par defaut).

    Seules les saisons regulieres sont considerees.
    """
    target = _iso_date(date)
    logger.debug(f"Selected Date: {target}")

    for episode in _regular_episodes(series):
        if episode.first_aired and episode.first_aired > target:
            return episode
    return None


def episode_latest_aired_get(series: Series, date: Optional[str] = None) -> Optional[Episode]:
    """
    Retourne le dernier episode diffuse au plus tard a une date
    (aujourd'hui par defaut).

    Seules les saisons regulieres sont considerees.
    """
    target = _iso_date(date)
    logger.debug(f"Selected Date: {target}")

    for season in reversed(series.seasons):
        for episode in reversed(season):
            if episode.first_aired and episode.first_aired <= target:
                logger.debug(f"Latest Episode aired on: {episode.first_aired}")
                return episode
    return None
