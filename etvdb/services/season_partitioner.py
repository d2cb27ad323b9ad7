"""
Partition d'une liste plate d'episodes en saisons.

Redistribue les episodes d'une serie (tels que retournes par le document
"all" de TVDB) dans les conteneurs de la serie:
- series.seasons[i] recoit les episodes de la saison i + 1
- series.specials recoit les episodes de la saison 0

L'ordre du document est conserve dans chaque saison: il reflete l'ordre
des episodes au sein de la saison.
"""

from typing import Optional

from loguru import logger

from etvdb.core.entities.media import Episode, Series
from etvdb.core.errors import EmptySource, MissingIdentifier, PartitionIncomplete


def _is_sorted_by_season(episodes: list[Episode]) -> bool:
    return all(a.season <= b.season for a, b in zip(episodes, episodes[1:]))


class SeasonPartitioner:
    """
    Service de repartition des episodes d'une serie par saison.

    TVDB emet normalement les episodes tries par saison puis par numero.
    Si ce n'est pas le cas, les episodes sont d'abord tries de facon stable
    par numero de saison (l'ordre du document est conserve au sein d'une
    saison). Les saisons absentes donnent des conteneurs vides, de sorte que
    seasons[i] contient toujours la saison i + 1.

    Example:
        partitioner = SeasonPartitioner()
        partitioner.partition(series, builder.build_episodes(xml, series))
        first_episode = series.seasons[0][0]
    """

    def partition(self, series: Series, episodes: Optional[list[Episode]]) -> Series:
        """
        Deplace tous les episodes de la liste source vers la serie.

        La liste source est videe. Les saisons et specials deja presents
        dans la serie sont liberes avant la repartition.

        Args:
            series: Serie a peupler (doit avoir un identifiant)
            episodes: Liste plate d'episodes, dans l'ordre du document

        Returns:
            La serie modifiee

        Raises:
            MissingIdentifier: Si la serie n'a pas d'identifiant
            EmptySource: Si la liste source est vide ou absente
            PartitionIncomplete: Si un episode n'a pas pu etre deplace
        """
        if not series.id:
            logger.error("Passed series data is not valid.")
            raise MissingIdentifier(series)

        if not episodes:
            logger.error(f"No episodes to partition for series {series.id}")
            raise EmptySource(series.id)

        if not _is_sorted_by_season(episodes):
            logger.warning(
                f"Episodes of series {series.id} are not sorted by season, sorting them"
            )
            episodes.sort(key=lambda episode: episode.season)

        series.release_episodes()

        total = len(episodes)
        for episode in episodes:
            self._relocate(series, episode)
        episodes.clear()

        if series.episode_count != total:
            raise PartitionIncomplete(series.id, total - series.episode_count)

        logger.debug(
            f"Series {series.id}: {len(series.seasons)} season(s), "
            f"{len(series.specials)} special(s)"
        )
        return series

    def _relocate(self, series: Series, episode: Episode) -> None:
        if episode.series is not series:
            episode.link_series(series)

        if episode.season <= 0:
            series.specials.append(episode)
            return

        while len(series.seasons) < episode.season:
            series.seasons.append([])
        series.seasons[episode.season - 1].append(episode)
