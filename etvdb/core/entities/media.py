"""
Media metadata entities.

Entities representing TV series, episodes and supported languages as
materialized from TheTVDB XML documents.
"""

import weakref
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Series:
    """
    TV series metadata from TVDB.

    Roughly comparable to TVDB's base series record. The series owns its
    episodes once partitioned: ``seasons[i]`` holds the episodes of season
    ``i + 1`` and ``specials`` holds the episodes of season 0.

    Attributes:
        id: TheTVDB ID
        imdb_id: IMDB series ID (e.g. "tt0903747")
        zap2it_id: Zap2it series ID (e.g. "SH01009396")
        name: Series name
        overview: Series description
        runtime: Runtime in minutes
        seasons: One ordered list of episodes per season
        specials: Ordered list of special episodes
    """

    id: Optional[str] = None
    imdb_id: Optional[str] = None
    zap2it_id: Optional[str] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    runtime: Optional[int] = None
    seasons: list[list["Episode"]] = field(default_factory=list, repr=False)
    specials: list["Episode"] = field(default_factory=list, repr=False)

    @property
    def episode_count(self) -> int:
        """Number of episodes held by the series, specials included."""
        return sum(len(season) for season in self.seasons) + len(self.specials)

    def release_episodes(self) -> None:
        """Drop all season buckets and specials."""
        for season in self.seasons:
            season.clear()
        self.seasons.clear()
        self.specials.clear()


@dataclass(eq=False)
class Episode:
    """
    Individual episode of a TV series.

    The parent series is a weak back-reference: an episode never keeps its
    series alive. ``series_id`` is kept so the series can be looked up again.

    Attributes:
        id: TheTVDB ID
        imdb_id: IMDB episode ID
        name: Episode name
        overview: Episode description
        first_aired: Original air date (ISO 8601, e.g. "2008-01-20")
        season: Season number (0 for specials)
        number: Episode number within the season (1-indexed)
        series_id: TheTVDB ID of the parent series
    """

    id: int = 0
    imdb_id: Optional[str] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    first_aired: Optional[str] = None
    season: int = 0
    number: int = 0
    series_id: Optional[str] = None
    _series_ref: Optional[weakref.ReferenceType] = field(
        default=None, init=False, repr=False
    )

    @property
    def series(self) -> Optional[Series]:
        """Parent series, or None if unknown or already released."""
        if self._series_ref is None:
            return None
        return self._series_ref()

    def link_series(self, series: Series) -> None:
        """Attach the parent series without taking ownership of it."""
        self._series_ref = weakref.ref(series)
        self.series_id = series.id

    @property
    def is_special(self) -> bool:
        """True for episodes stored with the specials (season 0 or below)."""
        return self.season <= 0


@dataclass(frozen=True)
class LanguageEntry:
    """
    Language supported by TVDB.

    Attributes:
        abbreviation: Two-letter language code (e.g. "en")
        name: Human-readable language name (e.g. "English")
    """

    abbreviation: str
    name: str
