"""
Business entities representing core domain concepts.

Exports:
- Series: TV series metadata from TVDB, owning its season buckets
- Episode: Individual episode of a series
- LanguageEntry: Language supported by TVDB
"""

from etvdb.core.entities.media import Episode, LanguageEntry, Series

__all__ = [
    "Series",
    "Episode",
    "LanguageEntry",
]
