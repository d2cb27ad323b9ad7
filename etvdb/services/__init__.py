"""
Couche application (services).

- EntityBuilder : construction d'entites en flux depuis les evenements XML
- SeasonPartitioner : repartition d'une liste plate d'episodes en saisons
- episode_finder : recherches d'episodes dans une serie peuplee
- xml_schemas : selecteurs de schema (SERIES_LIST, EPISODE_LIST, ...)
"""

from etvdb.services.entity_builder import EntityBuilder
from etvdb.services.season_partitioner import SeasonPartitioner
from etvdb.services.xml_schemas import (
    EPISODE_LIST,
    LANGUAGE_LIST,
    SERIES_LIST,
    SERVER_TIME,
    XmlSchema,
)

__all__ = [
    "EntityBuilder",
    "SeasonPartitioner",
    "XmlSchema",
    "SERIES_LIST",
    "EPISODE_LIST",
    "LANGUAGE_LIST",
    "SERVER_TIME",
]
