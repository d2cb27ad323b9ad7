"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour les
applications qui embarquent etvdb.
"""

from dependency_injector import containers, providers

from .adapters.api.http_fetcher import HttpFetcher
from .adapters.api.tvdb_client import TVDBClient
from .adapters.xml.lxml_tokenizer import LxmlTokenizer
from .config import Settings
from .services.entity_builder import EntityBuilder
from .services.season_partitioner import SeasonPartitioner


class Container(containers.DeclarativeContainer):
    """Container DI de etvdb.

    Utilisation :
        container = Container()
        client = container.tvdb_client()
        series = client.series_find("Breaking Bad")
        client.close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    fetcher = providers.Singleton(
        HttpFetcher,
        timeout=config.provided.request_timeout,
        connect_timeout=config.provided.connect_timeout,
    )
    tokenizer = providers.Singleton(LxmlTokenizer)

    # Services (etat propre a chaque appel - Singletons)
    entity_builder = providers.Singleton(EntityBuilder, tokenizer=tokenizer)
    season_partitioner = providers.Singleton(SeasonPartitioner)

    # Client TVDB - cle API et langue depuis config
    tvdb_client = providers.Singleton(
        TVDBClient,
        fetcher=fetcher,
        builder=entity_builder,
        partitioner=season_partitioner,
        api_key=config.provided.api_key,
        language=config.provided.language,
        base_url=config.provided.base_url,
        languages_file=config.provided.languages_file,
    )
