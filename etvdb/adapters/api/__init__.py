"""
Clients API externes.

Ce module fournit les adaptateurs pour communiquer avec l'API XML de TVDB:
- HttpFetcher: Recuperation synchrone des documents via httpx (sans retry)
- TVDBClient: Facade publique (series, episodes, langues, heure serveur)
"""

from etvdb.adapters.api.http_fetcher import HttpFetcher
from etvdb.adapters.api.tvdb_client import TVDBClient

__all__ = [
    "HttpFetcher",
    "TVDBClient",
]
