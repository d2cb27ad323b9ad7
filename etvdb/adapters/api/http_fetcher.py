"""
Recuperation de documents TVDB via httpx.

Implemente IDocumentFetcher avec un client httpx synchrone unique (connection
pooling). Tout echec (timeout, connexion, statut HTTP en erreur) est converti
en TransportError et remonte immediatement: aucune requete n'est relancee.
"""

from typing import Optional

import httpx
from loguru import logger

from etvdb.core.errors import TransportError
from etvdb.core.ports.transport import IDocumentFetcher


class HttpFetcher(IDocumentFetcher):
    """
    Client HTTP synchrone pour les documents XML de TVDB.

    Example:
        fetcher = HttpFetcher(timeout=30.0, connect_timeout=10.0)
        data = fetcher.fetch("http://thetvdb.com/api/Updates.php", {"type": "none"})
        fetcher.close()
    """

    def __init__(self, timeout: float = 30.0, connect_timeout: float = 10.0) -> None:
        """
        Initialise le fetcher.

        Args:
            timeout: Duree maximale d'une requete en secondes
            connect_timeout: Duree maximale d'etablissement de connexion
        """
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """
        Retourne le client HTTP, cree s'il n'existe pas.
        """
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    def fetch(self, uri: str, params: Optional[dict[str, str]] = None) -> bytes:
        """
        Telecharge un document en memoire.

        Args:
            uri: URI absolue du document
            params: Parametres de requete optionnels

        Returns:
            Le corps brut de la reponse

        Raises:
            TransportError: Si la requete echoue ou retourne un statut en erreur
        """
        client = self._get_client()
        logger.debug("GET {}", uri, params=params)

        try:
            response = client.get(uri, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Couldn't get {uri}: HTTP {status}")
            raise TransportError(uri, f"HTTP {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.error(f"Couldn't get {uri}: {e!r}")
            raise TransportError(uri, str(e) or type(e).__name__) from e

        logger.debug(f"Received {len(response.content)} bytes from {uri}")
        return response.content

    def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            self._client.close()
            self._client = None
