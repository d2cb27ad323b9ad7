"""
Interface port pour la recuperation de documents.

Le domaine a seulement besoin de "fetch(uri) -> bytes". L'implementation
(adaptateur httpx) gere les timeouts et convertit tout echec en
TransportError, sans jamais relancer la requete.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IDocumentFetcher(ABC):
    """
    Interface de recuperation synchrone d'un document distant.
    """

    @abstractmethod
    def fetch(self, uri: str, params: Optional[dict[str, str]] = None) -> bytes:
        """
        Recupere le contenu brut d'un document.

        Args :
            uri : URI absolue du document
            params : Parametres de requete optionnels (encodes par l'adaptateur)

        Retourne :
            Le corps de la reponse

        Leve :
            TransportError : echec reseau, timeout ou statut HTTP en erreur
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Libere les ressources reseau."""
        ...
