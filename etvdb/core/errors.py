"""
Taxonomie d'erreurs de etvdb.

Toutes les erreurs derivent de TVDBError pour que l'appelant puisse les
intercepter en bloc. Chaque operation publique retourne son resultat ou
leve exactement une de ces erreurs.
"""

from typing import Optional


class TVDBError(Exception):
    """Erreur de base de etvdb."""


class InvalidConfiguration(TVDBError):
    """Cle API ou langue invalide passee au client."""


class TransportError(TVDBError):
    """
    Echec de recuperation d'un document (reseau, timeout, statut HTTP).

    Attributes:
        uri: URI demandee
        reason: Description de l'echec
        status_code: Code HTTP si la reponse a ete recue, sinon None
    """

    def __init__(self, uri: str, reason: str, status_code: Optional[int] = None) -> None:
        self.uri = uri
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Fetching {uri} failed: {reason}")


class MalformedDocument(TVDBError):
    """
    Document XML rejete par le tokenizer ou incoherent avec son schema.

    Attributes:
        schema: Nom du schema en cours de parsing
        reason: Description de l'anomalie
    """

    def __init__(self, schema: str, reason: str) -> None:
        self.schema = schema
        self.reason = reason
        super().__init__(f"Malformed {schema} document: {reason}")


class EmptySource(TVDBError):
    """Aucun episode a partitionner pour une serie."""

    def __init__(self, series_id: Optional[str]) -> None:
        self.series_id = series_id
        super().__init__(f"No episodes available for series {series_id}")


class PartitionIncomplete(TVDBError):
    """Des episodes restent dans la liste source apres partition."""

    def __init__(self, series_id: Optional[str], remaining: int) -> None:
        self.series_id = series_id
        self.remaining = remaining
        super().__init__(
            f"{remaining} episode(s) of series {series_id} were not relocated"
        )


class MissingIdentifier(TVDBError):
    """Entite sans identifiant passee a une operation qui en requiert un."""

    def __init__(self, entity: object) -> None:
        self.entity = entity
        super().__init__(f"{type(entity).__name__} has no identifier")
