"""
Vocabulaires XML des documents TVDB (selecteurs de schema).

Chaque schema fixe la balise racine, la balise d'enregistrement et la table
"nom de balise -> champ" utilisee par le constructeur d'entites. Les noms
de balise sont compares nus et en respectant la casse.

Schemas disponibles:
- SERIES_LIST: GetSeries.php, GetSeriesByRemoteID.php, series/{id}/{lang}.xml
- EPISODE_LIST: series/{id}/all/{lang}.xml et documents d'un seul episode
- LANGUAGE_LIST: languages.xml
- SERVER_TIME: Updates.php?type=none
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class FieldKind(Enum):
    """Type semantique d'un champ, qui determine sa conversion.

    Valeurs:
        RAW: Copie brute (identifiants, dates)
        FREE_TEXT: Texte lisible, entites HTML decodees (noms, resumes)
        INTEGER: Entier decimal, 0 si la conversion echoue
        SERIES_REF: Identifiant de la serie parente (reference faible)
    """

    RAW = "raw"
    FREE_TEXT = "free_text"
    INTEGER = "integer"
    SERIES_REF = "series_ref"


class EntityField(Enum):
    """Champ d'entite: la valeur est le couple (attribut, type)."""

    @property
    def attribute(self) -> str:
        return self.value[0]

    @property
    def kind(self) -> FieldKind:
        return self.value[1]


class SeriesField(EntityField):
    ID = ("id", FieldKind.RAW)
    IMDB = ("imdb_id", FieldKind.RAW)
    ZAP2IT = ("zap2it_id", FieldKind.RAW)
    NAME = ("name", FieldKind.FREE_TEXT)
    OVERVIEW = ("overview", FieldKind.FREE_TEXT)
    RUNTIME = ("runtime", FieldKind.INTEGER)


class EpisodeField(EntityField):
    ID = ("id", FieldKind.INTEGER)
    IMDB = ("imdb_id", FieldKind.RAW)
    NAME = ("name", FieldKind.FREE_TEXT)
    OVERVIEW = ("overview", FieldKind.FREE_TEXT)
    FIRST_AIRED = ("first_aired", FieldKind.RAW)
    NUMBER = ("number", FieldKind.INTEGER)
    SEASON = ("season", FieldKind.INTEGER)
    SERIES = ("series_id", FieldKind.SERIES_REF)


class LanguageField(EntityField):
    NAME = ("name", FieldKind.FREE_TEXT)
    ABBREVIATION = ("abbreviation", FieldKind.RAW)


class TimeField(EntityField):
    VALUE = ("value", FieldKind.INTEGER)


class RecordKind(Enum):
    """Variante d'entite produite par un schema."""

    SERIES = "series"
    EPISODE = "episode"
    LANGUAGE = "language"
    SERVER_TIME = "server_time"


@dataclass(frozen=True)
class XmlSchema:
    """
    Selecteur de schema pour le constructeur d'entites.

    Attributs :
        name : Nom du schema (utilise dans les logs et les erreurs)
        kind : Variante d'entite produite
        root_tag : Balise racine (profondeur 0)
        record_tag : Balise d'enregistrement (profondeur 1)
        fields : Table balise enfant -> champ (profondeur 2)
        scalar_field : Champ recevant le texte propre de l'enregistrement,
            pour les schemas sans balises enfants
    """

    name: str
    kind: RecordKind
    root_tag: str
    record_tag: str
    fields: Mapping[str, EntityField] = field(default_factory=dict)
    scalar_field: Optional[EntityField] = None

    def field_for(self, tag: str) -> Optional[EntityField]:
        """Retourne le champ associe a une balise enfant, None si inconnue."""
        return self.fields.get(tag)


SERIES_LIST = XmlSchema(
    name="Series-list",
    kind=RecordKind.SERIES,
    root_tag="Data",
    record_tag="Series",
    fields=MappingProxyType({
        "id": SeriesField.ID,
        "seriesid": SeriesField.ID,
        "SeriesName": SeriesField.NAME,
        "Overview": SeriesField.OVERVIEW,
        "IMDB_ID": SeriesField.IMDB,
        "zap2it_id": SeriesField.ZAP2IT,
        "Runtime": SeriesField.RUNTIME,
    }),
)

EPISODE_LIST = XmlSchema(
    name="Episode-list",
    kind=RecordKind.EPISODE,
    root_tag="Data",
    record_tag="Episode",
    fields=MappingProxyType({
        "id": EpisodeField.ID,
        "EpisodeName": EpisodeField.NAME,
        "Overview": EpisodeField.OVERVIEW,
        "IMDB_ID": EpisodeField.IMDB,
        "FirstAired": EpisodeField.FIRST_AIRED,
        "EpisodeNumber": EpisodeField.NUMBER,
        "SeasonNumber": EpisodeField.SEASON,
        "seriesid": EpisodeField.SERIES,
    }),
)

LANGUAGE_LIST = XmlSchema(
    name="Language-list",
    kind=RecordKind.LANGUAGE,
    root_tag="Languages",
    record_tag="Language",
    fields=MappingProxyType({
        "name": LanguageField.NAME,
        "abbreviation": LanguageField.ABBREVIATION,
    }),
)

SERVER_TIME = XmlSchema(
    name="Server-time",
    kind=RecordKind.SERVER_TIME,
    root_tag="Items",
    record_tag="Time",
    scalar_field=TimeField.VALUE,
)
