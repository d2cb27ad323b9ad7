"""
Constructeur d'entites en flux a partir des evenements XML.

Consomme les evenements du tokenizer (ouvrante, fermante, texte) en une
seule passe et construit les entites au fil de l'eau, sans arbre DOM.
Une petite machine a etats par parsing suit:
- depth: profondeur relative a la racine (0 racine, 1 liste, 2 enregistrement)
- record_index: nombre d'enregistrements fermes
- active_field: champ auquel appartient le prochain texte (None = inconnu)

Chaque entite est creee vide des sa balise ouvrante, ajoutee a la sortie,
puis remplie champ par champ. Les balises inconnues sont ignorees et les
champs absents gardent leur valeur par defaut.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from loguru import logger

from etvdb.adapters.xml.html_entities import decode_html_entities
from etvdb.core.entities.media import Episode, LanguageEntry, Series
from etvdb.core.errors import MalformedDocument
from etvdb.core.ports.xml_tokenizer import IXmlTokenizer, XmlEvent
from etvdb.services.xml_schemas import (
    EPISODE_LIST,
    LANGUAGE_LIST,
    SERIES_LIST,
    SERVER_TIME,
    EntityField,
    FieldKind,
    LanguageField,
    RecordKind,
    XmlSchema,
)

# Equivalent de strtol: prefixe decimal, le reste est ignore
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> int:
    """Convertit le prefixe decimal de text en entier, 0 si absent."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class ParserState:
    """Etat d'un parsing, propre a chaque appel."""

    depth: int = 0
    record_index: int = 0
    active_field: Optional[EntityField] = None


class _RecordSink(ABC):
    """Destination des enregistrements d'un parsing."""

    @abstractmethod
    def open_record(self, index: int) -> None:
        ...

    @abstractmethod
    def assign(self, field: EntityField, text: str) -> None:
        ...

    @abstractmethod
    def result(self) -> Any:
        ...


class _EntitySink(_RecordSink):
    """
    Liste ordonnee d'entites (Series ou Episode).

    Garde une reference directe vers la derniere entite ajoutee plutot que
    de la retrouver par index dans la liste.
    """

    def __init__(
        self,
        factory: Callable[[], Union[Series, Episode]],
        decode: Callable[[str], str],
        series: Optional[Series] = None,
    ) -> None:
        self._factory = factory
        self._decode = decode
        self._series = series
        self._entities: list = []
        self._current: Optional[Union[Series, Episode]] = None

    def open_record(self, index: int) -> None:
        self._current = self._factory()
        self._entities.append(self._current)

    def assign(self, field: EntityField, text: str) -> None:
        entity = self._current
        if entity is None:
            return

        if field.kind is FieldKind.SERIES_REF:
            self._link_series(entity, text)
            return

        if field.kind is FieldKind.INTEGER:
            value: Any = parse_int(text)
        elif field.kind is FieldKind.FREE_TEXT:
            value = self._decode(text)
        else:
            value = text

        setattr(entity, field.attribute, value)
        if field.attribute == "overview":
            logger.debug(f"Found {field.name}: {len(value)} chars")
        else:
            logger.debug(f"Found {field.name}: {value}")

    def _link_series(self, episode: Episode, text: str) -> None:
        if self._series is not None and self._series.id:
            logger.debug("Found Series ID, but using existing one.")
            episode.link_series(self._series)
        else:
            episode.series_id = text
            logger.debug(f"Found Series ID: {text}")

    def result(self) -> list:
        return self._entities


@dataclass(frozen=True)
class _PartialLanguage:
    """Enregistrement de langue dont un seul champ est connu."""

    field: Optional[LanguageField] = None
    value: str = ""


class _LanguageSink(_RecordSink):
    """
    Table des langues, indexee par code a deux lettres.

    Le code n'est connu qu'a l'arrivee du champ abbreviation, et TVDB peut
    emettre name et abbreviation dans n'importe quel ordre. Chaque
    enregistrement est donc d'abord range sous une cle provisoire (son index),
    puis deplace sous son code des que les deux champs sont connus.
    """

    def __init__(self, decode: Callable[[str], str]) -> None:
        self._decode = decode
        self._table: dict[str, Union[_PartialLanguage, LanguageEntry]] = {}
        self._key: Optional[str] = None

    def open_record(self, index: int) -> None:
        self._key = str(index)
        self._table[self._key] = _PartialLanguage()

    def assign(self, field: EntityField, text: str) -> None:
        entry = self._table.get(self._key) if self._key is not None else None
        if entry is None:
            raise MalformedDocument(
                LANGUAGE_LIST.name,
                f"{field.attribute} found outside of a Language record",
            )

        if field is LanguageField.NAME:
            text = self._decode(text)
            logger.debug(f"Found Name: {text}")
        else:
            logger.debug(f"Found Abbreviation: {text}")

        if isinstance(entry, LanguageEntry):
            self._update_complete(entry, field, text)
        elif entry.field is None or entry.field is field:
            self._table[self._key] = _PartialLanguage(field, text)
        elif field is LanguageField.NAME:
            self._complete(abbreviation=entry.value, name=text)
        else:
            self._complete(abbreviation=text, name=entry.value)

    def _complete(self, abbreviation: str, name: str) -> None:
        del self._table[self._key]
        self._store(LanguageEntry(abbreviation=abbreviation, name=name))

    def _update_complete(
        self, entry: LanguageEntry, field: EntityField, text: str
    ) -> None:
        if field is LanguageField.NAME:
            self._table[self._key] = replace(entry, name=text)
        else:
            del self._table[self._key]
            self._store(replace(entry, abbreviation=text))

    def _store(self, entry: LanguageEntry) -> None:
        if entry.abbreviation in self._table:
            logger.warning(f"Duplicate language {entry.abbreviation}, keeping the last one")
        self._table[entry.abbreviation] = entry
        self._key = entry.abbreviation

    def result(self) -> dict[str, LanguageEntry]:
        languages = {}
        for key, entry in self._table.items():
            if isinstance(entry, LanguageEntry):
                languages[key] = entry
            else:
                logger.warning(f"Dropping incomplete language record {key}")
        return languages


class _ScalarSink(_RecordSink):
    """Valeur entiere unique (heure serveur)."""

    def __init__(self) -> None:
        self._value = 0

    def open_record(self, index: int) -> None:
        pass

    def assign(self, field: EntityField, text: str) -> None:
        self._value = parse_int(text)
        logger.debug(f"Found {field.name}: {self._value}")

    def result(self) -> int:
        return self._value


class _ParseRun:
    """Machine a etats d'un parsing: relie les evenements XML au sink."""

    def __init__(self, schema: XmlSchema, sink: _RecordSink) -> None:
        self.schema = schema
        self.sink = sink
        self.state = ParserState()

    def handle(self, event: XmlEvent, content: str) -> None:
        if event is XmlEvent.OPEN:
            self._open(content)
        elif event is XmlEvent.CLOSE:
            self._close(content)
        elif self.state.depth == 2 and self.state.active_field is not None:
            self.sink.assign(self.state.active_field, content)

    def _open(self, tag: str) -> None:
        state = self.state
        if state.depth == 0:
            if tag == self.schema.root_tag:
                state.depth = 1
        elif state.depth == 1:
            if tag == self.schema.record_tag:
                state.depth = 2
                state.active_field = self.schema.scalar_field
                self.sink.open_record(state.record_index)
        elif state.depth == 2:
            state.active_field = self.schema.field_for(tag)

    def _close(self, tag: str) -> None:
        state = self.state
        if tag == self.schema.record_tag and state.depth == 2:
            state.record_index += 1
            state.depth = 1
            state.active_field = None
        elif tag == self.schema.root_tag and state.depth == 1:
            state.depth = 0


class EntityBuilder:
    """
    Construit des entites TVDB a partir d'un document XML complet.

    Chaque appel possede son propre etat: une instance peut etre partagee
    entre threads tant que le tokenizer l'est aussi.

    Example:
        builder = EntityBuilder(LxmlTokenizer())
        series_list = builder.build_series(xml_bytes)
        languages = builder.build_languages(languages_xml)
    """

    def __init__(
        self,
        tokenizer: IXmlTokenizer,
        decode: Callable[[str], str] = decode_html_entities,
    ) -> None:
        """
        Initialise le constructeur.

        Args:
            tokenizer: Tokenizer XML evenementiel
            decode: Decodeur d'entites HTML pour les champs texte libres
        """
        self._tokenizer = tokenizer
        self._decode = decode

    def build(
        self,
        data: bytes,
        schema: XmlSchema,
        series: Optional[Series] = None,
    ) -> Any:
        """
        Parse un document selon un schema.

        Args:
            data: Document XML complet
            schema: Selecteur de schema (SERIES_LIST, EPISODE_LIST, ...)
            series: Serie de contexte a laquelle rattacher les episodes

        Returns:
            list[Series] ou list[Episode] dans l'ordre du document,
            dict[str, LanguageEntry] pour les langues, int pour l'heure serveur

        Raises:
            MalformedDocument: Si le document est rejete; aucune entite
                partielle n'est retournee
        """
        run = _ParseRun(schema, self._make_sink(schema, series))
        try:
            self._tokenizer.parse(data, run.handle)
        except MalformedDocument as e:
            logger.critical(
                f"Parsing of {schema.name} data failed: {e.reason}. "
                "If it happens again, please report a bug."
            )
            if e.schema != schema.name:
                raise MalformedDocument(schema.name, e.reason) from e
            raise
        return run.sink.result()

    def _make_sink(self, schema: XmlSchema, series: Optional[Series]) -> _RecordSink:
        if schema.kind is RecordKind.SERIES:
            return _EntitySink(Series, self._decode)
        if schema.kind is RecordKind.EPISODE:
            return _EntitySink(Episode, self._decode, series=series)
        if schema.kind is RecordKind.LANGUAGE:
            return _LanguageSink(self._decode)
        return _ScalarSink()

    def build_series(self, data: bytes) -> list[Series]:
        """Parse une liste de series."""
        return self.build(data, SERIES_LIST)

    def build_episodes(self, data: bytes, series: Optional[Series] = None) -> list[Episode]:
        """Parse une liste d'episodes, rattaches a series si fournie."""
        return self.build(data, EPISODE_LIST, series=series)

    def build_languages(self, data: bytes) -> dict[str, LanguageEntry]:
        """Parse la table des langues supportees."""
        return self.build(data, LANGUAGE_LIST)

    def build_server_time(self, data: bytes) -> int:
        """Parse l'heure serveur (secondes depuis l'epoch)."""
        return self.build(data, SERVER_TIME)
