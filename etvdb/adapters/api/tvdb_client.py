"""
Client pour l'API XML publique de TVDB.

Assemble les briques de etvdb: construit les URIs de l'API, recupere les
documents via le fetcher, les materialise avec le constructeur d'entites et
repartit les episodes en saisons.

Toutes les operations sont synchrones et peuvent bloquer plusieurs
secondes le temps du telechargement; une application interactive devrait
les appeler depuis un thread dedie.

Reference API: http://thetvdb.com/wiki/index.php/Programmers_API
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from etvdb.core.entities.media import Episode, LanguageEntry, Series
from etvdb.core.errors import (
    EmptySource,
    InvalidConfiguration,
    MalformedDocument,
    MissingIdentifier,
    TransportError,
)
from etvdb.core.ports.transport import IDocumentFetcher
from etvdb.services.entity_builder import EntityBuilder
from etvdb.services.season_partitioner import SeasonPartitioner
from etvdb.services.xml_schemas import SERVER_TIME

# Table des langues livree avec le package
DEFAULT_LANGUAGES_FILE = Path(__file__).resolve().parents[2] / "data" / "languages.xml"


class TVDBClient:
    """
    Client TVDB pour les series, episodes et donnees d'infrastructure.

    La cle API et la langue des reponses sont propres a chaque instance.

    Attributes:
        BASE_URL: URL de base de l'API XML
        DEFAULT_API_KEY: Cle API de etvdb, utilisee si aucune n'est fournie

    Example:
        with TVDBClient(HttpFetcher(), EntityBuilder(LxmlTokenizer())) as client:
            series = client.series_find("Breaking Bad")[0]
            client.series_populate(series)
            pilot = series.seasons[0][0]
    """

    BASE_URL = "http://thetvdb.com/api"
    DEFAULT_API_KEY = "A34C5A0CAF0F3EFD"

    def __init__(
        self,
        fetcher: IDocumentFetcher,
        builder: EntityBuilder,
        partitioner: Optional[SeasonPartitioner] = None,
        api_key: Optional[str] = None,
        language: str = "en",
        base_url: str = BASE_URL,
        languages_file: Optional[Path] = None,
    ) -> None:
        """
        Initialise le client TVDB.

        Args:
            fetcher: Recuperation des documents (HttpFetcher)
            builder: Constructeur d'entites
            partitioner: Partition des episodes en saisons
            api_key: Cle API TVDB de 16 caracteres, None pour la cle de etvdb
            language: Code langue a deux lettres des reponses
            base_url: URL de base de l'API XML
            languages_file: Fichier XML des langues a lire avant de telecharger

        Raises:
            InvalidConfiguration: Si la cle API ou la langue est mal formee
        """
        if api_key is None:
            api_key = self.DEFAULT_API_KEY
            logger.info("Using ETVDBs own API key.")
        elif len(api_key) == 16:
            logger.info("Using project specific API key.")
        else:
            logger.critical("Invalid API key format.")
            raise InvalidConfiguration("API key must be 16 characters long")

        if len(language) != 2:
            raise InvalidConfiguration(f"Invalid language code: {language!r}")

        self._fetcher = fetcher
        self._builder = builder
        self._partitioner = partitioner or SeasonPartitioner()
        self._api_key = api_key
        self._language = language
        self._base_url = base_url.rstrip("/")
        self._languages_file = languages_file

    @property
    def language(self) -> str:
        """Code langue des reponses."""
        return self._language

    def _api_uri(self, path: str) -> str:
        """URI d'un document protege par la cle API."""
        return f"{self._base_url}/{self._api_key}/{path}"

    def languages_get(
        self, lang_file_path: Optional[Union[str, Path]] = None
    ) -> dict[str, LanguageEntry]:
        """
        Recupere les langues supportees par TVDB.

        Lit d'abord un fichier XML local (chemin fourni, sinon fichier
        configure, sinon fichier livre avec etvdb) et ne telecharge la liste
        que si aucun fichier n'est lisible.

        Args:
            lang_file_path: Chemin optionnel vers un languages.xml personnalise

        Returns:
            Dictionnaire code a deux lettres -> LanguageEntry
        """
        if lang_file_path:
            path = Path(lang_file_path)
        else:
            path = self._languages_file or DEFAULT_LANGUAGES_FILE

        if path.is_file():
            data = path.read_bytes()
            logger.debug(f"Read {path} file with size {len(data)}")
        else:
            logger.debug(f"No language file at {path}, downloading languages")
            data = self._fetcher.fetch(self._api_uri("languages.xml"))

        return self._builder.build_languages(data)

    def language_set(self, languages: dict[str, LanguageEntry], lang: Optional[str]) -> bool:
        """
        Change la langue des reponses.

        Args:
            languages: Table des langues (languages_get)
            lang: Code langue a deux lettres, ex: "en" ou "fr"

        Returns:
            True si la langue est supportee et a ete selectionnee
        """
        if not lang or len(lang) != 2:
            logger.warning("Invalid languages. Falling back to default.")
            return False

        if lang not in languages:
            logger.warning(f"Language {lang} not found. Using default.")
            return False

        self._language = lang
        return True

    def server_time_get(self) -> datetime:
        """
        Recupere l'heure des serveurs TVDB.

        Utile pour mettre a jour des donnees existantes: il est recommande
        de la stocker avec les donnees persistees.

        Returns:
            Heure serveur en UTC

        Raises:
            TransportError: Si le document n'a pas pu etre recupere
            MalformedDocument: Si le document ne contient pas d'heure
        """
        data = self._fetcher.fetch(f"{self._base_url}/Updates.php", {"type": "none"})
        timestamp = self._builder.build_server_time(data)
        if timestamp <= 0:
            raise MalformedDocument(SERVER_TIME.name, "no server time found")

        logger.debug(f"Server Time: {timestamp}")
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)

    def series_find(self, name: str) -> list[Series]:
        """
        Recherche des series par nom.

        Un parametre commencant par "tt" est traite comme un ID IMDB, un
        parametre commencant par "SH" comme un ID zap2it.

        Args:
            name: Nom ou identifiant externe de la serie

        Returns:
            Liste des series trouvees, dans l'ordre de TVDB
        """
        if not name:
            return []

        if name.startswith("tt"):
            logger.debug(f"Searching by IMDB ID: {name}")
            uri = f"{self._base_url}/GetSeriesByRemoteID.php"
            params = {"imdbid": name, "language": self._language}
        elif name.startswith("SH"):
            logger.debug(f"Searching by zap2it ID: {name}")
            uri = f"{self._base_url}/GetSeriesByRemoteID.php"
            params = {"zap2it": name, "language": self._language}
        else:
            logger.debug(f"Searching by Name: {name}")
            uri = f"{self._base_url}/GetSeries.php"
            params = {"seriesname": name, "language": self._language}

        return self._builder.build_series(self._fetcher.fetch(uri, params))

    def series_by_id_get(self, series_id: Union[str, int]) -> Optional[Series]:
        """
        Recupere les donnees de base d'une serie par son ID TVDB.

        Returns:
            La serie (sans episodes), ou None si TVDB ne la connait pas
        """
        uri = self._api_uri(f"series/{series_id}/{self._language}.xml")
        try:
            data = self._fetcher.fetch(uri)
        except TransportError as e:
            if e.status_code == 404:
                return None
            raise

        series_list = self._builder.build_series(data)
        if not series_list:
            return None
        return series_list[0]

    def episodes_get(self, series: Series) -> list[Episode]:
        """
        Recupere tous les episodes d'une serie, sans les structurer en saisons.

        Sauf besoin specifique de la liste plate, preferer series_populate().

        Args:
            series: Serie avec un identifiant

        Returns:
            Episodes dans l'ordre du document, rattaches a la serie

        Raises:
            MissingIdentifier: Si la serie n'a pas d'identifiant
        """
        if not series.id:
            logger.error("Passed series data is not valid.")
            raise MissingIdentifier(series)

        uri = self._api_uri(f"series/{series.id}/all/{self._language}.xml")
        return self._builder.build_episodes(self._fetcher.fetch(uri), series=series)

    def series_populate(self, series: Series) -> Series:
        """
        Telecharge tous les episodes d'une serie et les range par saison.

        Les saisons et specials deja presents sont remplaces.

        Raises:
            MissingIdentifier: Si la serie n'a pas d'identifiant
            EmptySource: Si aucun episode n'a pu etre recupere
            MalformedDocument: Si le document des episodes est invalide
        """
        try:
            episodes = self.episodes_get(series)
        except TransportError as e:
            logger.error(f"Couldn't get series data from server: {e.reason}")
            raise EmptySource(series.id) from e

        return self._partitioner.partition(series, episodes)

    def episode_by_id_get(
        self,
        episode_id: Union[str, int],
        series: Optional[Series] = None,
    ) -> tuple[Optional[Episode], Optional[Series]]:
        """
        Recupere un episode par son ID TVDB.

        L'ID d'episode ne requiert pas de connaitre la serie: si aucune
        serie avec identifiant n'est fournie, elle est recuperee a partir du
        seriesid de l'episode. L'episode n'est pas ajoute aux saisons de la
        serie.

        Returns:
            (episode, serie); episode vaut None si TVDB ne le connait pas
        """
        uri = self._api_uri(f"episodes/{episode_id}/{self._language}.xml")
        episodes = self._fetch_episodes(uri, series)
        if not episodes:
            return None, series

        episode = episodes[0]
        if (series is None or not series.id) and episode.series_id:
            series = self.series_by_id_get(episode.series_id)
            if series is not None:
                episode.link_series(series)

        return episode, series

    def episode_by_number_get(
        self, series: Series, season: int, number: int
    ) -> Optional[Episode]:
        """
        Recupere un episode par numero de saison et numero d'episode.

        Raises:
            MissingIdentifier: Si la serie n'a pas d'identifiant
        """
        if not series.id:
            logger.error("Passed series data is not valid.")
            raise MissingIdentifier(series)

        uri = self._api_uri(
            f"series/{series.id}/default/{season}/{number}/{self._language}.xml"
        )
        episodes = self._fetch_episodes(uri, series)
        return episodes[0] if episodes else None

    def _fetch_episodes(self, uri: str, series: Optional[Series]) -> list[Episode]:
        """Recupere un document d'episodes, liste vide si TVDB repond 404."""
        try:
            data = self._fetcher.fetch(uri)
        except TransportError as e:
            if e.status_code == 404:
                return []
            raise

        return self._builder.build_episodes(data, series=series)

    def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        self._fetcher.close()

    def __enter__(self) -> "TVDBClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
