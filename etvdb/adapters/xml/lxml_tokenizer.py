"""
Tokenizer XML evenementiel base sur l'interface "target" de lxml.

Implemente IXmlTokenizer : lxml appelle start/end/data sur un objet cible
au fil du parsing, sans jamais construire d'arbre. Ce module traduit ces
appels en XmlEvent et normalise le texte :
- les morceaux consecutifs d'un meme noeud texte sont regroupes
- le texte est debarrasse des espaces en debut et fin
- un texte vide apres nettoyage n'est pas emis
"""

from loguru import logger
from lxml import etree

from etvdb.core.errors import MalformedDocument
from etvdb.core.ports.xml_tokenizer import IXmlTokenizer, XmlEvent, XmlEventHandler


def _local_name(tag: str) -> str:
    """Retire l'eventuel espace de noms "{uri}" d'un nom de balise."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class _EventTarget:
    """Cible lxml qui relaie les evenements vers un handler."""

    def __init__(self, handler: XmlEventHandler) -> None:
        self._handler = handler
        self._chunks: list[str] = []

    def _flush_text(self) -> None:
        if not self._chunks:
            return
        text = "".join(self._chunks).strip()
        self._chunks.clear()
        if text:
            self._handler(XmlEvent.DATA, text)

    def start(self, tag: str, attrib: dict) -> None:
        self._flush_text()
        self._handler(XmlEvent.OPEN, _local_name(tag))

    def end(self, tag: str) -> None:
        self._flush_text()
        self._handler(XmlEvent.CLOSE, _local_name(tag))

    def data(self, data: str) -> None:
        self._chunks.append(data)

    def close(self) -> None:
        self._flush_text()


class LxmlTokenizer(IXmlTokenizer):
    """
    Tokenizer XML utilisant le parser lxml en mode cible.

    Les entites externes et l'acces reseau sont desactives : seul le
    contenu du document est lu.

    Example:
        tokenizer = LxmlTokenizer()
        tokenizer.parse(b"<Data><Series/></Data>", handler)
    """

    def parse(self, data: bytes, handler: XmlEventHandler) -> None:
        """
        Parse un document complet et emet les evenements vers handler.

        Args:
            data: Document XML complet
            handler: Callback appele pour chaque evenement

        Raises:
            MalformedDocument: Si lxml rejette le document
        """
        if not data or not data.strip():
            raise MalformedDocument("xml", "empty document")

        parser = etree.XMLParser(
            target=_EventTarget(handler),
            resolve_entities=False,
            no_network=True,
        )
        try:
            parser.feed(data)
            parser.close()
        except etree.XMLSyntaxError as e:
            logger.debug(f"lxml a rejete le document: {e}")
            raise MalformedDocument("xml", str(e)) from e
