"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports de transport :
- IDocumentFetcher : Recuperation synchrone d'un document par URI

Ports de parsing :
- IXmlTokenizer : Tokenization XML evenementielle (ouvrante, fermante, texte)
- XmlEvent : Types d'evenements emis par le tokenizer
"""

from etvdb.core.ports.transport import IDocumentFetcher
from etvdb.core.ports.xml_tokenizer import IXmlTokenizer, XmlEvent, XmlEventHandler

__all__ = [
    "IDocumentFetcher",
    "IXmlTokenizer",
    "XmlEvent",
    "XmlEventHandler",
]
