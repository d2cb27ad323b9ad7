"""
Adaptateurs XML.

- LxmlTokenizer : implementation de IXmlTokenizer via lxml
- decode_html_entities : decodeur d'entites HTML pour les champs texte libres
"""

from etvdb.adapters.xml.html_entities import decode_html_entities
from etvdb.adapters.xml.lxml_tokenizer import LxmlTokenizer

__all__ = [
    "LxmlTokenizer",
    "decode_html_entities",
]
