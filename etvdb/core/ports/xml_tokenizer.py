"""
Interface port pour le tokenizer XML evenementiel.

Le tokenizer emet, de maniere synchrone et dans l'ordre du document, un
evenement par balise ouvrante, balise fermante et noeud texte. Les noms de
balise sont transmis nus (sans '<', '>' ni attributs).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable


class XmlEvent(Enum):
    """Type d'evenement emis par le tokenizer.

    Valeurs:
        OPEN: Balise ouvrante, le contenu est le nom de la balise
        CLOSE: Balise fermante, le contenu est le nom de la balise
        DATA: Noeud texte, le contenu est le texte decode par le parser XML
    """

    OPEN = "open"
    CLOSE = "close"
    DATA = "data"


XmlEventHandler = Callable[[XmlEvent, str], None]


class IXmlTokenizer(ABC):
    """
    Interface de tokenization XML sans construction d'arbre.
    """

    @abstractmethod
    def parse(self, data: bytes, handler: XmlEventHandler) -> None:
        """
        Parcourt un document et appelle handler pour chaque evenement.

        Les exceptions levees par handler interrompent le parsing et sont
        propagees telles quelles.

        Args :
            data : Document XML complet
            handler : Callback appele avec (type d'evenement, contenu)

        Leve :
            MalformedDocument : le document n'est pas du XML bien forme
        """
        ...
