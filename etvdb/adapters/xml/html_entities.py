"""
Decodage des entites HTML dans les champs texte libres.

TVDB encode certains caracteres des noms et resumes en entites HTML
(ex: "&amp;quot;" dans le XML, soit "&quot;" apres parsing). Ce decodage
n'est applique qu'aux champs lisibles (nom, resume), jamais aux
identifiants.
"""

import html


def decode_html_entities(text: str) -> str:
    """Retourne une copie de text avec les entites HTML remplacees."""
    return html.unescape(text)
