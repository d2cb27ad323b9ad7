"""
Couche domaine (core).

Contient les entites metier, la taxonomie d'erreurs et les ports (interfaces
abstraites). Cette couche n'a AUCUNE dependance vers l'infrastructure
(httpx, lxml, frameworks).

Sous-packages :
- entities/ : Entites metier (Series, Episode, LanguageEntry)
- ports/ : Interfaces abstraites des collaborateurs externes
"""
