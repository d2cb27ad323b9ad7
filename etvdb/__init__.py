"""
etvdb - Bibliotheque cliente pour l'API XML publique de TheTVDB.

Ce package recupere des documents XML par HTTP et les materialise en
entites typees (series, episodes, langues, heure serveur) sans jamais
construire d'arbre DOM complet.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, erreurs, ports)
- services/ : Couche application (constructeur d'entites, partition en saisons)
- adapters/ : Couche infrastructure (HTTP, tokenizer XML, CLI)

Les logs de etvdb sont desactives a l'import, comme pour toute bibliotheque
utilisant loguru : configure_logging() ou logger.enable("etvdb") les active.
"""

from loguru import logger

__version__ = "0.1.0"

logger.disable("etvdb")
