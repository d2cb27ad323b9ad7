"""
Configuration du logging de etvdb via loguru.

etvdb est d'abord une bibliothèque : ses logs sont désactivés à l'import
(voir etvdb/__init__.py) et l'application hôte décide de les activer.
configure_logging() est utilisée par la CLI et par les applications qui
veulent la configuration par défaut :
- Sortie console : lisible par l'humain, colorée
- Sortie fichier (optionnelle) : sérialisée en JSON, avec rotation, incluant
  le niveau DEBUG où le constructeur d'entités trace chaque champ lu
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Logger du package, désactivé par défaut
PACKAGE_LOGGER = "etvdb"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/etvdb.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging et active les logs de etvdb.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log, None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,
        )

    logger.enable(PACKAGE_LOGGER)
    logger.debug("Logging etvdb configuré", log_file=str(log_file), level=log_level)
