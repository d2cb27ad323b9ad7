"""
Configuration de etvdb via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ETVDB_,
et peut optionnellement être fournie via un fichier .env.

La clé API est optionnelle - etvdb utilise sa propre clé si aucune n'est fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de etvdb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de etvdb avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ETVDB_.
    Exemple : ETVDB_LANGUAGE=fr

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="ETVDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TVDB (clé de projet OPTIONNELLE - clé etvdb utilisée sinon)
    api_key: Optional[str] = Field(default=None)
    language: str = Field(default="en")
    base_url: str = Field(default="http://thetvdb.com/api")

    # Transport (durée maximale d'une requête, jamais relancée)
    request_timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)

    # Fichier XML des langues (fichier livré avec etvdb si non défini)
    languages_file: Optional[Path] = Field(default=None)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/etvdb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("api_key")
    @classmethod
    def check_api_key(cls, v: Optional[str]) -> Optional[str]:
        """Vérifie le format de la clé API TVDB (16 caractères)."""
        if v is not None and len(v) != 16:
            raise ValueError("La clé API TVDB doit faire 16 caractères")
        return v

    @field_validator("language")
    @classmethod
    def check_language(cls, v: str) -> str:
        """Vérifie le code langue (2 caractères) et le passe en minuscules."""
        if len(v) != 2:
            raise ValueError("Le code langue doit faire 2 caractères (ex: en, fr)")
        return v.lower()

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        """Retire le / final de l'URL de base."""
        return v.rstrip("/")

    @field_validator("languages_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @property
    def has_project_api_key(self) -> bool:
        """Vérifie si une clé API de projet est configurée."""
        return self.api_key is not None
