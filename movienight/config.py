"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIENIGHT_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movienight.utils.constants import DEFAULT_MAX_RESULTS

# Trouver le fichier .env à la racine du projet (parent de movienight/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIENIGHT_.
    Exemple : MOVIENIGHT_DEFAULT_MAX_RESULTS=3
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIENIGHT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Recommandation
    default_max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movienight.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules (debug -> DEBUG)."""
        return str(v).strip().upper()
