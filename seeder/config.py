"""
Configuration du seeder via pydantic-settings.

Les parametres de l'outil sont charges depuis les variables d'environnement avec
le prefixe SEEDER_, et peuvent etre fournis via un fichier .env.

Les identifiants Supabase sont lus sans prefixe : SUPABASE_URL / SUPABASE_KEY,
avec repli sur VITE_SUPABASE_URL / VITE_SUPABASE_ANON_KEY (cles du .env du front).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Levee quand l'URL ou la cle du store restent vides apres repli."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "definir SUPABASE_URL et SUPABASE_KEY (ou VITE_SUPABASE_URL et "
            f"VITE_SUPABASE_ANON_KEY) avant d'executer ; manquant : {', '.join(missing)}"
        )


@dataclass(frozen=True)
class StoreTarget:
    """
    Cible resolue du store REST.

    Attributes:
        url: URL de base du projet Supabase
        key: Cle API, envoyee en apikey et en Bearer
    """

    url: str
    key: str

    @property
    def masked_key(self) -> str:
        """Cle masquee pour l'affichage (jamais la cle complete)."""
        if len(self.key) <= 8:
            return "****"
        return f"{self.key[:4]}...{self.key[-4:]}"


class Settings(BaseSettings):
    """Parametres du seeder, construits une fois au demarrage.

    Exemple : SEEDER_REQUEST_TIMEOUT=5 SEEDER_LOG_LEVEL=DEBUG

    L'objet est fige : il est passe tel quel au client REST.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Identifiants du store (sans prefixe)
    supabase_url: Optional[str] = Field(default=None, validation_alias="SUPABASE_URL")
    supabase_key: Optional[str] = Field(default=None, validation_alias="SUPABASE_KEY")
    vite_supabase_url: Optional[str] = Field(
        default=None, validation_alias="VITE_SUPABASE_URL"
    )
    vite_supabase_anon_key: Optional[str] = Field(
        default=None, validation_alias="VITE_SUPABASE_ANON_KEY"
    )

    # Requetes
    request_timeout: float = Field(default=20.0, gt=0)
    conflict_column: str = Field(default="tmdb_id", min_length=1)

    # Donnees (None -> fixture embarquee)
    catalog_file: Optional[Path] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    @field_validator("catalog_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home ; une valeur vide vaut None."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    def resolve_target(self) -> StoreTarget:
        """
        Resout l'URL et la cle du store, avec repli valeur par valeur.

        Une variable primaire absente ou vide est remplacee par son alias VITE_.

        Returns:
            StoreTarget avec URL et cle non vides

        Raises:
            ConfigurationError: Si l'une des deux valeurs reste vide
        """
        url = (self.supabase_url or "").strip() or (self.vite_supabase_url or "").strip()
        key = (self.supabase_key or "").strip() or (self.vite_supabase_anon_key or "").strip()

        missing = []
        if not url:
            missing.append("SUPABASE_URL")
        if not key:
            missing.append("SUPABASE_KEY")
        if missing:
            raise ConfigurationError(missing)

        return StoreTarget(url=url, key=key)
