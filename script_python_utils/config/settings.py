"""Réglages des scripts, validés par Pydantic.

Exemple de fichier TOML :

    [logging]
    level = "DEBUG"
    color = true

    [commands]
    stdio = "pipe"
    timeout = 600

    [paths]
    base_dir = "~/projets/app"

Les mêmes sections peuvent être regroupées sous une table
``[script]`` pour partager un fichier avec d'autres outils.
"""

from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from script_python_utils.commands.options import CommandOptions
from script_python_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    validate_with_schema,
)


class LoggingSettings(BaseModel):
    """Section ``logging``."""

    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    color: bool = False

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Niveau de log inconnu : {value}")
        return level


class CommandSettings(BaseModel):
    """Section ``commands`` : options par défaut des commandes."""

    model_config = ConfigDict(extra="forbid")

    stdio: Literal["inherit", "pipe"] = "inherit"
    shell: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)
    reject: bool = True

    def to_options(self) -> CommandOptions:
        """Convertit la section en CommandOptions."""
        return CommandOptions(
            stdio=self.stdio,
            shell=self.shell,
            timeout=self.timeout,
            reject=self.reject,
        )


class PathSettings(BaseModel):
    """Section ``paths``."""

    model_config = ConfigDict(extra="forbid")

    base_dir: Optional[str] = None

    @field_validator("base_dir")
    @classmethod
    def _expand_base_dir(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return str(Path(value).expanduser())


class JsonSettings(BaseModel):
    """Section ``json``."""

    model_config = ConfigDict(extra="forbid")

    indent: Optional[int] = Field(default=2, ge=0)


class ScriptSettings(BaseModel):
    """Réglages complets d'un ScriptContext."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    commands: CommandSettings = Field(default_factory=CommandSettings)
    paths: PathSettings = Field(default_factory=PathSettings)
    json_: JsonSettings = Field(default_factory=JsonSettings, alias="json")

    def logging_config(self) -> Dict[str, Any]:
        """Retourne la section logging au format attendu par les loggers."""
        return {"logging": self.logging.model_dump()}


def load_settings(
    config_path: Union[str, Path],
    config_loader: Optional[ConfigLoader] = None,
) -> ScriptSettings:
    """Charge et valide les réglages d'un fichier TOML ou JSON.

    Args:
        config_path: Chemin du fichier.
        config_loader: Chargeur injectable (défaut: FileConfigLoader).

    Returns:
        Réglages validés.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ConfigurationError: Si le contenu est invalide.
    """
    loader = config_loader or FileConfigLoader()
    raw = loader.load(config_path)
    if isinstance(raw, dict) and isinstance(raw.get("script"), dict):
        raw = raw["script"]
    return validate_with_schema(raw, ScriptSettings, source=str(config_path))
