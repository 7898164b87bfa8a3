"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from script_python_utils.errors.exceptions import ConfigurationError


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle pour
                validation. Si fourni, retourne une instance
                du modèle. Si None, retourne un dict brut.

        Returns:
            Dictionnaire de configuration ou instance du schema
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers TOML ou JSON.

    Le format est détecté par l'extension du fichier. Un modèle
    Pydantic BaseModel peut valider le contenu.
    """

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Charge un fichier de configuration TOML ou JSON.

        Args:
            config_path: Chemin vers le fichier de configuration
            schema: Classe Pydantic BaseModel optionnelle

        Returns:
            Dictionnaire de configuration ou instance du schema

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si l'extension n'est pas supportée
            TypeError: Si schema n'est pas un BaseModel
            ConfigurationError: Si le contenu ne respecte pas le schema
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                raw_config = tomllib.load(f)
        elif suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                raw_config = json.load(f)
        else:
            raise ValueError(
                f"Extension non supportée: {suffix}. "
                "Utilisez .toml ou .json"
            )

        if schema is None:
            return raw_config

        return validate_with_schema(raw_config, schema, source=str(path))


def validate_with_schema(
    data: Dict[str, Any], schema: type, source: str = "<dict>"
) -> Any:
    """Valide un dict via un modèle Pydantic.

    Args:
        data: Dictionnaire brut à valider.
        schema: Classe Pydantic BaseModel.
        source: Origine des données, reprise dans le message d'erreur.

    Returns:
        Instance du modèle validé.

    Raises:
        TypeError: Si schema n'est pas un BaseModel.
        ConfigurationError: Si la validation échoue.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(
            f"Le schema doit être une sous-classe de "
            f"pydantic.BaseModel, reçu: {schema}"
        )

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration invalide ({source}): {e}"
        ) from e
