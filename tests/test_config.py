"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from script_python_utils.commands import CommandOptions
from script_python_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    ScriptSettings,
    load_settings,
)
from script_python_utils.errors import ConfigurationError


class _Schema(BaseModel):
    name: str
    count: int = 0


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        """Initialise le loader avant chaque test."""
        self.loader = FileConfigLoader()

    def test_load_json(self, tmp_path):
        """Test du chargement d'un fichier JSON."""
        config_file = tmp_path / "config.json"
        config_data = {"key": "value", "nested": {"a": 1}}
        config_file.write_text(json.dumps(config_data))

        assert self.loader.load(config_file) == config_data

    def test_load_toml(self, tmp_path):
        """Test du chargement d'un fichier TOML."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[section]\nkey = "value"\n')

        result = self.loader.load(config_file)

        assert result["section"]["key"] == "value"

    def test_file_not_found(self):
        """Test avec fichier inexistant."""
        with pytest.raises(FileNotFoundError):
            self.loader.load("/nonexistent/config.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test avec extension non supportée."""
        config_file = tmp_path / "config.xml"
        config_file.write_text("<config></config>")

        with pytest.raises(ValueError, match="Extension non supportée"):
            self.loader.load(config_file)

    def test_schema_valide(self, tmp_path):
        """Test de la validation par un modèle Pydantic."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"name": "app", "count": 3}')

        result = self.loader.load(config_file, schema=_Schema)

        assert result == _Schema(name="app", count=3)

    def test_schema_invalide(self, tmp_path):
        """Test qu'un contenu invalide lève ConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"count": "beaucoup"}')

        with pytest.raises(ConfigurationError, match="config.json"):
            self.loader.load(config_file, schema=_Schema)

    def test_schema_pas_un_base_model(self, tmp_path):
        """Test qu'un schema non Pydantic lève TypeError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{}")

        with pytest.raises(TypeError):
            self.loader.load(config_file, schema=dict)


class TestScriptSettings:
    """Tests pour ScriptSettings et load_settings."""

    def test_defauts(self):
        """Test des réglages par défaut."""
        settings = ScriptSettings()
        assert settings.logging.level == "INFO"
        assert settings.commands.to_options() == CommandOptions()
        assert settings.paths.base_dir is None
        assert settings.json_.indent == 2

    def test_load_toml_complet(self, tmp_path):
        """Test du chargement d'un fichier TOML complet."""
        config_file = tmp_path / "script.toml"
        config_file.write_text(
            '[logging]\nlevel = "debug"\ncolor = true\n'
            '[commands]\nstdio = "pipe"\ntimeout = 30\nreject = false\n'
            '[paths]\nbase_dir = "~/projet"\n'
            '[json]\nindent = 4\n'
        )

        settings = load_settings(config_file)

        assert settings.logging.level == "DEBUG"
        assert settings.logging.color is True
        options = settings.commands.to_options()
        assert options.stdio == "pipe"
        assert options.timeout == 30
        assert options.reject is False
        assert not settings.paths.base_dir.startswith("~")
        assert settings.json_.indent == 4

    def test_section_script(self, tmp_path):
        """Test d'un fichier partagé avec une table [script]."""
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text(
            '[project]\nname = "x"\n'
            '[script.commands]\nstdio = "pipe"\n'
        )
        settings = load_settings(config_file)
        assert settings.commands.stdio == "pipe"

    def test_stdio_invalide(self, tmp_path):
        """Test qu'une valeur invalide lève ConfigurationError."""
        config_file = tmp_path / "script.json"
        config_file.write_text('{"commands": {"stdio": "ignore"}}')
        with pytest.raises(ConfigurationError):
            load_settings(config_file)

    def test_cle_inconnue(self, tmp_path):
        """Test qu'une clé inconnue lève ConfigurationError."""
        config_file = tmp_path / "script.json"
        config_file.write_text('{"logging": {"niveau": "INFO"}}')
        with pytest.raises(ConfigurationError):
            load_settings(config_file)

    def test_niveau_inconnu(self, tmp_path):
        """Test qu'un niveau de log inconnu lève ConfigurationError."""
        config_file = tmp_path / "script.json"
        config_file.write_text('{"logging": {"level": "BAVARD"}}')
        with pytest.raises(ConfigurationError):
            load_settings(config_file)

    def test_loader_injecte(self):
        """Test de l'injection d'un ConfigLoader."""
        loader = MagicMock(spec=ConfigLoader)
        loader.load.return_value = {"json": {"indent": 0}}
        settings = load_settings("script.toml", config_loader=loader)
        loader.load.assert_called_once_with("script.toml")
        assert settings.json_.indent == 0

    def test_logging_config(self):
        """Test du format attendu par les loggers."""
        settings = ScriptSettings()
        assert settings.logging_config()["logging"]["level"] == "INFO"
