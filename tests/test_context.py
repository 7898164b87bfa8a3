"""Tests pour ScriptContext et les fonctions de module."""

import os
from unittest.mock import MagicMock, patch

import pytest

from script_python_utils import api
from script_python_utils.commands import CommandOptions
from script_python_utils.context import ScriptContext
from script_python_utils.logging import (
    AnsiCallFormatter,
    ConsoleLogger,
    FileLogger,
)
from script_python_utils.logging.base import Logger


RUN_PATH = "script_python_utils.commands.runner.subprocess.run"


class TestScriptContext:
    """Tests pour ScriptContext."""

    def setup_method(self):
        """Initialise un contexte avec un logger mocké."""
        self.mock_logger = MagicMock(spec=Logger)
        self.ctx = ScriptContext(
            logger=self.mock_logger,
            command_defaults=CommandOptions(stdio="pipe"),
        )

    def test_cd_partage_par_commandes_et_fichiers(self, tmp_path):
        """Test que cd s'applique aux fichiers et aux commandes."""
        (tmp_path / "build").mkdir()
        process_cwd = os.getcwd()

        self.ctx.cd([str(tmp_path), "build"])
        self.ctx.write("out.txt", "x")
        result = self.ctx.x("ls")

        assert (tmp_path / "build" / "out.txt").exists()
        assert result.stdout == "out.txt\n"
        assert self.ctx.base_dir == str(tmp_path / "build")
        assert os.getcwd() == process_cwd

    def test_cd_du_gestionnaire_suivi_par_les_commandes(self, tmp_path):
        """Test que files.cd() s'applique aussi aux commandes."""
        (tmp_path / "build").mkdir()
        (tmp_path / "build" / "out.txt").write_text("x")

        self.ctx.files.cd(str(tmp_path / "build"))
        result = self.ctx.x("ls")

        assert result.stdout == "out.txt\n"
        assert self.ctx.runner.base_dir == str(tmp_path / "build")

    def test_x_options_en_deuxieme_position(self):
        """Test de x(ligne, options) avec un vrai shell."""
        result = self.ctx.x("printf hi", {"stdio": "pipe"})
        assert result.stdout == "hi"

    def test_cp_puis_exec(self, tmp_path):
        """Test d'un enchaînement fichiers puis commande."""
        (tmp_path / "a.txt").write_text("bonjour")
        self.ctx.mkdirp([str(tmp_path), "dist"])
        dest = self.ctx.cp(str(tmp_path / "a.txt"), [str(tmp_path), "dist"])

        result = self.ctx.x("cat", [dest])

        assert result.stdout == "bonjour"

    def test_logger_partage(self, tmp_path):
        """Test que commandes et fichiers loguent au même endroit."""
        self.ctx.exists(str(tmp_path))
        self.ctx.x("true")
        messages = [c[0][0] for c in self.mock_logger.log_info.call_args_list]
        assert messages[0].startswith("exists ")
        assert messages[1].endswith("$ true")

    def test_join(self):
        """Test du raccourci join."""
        assert ScriptContext.join(["a", "b"]) == os.path.join("a", "b")

    def test_from_config(self, tmp_path):
        """Test de la construction depuis un fichier de réglages."""
        log_file = tmp_path / "logs" / "script.log"
        config_file = tmp_path / "script.toml"
        config_file.write_text(
            f'[logging]\nfile = "{log_file}"\ncolor = true\n'
            f'[commands]\nstdio = "pipe"\n'
            f'[paths]\nbase_dir = "{tmp_path}"\n'
            f'[json]\nindent = 4\n'
        )

        ctx = ScriptContext.from_config(config_file)

        assert isinstance(ctx.logger, FileLogger)
        assert isinstance(ctx.files._formatter, AnsiCallFormatter)
        assert ctx.runner.defaults.stdio == "pipe"
        assert ctx.base_dir == str(tmp_path)
        assert ctx.files.json_indent == 4

        ctx.mkdirp("sub")
        assert (tmp_path / "sub").is_dir()
        assert "mkdirp" in log_file.read_text(encoding="utf-8")

    def test_from_settings_console(self):
        """Test du logger console sans fichier de log."""
        from script_python_utils.config import ScriptSettings

        ctx = ScriptContext.from_settings(ScriptSettings())
        assert isinstance(ctx.logger, ConsoleLogger)


class TestApi:
    """Tests pour les fonctions de module."""

    def setup_method(self):
        """Installe un contexte par défaut sans log."""
        self.ctx = ScriptContext(
            command_defaults=CommandOptions(stdio="pipe")
        )
        api.set_default_context(self.ctx)

    def teardown_method(self):
        """Réinitialise le contexte par défaut."""
        api.set_default_context(None)

    def test_contexte_par_defaut_cree_a_la_demande(self):
        """Test de la création paresseuse du contexte par défaut."""
        api.set_default_context(None)
        ctx = api.get_default_context()
        assert isinstance(ctx.logger, ConsoleLogger)
        assert api.get_default_context() is ctx

    def test_fonctions_fichiers(self, tmp_path):
        """Test d'un scénario de script complet."""
        api.cd(str(tmp_path))
        api.write_json(["config", "app.json"], {"version": "1.2.0"})
        version = api.read_json(["config", "app.json"])["version"]
        api.mkdirp(["dist", version])
        api.write("notes.txt", "v1.2.0")
        api.cp("notes.txt", ["dist", version])
        api.mv("notes.txt", "NOTES.txt")

        assert api.exists(["dist", "1.2.0", "notes.txt"])
        assert api.ls(".") == ["NOTES.txt", "config", "dist"]
        assert api.globby("**/*.txt") == [
            "NOTES.txt", "dist/1.2.0/notes.txt",
        ]
        assert api.read("NOTES.txt", encoding="utf-8") == "v1.2.0"
        assert api.cwd() == str(tmp_path)

        api.chmod("NOTES.txt", 0o600)
        api.empty_dir("dist")
        assert api.ls("dist") == []
        api.rm("dist", "config", "absent")
        assert api.ls(".") == ["NOTES.txt"]

    def test_tmp_dir(self):
        """Test du répertoire temporaire."""
        path = api.tmp_dir()
        try:
            assert os.path.isdir(path)
        finally:
            api.rm(path)

    @patch(RUN_PATH)
    def test_x_deux_conventions(self, mock_run):
        """Test des deux conventions d'appel de x()."""
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")

        api.x("echo $PATH | tr : '\\n'")
        assert mock_run.call_args[1]["shell"] is True

        api.x("echo", ["$PATH"])
        assert mock_run.call_args[0][0] == ["echo", "$PATH"]

        api.x("make", {"timeout": 60})
        assert mock_run.call_args[0][0] == "make"
        assert mock_run.call_args[1]["timeout"] == 60

        api.run_shell("true")
        api.run_exec("true")
        assert mock_run.call_count == 5

    def test_x_reel(self):
        """Test de x() avec un vrai processus."""
        assert api.x("printf", ["%s", "a b"]).stdout == "a b"

    def test_x_args_chaine(self):
        """Test que x(cmd, 'chaine') est refusé."""
        with pytest.raises(TypeError):
            api.x("ls", "-la")

    def test_env_et_home(self):
        """Test des alias env et home."""
        assert api.env is os.environ
        assert api.home == os.path.expanduser("~")
