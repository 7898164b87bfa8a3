"""Contexte d'exécution d'un script.

ScriptContext réunit un CommandRunner et un LocalFileManager qui
partagent le même logger, le même formateur et le même répertoire
de base : après ``ctx.cd("build")``, les chemins relatifs des
opérations fichiers comme le cwd des commandes sont ancrés sur
``build``, sans modifier le répertoire courant du processus.
Le répertoire de base est porté par le gestionnaire de fichiers ;
l'exécuteur le relit à chaque commande, ``ctx.files.cd()`` a donc
le même effet que ``ctx.cd()``.
"""

from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from script_python_utils.commands.base import CommandResult, CommandSpec
from script_python_utils.commands.options import CommandOptions, OptionsLike
from script_python_utils.commands.runner import CommandRunner
from script_python_utils.config.settings import ScriptSettings, load_settings
from script_python_utils.filesystem.local import LocalFileManager
from script_python_utils.filesystem.paths import PathSpec, join
from script_python_utils.logging.base import Logger
from script_python_utils.logging.console_logger import ConsoleLogger
from script_python_utils.logging.file_logger import FileLogger
from script_python_utils.logging.formatter import (
    AnsiCallFormatter,
    CallFormatter,
    PlainCallFormatter,
)


class ScriptContext:
    """Point d'accès unique aux commandes et aux fichiers.

    Attributes:
        runner: Exécuteur de commandes.
        files: Gestionnaire de fichiers.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        formatter: Optional[CallFormatter] = None,
        base_dir: Optional[str] = None,
        command_defaults: Optional[CommandOptions] = None,
        json_indent: Optional[int] = 2,
    ) -> None:
        """Initialise le contexte.

        Args:
            logger: Logger partagé (aucun log si None).
            formatter: Formateur partagé (défaut: PlainCallFormatter).
            base_dir: Répertoire de base initial.
            command_defaults: Options par défaut des commandes.
            json_indent: Indentation par défaut de write_json.
        """
        formatter = formatter or PlainCallFormatter()
        self.logger = logger
        self.files = LocalFileManager(
            logger=logger,
            formatter=formatter,
            base_dir=base_dir,
            json_indent=json_indent,
        )
        self.runner = CommandRunner(
            logger=logger,
            formatter=formatter,
            defaults=command_defaults,
            base_dir_source=lambda: self.files.base_dir,
        )

    @classmethod
    def from_settings(cls, settings: ScriptSettings) -> "ScriptContext":
        """Construit un contexte à partir de réglages validés.

        Le logger écrit dans logging.file si renseigné, sur stderr
        sinon.
        """
        log_cfg = settings.logging_config()
        if settings.logging.file:
            logger: Logger = FileLogger(settings.logging.file, config=log_cfg)
        else:
            logger = ConsoleLogger(config=log_cfg)
        formatter = (
            AnsiCallFormatter() if settings.logging.color
            else PlainCallFormatter()
        )
        return cls(
            logger=logger,
            formatter=formatter,
            base_dir=settings.paths.base_dir,
            command_defaults=settings.commands.to_options(),
            json_indent=settings.json_.indent,
        )

    @classmethod
    def from_config(cls, config_path: Union[str, Path]) -> "ScriptContext":
        """Construit un contexte depuis un fichier TOML ou JSON."""
        return cls.from_settings(load_settings(config_path))

    @property
    def base_dir(self) -> Optional[str]:
        return self.files.base_dir

    # --- Commandes ---

    def run(
        self, spec: CommandSpec, options: Optional[OptionsLike] = None
    ) -> CommandResult:
        return self.runner.run(spec, options)

    def x(
        self,
        cmd: str,
        args: Union[Sequence[str], OptionsLike, None] = None,
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        return self.runner.x(cmd, args, options)

    def run_exec(
        self,
        program: str,
        args: Sequence[str] = (),
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        return self.runner.run_exec(program, args, options)

    def run_shell(
        self, line: str, options: Optional[OptionsLike] = None
    ) -> CommandResult:
        return self.runner.run_shell(line, options)

    # --- Fichiers ---

    @staticmethod
    def join(filepath: PathSpec) -> str:
        return join(filepath)

    def cd(self, filepath: PathSpec) -> str:
        """Change le répertoire de base des fichiers et des commandes."""
        return self.files.cd(filepath)

    def read_json(self, filepath: PathSpec) -> Any:
        return self.files.read_json(filepath)

    def write_json(
        self,
        filepath: PathSpec,
        data: Any,
        indent: Optional[int] = None,
        sort_keys: bool = False,
    ) -> None:
        return self.files.write_json(filepath, data, indent, sort_keys)

    def mkdirp(self, *filepaths: PathSpec) -> None:
        return self.files.mkdirp(*filepaths)

    def globby(
        self,
        patterns: Union[str, Sequence[str]],
        cwd: Optional[PathSpec] = None,
        dot: bool = False,
        only_files: bool = True,
    ) -> List[str]:
        return self.files.globby(patterns, cwd, dot, only_files)

    def write(
        self,
        filepath: PathSpec,
        data: Union[str, bytes],
        encoding: str = "utf-8",
    ) -> None:
        return self.files.write(filepath, data, encoding)

    def read(
        self, filepath: PathSpec, encoding: Optional[str] = None
    ) -> Union[str, bytes]:
        return self.files.read(filepath, encoding)

    def ls(self, filepath: PathSpec = ".") -> List[str]:
        return self.files.ls(filepath)

    def cp(self, source: PathSpec, destination: PathSpec) -> str:
        return self.files.cp(source, destination)

    def rm(self, *filepaths: PathSpec) -> None:
        return self.files.rm(*filepaths)

    def mv(self, source: PathSpec, destination: PathSpec) -> str:
        return self.files.mv(source, destination)

    def exists(self, filepath: PathSpec) -> bool:
        return self.files.exists(filepath)

    def cwd(self) -> str:
        return self.files.cwd()

    def chmod(self, filepath: PathSpec, mode: int) -> None:
        return self.files.chmod(filepath, mode)

    def tmp_dir(self, prefix: str = "tmp-") -> str:
        return self.files.tmp_dir(prefix)

    def empty_dir(self, filepath: PathSpec) -> None:
        return self.files.empty_dir(filepath)
