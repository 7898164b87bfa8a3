"""Exécuteur de commandes via subprocess.

Ce module fournit CommandRunner, une implémentation concrète de
CommandExecutor qui lance les commandes avec subprocess.run, soit
via le shell (ShellCommand), soit directement (ExecCommand).

Par défaut, les sorties du processus enfant sont héritées du
processus courant (stdio="inherit") : le script affiche ce que
la commande affiche.

Example :
    Exécution simple avec logs console :

        from script_python_utils import ConsoleLogger
        from script_python_utils.commands import CommandRunner

        runner = CommandRunner(logger=ConsoleLogger())
        runner.x("npm run build && npm test")
        runner.x("git", ["tag", "-a", "v1.0.0", "-m", "release; v1"])

    Capture de la sortie :

        result = runner.x("git", ["rev-parse", "HEAD"],
                          options={"stdio": "pipe"})
        print(result.stdout.strip())
"""

import os
import subprocess  # nosec B404
import time
from typing import Callable, Dict, Optional

from script_python_utils.commands.base import (
    CommandExecutor,
    CommandMode,
    CommandResult,
    CommandSpec,
)
from script_python_utils.commands.options import (
    CommandOptions,
    OptionsLike,
    merge_options,
)
from script_python_utils.errors.exceptions import CommandError
from script_python_utils.logging.base import Logger
from script_python_utils.logging.formatter import (
    CallFormatter,
    PlainCallFormatter,
)

#: Accès direct à l'environnement du processus courant.
env = os.environ


class CommandRunner(CommandExecutor):
    """Exécuteur de commandes via subprocess.

    Chaque exécution est précédée d'une ligne de log reprenant le
    mode et la commande exacte, préfixée [ROOT] ou [user] selon les
    privilèges détectés à l'initialisation.

    Les erreurs de lancement (exécutable introuvable, permission,
    timeout) remontent telles quelles. Un code retour non nul lève
    CommandError si l'option reject est active.

    Attributes:
        base_dir: Répertoire de travail par défaut des commandes.
        defaults: Options par défaut fusionnées à chaque appel.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        formatter: Optional[CallFormatter] = None,
        defaults: Optional[CommandOptions] = None,
        base_dir: Optional[str] = None,
        base_dir_source: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel.
            formatter: Formateur des lignes de log
                (défaut: PlainCallFormatter).
            defaults: Options par défaut (défaut: stdio hérité,
                reject actif).
            base_dir: Répertoire de travail utilisé quand l'appel
                ne précise pas cwd.
            base_dir_source: Fonction fournissant le répertoire de
                base à chaque appel, prioritaire sur base_dir.
        """
        self._logger = logger
        self._formatter = formatter or PlainCallFormatter()
        self.defaults = defaults or CommandOptions()
        self._base_dir = base_dir
        self._base_dir_source = base_dir_source
        self._is_root: bool = hasattr(os, "getuid") and os.getuid() == 0

    @property
    def base_dir(self) -> Optional[str]:
        if self._base_dir_source is not None:
            return self._base_dir_source()
        return self._base_dir

    @base_dir.setter
    def base_dir(self, value: Optional[str]) -> None:
        self._base_dir_source = None
        self._base_dir = value

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _build_env(
        self, extra: Optional[Dict[str, str]]
    ) -> Optional[Dict[str, str]]:
        """Fusionne os.environ et les variables de l'appel.

        Retourne None sans variables supplémentaires (subprocess
        utilisera os.environ).
        """
        if not extra:
            return None
        merged = os.environ.copy()
        merged.update(extra)
        return merged

    def _resolve_cwd(self, cwd: Optional[str]) -> Optional[str]:
        """Ancre un cwd relatif sur le répertoire de base."""
        if cwd is None:
            return self.base_dir
        if self.base_dir and not os.path.isabs(cwd):
            return os.path.join(self.base_dir, cwd)
        return cwd

    def run(
        self,
        spec: CommandSpec,
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Le mode est choisi par spec.mode : SHELL passe la ligne
        entière au shell, EXEC passe l'exécutable et ses arguments
        sans interprétation.

        Args:
            spec: ShellCommand ou ExecCommand.
            options: Options de l'appel, prioritaires sur les défauts.

        Returns:
            CommandResult ; stdout/stderr sont None en mode hérité.

        Raises:
            CommandError: Code retour non nul ou signal, si reject.
            OSError: Si le processus ne peut pas être lancé.
            subprocess.TimeoutExpired: Si le timeout est dépassé.
        """
        effective = merge_options(self.defaults, options)

        self._log(
            self._formatter.format_command(spec.display(), self._is_root)
        )

        kwargs = {
            "env": self._build_env(effective.env),
            "cwd": self._resolve_cwd(effective.cwd),
            "timeout": effective.timeout,
            "input": effective.input,
            "capture_output": effective.captures_output,
            "text": True,
        }
        start = time.monotonic()
        if spec.mode is CommandMode.SHELL:
            proc = subprocess.run(  # nosec B602
                spec.line,
                shell=True,
                executable=effective.shell,
                **kwargs,
            )
        else:
            proc = subprocess.run(  # nosec B603
                spec.tokens,
                **kwargs,
            )
        duration = time.monotonic() - start

        signal_number = -proc.returncode if proc.returncode < 0 else None
        result = CommandResult(
            command=spec.tokens,
            mode=spec.mode,
            return_code=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
            success=proc.returncode == 0,
            duration=duration,
            signal=signal_number,
            executed_as_root=self._is_root,
        )

        if not result.success:
            if signal_number is not None:
                self._log_error(
                    f"Signal {signal_number} : {spec.display()}"
                )
            else:
                self._log_error(
                    f"Code retour {proc.returncode} : {spec.display()}"
                )
            if effective.reject:
                raise CommandError(result)
        return result
