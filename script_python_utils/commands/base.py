"""Interfaces abstraites et structures de données pour l'exécution
de commandes système.

Ce module définit :
    - CommandMode : Discriminant explicite entre mode shell et mode
      exécutable.
    - ShellCommand / ExecCommand : Les deux formes de commande.
    - CommandResult : Résultat immuable d'une exécution.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

import shlex
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from script_python_utils.commands.options import CommandOptions, OptionsLike


class CommandMode(Enum):
    """Mode d'exécution d'une commande."""

    SHELL = "shell"
    EXEC = "exec"


@dataclass(frozen=True)
class ShellCommand:
    """Ligne de commande interprétée par un shell.

    Les métacaractères (pipes, globs, $VAR, ;) sont interprétés.

    Attributes:
        line: Ligne de commande complète.
    """

    line: str

    def __post_init__(self) -> None:
        if not self.line or not self.line.strip():
            raise ValueError("La ligne de commande est requise.")

    @property
    def mode(self) -> CommandMode:
        return CommandMode.SHELL

    @property
    def tokens(self) -> List[str]:
        return [self.line]

    def display(self) -> str:
        """Retourne la commande telle qu'elle sera interprétée."""
        return self.line


@dataclass(frozen=True)
class ExecCommand:
    """Exécutable et arguments passés directement au système.

    Aucun shell n'intervient : les arguments sont transmis
    littéralement, métacaractères compris.

    Attributes:
        program: Nom ou chemin de l'exécutable.
        args: Arguments positionnels.
    """

    program: str
    args: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.program or not self.program.strip():
            raise ValueError("Le programme est requis.")
        if isinstance(self.args, (str, bytes)):
            raise TypeError(
                "args doit être une séquence de chaînes, "
                "pas une chaîne unique."
            )
        object.__setattr__(self, "args", tuple(self.args))
        for arg in self.args:
            if not isinstance(arg, str):
                raise TypeError(
                    f"Argument non textuel : {arg!r} "
                    f"({type(arg).__name__})"
                )

    @property
    def mode(self) -> CommandMode:
        return CommandMode.EXEC

    @property
    def tokens(self) -> List[str]:
        return [self.program, *self.args]

    def display(self) -> str:
        """Retourne les jetons échappés, rejouables dans un shell."""
        return shlex.join(self.tokens)


CommandSpec = Union[ShellCommand, ExecCommand]


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande système.

    Attributes:
        command: Commande exécutée sous forme de liste.
        mode: Mode d'exécution (shell ou exécutable).
        return_code: Code de retour du processus (négatif si tué
            par un signal, comme subprocess).
        stdout: Sortie standard capturée, None si héritée.
        stderr: Sortie d'erreur capturée, None si héritée.
        success: True si la commande a réussi (code 0).
        duration: Durée d'exécution en secondes.
        signal: Numéro du signal ayant terminé le processus.
        executed_as_root: True si lancée par root.
    """

    command: List[str]
    mode: CommandMode
    return_code: int
    stdout: Optional[str]
    stderr: Optional[str]
    success: bool
    duration: float
    signal: Optional[int] = None
    executed_as_root: bool = False


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes système.

    Les implémentations fournissent run() ; les points d'entrée
    run_exec(), run_shell() et x() construisent la forme de
    commande adaptée puis délèguent à run().
    """

    @abstractmethod
    def run(
        self,
        spec: CommandSpec,
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Args:
            spec: ShellCommand ou ExecCommand.
            options: Options de l'appel, fusionnées sur les défauts.

        Returns:
            Résultat de l'exécution.
        """
        pass

    def run_exec(
        self,
        program: str,
        args: Sequence[str] = (),
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        """Lance un exécutable sans shell.

        Args:
            program: Nom ou chemin de l'exécutable.
            args: Arguments transmis littéralement.
            options: Options de l'appel.

        Returns:
            Résultat de l'exécution.
        """
        return self.run(ExecCommand(program, args), options)

    def run_shell(
        self,
        line: str,
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        """Lance une ligne de commande via le shell.

        Args:
            line: Ligne de commande complète.
            options: Options de l'appel.

        Returns:
            Résultat de l'exécution.
        """
        return self.run(ShellCommand(line), options)

    def x(
        self,
        cmd: str,
        args: Union[Sequence[str], OptionsLike, None] = None,
        options: Optional[OptionsLike] = None,
    ) -> CommandResult:
        """Point d'entrée unique pour les deux conventions d'appel.

        Sans args, cmd est une ligne shell ; avec une liste d'args,
        cmd est un exécutable lancé sans shell. Un dict ou un
        CommandOptions en deuxième position sont les options d'une
        ligne shell.

        Example:
            >>> runner.x("ls *.txt | wc -l")
            >>> runner.x("git", ["commit", "-m", "a; b"])
            >>> runner.x("make", {"stdio": "pipe"})
            >>> runner.x("make", options={"stdio": "pipe"})

        Raises:
            TypeError: Si args est une chaîne et non une séquence, ou
                si les options sont fournies deux fois.
        """
        if args is None:
            return self.run_shell(cmd, options)
        if isinstance(args, (Mapping, CommandOptions)):
            if options is not None:
                raise TypeError(
                    "Options fournies deux fois : en deuxième position "
                    "et par le paramètre options."
                )
            return self.run_shell(cmd, args)
        if isinstance(args, (str, bytes)):
            raise TypeError(
                "args doit être une liste de chaînes ; passer les "
                "options par mot-clé : x(cmd, options=...)"
            )
        return self.run_exec(cmd, args, options)
