"""Module d'exécution de commandes système.

Ce module fournit un point d'entrée unique acceptant une ligne
shell ou un exécutable suivi de sa liste d'arguments.

Classes disponibles :
    CommandMode : Discriminant shell / exécutable.
    ShellCommand : Ligne interprétée par le shell.
    ExecCommand : Exécutable et arguments sans shell.
    CommandResult : Résultat immuable d'une exécution.
    CommandOptions : Options d'exécution (stdio, cwd, env...).
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandRunner : Exécuteur concret via subprocess.
"""

from script_python_utils.commands.base import (
    CommandMode,
    ShellCommand,
    ExecCommand,
    CommandSpec,
    CommandResult,
    CommandExecutor,
)
from script_python_utils.commands.options import (
    CommandOptions,
    merge_options,
)
from script_python_utils.commands.runner import (
    CommandRunner,
    env,
)

__all__ = [
    # Structures de données
    "CommandMode",
    "ShellCommand",
    "ExecCommand",
    "CommandSpec",
    "CommandResult",
    "CommandOptions",
    "merge_options",
    # Interface abstraite
    "CommandExecutor",
    # Implémentation
    "CommandRunner",
    "env",
]
