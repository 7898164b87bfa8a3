"""
Script Python Utils - Outils de scripts de build et d'automatisation.

Modules disponibles:
- commands: Exécution de commandes, en mode shell ou exécutable
  (CommandRunner, ShellCommand, ExecCommand)
- filesystem: Opérations sur fichiers avec chemins en segments
  (LocalFileManager, join)
- logging: Gestion des logs (Logger, ConsoleLogger, FileLogger)
- config: Chargement et validation des réglages (TOML, JSON)
- errors: Exceptions de la bibliothèque
- context: Contexte partagé commandes + fichiers (ScriptContext)
- api: Fonctions de module sur un contexte par défaut
"""

__version__ = "1.0.0"

from script_python_utils.logging import (
    Logger,
    ConsoleLogger,
    FileLogger,
    CallFormatter,
    PlainCallFormatter,
    AnsiCallFormatter,
)
from script_python_utils.errors import (
    ApplicationError,
    ConfigurationError,
    CommandError,
)
from script_python_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    ScriptSettings,
    load_settings,
)
from script_python_utils.commands import (
    CommandMode,
    ShellCommand,
    ExecCommand,
    CommandResult,
    CommandOptions,
    CommandExecutor,
    CommandRunner,
)
from script_python_utils.filesystem import (
    FileManager,
    LocalFileManager,
    join,
)
from script_python_utils.context import ScriptContext

__all__ = [
    # Logging
    "Logger",
    "ConsoleLogger",
    "FileLogger",
    "CallFormatter",
    "PlainCallFormatter",
    "AnsiCallFormatter",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "CommandError",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "ScriptSettings",
    "load_settings",
    # Commands
    "CommandMode",
    "ShellCommand",
    "ExecCommand",
    "CommandResult",
    "CommandOptions",
    "CommandExecutor",
    "CommandRunner",
    # Filesystem
    "FileManager",
    "LocalFileManager",
    "join",
    # Contexte
    "ScriptContext",
]
