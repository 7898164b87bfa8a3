"""
Exceptions personnalisées de script_python_utils.

Les erreurs du système d'exploitation (OSError, TimeoutExpired...)
ne sont jamais encapsulées : elles remontent telles quelles à
l'appelant. Seuls les échecs propres à la bibliothèque ont une
classe dédiée.
"""
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from script_python_utils.commands.base import CommandResult


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Fichier de configuration ou schéma de réglages invalide."""
    pass


class CommandError(ApplicationError):
    """Commande terminée par un code non nul ou par un signal.

    Attributes:
        result: Résultat complet de l'exécution.
    """

    def __init__(self, result: "CommandResult") -> None:
        """Initialise l'erreur à partir du résultat d'exécution.

        Args:
            result: Résultat de la commande en échec.
        """
        self.result = result
        cmd_str = " ".join(result.command)
        if result.signal is not None:
            message = (
                f"Commande interrompue par le signal {result.signal} : "
                f"{cmd_str}"
            )
        else:
            message = (
                f"Code retour {result.return_code} : {cmd_str}"
            )
        super().__init__(message)

    @property
    def command(self) -> List[str]:
        """Commande exécutée sous forme de liste."""
        return self.result.command

    @property
    def return_code(self) -> int:
        """Code de retour du processus."""
        return self.result.return_code

    @property
    def signal(self) -> Optional[int]:
        """Numéro du signal ayant terminé le processus, sinon None."""
        return self.result.signal
