"""Options d'exécution des commandes et fusion avec les défauts.

Les options fournies par l'appelant sont prioritaires sur les
valeurs par défaut pour chaque clé qu'elles renseignent : toutes
celles d'un CommandOptions, celles présentes dans un dict.

Example:
    Capture de la sortie au lieu de l'hériter :

        from script_python_utils.commands import (
            CommandOptions,
            merge_options,
        )

        options = merge_options(CommandOptions(), {"stdio": "pipe"})
        # options.stdio == "pipe", options.reject == True
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

STDIO_INHERIT = "inherit"
STDIO_PIPE = "pipe"
_STDIO_MODES = (STDIO_INHERIT, STDIO_PIPE)


@dataclass(frozen=True)
class CommandOptions:
    """Options transmises à la primitive d'exécution.

    Attributes:
        stdio: "inherit" (sorties du processus parent) ou "pipe"
            (stdout/stderr capturés en texte).
        cwd: Répertoire de travail ; à défaut, le répertoire de base
            de l'exécuteur.
        env: Variables d'environnement fusionnées avec os.environ.
        timeout: Timeout en secondes.
        input: Texte envoyé sur l'entrée standard du processus.
        reject: Si True, un code retour non nul lève CommandError.
        shell: Exécutable du shell en mode shell (défaut: /bin/sh).
    """

    stdio: str = STDIO_INHERIT
    cwd: Optional[str] = None
    env: Optional[Dict[str, str]] = None
    timeout: Optional[float] = None
    input: Optional[str] = None
    reject: bool = True
    shell: Optional[str] = None

    def __post_init__(self) -> None:
        """Valide le mode stdio.

        Raises:
            ValueError: Si stdio n'est ni "inherit" ni "pipe".
        """
        if self.stdio not in _STDIO_MODES:
            raise ValueError(
                f"Mode stdio invalide : {self.stdio!r}. "
                f"Valeurs possibles : {', '.join(_STDIO_MODES)}"
            )

    @property
    def captures_output(self) -> bool:
        """True si stdout/stderr sont capturés."""
        return self.stdio == STDIO_PIPE


OptionsLike = Union[CommandOptions, Mapping[str, Any]]


def _as_overrides(options: OptionsLike) -> Dict[str, Any]:
    """Extrait les clés renseignées par l'appelant.

    Un CommandOptions est un jeu complet : tous ses champs comptent
    comme renseignés, y compris ceux laissés à leur valeur par
    défaut. Pour ne surcharger que quelques clés, passer un dict.

    Raises:
        TypeError: Si une clé inconnue est fournie.
    """
    if isinstance(options, CommandOptions):
        return {
            f.name: getattr(options, f.name)
            for f in dataclasses.fields(CommandOptions)
        }
    known = {f.name for f in dataclasses.fields(CommandOptions)}
    unknown = set(options) - known
    if unknown:
        raise TypeError(
            f"Option(s) inconnue(s) : {', '.join(sorted(unknown))}"
        )
    return dict(options)


def merge_options(
    defaults: CommandOptions,
    overrides: Optional[OptionsLike] = None,
) -> CommandOptions:
    """Fusionne les options de l'appelant sur les défauts.

    Args:
        defaults: Options par défaut de l'exécuteur.
        overrides: Options de l'appel (CommandOptions ou dict).

    Returns:
        Nouvelle instance de CommandOptions.

    Raises:
        TypeError: Si overrides contient une clé inconnue.
        ValueError: Si la valeur de stdio est invalide.
    """
    if overrides is None:
        return defaults
    return dataclasses.replace(defaults, **_as_overrides(overrides))
