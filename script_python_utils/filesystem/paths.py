"""Normalisation des chemins.

Toutes les opérations fichiers acceptent soit un chemin unique,
soit une séquence de segments joints de gauche à droite avec
os.path.join.
"""

import os
from typing import Optional, Sequence, Union

PathLike = Union[str, os.PathLike]
PathSpec = Union[PathLike, Sequence[PathLike]]

#: Répertoire personnel de l'utilisateur courant.
home = os.path.expanduser("~")


def join(filepath: PathSpec) -> str:
    """Joint un chemin ou une séquence de segments.

    Un segment absolu écarte les segments qui le précèdent ; un
    segment vide n'ajoute rien (hormis un séparateur final s'il
    termine la séquence, comme os.path.join).

    Args:
        filepath: Chemin unique ou séquence de segments.

    Returns:
        Chemin joint sous forme de chaîne.

    Raises:
        ValueError: Si la séquence est vide.

    Example:
        >>> join(["build", "assets", "app.js"])
        'build/assets/app.js'
        >>> join(["build", "/tmp", "out"])
        '/tmp/out'
    """
    if isinstance(filepath, (str, os.PathLike)):
        return os.fspath(filepath)
    segments = [os.fspath(s) for s in filepath]
    if not segments:
        raise ValueError("Aucun segment de chemin fourni.")
    return os.path.join(*segments)


def resolve(filepath: PathSpec, base_dir: Optional[str] = None) -> str:
    """Joint puis ancre un chemin relatif sur le répertoire de base.

    Args:
        filepath: Chemin unique ou séquence de segments.
        base_dir: Répertoire de base ; None pour le répertoire
            courant du processus.

    Returns:
        Chemin joint, préfixé par base_dir s'il est relatif.
    """
    joined = join(filepath)
    if base_dir is None or os.path.isabs(joined):
        return joined
    return os.path.join(base_dir, joined)


def home_dir() -> str:
    """Retourne le répertoire personnel de l'utilisateur."""
    return os.path.expanduser("~")
