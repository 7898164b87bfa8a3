"""Formateurs des messages de log des opérations.

Chaque opération (commande ou accès au système de fichiers) produit
une seule ligne de log. Les formateurs décident de sa représentation
selon la destination (fichier de log ou terminal).

Classes :
    CallFormatter : Interface abstraite de formatage.
    PlainCallFormatter : Texte brut avec préfixes [ROOT]/[user].
    AnsiCallFormatter : Codes ANSI colorés pour le terminal.

Example :
    Sortie pour une commande lancée par un utilisateur standard :
        [user] $ git commit -m 'premier commit'

    Sortie pour une opération fichier :
        cp build/app.js dist/app.js
"""

import os
import sys
from abc import ABC, abstractmethod
from typing import Any, Iterable


def _stringify(value: Any) -> str:
    """Convertit une valeur loggable en texte."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return str(value)


class CallFormatter(ABC):
    """Interface abstraite pour formater les messages d'opération."""

    @abstractmethod
    def format_command(self, command_line: str, is_root: bool) -> str:
        """Formate le message de lancement d'une commande.

        Args:
            command_line: Commande telle qu'elle sera exécutée
                (ligne shell ou jetons déjà échappés).
            is_root: True si le processus courant est root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_operation(self, name: str, values: Iterable[Any]) -> str:
        """Formate le message d'une opération sur les fichiers.

        Args:
            name: Nom court de l'opération (ex: 'cp', 'readJSON').
            values: Arguments normalisés de l'opération.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCallFormatter(CallFormatter):
    """Formateur texte brut pour les logs fichier.

    N'utilise aucun code ANSI : compatible avec les fichiers de log,
    les outils grep et les éditeurs de texte.
    """

    _ROOT_PREFIX = "[ROOT]"
    _USER_PREFIX = "[user]"

    def _prefix(self, is_root: bool) -> str:
        return self._ROOT_PREFIX if is_root else self._USER_PREFIX

    def format_command(self, command_line: str, is_root: bool) -> str:
        """Formate le lancement d'une commande avec préfixe textuel."""
        return f"{self._prefix(is_root)} $ {command_line}"

    def format_operation(self, name: str, values: Iterable[Any]) -> str:
        """Formate une opération : nom suivi des arguments."""
        return " ".join([name, *(_stringify(v) for v in values)])


class AnsiCallFormatter(PlainCallFormatter):
    """Formateur ANSI coloré pour le terminal.

    Les commandes root sont en jaune-or gras, celles d'un utilisateur
    standard en vert ; le nom des opérations fichier est en cyan.
    N'émet aucun code ANSI si stderr n'est pas un terminal TTY.
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"   # Jaune-or gras
    USER_STYLE = "\033[0;32m"   # Vert normal
    OPERATION_STYLE = "\033[0;36m"  # Cyan

    def _is_tty(self) -> bool:
        """Vérifie si stderr est un terminal interactif (TTY)."""
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    def _style(self, text: str, color: str) -> str:
        if not self._is_tty():
            return text
        return f"{color}{text}{self.RESET}"

    def format_command(self, command_line: str, is_root: bool) -> str:
        """Formate le lancement d'une commande avec style ANSI."""
        color = self.ROOT_STYLE if is_root else self.USER_STYLE
        return self._style(
            super().format_command(command_line, is_root), color
        )

    def format_operation(self, name: str, values: Iterable[Any]) -> str:
        """Formate une opération, seul le nom est coloré."""
        rest = [_stringify(v) for v in values]
        return " ".join([self._style(name, self.OPERATION_STYLE), *rest])
