"""Logger console pour les scripts."""

import logging
import sys
from typing import Any, Mapping, Optional, TextIO

from script_python_utils.logging.base import Logger, read_logging_config


class ConsoleLogger(Logger):
    """
    Logger qui écrit sur la sortie d'erreur.

    La sortie standard reste libre pour les processus enfants
    lancés avec stdio="inherit" : les traces d'opérations ne se
    mélangent pas à leur sortie.

    Caractéristiques:
    - Logger nommé (un seul jeu de handlers par nom ; le dernier
      logger créé impose son niveau et son format)
    - Pas de propagation (évite les logs en double)
    """

    def __init__(
        self,
        name: str = "script_python_utils",
        config: Optional[Mapping[str, Any]] = None,
        stream: Optional[TextIO] = None
    ) -> None:
        """
        Initialise le logger console.

        Args:
            name: Nom du logger sous-jacent
            config: Configuration optionnelle (section logging)
            stream: Flux de sortie (défaut: sys.stderr)
        """
        log_level, log_format = read_logging_config(config)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)

        if not self.logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            self.logger.addHandler(handler)
        else:
            handler = self.logger.handlers[0]
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(log_format))
        self.handler = handler

        self.logger.propagate = False

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
