"""Interface abstraite pour le logging."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Tuple

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"


class Logger(ABC):
    """Interface pour le système de logging.

    Les composants (CommandRunner, LocalFileManager) ne dépendent
    que de cette abstraction : chaque opération émet un message
    via log_info avant d'appeler la primitive sous-jacente.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass


def read_logging_config(
    config: Optional[Mapping[str, Any]] = None
) -> Tuple[int, str]:
    """Extrait le niveau et le format de log d'une configuration.

    Accepte un dict contenant une section ``logging`` (clés
    ``level`` et ``format``). Les valeurs absentes ou inconnues
    retombent sur INFO et le format par défaut.

    Args:
        config: Configuration optionnelle.

    Returns:
        Tuple (niveau numérique, format).
    """
    level_str = DEFAULT_LOG_LEVEL
    log_format = DEFAULT_LOG_FORMAT
    if config is not None and hasattr(config, "get"):
        logging_cfg = config.get("logging") or {}
        level_str = logging_cfg.get("level", DEFAULT_LOG_LEVEL)
        log_format = logging_cfg.get("format", DEFAULT_LOG_FORMAT)
    level = getattr(logging, str(level_str).upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return level, log_format
