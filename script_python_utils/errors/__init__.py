"""Module de gestion des erreurs."""

from script_python_utils.errors.exceptions import (ApplicationError,
                                                   ConfigurationError,
                                                   CommandError)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "CommandError",
]
