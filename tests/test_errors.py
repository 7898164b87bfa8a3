"""Tests pour le module errors."""

import pytest

from script_python_utils.commands import CommandMode, CommandResult
from script_python_utils.errors import (
    ApplicationError,
    CommandError,
    ConfigurationError,
)


def _result(return_code, signal=None):
    return CommandResult(
        command=["make", "all"],
        mode=CommandMode.EXEC,
        return_code=return_code,
        stdout=None,
        stderr=None,
        success=return_code == 0,
        duration=0.1,
        signal=signal,
    )


class TestExceptions:
    """Tests de la hiérarchie d'exceptions."""

    def test_hierarchie(self):
        """Test que toutes les erreurs dérivent d'ApplicationError."""
        assert issubclass(ConfigurationError, ApplicationError)
        assert issubclass(CommandError, ApplicationError)

    def test_command_error_code_retour(self):
        """Test du message et des attributs pour un code non nul."""
        error = CommandError(_result(2))
        assert str(error) == "Code retour 2 : make all"
        assert error.return_code == 2
        assert error.signal is None
        assert error.command == ["make", "all"]

    def test_command_error_signal(self):
        """Test du message pour un processus tué par un signal."""
        error = CommandError(_result(-15, signal=15))
        assert "signal 15" in str(error)
        assert error.signal == 15

    def test_command_error_capturable(self):
        """Test que CommandError est capturable comme ApplicationError."""
        with pytest.raises(ApplicationError):
            raise CommandError(_result(1))
