"""Module de logging."""

from script_python_utils.logging.base import Logger
from script_python_utils.logging.console_logger import ConsoleLogger
from script_python_utils.logging.file_logger import FileLogger
from script_python_utils.logging.formatter import (
    CallFormatter,
    PlainCallFormatter,
    AnsiCallFormatter,
)

__all__ = [
    "Logger",
    "ConsoleLogger",
    "FileLogger",
    "CallFormatter",
    "PlainCallFormatter",
    "AnsiCallFormatter",
]
