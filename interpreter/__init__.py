"""Interpreter-Modul: Befehlszeilen parsen und gegen die Registry ausführen."""

from interpreter.commands import COMMANDS, CommandSpec, ParsedCommand, parse_line
from interpreter.interpreter import (
    BANNER,
    FAREWELL,
    CommandInterpreter,
    SessionState,
)
from interpreter.result import CommandResult

__all__ = [
    "COMMANDS",
    "CommandSpec",
    "ParsedCommand",
    "parse_line",
    "CommandInterpreter",
    "CommandResult",
    "SessionState",
    "BANNER",
    "FAREWELL",
]
