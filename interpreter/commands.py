"""Befehlstabelle und Zeilen-Parser des Interpreters.

Eine Zeile wird an Whitespace in höchstens drei Felder zerlegt
(Verb, erstes Argument, Rest). Nur ``submit_assignment`` zerlegt den Rest
ein weiteres Mal. Das letzte Feld behält seine inneren Leerzeichen, damit
``schedule_assignment`` und ``submit_assignment`` denselben Aufgabentext
liefern.
"""

from dataclasses import dataclass

from registry.errors import MissingArgumentError, UnknownCommandError


@dataclass(frozen=True)
class CommandSpec:
    """Beschreibung eines Befehls: Parameter, Fehlermeldung, Hilfezeile."""

    verb: str
    params: tuple[str, ...] = ()
    missing_message: str = ""

    @property
    def max_fields(self) -> int:
        """Maximale Feldanzahl beim Zerlegen (inkl. Verb)."""
        return max(3, len(self.params) + 1)

    @property
    def usage(self) -> str:
        return " ".join([self.verb] + [f"[{p}]" for p in self.params])


@dataclass(frozen=True)
class ParsedCommand:
    spec: CommandSpec
    args: tuple[str, ...]

    @property
    def verb(self) -> str:
        return self.spec.verb


# Reihenfolge = Reihenfolge in der Hilfe
COMMANDS: dict[str, CommandSpec] = {
    spec.verb: spec
    for spec in (
        CommandSpec("add_classroom", ("class_name",),
                    "Class name is missing."),
        CommandSpec("add_student", ("student_id", "class_name"),
                    "Student ID or class name is missing."),
        CommandSpec("schedule_assignment", ("class_name", "assignment_details"),
                    "Class name or assignment details are missing."),
        CommandSpec("submit_assignment",
                    ("student_id", "class_name", "assignment_details"),
                    "Student ID, class name, or assignment details are missing."),
        CommandSpec("list_classrooms"),
        CommandSpec("list_students"),
        CommandSpec("help"),
        CommandSpec("exit"),
    )
}


def split_fields(line: str, max_fields: int) -> list[str]:
    """Zerlegt ``line`` in höchstens ``max_fields`` Felder.

    >>> split_fields("schedule_assignment Math Read  chapter 3", 3)
    ['schedule_assignment', 'Math', 'Read  chapter 3']
    """
    return line.strip().split(maxsplit=max_fields - 1)


def parse_line(line: str) -> ParsedCommand:
    """Parst eine Eingabezeile.

    Raises:
        UnknownCommandError: Verb nicht in ``COMMANDS``.
        MissingArgumentError: Zu wenige Argumente für das Verb.
    """
    fields = split_fields(line, 3)
    verb = fields[0] if fields else ""
    spec = COMMANDS.get(verb)
    if spec is None:
        raise UnknownCommandError()

    if spec.max_fields > 3:
        fields = split_fields(line, spec.max_fields)

    args = tuple(fields[1:1 + len(spec.params)])
    if len(args) < len(spec.params):
        raise MissingArgumentError(spec.missing_message)
    return ParsedCommand(spec=spec, args=args)


def help_lines() -> list[str]:
    """Befehlsübersicht für ``help``."""
    return ["Commands:"] + [spec.usage for spec in COMMANDS.values()]
