"""CommandInterpreter: Textzeilen → Registry-Operationen → Ausgabezeilen.

Zustandsautomat mit RUNNING (Start) und TERMINATED (nach ``exit``).
Fachliche Fehler werden hier abgefangen und als fehlgeschlagenes
``CommandResult`` gemeldet; die Sitzung läuft danach weiter.
"""

import logging
from enum import Enum
from typing import Iterator

from interpreter.commands import ParsedCommand, help_lines, parse_line
from interpreter.result import CommandResult
from registry.classroom_registry import ClassroomRegistry
from registry.errors import ClassroomManagerError

logger = logging.getLogger(__name__)

BANNER = "Virtual Classroom Manager started. Type 'help' for a list of commands."
FAREWELL = "Exiting Virtual Classroom Manager."


class SessionState(str, Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandInterpreter:
    """Führt Befehle gegen eine übergebene Registry aus."""

    def __init__(self, registry: ClassroomRegistry) -> None:
        self.registry = registry
        self.state = SessionState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state == SessionState.RUNNING

    def execute(self, line: str) -> CommandResult:
        """Verarbeitet genau eine Eingabezeile.

        Leere Zeilen liefern ein leeres Erfolgsergebnis. Nach ``exit``
        wird keine weitere Eingabe angenommen (RuntimeError).
        """
        if not self.is_running:
            raise RuntimeError("Sitzung bereits beendet.")
        if not line.strip():
            return CommandResult()

        verb = line.split(maxsplit=1)[0]
        try:
            command = parse_line(line)
            return self._dispatch(command)
        except ClassroomManagerError as e:
            logger.debug(f"{verb}: {e.code}")
            return CommandResult(
                verb=verb,
                success=False,
                lines=[f"Error: {e.message}"],
                error=e.code,
            )

    def run(self, lines) -> Iterator[CommandResult]:
        """Verarbeitet Zeilen bis ``exit`` oder Ende der Eingabe.

        Generator: jede Zeile wird erst gelesen, nachdem das Ergebnis der
        vorherigen abgeholt wurde.
        """
        for line in lines:
            yield self.execute(line.rstrip("\r\n"))
            if not self.is_running:
                return

    # ─── Dispatch ───

    def _dispatch(self, command: ParsedCommand) -> CommandResult:
        handler = getattr(self, f"_cmd_{command.verb}")
        lines = handler(*command.args)
        return CommandResult(
            verb=command.verb,
            lines=lines,
            terminated=not self.is_running,
        )

    def _cmd_add_classroom(self, class_name: str) -> list[str]:
        self.registry.create_classroom(class_name)
        return [f"Classroom {class_name} has been created."]

    def _cmd_add_student(self, student_id: str, class_name: str) -> list[str]:
        self.registry.enroll_student(student_id, class_name)
        return [f"Student {student_id} has been enrolled in {class_name}."]

    def _cmd_schedule_assignment(self, class_name: str, details: str) -> list[str]:
        self.registry.schedule_assignment(class_name, details)
        return [f"Assignment for {class_name} has been scheduled."]

    def _cmd_submit_assignment(self, student_id: str, class_name: str,
                               details: str) -> list[str]:
        self.registry.submit_assignment(student_id, class_name, details)
        return [f"Assignment submitted by Student {student_id} in {class_name}."]

    def _cmd_list_classrooms(self) -> list[str]:
        classrooms = self.registry.list_classrooms()
        if not classrooms:
            return ["No classrooms available."]
        lines = []
        for classroom in classrooms:
            lines.append(f"Classroom: {classroom.name}")
            if not classroom.students:
                lines.append("  No students enrolled.")
            for student_id in classroom.student_ids:
                lines.append(f"  Student ID: {student_id}")
        return lines

    def _cmd_list_students(self) -> list[str]:
        students = self.registry.list_students()
        if not students:
            return ["No students enrolled."]
        return [
            f"Student ID: {s.id}, Classroom: {s.classroom_name}"
            for s in students
        ]

    def _cmd_help(self) -> list[str]:
        return help_lines()

    def _cmd_exit(self) -> list[str]:
        self.state = SessionState.TERMINATED
        logger.info(
            f"Sitzung beendet ({self.registry.classroom_count} Klassen, "
            f"{self.registry.student_count} Schüler)"
        )
        return [FAREWELL]
