"""Fehlerklassen des Classroom-Managers.

Jede Klasse trägt einen stabilen ``code`` (z.B. ``"DuplicateClassroom"``),
den der Interpreter im Ergebnis meldet, und eine Nachricht für die Ausgabe.
"""

from typing import Optional


class ClassroomManagerError(Exception):
    """Basisklasse aller fachlichen Fehler (immer behebbar)."""

    code = "ClassroomManagerError"
    default_message = "Unexpected error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ─── Eindeutigkeit ───

class DuplicateClassroomError(ClassroomManagerError):
    code = "DuplicateClassroom"
    default_message = "Classroom already exists."


class DuplicateStudentError(ClassroomManagerError):
    code = "DuplicateStudent"
    default_message = "Student ID already exists."


# ─── Referenzielle Integrität ───

class ClassroomNotFoundError(ClassroomManagerError):
    code = "ClassroomNotFound"
    default_message = "Classroom not found."


class StudentNotEnrolledInClassError(ClassroomManagerError):
    code = "StudentNotEnrolledInClass"
    default_message = "Student not enrolled in the specified class."


class AssignmentNotScheduledError(ClassroomManagerError):
    code = "AssignmentNotScheduled"
    default_message = "Assignment not found for this class."


# ─── Eingabe ───

class MissingArgumentError(ClassroomManagerError):
    """Zu wenige Argumente; die Nachricht nennt die fehlenden Felder."""

    code = "MissingArgument"
    default_message = "Argument is missing."


class UnknownCommandError(ClassroomManagerError):
    code = "UnknownCommand"
    default_message = "Unknown command."
