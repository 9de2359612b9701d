"""Datenmodell für einen virtuellen Klassenraum (Pydantic v2)."""

from pydantic import BaseModel

from models.assignment import Assignment
from models.student import Student


class Classroom(BaseModel):
    """Ein Klassenraum mit Teilnehmerliste und geplanten Aufgaben.

    Beide Listen behalten die Einfügereihenfolge. Aufgaben werden beim
    Planen nicht dedupliziert.
    """

    name: str                           # Eindeutiger Schlüssel, z.B. "Math"
    students: list[Student] = []        # In Einschreibe-Reihenfolge
    assignments: list[Assignment] = []  # In Planungs-Reihenfolge

    def add_student(self, student: Student) -> None:
        self.students.append(student)

    def add_assignment(self, assignment: Assignment) -> None:
        self.assignments.append(assignment)

    def has_assignment(self, assignment: Assignment) -> bool:
        """True wenn eine Aufgabe mit gleichem Text geplant wurde."""
        return assignment in self.assignments

    @property
    def student_ids(self) -> list[str]:
        return [s.id for s in self.students]
