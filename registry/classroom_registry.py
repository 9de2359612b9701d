"""ClassroomRegistry: In-Memory-Verwaltung von Klassen, Schülern und Aufgaben.

Die Registry besitzt alle Entitäten und prüft vor jeder Änderung sämtliche
Invarianten. Schlägt eine Prüfung fehl, wird eine Fehlerklasse aus
``registry.errors`` geworfen und der Zustand bleibt unverändert.

Alle Schlüssel werden exakt und case-sensitiv verglichen.
"""

import logging

from models.assignment import Assignment
from models.classroom import Classroom
from models.student import Student
from registry.errors import (
    AssignmentNotScheduledError,
    ClassroomNotFoundError,
    DuplicateClassroomError,
    DuplicateStudentError,
    StudentNotEnrolledInClassError,
)

logger = logging.getLogger(__name__)


class ClassroomRegistry:
    """Speicher für eine Sitzung. Wird einmal erzeugt und weitergereicht."""

    def __init__(self) -> None:
        # dicts behalten die Einfügereihenfolge → Listen in Anlage-Reihenfolge
        self._classrooms: dict[str, Classroom] = {}
        self._students: dict[str, Student] = {}

    # ─── Abfragen ───

    @property
    def classroom_count(self) -> int:
        return len(self._classrooms)

    @property
    def student_count(self) -> int:
        return len(self._students)

    def get_classroom(self, name: str) -> Classroom:
        """Klasse per Name; ``ClassroomNotFoundError`` wenn unbekannt."""
        classroom = self._classrooms.get(name)
        if classroom is None:
            logger.debug(f"Klasse '{name}' nicht gefunden")
            raise ClassroomNotFoundError()
        return classroom

    def get_student(self, student_id: str) -> Student:
        """Schüler per ID; ``StudentNotEnrolledInClassError`` wenn unbekannt."""
        student = self._students.get(student_id)
        if student is None:
            logger.debug(f"Schüler '{student_id}' nicht gefunden")
            raise StudentNotEnrolledInClassError()
        return student

    def list_classrooms(self) -> list[Classroom]:
        """Alle Klassen in Anlage-Reihenfolge."""
        return list(self._classrooms.values())

    def list_students(self) -> list[Student]:
        """Alle Schüler in Einschreibe-Reihenfolge."""
        return list(self._students.values())

    # ─── Änderungen ───

    def create_classroom(self, name: str) -> Classroom:
        if name in self._classrooms:
            logger.debug(f"Klasse '{name}' existiert bereits")
            raise DuplicateClassroomError()
        classroom = Classroom(name=name)
        self._classrooms[name] = classroom
        logger.info(f"Klasse angelegt: {name}")
        return classroom

    def enroll_student(self, student_id: str, class_name: str) -> Student:
        """Schreibt einen Schüler in genau eine Klasse ein.

        Reihenfolge der Prüfungen: erst die Klasse, dann die ID. Eine
        bereits vergebene ID wird auch für eine andere Klasse abgelehnt;
        die ursprüngliche Zuordnung bleibt bestehen.
        """
        classroom = self.get_classroom(class_name)
        if student_id in self._students:
            logger.debug(f"Schüler-ID '{student_id}' bereits vergeben")
            raise DuplicateStudentError()

        student = Student(id=student_id, classroom_name=classroom.name)
        self._students[student_id] = student
        classroom.add_student(student)
        logger.info(f"Schüler {student_id} in {class_name} eingeschrieben")
        return student

    def schedule_assignment(self, class_name: str, details: str) -> Assignment:
        classroom = self.get_classroom(class_name)
        assignment = Assignment(details=details)
        classroom.add_assignment(assignment)
        logger.info(
            f"Aufgabe für {class_name} geplant "
            f"({len(classroom.assignments)} insgesamt)"
        )
        return assignment

    def submit_assignment(self, student_id: str, class_name: str,
                          details: str) -> Assignment:
        """Vermerkt die Abgabe einer geplanten Aufgabe.

        Prüfungen:
        1. Schüler existiert und gehört zu ``class_name``
        2. Klasse existiert
        3. Aufgabe mit gleichem Text ist in der Klasse geplant

        Eine erneute Abgabe derselben Aufgabe ist erlaubt und ändert nichts.
        """
        student = self.get_student(student_id)
        if student.classroom_name != class_name:
            logger.debug(
                f"Abgabe abgelehnt: '{student_id}' nicht in '{class_name}'"
            )
            raise StudentNotEnrolledInClassError()

        classroom = self.get_classroom(class_name)

        assignment = Assignment(details=details)
        if not classroom.has_assignment(assignment):
            logger.debug(f"Abgabe abgelehnt: Aufgabe in '{class_name}' nicht geplant")
            raise AssignmentNotScheduledError()

        label = "Erneute Abgabe" if student.has_submitted(assignment) else "Abgabe"
        student.submit(assignment)
        logger.info(
            f"{label} von {student_id} in {class_name} "
            f"({student.submission_count} Aufgaben abgegeben)"
        )
        return assignment
