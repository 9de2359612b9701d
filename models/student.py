"""Datenmodell für eine Schülerin / einen Schüler (Pydantic v2)."""

from pydantic import BaseModel, Field

from models.assignment import Assignment


class Student(BaseModel):
    """Repräsentiert eine eingeschriebene Person.

    Die Klassenzuordnung wird bei der Einschreibung gesetzt und ist danach
    unveränderlich.
    """

    id: str                                   # Global eindeutig, z.B. "S1"
    classroom_name: str = Field(frozen=True)  # Name der Klasse
    submitted: set[Assignment] = set()        # Abgegebene Aufgaben

    def submit(self, assignment: Assignment) -> None:
        """Vermerkt eine Abgabe. Wiederholte Abgaben ändern nichts."""
        self.submitted.add(assignment)

    def has_submitted(self, assignment: Assignment) -> bool:
        return assignment in self.submitted

    @property
    def submission_count(self) -> int:
        """Anzahl unterschiedlicher abgegebener Aufgaben."""
        return len(self.submitted)
