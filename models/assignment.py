"""Datenmodell für eine Hausaufgabe/Assignment (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict


class Assignment(BaseModel):
    """Eine geplante Aufgabe, identifiziert allein über ihren Text.

    Das Modell ist eingefroren: Gleichheit und Hash ergeben sich aus
    ``details``. Zwei Instanzen mit gleichem Text sind austauschbar
    (Mengen, ``in``-Prüfungen).
    """

    model_config = ConfigDict(frozen=True)

    details: str  # Freitext, z.B. "HW1" oder "Kapitel 3 lesen"

    def __str__(self) -> str:
        return self.details
