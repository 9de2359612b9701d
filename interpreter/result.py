"""Ergebnis eines einzelnen Befehls (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Antwort des Interpreters auf eine Zeile."""

    verb: str = ""
    success: bool = True
    lines: list[str] = []          # Ausgabezeilen ohne Zeilenumbruch
    error: Optional[str] = None    # Fehlercode, z.B. "DuplicateClassroom"
    terminated: bool = False       # True nach "exit"

    def print_rich(self, console=None, color: bool = True) -> None:
        """Gibt die Zeilen über Rich aus (Fehler rot, Bestätigungen grün)."""
        from rich.console import Console

        console = console or Console(emoji=False)
        style = None
        if color and self.verb not in ("help", "list_classrooms", "list_students"):
            style = "green" if self.success else "red"
        for line in self.lines:
            console.print(line, style=style, markup=False, emoji=False,
                          highlight=False, soft_wrap=True)
