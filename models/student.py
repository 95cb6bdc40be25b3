"""Datenmodell für einen Schüler (Pydantic v2)."""

from pydantic import BaseModel

from models.guardian import Guardian
from models.outcome import Outcome

# Ort eines Schülers, der keinem Raum zugewiesen ist
NO_LOCATION = "N/A"


class Student(BaseModel):
    """Repräsentiert einen Schüler mit Anwesenheitsstatus und aktuellem Raum.

    Invariante: ``is_present == False`` impliziert ``location == NO_LOCATION``.
    Sie wird von engine.attendance / engine.assignment gepflegt, nicht hier.
    """

    name: str                       # Identität, case-insensitive eindeutig
    grade: int
    gender: str
    guardians: list[Guardian] = []  # Abholberechtigte, Reihenfolge wie in der Datei
    allergies: str = ""
    needs_para: bool = False        # Schulbegleitung erforderlich
    meds: str = ""
    location: str = NO_LOCATION
    is_present: bool = False

    # ─── Anwesenheit ───

    def mark_present(self) -> Outcome:
        if self.is_present:
            return Outcome.ALREADY_PRESENT
        self.is_present = True
        return Outcome.OK

    def mark_absent(self) -> Outcome:
        """Nur der Statuswechsel; das Entfernen aus dem Raum macht die Engine."""
        if not self.is_present:
            return Outcome.ALREADY_ABSENT
        self.is_present = False
        return Outcome.OK

    # ─── Ort ───

    def move_to(self, room_name: str) -> None:
        self.location = room_name

    def clear_location(self) -> None:
        self.location = NO_LOCATION
