"""Datenmodell für eine Mitarbeiterin / einen Mitarbeiter (Pydantic v2)."""

from pydantic import BaseModel

from models.outcome import Outcome
from models.student import NO_LOCATION

# Ort einer Lehrkraft, die nicht eingestempelt ist
CLOCKED_OUT_LOCATION = "Not clocked in"


class Staff(BaseModel):
    """Repräsentiert eine Lehrkraft oder sonstiges Personal mit Stempelstatus."""

    name: str
    position: str                   # "Teacher", "Nurse", ...
    shift: str                      # Freitext, z.B. "AM"
    email: str = ""                 # optional (vierte Spalte)
    location: str = CLOCKED_OUT_LOCATION
    is_clocked_in: bool = False

    def clock_in(self) -> Outcome:
        if self.is_clocked_in:
            return Outcome.ALREADY_CLOCKED_IN
        self.is_clocked_in = True
        return Outcome.OK

    def clock_out(self) -> Outcome:
        if not self.is_clocked_in:
            return Outcome.ALREADY_CLOCKED_OUT
        self.is_clocked_in = False
        self.location = CLOCKED_OUT_LOCATION
        return Outcome.OK

    def move_to(self, room_name: str) -> None:
        self.location = room_name

    def clear_location(self) -> None:
        # Raum geschlossen / umgesetzt: eingestempelt, aber ohne Raum
        self.location = NO_LOCATION if self.is_clocked_in else CLOCKED_OUT_LOCATION
