"""Ergebnis-Werte der Zustandsübergänge (Zuweisung, Anwesenheit, Raumstatus).

Die Domänen-Methoden geben ausschließlich diese Werte zurück und drucken nichts.
Die Textausgabe übernimmt export.console_renderer.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    ROOM_CLOSED = "room_closed"
    NOT_PRESENT = "not_present"
    NOT_CLOCKED_IN = "not_clocked_in"
    ALREADY_ASSIGNED = "already_assigned"
    AT_CAPACITY = "at_capacity"
    ALREADY_OPEN = "already_open"
    ALREADY_CLOSED = "already_closed"
    ALREADY_PRESENT = "already_present"
    ALREADY_ABSENT = "already_absent"
    ALREADY_CLOCKED_IN = "already_clocked_in"
    ALREADY_CLOCKED_OUT = "already_clocked_out"


# No-op-Warnungen: Zustand unverändert, aber kein echter Fehler
NO_OP_OUTCOMES = frozenset({
    Outcome.ALREADY_OPEN,
    Outcome.ALREADY_CLOSED,
    Outcome.ALREADY_PRESENT,
    Outcome.ALREADY_ABSENT,
    Outcome.ALREADY_CLOCKED_IN,
    Outcome.ALREADY_CLOCKED_OUT,
})


class Action(str, Enum):
    """Welche Operation das Ergebnis erzeugt hat (steuert die Meldung)."""

    ASSIGN_STUDENT = "assign_student"
    ASSIGN_STAFF = "assign_staff"
    OPEN_ROOM = "open_room"
    CLOSE_ROOM = "close_room"
    MARK_PRESENT = "mark_present"
    MARK_ABSENT = "mark_absent"
    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"


class OperationResult(BaseModel):
    """Ergebnis einer einzelnen Registry-Operation."""

    action: Action
    outcome: Outcome
    subject: str = ""                  # Name der Person (leer bei Raum-Operationen)
    room: str = ""                     # Zielraum bzw. betroffener Raum
    capacity: Optional[int] = None     # nur bei AT_CAPACITY gesetzt
    missing: list[str] = []            # unbekannte Namen bei NOT_FOUND
    evicted_from: Optional[str] = None # Raum, aus dem die Person entfernt wurde
    evicted_students: int = 0
    evicted_staff: int = 0

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.OK

    @property
    def is_no_op(self) -> bool:
        return self.outcome in NO_OP_OUTCOMES
