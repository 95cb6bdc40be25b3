"""Raumzuweisung: Schüler und Personal in Räume setzen, Räume öffnen/schließen.

Regeln:
  - Eine Person ist höchstens in einem Raum.
  - Geschlossene Räume sind leer und nehmen niemanden auf.
  - Schülerzahl ≤ Kapazität; Personal ist unbegrenzt.

Beim Zuweisen wird die Person ZUERST aus ihrem bisherigen Raum entfernt und
erst danach prüft Room.add_student / add_staff, ob der Zielraum sie aufnimmt.
Scheitert die Aufnahme, ist die Person anschließend in keinem Raum. Das ist
das gewollte Verhalten (kein Zurücksetzen auf den alten Raum).
"""

import logging
from typing import Optional

from models.outcome import Action, OperationResult, Outcome
from models.registry import Registry
from models.room import Room
from models.staff import Staff
from models.student import Student

logger = logging.getLogger(__name__)


class RoomAssignmentEngine:
    """Alle Zustandsübergänge, die Raumbelegungen verändern."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    # ─── Entfernen ───

    def evict_student(self, student: Student) -> Optional[Room]:
        """Entfernt den Schüler aus seinem Raum (falls vorhanden), Ort → "N/A"."""
        room = self.registry.room_of_student(student)
        if room is not None:
            room.remove_student(student)
            logger.info(f"Student {student.name} removed from {room.name}")
        return room

    def evict_staff(self, staff_member: Staff) -> Optional[Room]:
        room = self.registry.room_of_staff(staff_member)
        if room is not None:
            room.remove_staff(staff_member)
            logger.info(f"Staff {staff_member.name} removed from {room.name}")
        return room

    # ─── Zuweisen ───

    def assign_student(self, student_name: str, room_name: str) -> OperationResult:
        student = self.registry.find_student(student_name)
        room = self.registry.find_room(room_name)
        missing = self._missing(student_name if student is None else None,
                                room_name if room is None else None)
        if missing:
            return OperationResult(action=Action.ASSIGN_STUDENT, outcome=Outcome.NOT_FOUND,
                                   subject=student_name, room=room_name, missing=missing)
        if room.is_closed:
            return OperationResult(action=Action.ASSIGN_STUDENT, outcome=Outcome.ROOM_CLOSED,
                                   subject=student.name, room=room.name)

        previous = self.evict_student(student)
        outcome = room.add_student(student)
        if outcome == Outcome.OK:
            logger.info(f"Student {student.name} added to {room.name}")
        return OperationResult(
            action=Action.ASSIGN_STUDENT,
            outcome=outcome,
            subject=student.name,
            room=room.name,
            capacity=room.student_capacity if outcome == Outcome.AT_CAPACITY else None,
            evicted_from=previous.name if previous is not None else None,
        )

    def assign_staff(self, staff_name: str, room_name: str) -> OperationResult:
        staff_member = self.registry.find_staff(staff_name)
        room = self.registry.find_room(room_name)
        missing = self._missing(staff_name if staff_member is None else None,
                                room_name if room is None else None)
        if missing:
            return OperationResult(action=Action.ASSIGN_STAFF, outcome=Outcome.NOT_FOUND,
                                   subject=staff_name, room=room_name, missing=missing)
        if room.is_closed:
            return OperationResult(action=Action.ASSIGN_STAFF, outcome=Outcome.ROOM_CLOSED,
                                   subject=staff_member.name, room=room.name)

        previous = self.evict_staff(staff_member)
        outcome = room.add_staff(staff_member)
        if outcome == Outcome.OK:
            logger.info(f"Staff {staff_member.name} assigned to {room.name}")
        return OperationResult(
            action=Action.ASSIGN_STAFF,
            outcome=outcome,
            subject=staff_member.name,
            room=room.name,
            evicted_from=previous.name if previous is not None else None,
        )

    # ─── Raumstatus ───

    def open_room(self, room_name: str) -> OperationResult:
        room = self.registry.find_room(room_name)
        if room is None:
            return OperationResult(action=Action.OPEN_ROOM, outcome=Outcome.NOT_FOUND,
                                   room=room_name, missing=[room_name])
        if not room.is_closed:
            return OperationResult(action=Action.OPEN_ROOM, outcome=Outcome.ALREADY_OPEN,
                                   room=room.name)
        room.is_closed = False
        logger.info(f"Room {room.name} opened")
        return OperationResult(action=Action.OPEN_ROOM, outcome=Outcome.OK, room=room.name)

    def close_room(self, room_name: str) -> OperationResult:
        room = self.registry.find_room(room_name)
        if room is None:
            return OperationResult(action=Action.CLOSE_ROOM, outcome=Outcome.NOT_FOUND,
                                   room=room_name, missing=[room_name])
        if room.is_closed:
            return OperationResult(action=Action.CLOSE_ROOM, outcome=Outcome.ALREADY_CLOSED,
                                   room=room.name)
        n_students, n_staff = room.evict_all()
        room.is_closed = True
        logger.info(
            f"Room {room.name} closed ({n_students} students, {n_staff} staff removed)"
        )
        return OperationResult(
            action=Action.CLOSE_ROOM,
            outcome=Outcome.OK,
            room=room.name,
            evicted_students=n_students,
            evicted_staff=n_staff,
        )

    def ratio(self, room_name: str) -> Optional[str]:
        room = self.registry.find_room(room_name)
        return room.ratio if room is not None else None

    @staticmethod
    def _missing(*names: Optional[str]) -> list[str]:
        return [n for n in names if n is not None]
