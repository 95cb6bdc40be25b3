"""Registry: alle bekannten Schüler, Mitarbeiter und Räume eines Prozesses (Pydantic v2).

Jede Sammlung existiert doppelt: als Liste (Reihenfolge für die Anzeige) und
als Index ``name_key(name) → Objekt`` für die Suche ohne Groß-/Kleinschreibung.
"""

from typing import Optional

from pydantic import BaseModel, PrivateAttr

from models.room import Room
from models.staff import Staff
from models.student import Student


def name_key(name: str) -> str:
    """Einzige Normalisierung für Namen, bei Einfügen und Suche identisch."""
    return " ".join(name.split()).lower()


class DuplicateNameError(ValueError):
    """Ein Datensatz mit diesem Namen ist bereits registriert."""


class Registry(BaseModel):
    """In-Memory-Register, wird an Engine und Shell übergeben (kein globaler Zustand)."""

    students: list[Student] = []
    staff: list[Staff] = []
    rooms: list[Room] = []

    _student_index: dict[str, Student] = PrivateAttr(default_factory=dict)
    _staff_index: dict[str, Staff] = PrivateAttr(default_factory=dict)
    _room_index: dict[str, Room] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        for s in self.students:
            self._student_index[name_key(s.name)] = s
        for s in self.staff:
            self._staff_index[name_key(s.name)] = s
        for r in self.rooms:
            self._room_index[name_key(r.name)] = r

    # ─── Einfügen ───

    def add_student(self, student: Student) -> None:
        key = name_key(student.name)
        if key in self._student_index:
            raise DuplicateNameError(f"Student '{student.name}' is already loaded.")
        self.students.append(student)
        self._student_index[key] = student

    def add_staff(self, staff_member: Staff) -> None:
        key = name_key(staff_member.name)
        if key in self._staff_index:
            raise DuplicateNameError(f"Staff '{staff_member.name}' is already loaded.")
        self.staff.append(staff_member)
        self._staff_index[key] = staff_member

    def add_room(self, room: Room) -> None:
        key = name_key(room.name)
        if key in self._room_index:
            raise DuplicateNameError(f"Room '{room.name}' is already loaded.")
        self.rooms.append(room)
        self._room_index[key] = room

    # ─── Suche ───

    def find_student(self, name: str) -> Optional[Student]:
        return self._student_index.get(name_key(name))

    def find_staff(self, name: str) -> Optional[Staff]:
        return self._staff_index.get(name_key(name))

    def find_room(self, name: str) -> Optional[Room]:
        return self._room_index.get(name_key(name))

    def room_of_student(self, student: Student) -> Optional[Room]:
        """Erster Raum, der den Schüler enthält (es gibt höchstens einen)."""
        return next((r for r in self.rooms if r.has_student(student)), None)

    def room_of_staff(self, staff_member: Staff) -> Optional[Room]:
        return next((r for r in self.rooms if r.has_staff(staff_member)), None)

    # ─── Übersicht ───

    def summary(self) -> str:
        """Kurze Übersicht über den aktuellen Stand."""
        present = sum(1 for s in self.students if s.is_present)
        roomed = sum(len(r.students) for r in self.rooms)
        clocked_in = sum(1 for s in self.staff if s.is_clocked_in)
        closed = sum(1 for r in self.rooms if r.is_closed)
        lines = [
            f"Students: {len(self.students)} ({present} present, {roomed} in rooms)",
            f"Staff: {len(self.staff)} ({clocked_in} clocked in)",
            f"Rooms: {len(self.rooms)} ({len(self.rooms) - closed} open, {closed} closed)",
        ]
        return "\n".join(lines)
