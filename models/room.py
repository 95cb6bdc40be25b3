"""Datenmodell für einen Raum mit Belegung (Pydantic v2)."""

from pydantic import BaseModel, Field

from models.outcome import Outcome
from models.staff import Staff
from models.student import Student


def _contains(members: list, person) -> bool:
    # Identität statt Gleichheit: zwei Datensätze mit gleichen Feldern sind verschiedene Personen
    return any(m is person for m in members)


class Room(BaseModel):
    """Repräsentiert einen Raum mit Schülerkapazität und aktueller Belegung.

    Invarianten:
    - ``len(students) <= student_capacity``
    - geschlossener Raum hat weder Schüler noch Personal
    - jede Person in ``students``/``staff`` hat ``location == name``
    """

    name: str
    student_capacity: int = Field(ge=0)
    students: list[Student] = []
    staff: list[Staff] = []
    is_closed: bool = False

    @property
    def ratio(self) -> str:
        """Betreuungsschlüssel als Momentaufnahme, z.B. "1 staff : 12 students"."""
        return f"{len(self.staff)} staff : {len(self.students)} students"

    @property
    def is_full(self) -> bool:
        return len(self.students) >= self.student_capacity

    def has_student(self, student: Student) -> bool:
        return _contains(self.students, student)

    def has_staff(self, staff_member: Staff) -> bool:
        return _contains(self.staff, staff_member)

    # ─── Belegung ───

    def add_student(self, student: Student) -> Outcome:
        """Fügt einen Schüler hinzu. Die Prüfreihenfolge bestimmt die Fehlermeldung."""
        if not student.is_present:
            return Outcome.NOT_PRESENT
        if self.has_student(student):
            return Outcome.ALREADY_ASSIGNED
        if self.is_full:
            return Outcome.AT_CAPACITY
        self.students.append(student)
        student.move_to(self.name)
        return Outcome.OK

    def add_staff(self, staff_member: Staff) -> Outcome:
        """Fügt Personal hinzu. Für Personal gibt es keine Kapazitätsgrenze."""
        if not staff_member.is_clocked_in:
            return Outcome.NOT_CLOCKED_IN
        if self.has_staff(staff_member):
            return Outcome.ALREADY_ASSIGNED
        self.staff.append(staff_member)
        staff_member.move_to(self.name)
        return Outcome.OK

    def remove_student(self, student: Student) -> bool:
        for i, member in enumerate(self.students):
            if member is student:
                del self.students[i]
                student.clear_location()
                return True
        return False

    def remove_staff(self, staff_member: Staff) -> bool:
        for i, member in enumerate(self.staff):
            if member is staff_member:
                del self.staff[i]
                staff_member.clear_location()
                return True
        return False

    def evict_all(self) -> tuple[int, int]:
        """Leert den Raum vollständig. Gibt (Schüler, Personal) entfernt zurück."""
        n_students, n_staff = len(self.students), len(self.staff)
        for student in self.students:
            student.clear_location()
        for staff_member in self.staff:
            staff_member.clear_location()
        self.students.clear()
        self.staff.clear()
        return n_students, n_staff
