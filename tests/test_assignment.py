"""Tests für die Raumzuweisung (RoomAssignmentEngine)."""

import pytest

from engine.assignment import RoomAssignmentEngine
from export.console_renderer import format_result
from models.outcome import Action, Outcome
from models.registry import Registry
from models.room import Room
from models.staff import Staff
from models.student import Student


def _student(name: str, present: bool = True) -> Student:
    return Student(name=name, grade=3, gender="F", is_present=present)


def _staff(name: str, clocked_in: bool = True) -> Staff:
    return Staff(name=name, position="Teacher", shift="AM", is_clocked_in=clocked_in)


@pytest.fixture
def registry() -> Registry:
    return Registry(
        students=[_student("Alex Kim"), _student("Bo Lee"), _student("Cy Ray"),
                  _student("Dee Fox", present=False)],
        staff=[_staff("Pat Lee"), _staff("Sam Roe", clocked_in=False)],
        rooms=[Room(name="Gym", student_capacity=2), Room(name="Art", student_capacity=20)],
    )


@pytest.fixture
def engine(registry: Registry) -> RoomAssignmentEngine:
    return RoomAssignmentEngine(registry)


def _occupancy(registry: Registry, student: Student) -> int:
    return sum(1 for r in registry.rooms if r.has_student(student))


# ─── SCHÜLER ──────────────────────────────────────────────────────────────────

class TestAssignStudent:
    def test_assign_and_ratio(self, engine, registry):
        """Zwei Schüler in den Gym → Betreuungsschlüssel 0 : 2."""
        assert engine.assign_student("Alex Kim", "Gym").outcome == Outcome.OK
        assert engine.assign_student("Bo Lee", "Gym").outcome == Outcome.OK
        assert engine.ratio("Gym") == "0 staff : 2 students"
        assert registry.find_student("Alex Kim").location == "Gym"

    def test_at_capacity(self, engine, registry):
        """Voller Raum: Schüler wird abgewiesen, Ort bleibt unverändert."""
        engine.assign_student("Alex Kim", "Gym")
        engine.assign_student("Bo Lee", "Gym")
        result = engine.assign_student("Cy Ray", "Gym")
        assert result.outcome == Outcome.AT_CAPACITY
        assert result.capacity == 2
        assert registry.find_student("Cy Ray").location == "N/A"
        assert len(registry.find_room("Gym").students) == 2
        assert format_result(result)[-1][1] == (
            "Cannot add student Cy Ray - room Gym is at capacity (2 students)."
        )

    def test_not_present(self, engine, registry):
        result = engine.assign_student("Dee Fox", "Art")
        assert result.outcome == Outcome.NOT_PRESENT
        assert registry.find_room("Art").students == []

    def test_lookup_is_case_insensitive(self, engine, registry):
        result = engine.assign_student("alex kim", "gym")
        assert result.outcome == Outcome.OK
        assert result.subject == "Alex Kim"
        assert result.room == "Gym"

    def test_move_keeps_single_room(self, engine, registry):
        """Umsetzen entfernt den Schüler aus dem alten Raum."""
        engine.assign_student("Alex Kim", "Gym")
        result = engine.assign_student("Alex Kim", "Art")
        assert result.outcome == Outcome.OK
        assert result.evicted_from == "Gym"
        alex = registry.find_student("Alex Kim")
        assert _occupancy(registry, alex) == 1
        assert alex.location == "Art"
        assert registry.find_room("Gym").students == []

    def test_reassign_same_room(self, engine, registry):
        """Erneute Zuweisung in denselben Raum: raus und wieder rein."""
        engine.assign_student("Alex Kim", "Gym")
        result = engine.assign_student("Alex Kim", "Gym")
        assert result.outcome == Outcome.OK
        assert result.evicted_from == "Gym"
        assert len(registry.find_room("Gym").students) == 1

    def test_failed_move_leaves_student_roomless(self, engine, registry):
        """Scheitert die Aufnahme, ist der Schüler danach in keinem Raum."""
        engine.assign_student("Alex Kim", "Gym")
        engine.assign_student("Bo Lee", "Gym")
        engine.assign_student("Cy Ray", "Art")
        result = engine.assign_student("Cy Ray", "Gym")
        assert result.outcome == Outcome.AT_CAPACITY
        assert result.evicted_from == "Art"
        cy = registry.find_student("Cy Ray")
        assert _occupancy(registry, cy) == 0
        assert cy.location == "N/A"

    def test_not_found(self, engine):
        result = engine.assign_student("Nobody Here", "Gym")
        assert result.outcome == Outcome.NOT_FOUND
        assert result.missing == ["Nobody Here"]

    def test_both_not_found(self, engine):
        result = engine.assign_student("Nobody Here", "Attic")
        assert result.missing == ["Nobody Here", "Attic"]
        texts = [text for _, text in format_result(result)]
        assert texts == ["Nobody Here not found!", "Attic not found!"]

    def test_closed_room(self, engine, registry):
        engine.close_room("Art")
        result = engine.assign_student("Alex Kim", "Art")
        assert result.outcome == Outcome.ROOM_CLOSED
        assert registry.find_room("Art").students == []


# ─── PERSONAL ─────────────────────────────────────────────────────────────────

class TestAssignStaff:
    def test_staff_has_no_capacity_limit(self, engine, registry):
        """Personal zählt nicht gegen die Schülerkapazität."""
        engine.assign_student("Alex Kim", "Gym")
        engine.assign_student("Bo Lee", "Gym")
        result = engine.assign_staff("Pat Lee", "Gym")
        assert result.outcome == Outcome.OK
        assert engine.ratio("Gym") == "1 staff : 2 students"
        assert registry.find_staff("Pat Lee").location == "Gym"

    def test_not_clocked_in(self, engine, registry):
        result = engine.assign_staff("Sam Roe", "Gym")
        assert result.outcome == Outcome.NOT_CLOCKED_IN
        assert registry.find_room("Gym").staff == []

    def test_move_staff(self, engine, registry):
        engine.assign_staff("Pat Lee", "Gym")
        result = engine.assign_staff("Pat Lee", "Art")
        assert result.evicted_from == "Gym"
        assert registry.find_room("Gym").staff == []
        assert format_result(result)[0][1] == "Staff Pat Lee removed from Gym"

    def test_closed_room(self, engine):
        engine.close_room("Gym")
        assert engine.assign_staff("Pat Lee", "Gym").outcome == Outcome.ROOM_CLOSED


# ─── RAUMSTATUS ───────────────────────────────────────────────────────────────

class TestRoomState:
    def test_close_evicts_everyone(self, engine, registry):
        engine.assign_student("Alex Kim", "Gym")
        engine.assign_staff("Pat Lee", "Gym")
        result = engine.close_room("Gym")
        assert result.outcome == Outcome.OK
        assert result.evicted_students == 1
        assert result.evicted_staff == 1
        gym = registry.find_room("Gym")
        assert gym.is_closed
        assert gym.students == [] and gym.staff == []
        assert registry.find_student("Alex Kim").location == "N/A"
        # eingestempelt, aber ohne Raum
        assert registry.find_staff("Pat Lee").location == "N/A"

    def test_close_twice(self, engine, registry):
        """Zweites Schließen ist ein No-op, der Raum bleibt leer."""
        engine.assign_student("Alex Kim", "Gym")
        engine.close_room("Gym")
        gym = registry.find_room("Gym")
        assert gym.students == [] and gym.staff == []
        result = engine.close_room("Gym")
        assert result.outcome == Outcome.ALREADY_CLOSED
        assert result.is_no_op
        assert gym.students == [] and gym.staff == []
        assert format_result(result) == [("yellow", "Room Gym is already closed!")]

    def test_open_closed_room(self, engine, registry):
        engine.close_room("Gym")
        result = engine.open_room("gym")
        assert result.outcome == Outcome.OK
        assert registry.find_room("Gym").is_closed is False

    def test_open_already_open(self, engine):
        assert engine.open_room("Gym").outcome == Outcome.ALREADY_OPEN

    def test_open_unknown_room(self, engine):
        result = engine.open_room("Attic")
        assert result.outcome == Outcome.NOT_FOUND
        assert result.action == Action.OPEN_ROOM

    def test_ratio_unknown_room(self, engine):
        assert engine.ratio("Attic") is None


# ─── RAUM (direkt) ────────────────────────────────────────────────────────────

class TestRoom:
    def test_add_student_twice(self):
        """Derselbe Schüler zweimal → ALREADY_ASSIGNED, keine Doppelbelegung."""
        room = Room(name="Gym", student_capacity=2)
        alex = _student("Alex Kim")
        assert room.add_student(alex) == Outcome.OK
        assert room.add_student(alex) == Outcome.ALREADY_ASSIGNED
        assert len(room.students) == 1
        assert alex.location == "Gym"

    def test_already_assigned_checked_before_capacity(self):
        room = Room(name="Closet", student_capacity=1)
        alex = _student("Alex Kim")
        room.add_student(alex)
        assert room.add_student(alex) == Outcome.ALREADY_ASSIGNED

    def test_add_staff_twice(self):
        room = Room(name="Gym", student_capacity=2)
        pat = _staff("Pat Lee")
        assert room.add_staff(pat) == Outcome.OK
        assert room.add_staff(pat) == Outcome.ALREADY_ASSIGNED
        assert len(room.staff) == 1

    def test_membership_by_identity(self):
        """Gleiche Felder, anderes Objekt: zählt als andere Person."""
        room = Room(name="Gym", student_capacity=2)
        room.add_student(_student("Alex Kim"))
        assert room.add_student(_student("Alex Kim")) == Outcome.OK
        assert len(room.students) == 2
