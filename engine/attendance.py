"""Anwesenheit (Schüler) und Stempeln (Personal).

Zwei Zustände je Person. Wer abwesend gemeldet bzw. ausgestempelt wird,
verlässt seinen Raum.
"""

import logging

from engine.assignment import RoomAssignmentEngine
from models.outcome import Action, OperationResult, Outcome

logger = logging.getLogger(__name__)


class AttendanceService:

    def __init__(self, rooms: RoomAssignmentEngine) -> None:
        self.rooms = rooms
        self.registry = rooms.registry

    def mark_present(self, name: str) -> OperationResult:
        student = self.registry.find_student(name)
        if student is None:
            return OperationResult(action=Action.MARK_PRESENT, outcome=Outcome.NOT_FOUND,
                                   subject=name, missing=[name])
        outcome = student.mark_present()
        if outcome == Outcome.OK:
            logger.info(f"{student.name} marked present")
        return OperationResult(action=Action.MARK_PRESENT, outcome=outcome,
                               subject=student.name)

    def mark_absent(self, name: str) -> OperationResult:
        student = self.registry.find_student(name)
        if student is None:
            return OperationResult(action=Action.MARK_ABSENT, outcome=Outcome.NOT_FOUND,
                                   subject=name, missing=[name])
        outcome = student.mark_absent()
        previous = None
        if outcome == Outcome.OK:
            previous = self.rooms.evict_student(student)
            student.clear_location()
            logger.info(f"{student.name} marked absent")
        return OperationResult(
            action=Action.MARK_ABSENT,
            outcome=outcome,
            subject=student.name,
            evicted_from=previous.name if previous is not None else None,
        )

    def clock_in(self, name: str) -> OperationResult:
        staff_member = self.registry.find_staff(name)
        if staff_member is None:
            return OperationResult(action=Action.CLOCK_IN, outcome=Outcome.NOT_FOUND,
                                   subject=name, missing=[name])
        outcome = staff_member.clock_in()
        if outcome == Outcome.OK:
            logger.info(f"{staff_member.name} clocked in")
        return OperationResult(action=Action.CLOCK_IN, outcome=outcome,
                               subject=staff_member.name)

    def clock_out(self, name: str) -> OperationResult:
        staff_member = self.registry.find_staff(name)
        if staff_member is None:
            return OperationResult(action=Action.CLOCK_OUT, outcome=Outcome.NOT_FOUND,
                                   subject=name, missing=[name])
        outcome = staff_member.clock_out()
        previous = None
        if outcome == Outcome.OK:
            previous = self.rooms.evict_staff(staff_member)
            logger.info(f"{staff_member.name} clocked out")
        return OperationResult(
            action=Action.CLOCK_OUT,
            outcome=outcome,
            subject=staff_member.name,
            evicted_from=previous.name if previous is not None else None,
        )
