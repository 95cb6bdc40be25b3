"""Zustandsübergänge auf der Registry (Raumzuweisung, Anwesenheit)."""

from .assignment import RoomAssignmentEngine
from .attendance import AttendanceService

__all__ = [
    "RoomAssignmentEngine",
    "AttendanceService",
]
