from models.guardian import Guardian
from models.student import Student, NO_LOCATION
from models.staff import Staff, CLOCKED_OUT_LOCATION
from models.room import Room
from models.outcome import Action, Outcome, OperationResult
from models.registry import Registry, DuplicateNameError, name_key

__all__ = [
    "Guardian",
    "Student",
    "Staff",
    "Room",
    "Action",
    "Outcome",
    "OperationResult",
    "Registry",
    "DuplicateNameError",
    "name_key",
    "NO_LOCATION",
    "CLOCKED_OUT_LOCATION",
]
