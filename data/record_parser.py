"""Zeilen-Parser für Schüler-, Personal- und Raum-Dateien.

Format: ein Datensatz pro Zeile, Felder durch Komma getrennt, kein Quoting.
Jeder Fehlerfall hat einen eigenen Ausnahmetyp, damit der Loader die Zeile
mit passender Begründung überspringen kann:

  MalformedLineError  – zu wenige Felder (Zeile wird gar nicht erst gebaut)
  NumericParseError   – Jahrgang / Kapazität ist keine (gültige) Ganzzahl
  ConstructionError   – jeder andere Fehler beim Aufbau des Datensatzes

Guardian-Block (Spalte 4 der Schülerzeile):
  ((Jane Doe;Mother;555-1234) (John Doe;Father;555-5678))  oder  none
"""

import logging
from enum import Enum
from typing import Optional

from models.guardian import Guardian, unknown_guardian
from models.room import Room
from models.staff import Staff
from models.student import Student

logger = logging.getLogger(__name__)

GUARDIAN_OPEN = "(("
GUARDIAN_CLOSE = "))"
GUARDIAN_SEPARATOR = ") ("
GUARDIAN_FIELD_SEPARATOR = ";"
GUARDIAN_FIELDS = 3


class RecordParseError(Exception):
    """Basisklasse: Zeile kann nicht in einen Datensatz übersetzt werden."""

    reason = "construction"


class MalformedLineError(RecordParseError):
    """Zeile hat weniger Felder als der Datensatztyp mindestens braucht."""

    reason = "malformed_line"


class NumericParseError(RecordParseError):
    """Zahlenfeld ist keine gültige Ganzzahl."""

    reason = "numeric_parse"


class ConstructionError(RecordParseError):
    """Sonstiger Fehler beim Aufbau eines Datensatzes."""

    reason = "construction"


class GuardianIssue(str, Enum):
    FORMAT = "guardian_format"
    ENTRY_MALFORMED = "guardian_entry_malformed"


# ─── Felder ───────────────────────────────────────────────────────────────────

def _drop_trailing_empty(parts: list[str]) -> list[str]:
    # "a,b,," liefert zwei Felder, nicht vier
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def split_fields(line: str, delimiter: str = ",") -> list[str]:
    """Zerlegt eine Zeile in getrimmte Felder."""
    return [p.strip() for p in _drop_trailing_empty(line.split(delimiter))]


def _require_fields(fields: list[str], minimum: int, kind: str) -> None:
    if len(fields) < minimum:
        raise MalformedLineError(
            f"{kind} line needs at least {minimum} fields, got {len(fields)}"
        )


def _require_name(fields: list[str], kind: str) -> str:
    if not fields[0]:
        raise ConstructionError(f"{kind} line has an empty name")
    return fields[0]


def _parse_int(raw: str, field: str, minimum: Optional[int] = None) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise NumericParseError(
            f"Error parsing {field} - invalid number format: '{raw}'"
        ) from e
    if minimum is not None and value < minimum:
        raise NumericParseError(f"Error parsing {field} - must be >= {minimum}, got {value}")
    return value


# ─── Guardian-Block ───────────────────────────────────────────────────────────

def parse_guardians(
    raw: str,
    issues: Optional[list[tuple[GuardianIssue, str]]] = None,
) -> list[Guardian]:
    """Parst den Guardian-Block in eine geordnete Liste.

    ``""`` und ``"none"`` ergeben eine leere Liste. Ein unerwartetes Format
    ergibt ebenfalls eine leere Liste (Warnung). Ein Eintrag mit weniger als
    drei Feldern wird durch ``Unknown``-Platzhalter ersetzt, die Anzahl der
    Einträge bleibt also erhalten. Warnungen werden geloggt und, falls
    ``issues`` übergeben wird, dort als (GuardianIssue, Text) angehängt.
    """
    text = raw.strip()
    if not text or text.lower() == "none":
        return []

    if not (text.startswith(GUARDIAN_OPEN) and text.endswith(GUARDIAN_CLOSE)):
        msg = f"Warning: Guardians string format unexpected: {text}"
        logger.warning(msg)
        if issues is not None:
            issues.append((GuardianIssue.FORMAT, msg))
        return []

    body = text[len(GUARDIAN_OPEN):-len(GUARDIAN_CLOSE)]
    guardians: list[Guardian] = []
    for segment in body.split(GUARDIAN_SEPARATOR):
        fields = _drop_trailing_empty(segment.split(GUARDIAN_FIELD_SEPARATOR))
        if len(fields) < GUARDIAN_FIELDS:
            msg = f"Malformed guardian info: {segment}"
            logger.warning(msg)
            if issues is not None:
                issues.append((GuardianIssue.ENTRY_MALFORMED, msg))
            guardians.append(unknown_guardian())
            continue
        name, relation, phone = (f.strip() for f in fields[:GUARDIAN_FIELDS])
        guardians.append(Guardian(
            name=name,
            relationship_to_child=relation,
            phone_number=phone,
        ))
    return guardians


# ─── Datensätze ───────────────────────────────────────────────────────────────
# RecordParseError ist kein ValueError und läuft daher durch die except-Blöcke.

def build_student(
    fields: list[str],
    min_fields: int = 7,
    issues: Optional[list[tuple[GuardianIssue, str]]] = None,
) -> Student:
    """name, grade, gender, guardians, allergies, needsPara, meds"""
    _require_fields(fields, min_fields, "Student")
    try:
        name = _require_name(fields, "Student")
        grade = _parse_int(fields[1], "grade")
        return Student(
            name=name,
            grade=grade,
            gender=fields[2],
            guardians=parse_guardians(fields[3], issues),
            allergies=fields[4],
            needs_para=fields[5].lower() == "yes",
            meds=fields[6],
        )
    except (ValueError, IndexError) as e:
        raise ConstructionError(f"Error creating student from line: {e}") from e


def build_staff(fields: list[str], min_fields: int = 3) -> Staff:
    """name, position, shift[, email]"""
    _require_fields(fields, min_fields, "Staff")
    try:
        return Staff(
            name=_require_name(fields, "Staff"),
            position=fields[1],
            shift=fields[2],
            email=fields[3] if len(fields) > 3 else "",
        )
    except (ValueError, IndexError) as e:
        raise ConstructionError(f"Error creating staff from line: {e}") from e


def build_room(fields: list[str], min_fields: int = 2) -> Room:
    """name, studentCapacity"""
    _require_fields(fields, min_fields, "Room")
    try:
        name = _require_name(fields, "Room")
        capacity = _parse_int(fields[1], "capacity", minimum=0)
        return Room(name=name, student_capacity=capacity)
    except (ValueError, IndexError) as e:
        raise ConstructionError(f"Error creating room from line: {e}") from e
