"""Datei-Import: Schüler, Personal und Räume zeilenweise in die Registry laden.

Fehlerhafte Zeilen werden übersprungen und im LoadReport vermerkt; das Laden
läuft weiter. Bereits geladene Datensätze bleiben bestehen (kein Rollback).
Ist die Datei nicht lesbar, wird OSError weitergereicht und die Registry
bleibt für diese Datei unverändert.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel

from config.schema import LoaderConfig
from data.record_parser import (
    GuardianIssue,
    RecordParseError,
    build_room,
    build_staff,
    build_student,
    split_fields,
)
from models.registry import DuplicateNameError, Registry

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    STUDENT = "students"
    STAFF = "staff"
    ROOM = "rooms"


class SkipReason(str, Enum):
    MALFORMED_LINE = "malformed_line"
    NUMERIC_PARSE = "numeric_parse"
    CONSTRUCTION = "construction"
    DUPLICATE_NAME = "duplicate_name"


class SkippedLine(BaseModel):
    """Eine übersprungene Eingabezeile mit Begründung."""

    line_number: int
    line: str
    reason: SkipReason
    detail: str


class LoadReport(BaseModel):
    """Ergebnis eines Datei-Imports."""

    kind: RecordKind
    source: str
    loaded: list[str] = []          # Namen in Lade-Reihenfolge
    skipped: list[SkippedLine] = []
    warnings: list[str] = []        # Guardian-Hinweise (Zeile wurde trotzdem geladen)

    @property
    def loaded_count(self) -> int:
        return len(self.loaded)


def _skip_reason(error: RecordParseError) -> SkipReason:
    return SkipReason(error.reason)


def load_lines(
    lines: Iterable[str],
    kind: RecordKind,
    registry: Registry,
    config: Optional[LoaderConfig] = None,
    source: str = "<lines>",
) -> LoadReport:
    """Lädt Datensätze aus beliebigen Zeilen (Datei, Test, Skript)."""
    cfg = config or LoaderConfig()
    report = LoadReport(kind=kind, source=source)

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() and cfg.skip_blank_lines:
            continue

        fields = split_fields(line, cfg.delimiter)
        issues: list[tuple[GuardianIssue, str]] = []
        try:
            if kind == RecordKind.STUDENT:
                record = build_student(fields, cfg.min_student_fields, issues)
                registry.add_student(record)
            elif kind == RecordKind.STAFF:
                record = build_staff(fields, cfg.min_staff_fields)
                registry.add_staff(record)
            else:
                record = build_room(fields, cfg.min_room_fields)
                registry.add_room(record)
        except RecordParseError as e:
            logger.warning(f"{source}:{line_number}: skipping line ({e.reason}): {e}")
            report.skipped.append(SkippedLine(
                line_number=line_number, line=line,
                reason=_skip_reason(e), detail=str(e),
            ))
            continue
        except DuplicateNameError as e:
            logger.warning(f"{source}:{line_number}: skipping line (duplicate): {e}")
            report.skipped.append(SkippedLine(
                line_number=line_number, line=line,
                reason=SkipReason.DUPLICATE_NAME, detail=str(e),
            ))
            continue

        for _, msg in issues:
            report.warnings.append(f"line {line_number}: {msg}")
        report.loaded.append(record.name)
        logger.debug(f"{source}:{line_number}: loaded {kind.value} record '{record.name}'")

    logger.info(
        f"Finished loading {report.loaded_count} {kind.value} from {source} "
        f"({len(report.skipped)} skipped)"
    )
    return report


def load_file(
    path: Path,
    kind: RecordKind,
    registry: Registry,
    config: Optional[LoaderConfig] = None,
) -> LoadReport:
    """Lädt eine Datei. FileNotFoundError / OSError gehen an den Aufrufer."""
    cfg = config or LoaderConfig()
    path = Path(path)
    with open(path, "r", encoding=cfg.encoding) as f:
        # komplett einlesen, damit ein Lesefehler nichts halb lädt
        lines = f.readlines()
    return load_lines(lines, kind, registry, cfg, source=str(path))


def load_students(path: Path, registry: Registry,
                  config: Optional[LoaderConfig] = None) -> LoadReport:
    return load_file(path, RecordKind.STUDENT, registry, config)


def load_staff(path: Path, registry: Registry,
               config: Optional[LoaderConfig] = None) -> LoadReport:
    return load_file(path, RecordKind.STAFF, registry, config)


def load_rooms(path: Path, registry: Registry,
               config: Optional[LoaderConfig] = None) -> LoadReport:
    return load_file(path, RecordKind.ROOM, registry, config)
