import codecs
import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ─── DATEI-IMPORT ───

class LoaderConfig(BaseModel):
    """Einstellungen für das Einlesen der Datensatz-Dateien."""
    # Feldtrenner pro Zeile (kein Quoting, kein Escaping)
    delimiter: str = Field(",", min_length=1,
        description="Feldtrenner pro Zeile")
    # Zeichenkodierung der Eingabedateien
    encoding: str = Field("utf-8",
        description="Zeichenkodierung der Eingabedateien")
    # Leere Zeilen stillschweigend überspringen (sonst: als fehlerhaft melden)
    skip_blank_lines: bool = Field(True,
        description="Leere Zeilen überspringen")
    # Mindestanzahl Felder je Datensatztyp
    min_student_fields: int = Field(7, ge=1,
        description="Mindestfelder Schüler-Zeile")
    min_staff_fields: int = Field(3, ge=1,
        description="Mindestfelder Personal-Zeile")
    min_room_fields: int = Field(2, ge=1,
        description="Mindestfelder Raum-Zeile")

    @field_validator("delimiter")
    @classmethod
    def _delimiter_not_guardian_syntax(cls, v: str) -> str:
        # ; ( ) gehören zur Guardian-Grammatik
        if any(ch in v for ch in ";()"):
            raise ValueError(f"Feldtrenner '{v}' kollidiert mit dem Guardian-Format")
        return v

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unbekannte Zeichenkodierung: {v}") from e
        return v


# ─── SHELL ───

class ShellConfig(BaseModel):
    """Einstellungen der interaktiven Kommandozeile."""
    # Eingabeaufforderung
    prompt: str = Field("> ",
        description="Eingabeaufforderung")
    # Hilfe direkt nach dem Start anzeigen
    show_help_on_start: bool = Field(True,
        description="Hilfe beim Start anzeigen")


# ─── LOGGING ───

class LoggingConfig(BaseModel):
    """Logging-Konfiguration (stdlib logging, Ausgabe über Rich)."""
    # Log-Level für die Konsole
    level: str = Field("WARNING",
        description="DEBUG, INFO, WARNING, ERROR")
    # Optionale Log-Datei (zusätzlich zur Konsole)
    log_file: Optional[str] = Field(None,
        description="Pfad zur Log-Datei (optional)")

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unbekanntes Log-Level: {v}")
        return v


# ─── GESAMT-CONFIG ───

class RegistryConfig(BaseModel):
    """Gesamtkonfiguration des Schulregisters."""
    # Name der Schule (Begrüßung)
    school_name: str = Field("School Registry",
        description="Name der Schule")
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
