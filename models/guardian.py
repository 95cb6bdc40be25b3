"""Datenmodell für eine abholberechtigte Kontaktperson (Pydantic v2)."""

from pydantic import BaseModel


class Guardian(BaseModel):
    """Abholberechtigte Person eines Schülers."""

    name: str                  # "Jane Doe"
    relationship_to_child: str # "Mother", "Grandfather", ...
    phone_number: str          # Freitext, keine Formatprüfung

    def __str__(self) -> str:
        return f"{self.name} ({self.relationship_to_child}), Phone: {self.phone_number}"


# Platzhalter für fehlerhafte Einträge im Guardian-Block
UNKNOWN_GUARDIAN_FIELD = "Unknown"


def unknown_guardian() -> Guardian:
    """Erzeugt den Platzhalter für einen nicht lesbaren Guardian-Eintrag."""
    return Guardian(
        name=UNKNOWN_GUARDIAN_FIELD,
        relationship_to_child=UNKNOWN_GUARDIAN_FIELD,
        phone_number=UNKNOWN_GUARDIAN_FIELD,
    )
