"""Beispieldaten-Generator für das Schulregister.

Erzeugt reproduzierbare Schüler-, Personal- und Raum-Dateien im
Import-Format, die der Loader ohne übersprungene Zeilen einliest.
Namen bestehen immer aus genau einem Vor- und einem Nachnamen, damit
sie über "INFO <first> <last>" erreichbar sind.
"""

import random
from pathlib import Path
from typing import Optional

from models.guardian import Guardian
from models.registry import Registry
from models.room import Room
from models.staff import Staff
from models.student import Student

# ─── Namens-Listen ────────────────────────────────────────────────────────────

_FIRST_NAMES = [
    "Anna", "Ben", "Clara", "David", "Emma", "Felix", "Greta", "Hannah",
    "Jonas", "Karla", "Leon", "Mia", "Noah", "Olivia", "Paul", "Rosa",
    "Samuel", "Tessa", "Umar", "Vera", "Yusuf", "Zoe", "Liam", "Nora",
]

_LAST_NAMES = [
    "Miller", "Smith", "Schneider", "Fischer", "Weber", "Meyer", "Wagner",
    "Becker", "Schulz", "Hoffmann", "Koch", "Bauer", "Richter", "Klein",
    "Wolf", "Neumann", "Braun", "Lange", "Kaiser", "Fuchs", "Berger", "Roth",
]

_RELATIONS = ["Mother", "Father", "Grandmother", "Grandfather", "Aunt", "Uncle"]
_ALLERGIES = ["None", "Peanuts", "Gluten", "Lactose", "Bees", "Penicillin"]
_MEDS = ["None", "Inhaler", "EpiPen", "Insulin"]
_GENDERS = ["F", "M"]

_POSITIONS = ["Teacher", "Teacher", "Teacher", "Aide", "Nurse", "Counselor"]
_SHIFTS = ["AM", "PM", "Full"]

_ROOM_TEMPLATES = [
    ("Gym", 40), ("Library", 30), ("Cafeteria", 80), ("Art", 20),
    ("Music", 20), ("Lab", 24), ("Room101", 25), ("Room102", 25),
    ("Room103", 25), ("Room104", 25),
]


class SampleDataGenerator:
    """Generiert Beispieldatensätze und schreibt sie als Import-Dateien."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self._used_names: set[str] = set()

    def _unique_name(self) -> str:
        # Begrenzter Namensraum: nach vielen Fehlversuchen Zähler anhängen
        for _ in range(200):
            name = f"{self.rng.choice(_FIRST_NAMES)} {self.rng.choice(_LAST_NAMES)}"
            if name not in self._used_names:
                self._used_names.add(name)
                return name
        name = f"{self.rng.choice(_FIRST_NAMES)} {self.rng.choice(_LAST_NAMES)}{len(self._used_names)}"
        self._used_names.add(name)
        return name

    # ─── Datensätze ───────────────────────────────────────────────────────────

    def _make_guardians(self, last_name: str) -> list[Guardian]:
        count = self.rng.choice([0, 1, 1, 2])
        return [
            Guardian(
                name=f"{self.rng.choice(_FIRST_NAMES)} {last_name}",
                relationship_to_child=self.rng.choice(_RELATIONS),
                phone_number=f"555-{self.rng.randint(0, 9999):04d}",
            )
            for _ in range(count)
        ]

    def generate_students(self, count: int) -> list[Student]:
        students = []
        for _ in range(count):
            name = self._unique_name()
            students.append(Student(
                name=name,
                grade=self.rng.randint(1, 12),
                gender=self.rng.choice(_GENDERS),
                guardians=self._make_guardians(name.split()[-1]),
                allergies=self.rng.choice(_ALLERGIES),
                needs_para=self.rng.random() < 0.1,
                meds=self.rng.choice(_MEDS),
            ))
        return students

    def generate_staff(self, count: int) -> list[Staff]:
        staff = []
        for _ in range(count):
            name = self._unique_name()
            first, last = name.split(" ", 1)
            staff.append(Staff(
                name=name,
                position=self.rng.choice(_POSITIONS),
                shift=self.rng.choice(_SHIFTS),
                email=f"{first.lower()}.{last.lower()}@school.example",
            ))
        return staff

    def generate_rooms(self, count: int) -> list[Room]:
        rooms = [Room(name=n, student_capacity=c) for n, c in _ROOM_TEMPLATES[:count]]
        for i in range(len(rooms), count):
            rooms.append(Room(name=f"Room{201 + i}", student_capacity=self.rng.randint(10, 30)))
        return rooms

    def generate(self, students: int = 20, staff: int = 6, rooms: int = 5) -> Registry:
        """Erzeugt einen vollständigen Datensatz als Registry-Objekt."""
        return Registry(
            students=self.generate_students(students),
            staff=self.generate_staff(staff),
            rooms=self.generate_rooms(rooms),
        )

    # ─── Serialisierung im Import-Format ──────────────────────────────────────

    @staticmethod
    def student_line(student: Student) -> str:
        if student.guardians:
            entries = ") (".join(
                f"{g.name};{g.relationship_to_child};{g.phone_number}"
                for g in student.guardians
            )
            block = f"(({entries}))"
        else:
            block = "none"
        return ",".join([
            student.name, str(student.grade), student.gender, block,
            student.allergies, "yes" if student.needs_para else "no", student.meds,
        ])

    @staticmethod
    def staff_line(staff_member: Staff) -> str:
        return ",".join([staff_member.name, staff_member.position,
                         staff_member.shift, staff_member.email])

    @staticmethod
    def room_line(room: Room) -> str:
        return f"{room.name},{room.student_capacity}"

    def write(self, registry: Registry, out_dir: Path) -> dict[str, Path]:
        """Schreibt students.csv, staff.csv und rooms.csv nach out_dir."""
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        files = {
            "students": (out_dir / "students.csv",
                         [self.student_line(s) for s in registry.students]),
            "staff": (out_dir / "staff.csv",
                      [self.staff_line(s) for s in registry.staff]),
            "rooms": (out_dir / "rooms.csv",
                      [self.room_line(r) for r in registry.rooms]),
        }
        written = {}
        for key, (path, lines) in files.items():
            with open(path, "w", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n")
            written[key] = path
        return written
