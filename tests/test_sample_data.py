"""Tests für den Beispieldaten-Generator."""

from pathlib import Path

from data.file_loader import load_rooms, load_staff, load_students
from data.sample_data import SampleDataGenerator
from models.registry import Registry


class TestSampleData:
    def test_generate_counts(self):
        registry = SampleDataGenerator(seed=42).generate(students=12, staff=4, rooms=3)
        assert len(registry.students) == 12
        assert len(registry.staff) == 4
        assert len(registry.rooms) == 3

    def test_names_unique_and_two_tokens(self):
        """Alle Namen sind eindeutig und über "<first> <last>" erreichbar."""
        registry = SampleDataGenerator(seed=1).generate(students=40, staff=10)
        names = [s.name for s in registry.students] + [s.name for s in registry.staff]
        assert len(names) == len({n.lower() for n in names})
        for name in names:
            assert len(name.split()) == 2, name

    def test_more_rooms_than_templates(self):
        registry = SampleDataGenerator(seed=0).generate(rooms=12)
        names = [r.name for r in registry.rooms]
        assert len(names) == len(set(names)) == 12

    def test_same_seed_is_reproducible(self):
        a = SampleDataGenerator(seed=7).generate()
        b = SampleDataGenerator(seed=7).generate()
        assert [SampleDataGenerator.student_line(s) for s in a.students] == \
               [SampleDataGenerator.student_line(s) for s in b.students]

    def test_student_line_format(self):
        registry = SampleDataGenerator(seed=3).generate(students=20)
        for student in registry.students:
            line = SampleDataGenerator.student_line(student)
            guardian_block = line.split(",")[3]
            assert guardian_block == "none" or guardian_block.startswith("((")

    def test_written_files_load_without_skips(self, tmp_path: Path):
        """Geschriebene Dateien lassen sich vollständig wieder einlesen."""
        gen = SampleDataGenerator(seed=42)
        original = gen.generate(students=25, staff=8, rooms=6)
        written = gen.write(original, tmp_path / "out")
        assert set(written) == {"students", "staff", "rooms"}

        registry = Registry()
        reports = [
            load_students(written["students"], registry),
            load_staff(written["staff"], registry),
            load_rooms(written["rooms"], registry),
        ]
        for report in reports:
            assert report.skipped == []
            assert report.warnings == []
        assert [s.name for s in registry.students] == [s.name for s in original.students]
        assert registry.students[0].guardians == original.students[0].guardians
        assert [r.student_capacity for r in registry.rooms] == \
               [r.student_capacity for r in original.rooms]
