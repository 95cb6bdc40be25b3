"""Tests für den Guardian-Block und die Datensatz-Konstruktion."""

import pytest

from data.record_parser import (
    ConstructionError,
    GuardianIssue,
    MalformedLineError,
    NumericParseError,
    build_room,
    build_staff,
    build_student,
    parse_guardians,
    split_fields,
)
from models.guardian import UNKNOWN_GUARDIAN_FIELD


# ─── GUARDIAN-BLOCK ───────────────────────────────────────────────────────────

class TestParseGuardians:
    def test_none_and_empty(self):
        """'none' (beliebige Schreibweise) und '' ergeben keine Guardians."""
        assert parse_guardians("none") == []
        assert parse_guardians("NONE") == []
        assert parse_guardians("") == []
        assert parse_guardians("   ") == []

    def test_single_guardian(self):
        guardians = parse_guardians("((Jane Doe;Mother;555-1234))")
        assert len(guardians) == 1
        g = guardians[0]
        assert g.name == "Jane Doe"
        assert g.relationship_to_child == "Mother"
        assert g.phone_number == "555-1234"
        assert str(g) == "Jane Doe (Mother), Phone: 555-1234"

    def test_multiple_guardians_keep_order(self):
        guardians = parse_guardians(
            "((Jane Doe;Mother;555-1234) (John Doe;Father;555-5678))"
        )
        assert [g.name for g in guardians] == ["Jane Doe", "John Doe"]
        assert guardians[1].relationship_to_child == "Father"

    def test_fields_are_trimmed(self):
        guardians = parse_guardians("(( Jane Doe ; Mother ; 555-1234 ))")
        assert guardians[0].name == "Jane Doe"
        assert guardians[0].phone_number == "555-1234"

    def test_malformed_entry_becomes_placeholder(self):
        """Eintrag mit < 3 Feldern → Platzhalter, Anzahl bleibt erhalten."""
        issues = []
        guardians = parse_guardians("((Jane Doe;Mother) (John Doe;Father;555-5678))", issues)
        assert len(guardians) == 2
        assert guardians[0].name == UNKNOWN_GUARDIAN_FIELD
        assert guardians[0].relationship_to_child == UNKNOWN_GUARDIAN_FIELD
        assert guardians[0].phone_number == UNKNOWN_GUARDIAN_FIELD
        assert guardians[1].name == "John Doe"
        assert len(issues) == 1
        assert issues[0][0] == GuardianIssue.ENTRY_MALFORMED
        assert "Malformed guardian info" in issues[0][1]

    def test_trailing_empty_field_counts_as_missing(self):
        """'Jane;Mother;' hat nur zwei Felder."""
        guardians = parse_guardians("((Jane Doe;Mother;))")
        assert guardians[0].name == UNKNOWN_GUARDIAN_FIELD

    def test_unexpected_format_gives_empty_list(self):
        issues = []
        assert parse_guardians("Jane Doe;Mother;555-1234", issues) == []
        assert issues[0][0] == GuardianIssue.FORMAT
        assert "Guardians string format unexpected" in issues[0][1]

    def test_unexpected_format_is_logged(self, caplog):
        with caplog.at_level("WARNING"):
            parse_guardians("(Jane Doe;Mother;555-1234)")
        assert "format unexpected" in caplog.text


# ─── FELDER ───────────────────────────────────────────────────────────────────

class TestSplitFields:
    def test_trims_fields(self):
        assert split_fields(" Gym , 2 ") == ["Gym", "2"]

    def test_drops_trailing_empty_fields(self):
        assert split_fields("a,b,,") == ["a", "b"]

    def test_keeps_inner_empty_fields(self):
        assert split_fields("a,,b") == ["a", "", "b"]

    def test_custom_delimiter(self):
        assert split_fields("Gym|2", "|") == ["Gym", "2"]


# ─── DATENSÄTZE ───────────────────────────────────────────────────────────────

class TestBuildRecords:
    def test_build_student(self):
        fields = split_fields(
            "Alex Kim,3,F,((Jane Doe;Mother;555-1234)),Peanuts,yes,EpiPen"
        )
        s = build_student(fields)
        assert s.name == "Alex Kim"
        assert s.grade == 3
        assert s.gender == "F"
        assert len(s.guardians) == 1
        assert s.allergies == "Peanuts"
        assert s.needs_para is True
        assert s.meds == "EpiPen"
        assert s.is_present is False
        assert s.location == "N/A"

    def test_needs_para_only_yes_is_true(self):
        s = build_student(split_fields("Alex Kim,3,F,none,None,YES,None"))
        assert s.needs_para is True
        s = build_student(split_fields("Bo Lee,3,F,none,None,true,None"))
        assert s.needs_para is False

    def test_student_too_few_fields(self):
        with pytest.raises(MalformedLineError):
            build_student(split_fields("Alex Kim,3,F"))

    def test_student_bad_grade(self):
        with pytest.raises(NumericParseError):
            build_student(split_fields("Alex Kim,three,F,none,None,no,None"))

    def test_student_empty_name(self):
        with pytest.raises(ConstructionError):
            build_student(split_fields(",3,F,none,None,no,None"))

    def test_student_low_min_fields_is_construction_error(self):
        """Zu niedrig konfigurierte Mindestfeldzahl → ConstructionError statt IndexError."""
        with pytest.raises(ConstructionError):
            build_student(split_fields("Alex Kim,3"), min_fields=2)

    def test_build_staff_with_and_without_email(self):
        s = build_staff(split_fields("Pat Lee,Teacher,AM,pat@school.example"))
        assert s.email == "pat@school.example"
        assert s.is_clocked_in is False
        assert s.location == "Not clocked in"
        s = build_staff(split_fields("Sam Roe,Nurse,PM"))
        assert s.email == ""

    def test_staff_too_few_fields(self):
        with pytest.raises(MalformedLineError):
            build_staff(split_fields("Pat Lee,Teacher"))

    def test_build_room(self):
        r = build_room(split_fields("Gym,2"))
        assert r.name == "Gym"
        assert r.student_capacity == 2
        assert r.is_closed is False
        assert r.students == [] and r.staff == []

    def test_room_bad_capacity(self):
        with pytest.raises(NumericParseError):
            build_room(split_fields("Gym,lots"))

    def test_room_negative_capacity(self):
        with pytest.raises(NumericParseError):
            build_room(split_fields("Gym,-1"))

    def test_room_zero_capacity_allowed(self):
        assert build_room(split_fields("Office,0")).student_capacity == 0
