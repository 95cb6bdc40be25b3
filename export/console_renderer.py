"""Terminal-Ausgabe (Rich) für Registry-Zustand, Ladeberichte und Operations-Ergebnisse.

Die Engine liefert nur OperationResult-Werte; erst hier entstehen die
Meldungstexte. format_result() ist ohne Konsole testbar.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config.defaults import COMMAND_HELP
from data.file_loader import LoadReport, RecordKind
from models.outcome import Action, OperationResult, Outcome
from models.registry import Registry
from models.room import Room
from models.staff import Staff
from models.student import Student

_STYLE_OK = "green"
_STYLE_NO_OP = "yellow"
_STYLE_ERROR = "red"

# (Aktion, Ergebnis) → Meldungsvorlage
_MESSAGES: dict[tuple[Action, Outcome], str] = {
    (Action.ASSIGN_STUDENT, Outcome.OK): "Student {subject} added to {room}",
    (Action.ASSIGN_STUDENT, Outcome.ROOM_CLOSED): "Cannot add student {subject} - room {room} is closed.",
    (Action.ASSIGN_STUDENT, Outcome.NOT_PRESENT): "Cannot add student {subject} - student is not present.",
    (Action.ASSIGN_STUDENT, Outcome.ALREADY_ASSIGNED): "Student {subject} is already in this room.",
    (Action.ASSIGN_STUDENT, Outcome.AT_CAPACITY): (
        "Cannot add student {subject} - room {room} is at capacity ({capacity} students)."
    ),
    (Action.ASSIGN_STAFF, Outcome.OK): "Staff {subject} assigned to {room}",
    (Action.ASSIGN_STAFF, Outcome.ROOM_CLOSED): "Cannot add staff {subject} - room {room} is closed.",
    (Action.ASSIGN_STAFF, Outcome.NOT_CLOCKED_IN): "Cannot add staff {subject} - staff is not clocked in.",
    (Action.ASSIGN_STAFF, Outcome.ALREADY_ASSIGNED): "Staff {subject} is already assigned to this room.",
    (Action.OPEN_ROOM, Outcome.OK): "Room {room} opened",
    (Action.OPEN_ROOM, Outcome.ALREADY_OPEN): "Room {room} is already open!",
    (Action.CLOSE_ROOM, Outcome.OK): (
        "Room {room} closed ({evicted_students} students and {evicted_staff} staff sent out)"
    ),
    (Action.CLOSE_ROOM, Outcome.ALREADY_CLOSED): "Room {room} is already closed!",
    (Action.MARK_PRESENT, Outcome.OK): "{subject} marked present",
    (Action.MARK_PRESENT, Outcome.ALREADY_PRESENT): "Student is already present!",
    (Action.MARK_ABSENT, Outcome.OK): "{subject} marked absent",
    (Action.MARK_ABSENT, Outcome.ALREADY_ABSENT): "Student is already absent!",
    (Action.CLOCK_IN, Outcome.OK): "{subject} clocked in",
    (Action.CLOCK_IN, Outcome.ALREADY_CLOCKED_IN): "Staff is already clocked in!",
    (Action.CLOCK_OUT, Outcome.OK): "{subject} clocked out",
    (Action.CLOCK_OUT, Outcome.ALREADY_CLOCKED_OUT): "Staff is already clocked out!",
}

_STAFF_ACTIONS = {Action.ASSIGN_STAFF, Action.CLOCK_IN, Action.CLOCK_OUT}


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


# ─── Operations-Ergebnisse ────────────────────────────────────────────────────

def format_result(result: OperationResult) -> list[tuple[str, str]]:
    """Übersetzt ein Ergebnis in (Rich-Style, Text)-Zeilen."""
    lines: list[tuple[str, str]] = []
    if result.evicted_from:
        kind = "Staff" if result.action in _STAFF_ACTIONS else "Student"
        lines.append((_STYLE_NO_OP, f"{kind} {result.subject} removed from {result.evicted_from}"))

    if result.outcome == Outcome.NOT_FOUND:
        for name in result.missing:
            lines.append((_STYLE_ERROR, f"{name} not found!"))
        return lines

    template = _MESSAGES.get((result.action, result.outcome))
    if template is None:
        text = f"{result.action.value}: {result.outcome.value}"
    else:
        text = template.format(**result.model_dump())
    if result.ok:
        style = _STYLE_OK
    elif result.is_no_op:
        style = _STYLE_NO_OP
    else:
        style = _STYLE_ERROR
    lines.append((style, text))
    return lines


def print_result(console: Console, result: OperationResult) -> None:
    for style, text in format_result(result):
        console.print(text, style=style, markup=False, highlight=False)


# ─── Hilfe ────────────────────────────────────────────────────────────────────

def print_help(console: Console) -> None:
    table = Table(title="List of commands", box=box.ROUNDED)
    table.add_column("Command", style="bold")
    table.add_column("Arguments")
    table.add_column("Description")
    for command, (args, description) in COMMAND_HELP.items():
        table.add_row(command, args, description)
    console.print(table)


# ─── Datensätze ───────────────────────────────────────────────────────────────

def student_lines(student: Student) -> list[str]:
    lines = [
        f"Name: {student.name}",
        f"Grade: {student.grade}",
        f"Gender: {student.gender}",
        f"Allergies: {student.allergies}",
        f"Medications: {student.meds}",
        f"Needs Para: {_yes_no(student.needs_para)}",
        f"Is Present: {_yes_no(student.is_present)}",
        f"Location: {student.location}",
        "Authorized Pickups:",
    ]
    if not student.guardians:
        lines.append("  None")
    else:
        lines.extend(f"  {g}" for g in student.guardians)
    return lines


def staff_lines(staff_member: Staff) -> list[str]:
    return [
        f"Staff Member: {staff_member.name}",
        f"Position: {staff_member.position}",
        f"Shift: {staff_member.shift}",
        f"Location: {staff_member.location}",
        f"Email: {staff_member.email}",
        f"Clocked In: {_yes_no(staff_member.is_clocked_in)}",
    ]


def room_lines(room: Room) -> list[str]:
    lines = [
        f"Room Name: {room.name}",
        f"Student Capacity: {room.student_capacity}",
        f"Current Students: {len(room.students)}",
        f"Current Staff: {len(room.staff)}",
        f"Is Closed: {_yes_no(room.is_closed)}",
        f"Ratio: {room.ratio}",
    ]
    if room.staff:
        lines.append("Staff: " + ", ".join(s.name for s in room.staff))
    if room.students:
        lines.append("Students: " + ", ".join(s.name for s in room.students))
    return lines


def _panel(lines: list[str], title: str, border_style: str) -> Panel:
    return Panel(Text("\n".join(lines)), title=title, border_style=border_style)


def print_student(console: Console, student: Student, title: str = "Student") -> None:
    console.print(_panel(student_lines(student), title, "cyan"))


def print_staff(console: Console, staff_member: Staff, title: str = "Staff") -> None:
    console.print(_panel(staff_lines(staff_member), title, "magenta"))


def print_room(console: Console, room: Room) -> None:
    border = "red" if room.is_closed else "green"
    console.print(_panel(room_lines(room), f"Room {room.name}", border))


def print_all_students(console: Console, registry: Registry) -> None:
    if not registry.students:
        console.print("No Students!", style=_STYLE_NO_OP)
        return
    for i, student in enumerate(registry.students, start=1):
        print_student(console, student, title=f"Student {i}")


def print_all_staff(console: Console, registry: Registry) -> None:
    if not registry.staff:
        console.print("No Staff!", style=_STYLE_NO_OP)
        return
    for i, staff_member in enumerate(registry.staff, start=1):
        print_staff(console, staff_member, title=f"Staff {i}")


def print_all_rooms(console: Console, registry: Registry) -> None:
    if not registry.rooms:
        console.print("No Rooms!", style=_STYLE_NO_OP)
        return
    table = Table(title="Rooms", box=box.ROUNDED)
    table.add_column("Room", style="bold")
    table.add_column("Capacity", justify="right")
    table.add_column("Students", justify="right")
    table.add_column("Staff", justify="right")
    table.add_column("Status")
    for room in registry.rooms:
        status = "[red]closed[/red]" if room.is_closed else "[green]open[/green]"
        table.add_row(
            Text(room.name),
            str(room.student_capacity),
            str(len(room.students)),
            str(len(room.staff)),
            status,
        )
    console.print(table)


# ─── Ladebericht ──────────────────────────────────────────────────────────────

_KIND_SINGULAR = {
    RecordKind.STUDENT: "student",
    RecordKind.STAFF: "staff",
    RecordKind.ROOM: "room",
}


def print_load_report(console: Console, report: LoadReport) -> None:
    singular = _KIND_SINGULAR[report.kind]
    for name in report.loaded:
        console.print(f"Loaded {singular}: {name}", markup=False, highlight=False)
    for w in report.warnings:
        console.print(w, style=_STYLE_NO_OP, markup=False, highlight=False)
    for s in report.skipped:
        console.print(
            f"Skipping line {s.line_number} ({s.reason.value}): {s.detail}",
            style=_STYLE_ERROR, markup=False, highlight=False,
        )
    console.print(
        f"Finished loading {report.loaded_count} {report.kind.value}.",
        style="bold",
    )
