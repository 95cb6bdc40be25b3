"""Interaktive Kommandozeile: liest Befehle, ruft Engine/Loader auf, gibt Ergebnisse aus.

Erstes Token ist der Befehl (ohne Groß-/Kleinschreibung), der Rest sind
Argumente. Personen werden als "Vorname Nachname" angesprochen, Raumnamen
dürfen Leerzeichen enthalten (alle restlichen Tokens).
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from rich.console import Console

from config.defaults import default_registry_config
from config.schema import RegistryConfig
from data.file_loader import RecordKind, load_file
from engine.assignment import RoomAssignmentEngine
from engine.attendance import AttendanceService
from export import console_renderer as render
from models.registry import Registry

logger = logging.getLogger(__name__)


class CommandShell:
    """REPL über einer Registry. Ein Befehl wird vollständig abgearbeitet, bevor der nächste kommt."""

    def __init__(
        self,
        registry: Optional[Registry] = None,
        config: Optional[RegistryConfig] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.registry = registry if registry is not None else Registry()
        self.config = config or default_registry_config()
        self.console = console or Console()
        self.rooms = RoomAssignmentEngine(self.registry)
        self.attendance = AttendanceService(self.rooms)
        self.running = True

        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "HELP": self._cmd_help,
            "LOAD_STUDENTS": lambda args: self._cmd_load(args, RecordKind.STUDENT),
            "LOAD_STAFF": lambda args: self._cmd_load(args, RecordKind.STAFF),
            "LOAD_ROOMS": lambda args: self._cmd_load(args, RecordKind.ROOM),
            "INFO": self._cmd_info,
            "ALL_STUDENTS": lambda args: render.print_all_students(self.console, self.registry),
            "ALL_STAFF": lambda args: render.print_all_staff(self.console, self.registry),
            "ALL_ROOMS": lambda args: render.print_all_rooms(self.console, self.registry),
            "ROOM_INFO": self._cmd_room_info,
            "ASSIGN_STUDENT": lambda args: self._cmd_assign(args, staff=False),
            "ASSIGN_STAFF": lambda args: self._cmd_assign(args, staff=True),
            "OPEN_ROOM": lambda args: self._cmd_room_state(args, close=False),
            "CLOSE_ROOM": lambda args: self._cmd_room_state(args, close=True),
            "MARK_PRESENT": lambda args: self._cmd_person(args, self.attendance.mark_present),
            "MARK_ABSENT": lambda args: self._cmd_person(args, self.attendance.mark_absent),
            "CLOCK_IN": lambda args: self._cmd_person(args, self.attendance.clock_in),
            "CLOCK_OUT": lambda args: self._cmd_person(args, self.attendance.clock_out),
            "SUMMARY": self._cmd_summary,
            "QUIT": self._cmd_quit,
        }

    # ─── Schleifen ───

    def dispatch(self, line: str) -> bool:
        """Führt eine Befehlszeile aus. Gibt False zurück, sobald QUIT kam."""
        parts = line.split()
        if not parts:
            return self.running
        command, args = parts[0].upper(), parts[1:]
        handler = self._handlers.get(command)
        if handler is None:
            logger.debug(f"Unbekannter Befehl: {command}")
            self.console.print("Unknown Command!", style="red", markup=False)
            return self.running
        handler(args)
        return self.running

    def run_lines(self, lines: Iterable[str]) -> None:
        """Stapelbetrieb: Befehle aus einer Datei oder Liste abarbeiten."""
        for line in lines:
            if not self.dispatch(line):
                break

    def run_interactive(self) -> None:
        self.console.print(
            f"Welcome to {self.config.school_name}! Please enter a command to continue!",
            style="bold", markup=False,
        )
        if self.config.shell.show_help_on_start:
            render.print_help(self.console)
        while self.running:
            try:
                line = self.console.input(self.config.shell.prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self._cmd_quit([])
                break
            self.dispatch(line)

    # ─── Argumente ───

    def _full_name(self, args: list[str]) -> Optional[str]:
        if len(args) < 2:
            self.console.print("Please enter first and last name", style="yellow", markup=False)
            return None
        return f"{args[0]} {args[1]}"

    def _rest(self, args: list[str], usage: str) -> Optional[str]:
        if not args:
            self.console.print(f"Usage: {usage}", style="yellow", markup=False)
            return None
        return " ".join(args)

    # ─── Befehle ───

    def _cmd_help(self, args: list[str]) -> None:
        render.print_help(self.console)

    def _cmd_quit(self, args: list[str]) -> None:
        self.console.print("Thank You!")
        self.running = False

    def _cmd_summary(self, args: list[str]) -> None:
        self.console.print(self.registry.summary(), markup=False)

    def _cmd_load(self, args: list[str], kind: RecordKind) -> None:
        filename = self._rest(args, f"LOAD_{kind.value.upper()} <file>")
        if filename is not None:
            self.load(Path(filename), kind)

    def load(self, path: Path, kind: RecordKind) -> None:
        """Lädt eine Datei in die Registry und gibt den Bericht aus."""
        filename = str(path)
        try:
            report = load_file(path, kind, self.registry, self.config.loader)
        except FileNotFoundError:
            logger.warning(f"Datei nicht gefunden: {filename}")
            self.console.print(f"File not found: {filename}", style="red", markup=False)
            return
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Datei nicht lesbar: {filename}: {e}")
            self.console.print(f"Could not read {filename}: {e}", style="red", markup=False)
            return
        render.print_load_report(self.console, report)

    def _cmd_info(self, args: list[str]) -> None:
        full_name = self._full_name(args)
        if full_name is None:
            return
        student = self.registry.find_student(full_name)
        staff_member = self.registry.find_staff(full_name)
        if student is not None:
            render.print_student(self.console, student)
        if staff_member is not None:
            render.print_staff(self.console, staff_member)
        if student is None and staff_member is None:
            self.console.print(f"{full_name} not found!", style="red", markup=False)

    def _cmd_room_info(self, args: list[str]) -> None:
        room_name = self._rest(args, "ROOM_INFO <room>")
        if room_name is None:
            return
        room = self.registry.find_room(room_name)
        if room is None:
            self.console.print(f"{room_name} not found!", style="red", markup=False)
            return
        render.print_room(self.console, room)

    def _cmd_assign(self, args: list[str], staff: bool) -> None:
        if len(args) < 3:
            command = "ASSIGN_STAFF" if staff else "ASSIGN_STUDENT"
            self.console.print(f"Usage: {command} <first> <last> <room>",
                               style="yellow", markup=False)
            return
        full_name = f"{args[0]} {args[1]}"
        room_name = " ".join(args[2:])
        if staff:
            result = self.rooms.assign_staff(full_name, room_name)
        else:
            result = self.rooms.assign_student(full_name, room_name)
        render.print_result(self.console, result)

    def _cmd_room_state(self, args: list[str], close: bool) -> None:
        room_name = self._rest(args, "CLOSE_ROOM <room>" if close else "OPEN_ROOM <room>")
        if room_name is None:
            return
        if close:
            result = self.rooms.close_room(room_name)
        else:
            result = self.rooms.open_room(room_name)
        render.print_result(self.console, result)

    def _cmd_person(self, args: list[str], operation) -> None:
        full_name = self._full_name(args)
        if full_name is None:
            return
        render.print_result(self.console, operation(full_name))
