"""Schulregister — Haupt-CLI.

Verwendung:
  python main.py                              Interaktive Shell starten
  python main.py shell --students s.csv ...   Shell mit vorab geladenen Dateien
  python main.py run-script befehle.txt       Befehle aus Datei ausführen
  python main.py sample-data --out data/      Beispieldateien erzeugen
  python main.py config show                  Konfiguration anzeigen
  python main.py config init                  Konfigurationsdatei anlegen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console()


def _setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """Konfiguriert das Root-Logging einmalig: Rich auf der Konsole, optional Datei."""
    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)
    logging.basicConfig(level=level.upper(), format="%(message)s",
                        handlers=handlers, force=True)


def _load_config(config_path: Optional[Path]):
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    try:
        return ConfigManager().load(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _build_shell(ctx: click.Context):
    from shell.dispatcher import CommandShell
    config = ctx.obj["config"]
    return CommandShell(config=config, console=console)


# ─── SHELL ────────────────────────────────────────────────────────────────────

@click.command("shell")
@click.option("--students", type=click.Path(path_type=Path), default=None,
              help="Schülerdatei vorab laden.")
@click.option("--staff", type=click.Path(path_type=Path), default=None,
              help="Personaldatei vorab laden.")
@click.option("--rooms", type=click.Path(path_type=Path), default=None,
              help="Raumdatei vorab laden.")
@click.pass_context
def cmd_shell(ctx: click.Context, students: Optional[Path], staff: Optional[Path],
              rooms: Optional[Path]):
    """Startet die interaktive Kommandozeile."""
    from data.file_loader import RecordKind

    shell = _build_shell(ctx)
    preload = [(RecordKind.ROOM, rooms), (RecordKind.STUDENT, students), (RecordKind.STAFF, staff)]
    for kind, path in preload:
        if path is not None:
            shell.load(path, kind)
    shell.run_interactive()


# ─── RUN-SCRIPT ───────────────────────────────────────────────────────────────

@click.command("run-script")
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--echo/--no-echo", default=True, help="Befehle vor der Ausführung anzeigen.")
@click.pass_context
def cmd_run_script(ctx: click.Context, script: Path, echo: bool):
    """Führt Befehle aus einer Textdatei aus (eine Zeile pro Befehl)."""
    shell = _build_shell(ctx)
    prompt = ctx.obj["config"].shell.prompt
    with open(script, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if echo:
                console.print(f"{prompt}{line}", style="dim", markup=False)
            if not shell.dispatch(line):
                break


# ─── SAMPLE-DATA ──────────────────────────────────────────────────────────────

@click.command("sample-data")
@click.option("--out", "out_dir", default="output", type=click.Path(path_type=Path),
              help="Zielverzeichnis für die Dateien.")
@click.option("--seed", default=42, help="Zufalls-Seed für reproduzierbare Daten.")
@click.option("--students", "n_students", default=20, type=click.IntRange(min=0),
              help="Anzahl Schüler.")
@click.option("--staff", "n_staff", default=6, type=click.IntRange(min=0),
              help="Anzahl Mitarbeiter.")
@click.option("--rooms", "n_rooms", default=5, type=click.IntRange(min=0),
              help="Anzahl Räume.")
def cmd_sample_data(out_dir: Path, seed: int, n_students: int, n_staff: int, n_rooms: int):
    """Erzeugt Beispieldateien (students.csv, staff.csv, rooms.csv)."""
    from data.sample_data import SampleDataGenerator

    gen = SampleDataGenerator(seed=seed)
    registry = gen.generate(students=n_students, staff=n_staff, rooms=n_rooms)
    written = gen.write(registry, out_dir)

    table = Table(title="Erzeugte Beispieldaten", box=box.ROUNDED)
    table.add_column("Datei", style="bold cyan")
    table.add_column("Datensätze", justify="right")
    counts = {"students": len(registry.students), "staff": len(registry.staff),
              "rooms": len(registry.rooms)}
    for key, path in written.items():
        table.add_row(str(path), str(counts[key]))
    console.print(table)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt die aktive Konfiguration an."""
    config = ctx.obj["config"]
    table = Table(title=config.school_name, box=box.ROUNDED)
    table.add_column("Abschnitt", style="bold")
    table.add_column("Parameter")
    table.add_column("Wert")
    for section in ("loader", "shell", "logging"):
        for key, value in getattr(config, section).model_dump().items():
            table.add_row(section, key, repr(value))
    console.print(table)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False, help="Bestehende Datei überschreiben.")
def config_init(force: bool):
    """Schreibt die Standard-Konfiguration als YAML."""
    from config.defaults import default_registry_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {mgr.DEFAULT_CONFIG}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    path = mgr.save(default_registry_config())
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {path}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Pfad zur YAML-Konfiguration.")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Überschreibt das Log-Level der Konfiguration.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]):
    """Schulregister: Anwesenheit, Stempelzeiten und Raumbelegung.

    Ohne Unterbefehl startet die interaktive Shell.
    """
    config = _load_config(config_path)
    _setup_logging(log_level or config.logging.level, config.logging.log_file)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_shell)


def main():
    """Einstiegspunkt."""
    cli(obj={})


# Befehle registrieren
cli.add_command(cmd_shell)
cli.add_command(cmd_run_script)
cli.add_command(cmd_sample_data)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
