from config.schema import (
    LoaderConfig,
    LoggingConfig,
    RegistryConfig,
    ShellConfig,
)


def default_registry_config() -> RegistryConfig:
    """Standard-Konfiguration: Komma-getrennte UTF-8-Dateien, Warnungen auf der Konsole."""
    return RegistryConfig(
        school_name="School Registry",
        loader=LoaderConfig(),
        shell=ShellConfig(),
        logging=LoggingConfig(),
    )


# ─── Kommandos (Reihenfolge = Hilfe-Anzeige) ───
# Befehl → (Argumente, Beschreibung)

COMMAND_HELP: dict[str, tuple[str, str]] = {
    "HELP":           ("", "Prints help message"),
    "LOAD_STUDENTS":  ("<file>", "Loads students from the specified file"),
    "LOAD_STAFF":     ("<file>", "Loads staff from the specified file"),
    "LOAD_ROOMS":     ("<file>", "Loads rooms from the specified file"),
    "INFO":           ("<first> <last>", "Returns info for the specified person"),
    "ALL_STUDENTS":   ("", "Lists all students and info"),
    "ALL_STAFF":      ("", "Lists all staff and info"),
    "ALL_ROOMS":      ("", "Lists all rooms"),
    "ROOM_INFO":      ("<room>", "Shows occupancy of the specified room"),
    "ASSIGN_STUDENT": ("<first> <last> <room>", "Moves a present student into a room"),
    "ASSIGN_STAFF":   ("<first> <last> <room>", "Moves a clocked-in staff member into a room"),
    "OPEN_ROOM":      ("<room>", "Opens a closed room"),
    "CLOSE_ROOM":     ("<room>", "Closes a room and sends everyone out"),
    "MARK_PRESENT":   ("<first> <last>", "Marks student present"),
    "MARK_ABSENT":    ("<first> <last>", "Marks student absent"),
    "CLOCK_IN":       ("<first> <last>", "Clocks staff in"),
    "CLOCK_OUT":      ("<first> <last>", "Clocks staff out"),
    "SUMMARY":        ("", "Shows registry counts"),
    "QUIT":           ("", "Quits program"),
}
