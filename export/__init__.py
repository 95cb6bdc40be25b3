"""Export-Modul: Terminal-Ausgabe (Rich) für das Schulregister."""

from export.console_renderer import format_result, print_help, print_load_report, print_result

__all__ = ["format_result", "print_help", "print_load_report", "print_result"]
