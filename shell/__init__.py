"""Kommandozeilen-Shell des Schulregisters."""

from .dispatcher import CommandShell

__all__ = ["CommandShell"]
