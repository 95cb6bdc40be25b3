"""Konfigurationsmanager: Laden, Speichern und Validieren der Registry-Konfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_registry_config
from config.schema import RegistryConfig

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Schulregister — Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "loader": (
        "Datei-Import",
        "Feldtrenner darf nicht ; ( oder ) sein (Guardian-Format).",
    ),
    "shell": (
        "Kommandozeile",
        None,
    ),
    "logging": (
        "Logging",
        "level: DEBUG, INFO, WARNING oder ERROR.",
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "registry_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> RegistryConfig:
        """Lade Config aus YAML. Ohne Datei gelten die Defaults."""
        target = Path(path) if path else self.DEFAULT_CONFIG
        if not target.exists():
            if path is not None:
                raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {target}")
            logger.debug(f"Keine Konfiguration unter {target}, verwende Defaults")
            return default_registry_config()
        with open(target, "r", encoding="utf-8") as f:
            try:
                raw = yaml.load(f)
            except YAMLError as e:
                raise ValueError(
                    f"Konfigurationsdatei ist kein gültiges YAML: {target}\n{e}"
                ) from e
        try:
            return RegistryConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    # ─── Speichern ───

    def save(self, config: RegistryConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Abschnitts-Kommentaren."""
        target = Path(path) if path else self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        logger.info(f"Konfiguration gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: RegistryConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )
        return cm
