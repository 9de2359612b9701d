"""Konfigurationsmanager: Laden und Speichern der Sitzungskonfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren. Die Datei ist
optional: fehlt sie, gelten die Standardwerte.
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_session_config
from config.schema import SessionConfig

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# Virtual Classroom Manager — Sitzungskonfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_FIELD_COMMENTS = {
    "prompt": "Eingabeaufforderung (leer = keine)",
    "show_banner": "Startmeldung anzeigen",
    "color": "Fehler rot, Bestätigungen grün",
    "log_level": "DEBUG, INFO, WARNING, ERROR oder CRITICAL",
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "session_config.yaml"

    def exists(self, path: Optional[Path] = None) -> bool:
        return (path or self.DEFAULT_CONFIG).exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> SessionConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus, um sie anzulegen."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return SessionConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    def load_or_default(self, path: Optional[Path] = None) -> SessionConfig:
        """Wie ``load``, liefert aber Standardwerte wenn die Datei fehlt."""
        if not self.exists(path):
            return default_session_config()
        return self.load(path)

    # ─── Speichern ───

    def save(self, config: SessionConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)
        return target

    def _build_commented_yaml(self, config: SessionConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Zeilenend-Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)
        for field, comment in _FIELD_COMMENTS.items():
            if field in cm:
                cm.yaml_add_eol_comment(comment, field)
        return cm
