"""Pydantic-Schema der Sitzungskonfiguration."""

import logging

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SessionConfig(BaseModel):
    """Einstellungen der interaktiven Shell.

    Die Registry selbst ist nicht konfigurierbar; alle Werte betreffen nur
    Darstellung und Logging.
    """
    # Eingabeaufforderung vor jeder Zeile (leer = keine)
    prompt: str = Field("> ", description="Eingabeaufforderung")
    # Startmeldung beim Sitzungsbeginn anzeigen
    show_banner: bool = Field(True, description="Startmeldung anzeigen")
    # Fehler rot, Bestätigungen grün
    color: bool = Field(True, description="Farbige Ausgabe")
    # Log-Level für den RichHandler
    log_level: str = Field("WARNING", description="Log-Level (DEBUG..CRITICAL)")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Unbekanntes Log-Level '{v}'. Erlaubt: {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
