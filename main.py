"""Virtual Classroom Manager — Haupt-CLI.

Verwendung:
  python main.py                          Interaktive Sitzung starten
  python main.py shell                    Interaktive Sitzung starten
  python main.py shell --script <datei>   Befehle aus Datei ausführen
  python main.py config show              Konfiguration anzeigen
  python main.py config init              Standard-Konfiguration anlegen

Befehle innerhalb der Sitzung: siehe ``help``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config_or_abort(config_path: Optional[Path] = None):
    """Lädt die Konfiguration (oder Defaults) oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr, mgr.load_or_default(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ─── SHELL ────────────────────────────────────────────────────────────────────

@click.command("shell")
@click.option("--script", "script", type=click.File("r", encoding="utf-8"),
              default=None, help="Befehle zeilenweise aus Datei lesen.")
@click.option("--no-banner", is_flag=True, default=False,
              help="Startmeldung unterdrücken.")
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur Sitzungskonfiguration (YAML).")
def cmd_shell(script, no_banner: bool, config_path: Optional[Path]):
    """Startet eine Sitzung: liest Befehle bis 'exit' oder Eingabeende."""
    from interpreter import BANNER, CommandInterpreter
    from registry import ClassroomRegistry

    mgr, config = _load_config_or_abort(config_path)
    _setup_logging(config.log_level_number)

    interpreter = CommandInterpreter(ClassroomRegistry())
    # Nutzereingaben unverändert ausgeben: kein Markup, keine Emoji-Codes
    out = Console(no_color=not config.color, highlight=False, emoji=False)

    if config.show_banner and not no_banner:
        out.print(BANNER, soft_wrap=True)

    stream = script or sys.stdin
    # Prompt nur im Terminal, damit umgeleitete Ausgabe reines Protokoll bleibt
    show_prompt = bool(config.prompt) and script is None and stream.isatty()

    def _read_lines():
        while True:
            if show_prompt:
                out.print(config.prompt, end="", markup=False)
            line = stream.readline()
            if not line:
                # Eingabeende wie "exit", aber ohne Abschiedszeile
                return
            if script is not None:
                out.print(line.rstrip("\r\n"), markup=False, soft_wrap=True)
            yield line

    for result in interpreter.run(_read_lines()):
        result.print_rich(out, color=config.color)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Sitzungskonfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur Sitzungskonfiguration (YAML).")
def config_show(config_path: Optional[Path]):
    """Zeigt die wirksame Konfiguration an."""
    mgr, config = _load_config_or_abort(config_path)
    source = config_path or mgr.DEFAULT_CONFIG

    console.print(Panel(
        f"[bold]Virtual Classroom Manager[/bold]  |  "
        f"{source if mgr.exists(config_path) else 'Standardwerte'}",
        title="Sitzungskonfiguration",
        border_style="cyan",
    ))

    table = Table(box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    for key, value in config.model_dump().items():
        table.add_row(key, repr(value) if isinstance(value, str) else str(value))
    console.print(table)


@cmd_config.command("init")
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Zielpfad (Standard: config/session_config.yaml).")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Datei ohne Rückfrage überschreiben.")
def config_init(config_path: Optional[Path], force: bool):
    """Legt eine Konfigurationsdatei mit Standardwerten an."""
    from config.defaults import default_session_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if mgr.exists(config_path) and not force:
        if not click.confirm("Konfiguration existiert bereits. Überschreiben?",
                             default=False):
            console.print("[yellow]Abgebrochen.[/yellow]")
            return

    target = mgr.save(default_session_config(), config_path)
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Virtual Classroom Manager: Klassen, Schüler und Aufgaben verwalten.

    Ohne Unterbefehl startet eine interaktive Sitzung.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_shell)


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_shell)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
