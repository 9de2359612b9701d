"""Tests für Sitzungskonfiguration und Haupt-CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from config.defaults import default_session_config
from config.manager import ConfigManager
from config.schema import SessionConfig


# ─── SCHEMA ───────────────────────────────────────────────────────────────────

class TestSessionConfig:
    def test_defaults(self):
        config = default_session_config()
        assert config.prompt == "> "
        assert config.show_banner is True
        assert config.color is True
        assert config.log_level == "WARNING"

    def test_log_level_normalized(self):
        config = SessionConfig(log_level="debug")
        assert config.log_level == "DEBUG"
        assert config.log_level_number == 10

    def test_invalid_log_level_raises(self):
        with pytest.raises(Exception):
            SessionConfig(log_level="LOUD")


# ─── CONFIG-MANAGER ───────────────────────────────────────────────────────────

class TestConfigManager:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Config speichern und laden — vollständiger Roundtrip."""
        config = SessionConfig(prompt="classroom> ", show_banner=False,
                               color=False, log_level="INFO")
        mgr = ConfigManager()
        path = mgr.save(config, tmp_path / "session_config.yaml")
        assert path.exists()
        assert path.read_text(encoding="utf-8").startswith("# ====")

        loaded = mgr.load(path)
        assert loaded == config

    def test_load_nonexistent_raises(self, tmp_path: Path):
        mgr = ConfigManager()
        with pytest.raises(FileNotFoundError):
            mgr.load(tmp_path / "not_there.yaml")

    def test_load_or_default_without_file(self, tmp_path: Path):
        mgr = ConfigManager()
        assert mgr.load_or_default(tmp_path / "not_there.yaml") == \
            default_session_config()

    def test_invalid_file_raises_value_error(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: LOUD\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ConfigManager().load(path)


# ─── MAIN.PY CLI ──────────────────────────────────────────────────────────────

class TestCli:
    def test_help(self):
        from main import cli
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_shell_processes_stdin(self):
        """Befehle über stdin, Sitzung endet mit exit und Exit-Code 0."""
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                cli, ["shell"],
                input="add_classroom Math\nlist_classrooms\nexit\nadd_classroom X\n",
            )
        assert result.exit_code == 0
        assert "Virtual Classroom Manager started." in result.output
        assert "Classroom Math has been created." in result.output
        assert "No students enrolled." in result.output
        assert "Exiting Virtual Classroom Manager." in result.output
        assert "Classroom X has been created." not in result.output

    def test_shell_is_default_command(self):
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [], input="exit\n")
        assert result.exit_code == 0
        assert "Exiting Virtual Classroom Manager." in result.output

    def test_shell_end_of_input(self):
        """Eingabeende ohne exit beendet die Sitzung ebenfalls normal."""
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["shell", "--no-banner"],
                                   input="bogus\n")
        assert result.exit_code == 0
        assert "Error: Unknown command." in result.output
        assert "started" not in result.output

    def test_shell_script(self, tmp_path: Path):
        from main import cli
        script = tmp_path / "session.txt"
        script.write_text(
            "add_classroom Math\n"
            "add_student S1 Math\n"
            "schedule_assignment Math HW1\n"
            "submit_assignment S1 Math HW1\n",
            encoding="utf-8",
        )
        result = CliRunner().invoke(
            cli, ["shell", "--no-banner", "--script", str(script),
                  "--config", str(tmp_path / "none.yaml")],
        )
        assert result.exit_code == 0
        assert "add_student S1 Math" in result.output
        assert "Assignment submitted by Student S1 in Math." in result.output

    def test_shell_uses_config(self, tmp_path: Path):
        from main import cli
        path = ConfigManager().save(
            SessionConfig(prompt="", show_banner=False, color=False),
            tmp_path / "session_config.yaml",
        )
        result = CliRunner().invoke(cli, ["shell", "--config", str(path)],
                                    input="list_students\n")
        assert result.exit_code == 0
        assert result.output.strip() == "No students enrolled."

    def test_piped_output_is_plain_protocol(self):
        """Ohne Terminal: kein Prompt, nur Bestätigungs- und Fehlerzeilen."""
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                cli, ["shell", "--no-banner"],
                input="add_classroom Math\nadd_classroom Math\nexit\n",
            )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Classroom Math has been created.",
            "Error: Classroom already exists.",
            "Exiting Virtual Classroom Manager.",
        ]

    def test_names_printed_verbatim(self):
        """Emoji-Codes und Rich-Markup in Namen werden nicht umgewandelt."""
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(
                cli, ["shell", "--no-banner"],
                input=(
                    "add_classroom :smile:\n"
                    "add_classroom [bold]X[/bold]\n"
                    "add_student :wave: :smile:\n"
                    "list_classrooms\n"
                    "exit\n"
                ),
            )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Classroom :smile: has been created.",
            "Classroom [bold]X[/bold] has been created.",
            "Student :wave: has been enrolled in :smile:.",
            "Classroom: :smile:",
            "  Student ID: :wave:",
            "Classroom: [bold]X[/bold]",
            "  No students enrolled.",
            "Exiting Virtual Classroom Manager.",
        ]

    def test_config_init_and_show(self):
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 0
            assert Path("config/session_config.yaml").exists()

            result = runner.invoke(cli, ["config", "show"])
            assert result.exit_code == 0
            assert "log_level" in result.output

    def test_config_init_declined(self):
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            runner.invoke(cli, ["config", "init"])
            result = runner.invoke(cli, ["config", "init"], input="n\n")
            assert result.exit_code == 0
            assert "Abgebrochen" in result.output

    def test_invalid_config_aborts(self, tmp_path: Path):
        from main import cli
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: LOUD\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["shell", "--config", str(path)],
                                    input="exit\n")
        assert result.exit_code == 1
