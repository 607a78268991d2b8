"""Unit tests for config.py."""

from pathlib import Path

import pytest
from pom_timer.config import Config, ConfigError, parse_args, parse_minutes


class TestConfig:
    """Test the configuration holder."""

    def test_defaults(self):
        config = Config()
        assert config.work_minutes == 25
        assert config.break_minutes == 5
        assert config.log_path is None
        assert config.logging_enabled is False

    @pytest.mark.parametrize("field", ["work_minutes", "break_minutes"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ConfigError):
            Config(**{field: 0})

    def test_is_frozen(self):
        config = Config()
        with pytest.raises(AttributeError):
            config.work_minutes = 1


class TestParseMinutes:
    """Test integer parsing of duration values."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("15", 15), ("15min", 15), (" 7", 7), ("abc", 0), ("", 0), ("-3", -3), ("+4", 4)],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_minutes(raw) == expected


class TestParseArgs:
    """Test command line handling."""

    def test_no_arguments(self, display, output):
        config = parse_args([], display)
        assert config == Config()
        assert output.getvalue() == ""

    def test_short_options(self, display):
        config = parse_args(["-w", "50", "-b", "10", "-f", "pom.log"], display)
        assert config.work_minutes == 50
        assert config.break_minutes == 10
        assert config.log_path == Path("pom.log")

    def test_long_options(self, display):
        config = parse_args(["--work", "1", "--break", "2", "--log-file", "~/x.log"], display)
        assert config.work_minutes == 1
        assert config.break_minutes == 2
        assert config.log_path == Path("~/x.log")

    def test_extra_flags(self, display):
        config = parse_args(["--notify", "--tui"], display)
        assert config.notify is True
        assert config.tui is True

    def test_last_value_wins(self, display):
        assert parse_args(["-w", "10", "-w", "20"], display).work_minutes == 20

    @pytest.mark.parametrize("argv", [["--work", "0"], ["--work", "abc"], ["-b", "-2"]])
    def test_bad_value_is_fatal(self, display, argv):
        with pytest.raises(ConfigError, match="must be int > 0"):
            parse_args(argv, display)

    def test_bad_value_message(self, display):
        with pytest.raises(ConfigError) as excinfo:
            parse_args(["--break", "abc"], display)
        assert str(excinfo.value) == "Provided bad value 0 to --break (must be int > 0)."

    @pytest.mark.parametrize("argv", [["-h"], ["--help"], ["-w", "0", "--help"], ["--bogus", "-h", "-f"]])
    def test_help_anywhere_exits_zero(self, display, capsys, argv):
        with pytest.raises(SystemExit) as excinfo:
            parse_args(argv, display)
        assert excinfo.value.code == 0
        err = capsys.readouterr().err
        assert "--log-file" in err
        assert "License: GPLv3" in err

    def test_unknown_option_warns(self, display, output):
        config = parse_args(["--bogus", "-w", "30", "stray"], display)
        assert config.work_minutes == 30
        text = output.getvalue()
        assert "warning: Provided bad option --bogus." in text
        assert "warning: Provided bad option stray." in text

    def test_no_prefix_matching(self, display, output):
        config = parse_args(["--wor", "30"], display)
        assert config.work_minutes == 25
        assert "Provided bad option --wor." in output.getvalue()

    def test_missing_value_warns(self, display, output):
        config = parse_args(["-b", "3", "--work"], display)
        assert config.work_minutes == 25
        assert config.break_minutes == 3
        assert "warning: Need value after --work." in output.getvalue()

    def test_missing_value_before_option(self, display, output):
        config = parse_args(["--break", "--log-file", "a.log"], display)
        assert config.break_minutes == 5
        assert config.log_path == Path("a.log")
        assert "Need value after --break." in output.getvalue()

    def test_missing_log_file_warns(self, display, output):
        config = parse_args(["-f"], display)
        assert config.log_path is None
        assert "warning: Need value after --log-file." in output.getvalue()

    @pytest.mark.parametrize("bad", ["--tui=1", "--notify=yes"])
    def test_flag_with_value_warns(self, display, output, bad):
        config = parse_args([bad, "-w", "30"], display)
        assert config.work_minutes == 30
        assert config.tui is False
        assert config.notify is False
        assert f"warning: Provided bad option {bad}." in output.getvalue()

    def test_flag_with_value_keeps_valid_flags(self, display, output):
        config = parse_args(["--notify=1", "--tui"], display)
        assert config.tui is True
        assert config.notify is False

    def test_parser_error_raises(self):
        """Parser errors raise instead of exiting with status 2."""
        from pom_timer.config import build_parser
        import argparse

        with pytest.raises(argparse.ArgumentError):
            build_parser().error("boom")
