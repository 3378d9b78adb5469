"""Tests for the command line entry point and terminal helpers."""

import os

import pytest

from termpipes import animation, cli
from termpipes.cli import DEFAULT_DELAY_MS, MAX_DELAY_MS, build_parser, main, parse_delay
from termpipes.terminal import CLEAR_SCREEN, TerminalSizeError, cell_sequence, terminal_size


class TestParseDelay:
    """Tests for the frame delay argument."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, DEFAULT_DELAY_MS),
            ("20", 20),
            ("0", 0),
            ("1000", 1000),
            ("+5", 5),
            ("+", DEFAULT_DELAY_MS),
            ("++5", DEFAULT_DELAY_MS),
            ("18446744073709551615", MAX_DELAY_MS),
            ("18446744073709551616", DEFAULT_DELAY_MS),
            ("fast", DEFAULT_DELAY_MS),
            ("-5", DEFAULT_DELAY_MS),
            ("2.5", DEFAULT_DELAY_MS),
            ("", DEFAULT_DELAY_MS),
            ("١٢", DEFAULT_DELAY_MS),
        ],
    )
    def test_values(self, value, expected):
        assert parse_delay(value) == expected

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.delay is None
        assert args.glyphs == "double"
        assert args.seed is None
        assert args.frames is None


class TestTerminal:
    """Tests for the terminal collaborator."""

    def test_size(self, monkeypatch):
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((80, 24)))
        assert terminal_size(1) == (80, 24)

    def test_size_unavailable(self, monkeypatch):
        def fail(fd):
            raise OSError("Inappropriate ioctl for device")

        monkeypatch.setattr(os, "get_terminal_size", fail)
        with pytest.raises(TerminalSizeError):
            terminal_size(1)

    def test_zero_size_rejected(self, monkeypatch):
        monkeypatch.setattr(os, "get_terminal_size", lambda fd: os.terminal_size((0, 24)))
        with pytest.raises(TerminalSizeError):
            terminal_size(1)

    def test_cell_sequence(self):
        assert cell_sequence(3, 7, (1, 2, 3), "╔") == "\x1b[3;7H\x1b[38;2;1;2;3m╔"


class TestMain:
    """Tests for main()."""

    @pytest.fixture(autouse=True)
    def no_sleep(self, monkeypatch):
        monkeypatch.setattr(animation.time, "sleep", lambda seconds: None)

    def test_missing_terminal_is_fatal(self, monkeypatch, capsys):
        def fail():
            raise TerminalSizeError("cannot read terminal size")

        monkeypatch.setattr(cli, "terminal_size", fail)
        with pytest.raises(SystemExit) as exc_info:
            main(["--frames", "3"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "terminal size" in captured.err

    def test_draws_frames(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "terminal_size", lambda: (12, 6))
        main(["10", "--frames", "8", "--seed", "3"])

        out = capsys.readouterr().out
        assert out.startswith(CLEAR_SCREEN)
        assert out.count("\x1b[38;2;") == 8

    def test_seed_repeats_output(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "terminal_size", lambda: (12, 6))
        main(["--frames", "20", "--seed", "5"])
        first = capsys.readouterr().out
        main(["--frames", "20", "--seed", "5"])
        assert capsys.readouterr().out == first

    def test_bad_delay_falls_back(self, monkeypatch, capsys):
        slept = []
        monkeypatch.setattr(cli, "terminal_size", lambda: (12, 6))
        monkeypatch.setattr(animation.time, "sleep", slept.append)
        main(["-5", "--frames", "2"])
        assert slept == [DEFAULT_DELAY_MS / 1000] * 2
        assert capsys.readouterr().err == ""

    def test_light_glyphs(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "terminal_size", lambda: (12, 6))
        main(["--glyphs", "light", "--frames", "40", "--seed", "1"])
        out = capsys.readouterr().out
        assert not set("║═╔╗╚╝") & set(out)

    def test_interrupt_is_quiet(self, monkeypatch, capsys):
        def interrupt(seconds):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "terminal_size", lambda: (12, 6))
        monkeypatch.setattr(animation.time, "sleep", interrupt)
        main([])
        assert capsys.readouterr().out.count("\x1b[38;2;") == 1

    def test_largest_delay_does_not_overflow(self, monkeypatch, capsys):
        """Test a delay of 2**64 - 1 ms sleeps in chunks time.sleep accepts."""
        slept = []

        def record(seconds):
            slept.append(seconds)
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "terminal_size", lambda: (12, 6))
        monkeypatch.setattr(animation.time, "sleep", record)
        main(["18446744073709551615", "--frames", "1"])

        assert slept == [animation.MAX_SLEEP]
        assert capsys.readouterr().out.count("\x1b[38;2;") == 1
