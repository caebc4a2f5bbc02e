"""
Command line tests

Runs the termslides pipeline through main() without touching the screen.
"""

from pathlib import Path

import pytest

from termslides.__main__ import main, parser


SAMPLE = Path(__file__).parent / "data" / "inline_formatting.tpp"


class TestCheck:
    """--check compiles and reports only"""

    def test_check_sample(self, capsys):
        assert main([str(SAMPLE), "--check"]) == 0

        out = capsys.readouterr().out
        assert out.strip() == f"{SAMPLE}: OK, 3 pages"

    def test_parse_error_exits(self, tmp_path, capsys):
        deck = tmp_path / "bad.tpp"
        deck.write_text("fine\n--b never closed\n", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            main([str(deck), "--check"])

        assert excinfo.value.code == 1
        assert "line 2:" in capsys.readouterr().err

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "absent.tpp")])

        assert excinfo.value.code == 1
        assert "not found" in capsys.readouterr().err


class TestHighlight:
    def test_highlight_prints_source(self, capsys):
        main([str(SAMPLE), "--highlight"])

        out = capsys.readouterr().out
        assert "Inline styles" in out
        assert "\x1b[" in out

    def test_highlight_skips_compilation(self, tmp_path, capsys):
        """Broken markup can still be shown"""
        deck = tmp_path / "bad.tpp"
        deck.write_text("--bogus\n", encoding="utf-8")

        main([str(deck), "--highlight"])
        assert "bogus" in capsys.readouterr().out


class TestOptions:
    def test_autoplay_seconds(self):
        options = parser.parse_args(["deck.tpp", "--autoplay", "4"])
        assert options.autoplay == 4.0

    def test_autoplay_default_seconds(self):
        from termslides.config import appsettings

        options = parser.parse_args(["deck.tpp", "--autoplay"])
        assert options.autoplay == appsettings.autoplay_seconds

    @pytest.mark.parametrize("seconds", ["-1", "-0.5", "soon", "inf"])
    def test_autoplay_rejects_bad_seconds(self, seconds, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parser.parse_args(["deck.tpp", "--autoplay", seconds])

        assert excinfo.value.code == 2
        assert "--autoplay" in capsys.readouterr().err

    def test_autoplay_zero_seconds(self):
        options = parser.parse_args(["deck.tpp", "--autoplay", "0"])
        assert options.autoplay == 0.0

    def test_interactive_by_default(self):
        options = parser.parse_args(["deck.tpp"])

        assert options.autoplay is None
        assert options.check is False
        assert options.verbosity == 1
