"""
Tests for theme.py — styling transform and colour switches.
"""

from rich.style import Style

from progressors.theme import color_enabled, paint


class TestPaint:
    def test_no_style_is_identity(self):
        assert paint("===", None) == "==="

    def test_color_disabled_is_identity(self):
        assert paint("===", Style(color="green"), color=False) == "==="

    def test_empty_text_stays_empty(self):
        assert paint("", Style(bold=True)) == ""

    def test_foreground_color(self):
        assert paint("=", Style(color="green")) == "\x1b[32m=\x1b[0m"

    def test_bold_and_color(self):
        assert paint("=", Style(color="green", bold=True)) == "\x1b[1;32m=\x1b[0m"

    def test_dim(self):
        assert paint("[", Style(dim=True)) == "\x1b[2m[\x1b[0m"

    def test_background_color(self):
        assert paint("x", Style(color="yellow", bgcolor="blue")) == "\x1b[33;44mx\x1b[0m"

    def test_whole_run_wrapped_once(self):
        out = paint("====", Style(color="green"))
        assert out.count("\x1b[0m") == 1


class TestColorEnabled:
    def test_plain_environment(self):
        assert color_enabled({}) is True

    def test_no_color_set(self):
        assert color_enabled({"NO_COLOR": "1"}) is False

    def test_no_color_empty_is_ignored(self):
        assert color_enabled({"NO_COLOR": ""}) is True

    def test_dumb_terminal(self):
        assert color_enabled({"TERM": "dumb"}) is False

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert color_enabled() is False
