"""Tests for Rich Console factory and theme."""

from io import StringIO

from assetviz.output.console import ASSETVIZ_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[av.ok]OK[/av.ok]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "OK" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80

    def test_theme_styles(self) -> None:
        for name in ("av.ok", "av.error", "av.op", "av.key", "av.path", "av.count"):
            assert name in ASSETVIZ_THEME.styles
