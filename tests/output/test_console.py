"""Tests for the Rich console factory."""

from petledger.output.console import create_console, get_output, style_for_event


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True, width=60)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 100

    def test_event_styles(self) -> None:
        assert style_for_event("borrowed") == "ledger.event.borrowed"
        assert style_for_event("unknown") == ""
