"""Tests for output formatting."""

import io
import json

from rich.console import Console

from agentctl.output import OutputContext


def _ctx(json_mode: bool = False) -> tuple[OutputContext, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, width=200)
    return OutputContext(console=console, json_mode=json_mode), buffer


class TestOutputContext:
    """Tests for OutputContext."""

    def test_print_in_normal_mode(self) -> None:
        ctx, buffer = _ctx()
        ctx.print("Hello world")
        assert "Hello world" in buffer.getvalue()

    def test_print_suppressed_in_json_mode(self) -> None:
        ctx, buffer = _ctx(json_mode=True)
        ctx.print("Hello world")
        ctx.warning("careful")
        assert buffer.getvalue() == ""

    def test_error_prefix(self) -> None:
        ctx, buffer = _ctx()
        ctx.error("something broke")
        assert "Error: something broke" in buffer.getvalue()

    def test_error_json(self, capsys) -> None:
        ctx, _ = _ctx(json_mode=True)
        ctx.error("bad", {"code": 1})
        data = json.loads(capsys.readouterr().out)
        assert data == {"error": "bad", "code": 1}

    def test_success_json(self, capsys) -> None:
        ctx, _ = _ctx(json_mode=True)
        ctx.success("done", {"state": "enabled"})
        data = json.loads(capsys.readouterr().out)
        assert data == {"success": "done", "state": "enabled"}

    def test_warning_escapes_markup(self) -> None:
        ctx, buffer = _ctx()
        ctx.warning("[red]literal[/red]")
        assert "[red]literal[/red]" in buffer.getvalue()

    def test_result_message(self) -> None:
        ctx, buffer = _ctx()
        ctx.result({"state": "enabled"}, "Agent is enabled")
        assert "Agent is enabled" in buffer.getvalue()
