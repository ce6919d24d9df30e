"""Tests for console output."""

import io
import json

from typechat_cli.ui.console import ConsoleUI, colorize_json, print_json


class TtyStream(io.StringIO):
    def isatty(self):
        return True


class TestPrintJson:
    """Tests for print_json."""

    def test_plain_when_not_a_terminal(self):
        stream = io.StringIO()
        print_json({"name": "Gänse", "n": 2}, stream=stream)
        assert stream.getvalue() == '{\n  "name": "Gänse",\n  "n": 2\n}\n'

    def test_list_output(self):
        stream = io.StringIO()
        print_json([{"a": 1}, {"a": 2}], stream=stream)
        assert json.loads(stream.getvalue()) == [{"a": 1}, {"a": 2}]

    def test_colored_on_terminal(self):
        stream = TtyStream()
        print_json({"ok": True}, stream=stream)
        assert "\x1b[" in stream.getvalue()
        assert stream.getvalue() == colorize_json('{\n  "ok": true\n}') + "\n"


class TestConsoleUI:
    """Diagnostics never touch stdout."""

    def test_messages_go_to_stderr(self, capsys):
        ConsoleUI.error("bad thing")
        ConsoleUI.info("note")
        ConsoleUI.dim("quiet")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "bad thing" in captured.err
        assert "note" in captured.err
        assert "quiet" in captured.err
