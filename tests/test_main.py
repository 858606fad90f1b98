"""Tests for the demo entry point helpers."""

from __future__ import annotations

from types import SimpleNamespace

from main import build_arg_parser, on_drop


class _Field:
    def __init__(self):
        self.applied: list[str] = []

    def set_time_str(self, text):
        self.applied.append(text)
        return text.count(":") == 2


class TestArgParser:
    def test_defaults(self):
        args = build_arg_parser().parse_args([])
        assert args.initial == "00:00:00"
        assert args.idle_timeout == 1000
        assert args.no_idle_reset is False
        assert args.verbose is False

    def test_overrides(self):
        args = build_arg_parser().parse_args(
            ["--initial", "12:00:00", "--idle-timeout", "500", "--no-idle-reset", "--verbose"])
        assert args.initial == "12:00:00"
        assert args.idle_timeout == 500
        assert args.no_idle_reset is True
        assert args.verbose is True


class TestOnDrop:
    def test_braced_text_unwrapped(self):
        field = _Field()
        event = SimpleNamespace(data="{12:34:56}", action="copy")
        assert on_drop(field, event) == "copy"
        assert field.applied == ["12:34:56"]

    def test_unsupported_text_logged(self, caplog):
        field = _Field()
        with caplog.at_level("INFO"):
            on_drop(field, SimpleNamespace(data="hello", action="copy"))
        assert "Unsupported time text" in caplog.text
