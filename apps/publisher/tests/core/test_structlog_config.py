"""Tests for structlog configuration.

Only our wrapper is covered here: renderer choice, output stream,
level filtering and build_id injection.
"""

import json
import logging

import structlog

from publisher.core.logging import configure_structlog, get_build_id, set_build_id


class TestConfigureStructlog:
    def test_configure_does_not_raise_in_console_mode(self) -> None:
        configure_structlog(debug=True)

    def test_configure_does_not_raise_in_json_mode(self) -> None:
        configure_structlog(json_logs=True)

    def test_configure_multiple_times_is_safe(self) -> None:
        configure_structlog(debug=True)
        configure_structlog(json_logs=True)
        configure_structlog()

    def test_json_output_goes_to_stderr_with_build_id(self, capsys) -> None:
        configure_structlog(debug=True, json_logs=True)
        set_build_id("build-42")
        try:
            structlog.get_logger("test").info("publish.start", artifacts=2)
        finally:
            set_build_id("")

        captured = capsys.readouterr()
        assert captured.out == ""
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event["event"] == "publish.start"
        assert event["artifacts"] == 2
        assert event["build_id"] == "build-42"
        assert event["level"] == "info"

    def test_debug_events_filtered_without_debug(self, capsys) -> None:
        configure_structlog(debug=False, json_logs=True)

        structlog.get_logger("test").debug("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_stdlib_level_follows_debug_flag(self) -> None:
        configure_structlog(debug=True)
        assert logging.getLogger().level == logging.DEBUG

        configure_structlog(debug=False)
        assert logging.getLogger().level == logging.WARNING

    def test_build_id_defaults_to_empty(self) -> None:
        assert get_build_id() == ""
