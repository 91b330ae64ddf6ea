"""Tests for the CLI entry point."""

import json
import logging

import pytest

from pattern_catalog import __version__
from pattern_catalog.cli.main import main, parse_args
from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run in a temp dir so the observer demo's log file lands there."""
    monkeypatch.chdir(tmp_path)


def test_parse_args_global_options():
    args = parse_args(["--format", "json", "--log-level", "debug", "run", "state", "command"])

    assert args.format == "json"
    assert args.log_level == "DEBUG"
    assert args.command == "run"
    assert args.names == ["state", "command"]


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_run_prints_demo_output_verbatim(capsys):
    exit_code = main(["run", "strategy"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Paid 100 using Credit Card.",
        "Paid 200 using PayPal.",
        "Paid 300 using Bank Transfer.",
    ]


def test_run_json_format(capsys):
    exit_code = main(["--format", "json", "run", "decorator"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["results"][0]["name"] == "decorator"
    assert data["results"][0]["output_lines"][-1] == "Base coffee, sugar, milk: $ 3.0"


def test_list_json_by_category(capsys):
    exit_code = main(["--format", "json", "list", "--category", "structural"])

    assert exit_code == 0
    names = [d["name"] for d in json.loads(capsys.readouterr().out)["demos"]]
    assert names == ["adapter", "decorator", "composite", "facade"]


def test_show_includes_notes(capsys):
    exit_code = main(["--format", "list", "show", "observer"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("Demo: observer")
    assert "Use cases:" in out


def test_show_notes_can_be_disabled_in_config(tmp_path, capsys):
    config_file = tmp_path / "catalog.yaml"
    config_file.write_text("output:\n  format: json\n  show_notes: false\n")

    exit_code = main(["--config", str(config_file), "show", "state"])

    assert exit_code == 0
    assert "notes" not in json.loads(capsys.readouterr().out)["demo"]


def test_unknown_demo_reports_error(capsys):
    exit_code = main(["run", "visitor"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Error: Demo 'visitor' not found. Available demos:" in captured.err


def test_quiet_suppresses_error_message(capsys):
    exit_code = main(["--quiet", "show", "visitor"])

    assert exit_code == 1
    assert "Error:" not in capsys.readouterr().err


def test_invalid_config_reports_error(tmp_path, capsys):
    exit_code = main(["--config", str(tmp_path / "missing.yaml"), "list"])

    assert exit_code == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_no_command(capsys):
    assert main([]) == 1
    assert "No command specified" in capsys.readouterr().err


def test_run_all_category(capsys):
    exit_code = main(["run-all", "--category", "creational"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "==== abstract-factory ====" in out
    assert "==== prototype ====" in out
    assert "==== adapter ====" not in out


def test_debug_logging_stops_once_setup_handlers_are_dropped(capsys, drop_setup_handlers):
    assert main(["--log-level", "debug", "list"]) == 0
    assert "Logging configured" in capsys.readouterr().err

    drop_setup_handlers(logging.getLogger())
    DemoRegistry().clear_registrations()

    assert capsys.readouterr().err == ""
