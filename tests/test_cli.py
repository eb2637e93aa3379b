"""
Tests for the command-line entry point.

Each test runs main() in a temporary working directory and inspects
the exit code and captured output.
"""

import json
import logging

import pytest
import yaml

from envroulette import cli


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_env_file(workdir, capsys):
    assert cli.main([]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "No .env file found" in out
    assert "environment variables" not in out
    assert "Issues found" not in out


def test_clean_file(workdir, capsys):
    (workdir / ".env").write_text("FOO=bar\n")
    assert cli.main([]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Found .env!" in out
    assert "Found 1 environment variables:" in out
    assert "FOO=bar" in out
    assert "100% chance of working" in out


def test_file_with_issues(workdir, capsys):
    (workdir / ".env.production").write_text("API_SECRET=abc\nGREETING=hi there\nnope\n")
    assert cli.main([]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Found .env.production!" in out
    assert "API_SECRET=********" in out
    assert "Found 3 potential issues." in out
    assert "70% chance of working" in out


def test_unreadable_file(workdir, capsys):
    (workdir / ".env").write_bytes(b"\xff\xfe\xfd")
    assert cli.main([]) == cli.EXIT_READ_ERROR
    out = capsys.readouterr().out
    assert "Can't read" in out
    assert "Issues found" not in out


def test_json_format(workdir, capsys):
    (workdir / ".env").write_text("FOO=\n")
    assert cli.main(["--format", "json"]) == cli.EXIT_OK
    data = json.loads(capsys.readouterr().out)
    assert data["source"] == ".env"
    assert data["confidence"] == 90
    assert data["issues"][0]["kind"] == "empty_value"


def test_yaml_format(workdir, capsys):
    (workdir / ".env").write_text("STRIPE_KEY=sk_live_abc\n")
    assert cli.main(["--format", "yaml"]) == cli.EXIT_OK
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["variables"] == [{"key": "STRIPE_KEY", "value": "********", "line": 1}]


def test_machine_format_not_found_goes_to_stderr(workdir, capsys):
    assert cli.main(["--format", "json"]) == cli.EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No .env file found" in captured.err


def test_unknown_format_rejected(workdir):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--format", "xml"])
    assert exc_info.value.code == 2


def test_configure_logging_levels():
    cli.configure_logging(verbose=True)
    logger = logging.getLogger("envroulette")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    cli.configure_logging(verbose=False)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_text_is_the_default_format(workdir, capsys):
    (workdir / ".env").write_text("FOO=bar\nAPI_SECRET=abc\n")
    assert cli.main([]) == cli.EXIT_OK
    default_out = capsys.readouterr().out
    assert cli.main(["--format", "text"]) == cli.EXIT_OK
    assert capsys.readouterr().out == default_out
    assert default_out.startswith("🎰 Spinning the ENV Roulette wheel...\n")


def test_banner_and_found_messages(workdir, capsys):
    (workdir / ".env.local").write_text("FOO=bar\n")
    cli.main([])
    out = capsys.readouterr().out
    assert "💀 May the odds be ever in your favor (they won't be)" in out
    assert "🎯 Found .env.local! Because who needs consistent naming?" in out
    assert "Did you cheat?" in out


def test_not_found_messages(workdir, capsys):
    cli.main([])
    out = capsys.readouterr().out
    assert "❌ No .env file found. Your app will probably crash. Surprise!" in out
    assert "I'm not your mom." in out


def test_logs_do_not_reach_root_logger(workdir, caplog):
    cli.configure_logging(verbose=True)
    with caplog.at_level(logging.DEBUG):
        cli.main(["--verbose"])
    assert logging.getLogger("envroulette").propagate is False
    assert not [r for r in caplog.records if r.name.startswith("envroulette")]
