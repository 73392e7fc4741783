"""Tests for the server entry point, with uvicorn stubbed out."""

import pytest

from goal_tracker import main_web


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []

    def fake_run(app, **kwargs):
        calls.append((app, kwargs))

    monkeypatch.setattr(main_web.uvicorn, "run", fake_run)
    return calls


def test_defaults_from_environment(monkeypatch, uvicorn_calls):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)

    assert main_web.main([]) == 0

    _, kwargs = uvicorn_calls[0]
    assert kwargs["port"] == 3000
    assert kwargs["host"] == "0.0.0.0"


def test_port_from_environment(monkeypatch, uvicorn_calls):
    monkeypatch.setenv("PORT", "4321")

    assert main_web.main([]) == 0
    assert uvicorn_calls[0][1]["port"] == 4321


def test_command_line_overrides(monkeypatch, uvicorn_calls):
    monkeypatch.setenv("PORT", "4321")

    assert main_web.main(["--host", "127.0.0.1", "--port", "9000"]) == 0
    assert uvicorn_calls[0][1]["host"] == "127.0.0.1"
    assert uvicorn_calls[0][1]["port"] == 9000


def test_invalid_port_exits_with_error(monkeypatch, uvicorn_calls):
    monkeypatch.setenv("PORT", "not-a-port")

    assert main_web.main([]) == 1
    assert uvicorn_calls == []


def test_keyboard_interrupt_is_clean_exit(monkeypatch):
    def interrupted(app, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_web.uvicorn, "run", interrupted)
    assert main_web.main([]) == 0


def test_startup_failure_exits_with_error(monkeypatch):
    def broken(app, **kwargs):
        raise OSError("address already in use")

    monkeypatch.setattr(main_web.uvicorn, "run", broken)
    assert main_web.main([]) == 1


def test_missing_static_dir_exits_with_error(monkeypatch, tmp_path, uvicorn_calls):
    monkeypatch.setenv("GOAL_TRACKER_STATIC_DIR", str(tmp_path / "does-not-exist"))

    assert main_web.main([]) == 1
    assert uvicorn_calls == []
