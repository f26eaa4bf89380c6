"""Environment-driven settings."""

from pathlib import Path

import pytest

from device_simulator.config import SimulatorSettings, settings_from_env

ENV_NAMES = [
    "DEVSIM_CONTENT_ROOT",
    "DEVSIM_DEFAULT_DOCUMENT",
    "DEVSIM_FALLBACK_DOCUMENT",
    "DEVSIM_HEAP_PATH",
    "DEVSIM_HOST",
    "DEVSIM_PORT",
    "DEVSIM_SERVE_GZIP",
    "DEVSIM_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = settings_from_env(load_env_file=False)

    assert settings.content_root == Path(".")
    assert settings.default_document == "index.htm"
    assert settings.fallback_document == "404.html"
    assert settings.heap_path == "/heap"
    assert settings.port == 8080
    assert settings.serve_gzip is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DEVSIM_CONTENT_ROOT", str(tmp_path))
    monkeypatch.setenv("DEVSIM_DEFAULT_DOCUMENT", "home.html")
    monkeypatch.setenv("DEVSIM_PORT", "9000")
    monkeypatch.setenv("DEVSIM_SERVE_GZIP", "false")
    monkeypatch.setenv("DEVSIM_LOG_LEVEL", "debug")

    settings = settings_from_env(load_env_file=False)

    assert settings.content_root == tmp_path
    assert settings.default_document == "home.html"
    assert settings.port == 9000
    assert settings.serve_gzip is False
    assert settings.log_level == "DEBUG"


def test_env_file_is_loaded(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # recorded so the value loaded from .env is removed afterwards
    monkeypatch.setenv("DEVSIM_PORT", "0")
    monkeypatch.delenv("DEVSIM_PORT")
    (tmp_path / ".env").write_text("DEVSIM_PORT=8181\n")
    monkeypatch.chdir(tmp_path)

    settings = settings_from_env()

    assert settings.port == 8181


@pytest.mark.parametrize("value", ["eighty", "0", "70000"])
def test_invalid_port(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("DEVSIM_PORT", value)

    with pytest.raises(ValueError):
        settings_from_env(load_env_file=False)


def test_invalid_boolean(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVSIM_SERVE_GZIP", "maybe")

    with pytest.raises(ValueError):
        settings_from_env(load_env_file=False)


def test_empty_documents_rejected() -> None:
    with pytest.raises(ValueError):
        SimulatorSettings(default_document="")
    with pytest.raises(ValueError):
        SimulatorSettings(fallback_document="")
    with pytest.raises(ValueError):
        SimulatorSettings(heap_path="heap")
