# tests/conftest.py
import pytest


@pytest.fixture(autouse=True)
def clean_taut_env(monkeypatch):
    """Keep TAUT_* settings from the developer's shell or .env out of tests."""
    for name in ("TAUT_CONFIG", "TAUT_MAX_VARIABLES", "TAUT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "taut.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
