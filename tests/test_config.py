from pathlib import Path

from config import PuzzleSettings


def test_defaults(monkeypatch):
    for name in ("CALPUZ_RENDER", "CALPUZ_IMAGE_DIR", "CALPUZ_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = PuzzleSettings(_env_file=None)
    assert settings.render is True
    assert settings.image_dir is None
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CALPUZ_RENDER", "false")
    monkeypatch.setenv("CALPUZ_IMAGE_DIR", str(tmp_path))
    monkeypatch.setenv("CALPUZ_LOG_LEVEL", "DEBUG")
    settings = PuzzleSettings(_env_file=None)
    assert settings.render is False
    assert settings.image_dir == Path(tmp_path)
    assert settings.log_level == "DEBUG"
