import pytest

from ghost.web.config import Config


@pytest.fixture
def config(tmp_path):
    """Config with fast timings and no static files."""
    settings_path = tmp_path / "settings.json"
    settings_path.write_text('{"debounceMs": 10, "progressiveSteps": 3, "progressiveDurationMs": 30}')
    return Config(settings_path=str(settings_path), static_dir=str(tmp_path / "static"))
