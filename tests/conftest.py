import os
from pathlib import Path

import pytest

from gitfixtures.core.config import clear_all_caches
from gitfixtures.core.utils.subprocess import host_identity_configured
from gitfixtures.core.utils.tempdirs import cleanup_temp_dirs

pytest_plugins = ["gitfixtures.pytest_plugin", "pytester"]

TESTS_ROOT = Path(__file__).resolve().parent

# Config overrides that a developer shell may carry; every test starts from
# the bundled defaults.
_LEAK_PRONE_ENV_KEYS = [
    key for key in os.environ if key.startswith("GITFIXTURES_")
]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Fresh config cache and no GITFIXTURES_* leakage for each test."""
    for key in _LEAK_PRONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    clear_all_caches()
    host_identity_configured.cache_clear()
    yield
    clear_all_caches()
    host_identity_configured.cache_clear()


@pytest.fixture(autouse=True)
def _remove_temp_repos():
    """Remove every throwaway repository a test created."""
    yield
    cleanup_temp_dirs()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """Project root in ``tmp_path`` so ``.gitfixtures/config`` can be written per test."""
    monkeypatch.setenv("GITFIXTURES_PROJECT_ROOT", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    clear_all_caches()
    return tmp_path


@pytest.fixture
def write_project_config(isolated_project_env):
    """Write ``.gitfixtures/config/<name>.yaml`` into the isolated project."""
    import yaml

    def _write(name: str, data: dict) -> Path:
        cfg_dir = isolated_project_env / ".gitfixtures" / "config"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        path = cfg_dir / f"{name}.yaml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        clear_all_caches()
        return path

    return _write
