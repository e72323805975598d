"""Shared fixtures: an isolated home directory, working directory and settings."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from ngconfig.core.config import ConfigStore, NgConfigSettings, get_settings, reset_config_store


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def home_dir(temp_dir: Path) -> Path:
    home = temp_dir / "home"
    home.mkdir()
    return home


@pytest.fixture
def work_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory with no config files above it (inside the temp tree)."""
    work = temp_dir / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def settings(temp_dir: Path, home_dir: Path) -> NgConfigSettings:
    install = temp_dir / "install" / "ngconfig"
    install.mkdir(parents=True)
    return NgConfigSettings(home_dir=home_dir, xdg_config_home=None, install_dir=install)


@pytest.fixture
def store(settings: NgConfigSettings, work_dir: Path) -> ConfigStore:
    return ConfigStore(settings)


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    reset_config_store()
    get_settings.cache_clear()
    yield
    reset_config_store()
    get_settings.cache_clear()
