"""
Configuration file discovery.

Project configuration is found by walking up from a starting directory;
global configuration follows the XDG Base Directory convention with a
fallback to the home directory.
"""

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from loguru import logger

from ngconfig.core.exceptions import NoHomeDirectoryError
from .settings import NgConfigSettings, get_settings


def find_up(names: Iterable[str], start: Union[str, Path]) -> Optional[Path]:
    """
    Find the nearest file matching one of ``names``, walking up from ``start``.

    At each directory level the names are checked in order, so the first
    name wins over later ones at the same level. The filesystem root itself
    is not searched.

    Args:
        names: Candidate file names, in priority order
        start: Directory to start the search from

    Returns:
        Path of the first match, or None
    """
    names = list(names)
    current = Path(os.path.abspath(start))
    root = Path(current.anchor)

    while current != root:
        for name in names:
            candidate = current / name
            if candidate.exists():
                return candidate
        current = current.parent

    return None


def project_file_path(
    settings: Optional[NgConfigSettings] = None,
    project_path: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """
    Locate the project (workspace) configuration file.

    Search order: upward from ``project_path`` when given, then upward from
    the current working directory, then upward from the installation
    directory. The first hit wins.
    """
    settings = settings or get_settings()

    starts = []
    if project_path:
        starts.append(Path(project_path))
    starts.append(Path.cwd())
    starts.append(settings.install_dir)

    for start in starts:
        found = find_up(settings.config_names, start)
        if found:
            logger.debug(f"Found project config {found} (search from {start})")
            return found

    return None


def _system_home() -> Optional[Path]:
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    return home if str(home) else None


def home_directory(settings: Optional[NgConfigSettings] = None) -> Optional[Path]:
    """Return the home directory from settings or the OS, or None if it cannot be resolved."""
    settings = settings or get_settings()
    if settings.home_dir is not None:
        return settings.home_dir
    return _system_home()


def xdg_config_home(
    home: Path,
    settings: Optional[NgConfigSettings] = None,
    config_file: Optional[str] = None,
) -> Path:
    """
    Return the app's XDG config directory, or a file inside it.

    https://specifications.freedesktop.org/basedir-spec/basedir-spec-latest.html
    """
    settings = settings or get_settings()
    base = settings.xdg_config_home.expanduser() if settings.xdg_config_home else home / '.config'
    path = base / settings.app_name

    return path / config_file if config_file else path


def global_file_path(settings: Optional[NgConfigSettings] = None) -> Optional[Path]:
    """
    Locate the global (user-level) configuration file.

    The XDG location is preferred; the home-directory file is the fallback.
    New files are still created in the home directory (see
    ``default_global_file_path``), so users can move them to the XDG location.
    """
    settings = settings or get_settings()
    home = home_directory(settings)
    if home is None:
        return None

    xdg_config = xdg_config_home(home, settings, settings.global_file_name)
    if xdg_config.exists():
        return xdg_config

    path = home / settings.global_file_name
    if path.exists():
        return path

    return None


def default_global_file_path(settings: Optional[NgConfigSettings] = None) -> Path:
    """Return the location new global config files are written to."""
    settings = settings or get_settings()
    home = home_directory(settings)
    if home is None:
        raise NoHomeDirectoryError("write global settings")

    return home / settings.global_file_name


def legacy_file_path(settings: Optional[NgConfigSettings] = None) -> Optional[Path]:
    """Return the deprecated global config path, or None without a home directory."""
    settings = settings or get_settings()
    home = home_directory(settings)
    if home is None:
        return None

    return home / settings.legacy_file_name
