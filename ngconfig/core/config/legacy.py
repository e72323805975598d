"""
Support for the deprecated ``.angular-cli.json`` global config file.

Legacy files are best effort: a file that cannot be read or parsed is
treated as if it had no settings.
"""

import json
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from ngconfig.core.exceptions import LoadError
from .loaders import RelaxedJsonLoader
from .paths import default_global_file_path, legacy_file_path
from .settings import NgConfigSettings, get_settings


def _read_legacy_config(settings: NgConfigSettings) -> Optional[dict[str, Any]]:
    path = legacy_file_path(settings)
    if path is None or not path.exists():
        return None

    try:
        legacy = RelaxedJsonLoader().load_file(path)
    except (LoadError, OSError) as e:
        logger.warning(f"Ignoring unreadable legacy config {path}: {e}")
        return None

    if not isinstance(legacy, dict):
        logger.warning(f"Ignoring legacy config {path}: top-level value is not an object")
        return None

    return legacy


def _legacy_package_manager(legacy: dict[str, Any]) -> Optional[str]:
    value = legacy.get('packageManager')
    if value and isinstance(value, str) and value != 'default':
        return value
    return None


def migrate_legacy_global_config(settings: Optional[NgConfigSettings] = None) -> bool:
    """
    Convert the legacy global config file into the current format.

    Only ``packageManager``, ``defaults.schematics.collection`` (renamed to
    ``defaultCollection``) and ``warnings.versionMismatch`` carry over. Nothing
    is written when none of them is set.

    Returns:
        True if a new global config file was written
    """
    settings = settings or get_settings()
    legacy = _read_legacy_config(settings)
    if legacy is None:
        return False

    cli: dict[str, Any] = {}

    package_manager = _legacy_package_manager(legacy)
    if package_manager:
        cli['packageManager'] = package_manager

    defaults = legacy.get('defaults')
    if isinstance(defaults, dict) and isinstance(defaults.get('schematics'), dict):
        collection = defaults['schematics'].get('collection')
        if isinstance(collection, str):
            cli['defaultCollection'] = collection

    legacy_warnings = legacy.get('warnings')
    if isinstance(legacy_warnings, dict):
        warnings = {}
        if isinstance(legacy_warnings.get('versionMismatch'), bool):
            warnings['versionMismatch'] = legacy_warnings['versionMismatch']

        if warnings:
            cli['warnings'] = warnings

    if not cli:
        return False

    global_path: Path = default_global_file_path(settings)
    global_path.write_text(json.dumps({'version': 1, 'cli': cli}, indent=2), encoding='utf-8')
    logger.info(f"Migrated legacy global config to {global_path}")

    return True


def get_legacy_package_manager(settings: Optional[NgConfigSettings] = None) -> Optional[str]:
    """Return ``packageManager`` from the legacy global config, if set."""
    settings = settings or get_settings()
    legacy = _read_legacy_config(settings)
    if legacy is None:
        return None

    return _legacy_package_manager(legacy)
