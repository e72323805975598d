"""ngconfig - Hierarchical workspace configuration for CLI tools."""

__version__ = "1.0.0"
__description__ = "Hierarchical workspace configuration for CLI tools"

from .core.config import (
    ConfigStore,
    WorkspaceDocument,
    get_config_store,
    get_configured_package_manager,
    get_project_by_cwd,
    get_schematic_defaults,
    is_warning_enabled,
    migrate_legacy_global_config,
)
from .core.exceptions import LoadError, NgConfigError, NoHomeDirectoryError, ValidationError

__all__ = [
    "ConfigStore",
    "WorkspaceDocument",
    "get_config_store",
    "get_configured_package_manager",
    "get_project_by_cwd",
    "get_schematic_defaults",
    "is_warning_enabled",
    "migrate_legacy_global_config",
    "NgConfigError",
    "LoadError",
    "ValidationError",
    "NoHomeDirectoryError",
]
