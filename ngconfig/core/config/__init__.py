"""
Configuration package for ngconfig.

This package locates and loads CLI workspace configuration:
- Upward discovery of the project config file and XDG-aware global lookup
- Relaxed JSON loading with a typed document and a lossless model tree
- Project selection by filesystem location
- Cascading package manager, schematic default and warning lookups
- Migration of the legacy global config file
"""

from .legacy import get_legacy_package_manager, migrate_legacy_global_config
from .loaders import (
    JsonAstLoader,
    RelaxedJsonLoader,
    dump_json_ast,
    json_ast_to_value,
    read_config_text,
)
from .paths import (
    default_global_file_path,
    find_up,
    global_file_path,
    home_directory,
    project_file_path,
    xdg_config_home,
)
from .projects import get_project_by_cwd, get_project_by_path
from .resolver import get_configured_package_manager, get_schematic_defaults, is_warning_enabled
from .settings import NgConfigSettings, get_settings
from .store import ConfigStore, get_config_store, load_workspace_schema, reset_config_store
from .workspace import ProjectDefinition, WorkspaceDocument

__all__ = [
    "NgConfigSettings",
    "get_settings",
    "find_up",
    "project_file_path",
    "home_directory",
    "xdg_config_home",
    "global_file_path",
    "default_global_file_path",
    "RelaxedJsonLoader",
    "JsonAstLoader",
    "read_config_text",
    "dump_json_ast",
    "json_ast_to_value",
    "ProjectDefinition",
    "WorkspaceDocument",
    "ConfigStore",
    "get_config_store",
    "reset_config_store",
    "load_workspace_schema",
    "get_project_by_path",
    "get_project_by_cwd",
    "get_configured_package_manager",
    "get_schematic_defaults",
    "is_warning_enabled",
    "migrate_legacy_global_config",
    "get_legacy_package_manager",
]
