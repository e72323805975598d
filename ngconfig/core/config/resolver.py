"""
Cascading settings lookups across project, workspace and global scopes.

Override settings (package manager, warnings) take the first value found,
looking at the current project, then the workspace, then the global file.
Schematic defaults accumulate instead: global, workspace and project options
are merged in that order, so narrower scopes win on key collisions.
"""

from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from .legacy import get_legacy_package_manager
from .projects import get_project_by_cwd
from .store import ConfigStore, get_config_store

T = TypeVar('T')


async def _lookup_cli_value(
    store: ConfigStore,
    getter: Callable[[dict[str, Any]], Optional[T]],
) -> tuple[Optional[T], bool]:
    """
    Look up a ``cli`` value with override semantics.

    Returns:
        (value, any_document_found); the flag is False only when neither a
        local nor a global document exists.
    """
    result = None

    workspace = await store.get_workspace('local')
    if workspace:
        project = get_project_by_cwd(workspace)
        if project:
            result = getter(workspace.get_project_cli(project))

        if result is None:
            result = getter(workspace.get_cli())

    if result is not None:
        return result, True

    global_options = await store.get_workspace('global')
    if global_options:
        result = getter(global_options.get_cli())

    return result, bool(workspace or global_options)


def _package_manager(cli: dict[str, Any]) -> Optional[str]:
    value = cli.get('packageManager')
    if value and isinstance(value, str):
        return value
    return None


async def get_configured_package_manager(store: Optional[ConfigStore] = None) -> Optional[str]:
    """
    Get the package manager configured for the current project.

    Falls back to the legacy global file only when there is no workspace
    file and no global file at all.
    """
    store = store or get_config_store()

    result, found = await _lookup_cli_value(store, _package_manager)
    if result is None and not found:
        result = get_legacy_package_manager(store.settings)

    logger.debug(f"Configured package manager: {result}")
    return result


async def get_schematic_defaults(
    collection: str,
    schematic: str,
    project: Optional[str] = None,
    store: Optional[ConfigStore] = None,
) -> dict[str, Any]:
    """
    Get merged default options for a schematic.

    Args:
        collection: Schematic collection name
        schematic: Schematic name within the collection
        project: Project whose options apply (defaults to the current project)
        store: Config store to read from

    Returns:
        Merged options, empty if none are configured
    """
    store = store or get_config_store()
    result: dict[str, Any] = {}

    def merge_options(source: Any) -> None:
        if not isinstance(source, dict):
            return

        # Options from the qualified name
        qualified = source.get(f'{collection}:{schematic}')
        if isinstance(qualified, dict):
            result.update(qualified)

        # Options from nested collection schematics
        collection_options = source.get(collection)
        if isinstance(collection_options, dict):
            nested = collection_options.get(schematic)
            if isinstance(nested, dict):
                result.update(nested)

    global_options = await store.get_workspace('global')
    if global_options:
        merge_options(global_options.extensions.get('schematics'))

    workspace = await store.get_workspace('local')
    if workspace:
        merge_options(workspace.extensions.get('schematics'))

        project = project or get_project_by_cwd(workspace)
        if project:
            project_definition = workspace.get_project(project)
            if project_definition:
                merge_options(project_definition.extensions.get('schematics'))

    return result


async def is_warning_enabled(warning: str, store: Optional[ConfigStore] = None) -> bool:
    """Check whether a CLI warning is enabled. Warnings are on unless a scope turns them off."""
    store = store or get_config_store()

    def get_warning(cli: dict[str, Any]) -> Optional[bool]:
        warnings = cli.get('warnings')
        if isinstance(warnings, dict):
            value = warnings.get(warning)
            if isinstance(value, bool):
                return value
        return None

    result, _ = await _lookup_cli_value(store, get_warning)

    return True if result is None else result
