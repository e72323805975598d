"""
Workspace configuration store.

Loads the project (``local``) and user (``global``) configuration files,
caches them per scope for the life of the process, and exposes the raw
model tree for callers that edit files in place.
"""

import asyncio
import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Union

import json5
from json5.model import JSONText
from jsonschema import Draft7Validator
from loguru import logger

from ngconfig.core.exceptions import ConfigurationError, LoadError, ValidationError
from .loaders import JsonAstLoader, RelaxedJsonLoader, is_json_object_node
from .paths import default_global_file_path, global_file_path, project_file_path
from .settings import NgConfigSettings, get_settings
from .workspace import WorkspaceDocument

ConfigLevel = Literal['local', 'global']

LEVELS = ('local', 'global')
SCHEMA_RESOURCE = 'schema.json'


class ConfigStore:
    """Loads and caches workspace configuration per scope."""

    def __init__(
        self,
        settings: Optional[NgConfigSettings] = None,
        project_path: Optional[Union[str, Path]] = None,
    ):
        self.settings = settings or get_settings()
        self.project_path = Path(project_path) if project_path else None
        self._cache: Dict[str, Optional[WorkspaceDocument]] = {}
        self._json_loader = RelaxedJsonLoader()
        self._ast_loader = JsonAstLoader()

    def config_path(self, level: ConfigLevel = 'local') -> Optional[Path]:
        """Resolve the config file path for a scope, or None if there is no file."""
        _check_level(level)

        if level == 'local':
            return project_file_path(self.settings, self.project_path)
        return global_file_path(self.settings)

    async def get_workspace(self, level: ConfigLevel = 'local') -> Optional[WorkspaceDocument]:
        """
        Get the workspace document for a scope.

        The first lookup of a scope decides its result for the life of the
        store, including a missing file.

        Args:
            level: 'local' for the project file, 'global' for the user file

        Returns:
            The loaded document, or None if no file exists
        """
        if level in self._cache:
            logger.bind(scope=level).debug("Using cached workspace")
            return self._cache[level]

        _check_level(level)

        # Discovery and loading both touch the filesystem
        workspace = await asyncio.to_thread(self._find_and_load_workspace, level)
        self._cache[level] = workspace

        return workspace

    def _find_and_load_workspace(self, level: ConfigLevel) -> Optional[WorkspaceDocument]:
        log = logger.bind(scope=level)

        config_path = self.config_path(level)
        if config_path is None:
            log.debug("No workspace config found")
            return None

        workspace = self._load_workspace(config_path)
        log.debug(f"Loaded workspace from {config_path}")

        return workspace

    def _load_workspace(self, config_path: Path) -> WorkspaceDocument:
        data = self._json_loader.load_file(config_path)
        if not isinstance(data, dict):
            raise LoadError(config_path, reason="Top-level value must be a JSON object.")

        try:
            return WorkspaceDocument.from_json(data, config_path)
        except ValueError as e:
            raise LoadError(config_path, reason=str(e), cause=e) from e

    def get_workspace_raw(self, level: ConfigLevel = 'local') -> Tuple[Optional[JSONText], Optional[Path]]:
        """
        Get the raw model tree of a scope's config file.

        The returned document node holds the comments around the top-level
        object, so ``dump_json_ast(document)`` reproduces the file. The object
        itself is ``document.value``. A missing global file is created first.
        Results are not cached.

        Args:
            level: 'local' or 'global'

        Returns:
            (document node, path), or (None, None) when no local file exists
        """
        config_path = self.config_path(level)

        if config_path is None:
            if level == 'global':
                config_path = self.create_global_settings()
            else:
                return None, None

        document = self._ast_loader.load_file(config_path)
        if not is_json_object_node(document):
            raise LoadError(
                config_path,
                reason="Top-level value is not an object.",
                message=f"Invalid JSON file: {config_path}",
            )

        return document, config_path

    def create_global_settings(self) -> Path:
        """
        Write a minimal global config file to the home directory.

        Existing content at that location is overwritten.

        Returns:
            Path of the written file
        """
        global_path = default_global_file_path(self.settings)
        global_path.write_text(json.dumps({'version': 1}), encoding='utf-8')
        logger.bind(scope='global').info(f"Created global settings at {global_path}")

        return global_path

    async def validate_workspace(self, data: Dict[str, Any]) -> None:
        """
        Validate a workspace JSON object against the bundled schema.

        Args:
            data: Parsed workspace file content

        Raises:
            ValidationError: With one entry per schema violation
        """
        validator = Draft7Validator(load_workspace_schema())
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        if errors:
            raise ValidationError([_format_schema_error(e) for e in errors])


def _check_level(level: str) -> None:
    if level not in LEVELS:
        raise ConfigurationError('level', level, f"expected one of {', '.join(LEVELS)}")


def load_workspace_schema() -> Dict[str, Any]:
    """Load the bundled workspace JSON schema."""
    content = resources.files(__package__).joinpath(SCHEMA_RESOURCE).read_text(encoding='utf-8')
    return json5.loads(content)


def _format_schema_error(error: Any) -> Dict[str, str]:
    pointer = ''.join(f'/{part}' for part in error.absolute_path)
    return {'path': pointer, 'message': error.message}


# Process-wide store instance
_config_store: Optional[ConfigStore] = None


def get_config_store(settings: Optional[NgConfigSettings] = None) -> ConfigStore:
    """Get or create the process-wide config store.

    Args:
        settings: Settings for the store (for initialization only)

    Returns:
        Global ConfigStore instance
    """
    global _config_store

    if _config_store is None:
        _config_store = ConfigStore(settings)

    return _config_store


def reset_config_store() -> None:
    """Reset the process-wide config store (for testing)."""
    global _config_store
    _config_store = None
