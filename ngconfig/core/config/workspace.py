"""
Typed view of a workspace configuration file.

Known members are lifted into fields; every other key is kept as an
extension, at workspace level (``cli``, ``schematics``, ``defaultProject``)
and at project level (``cli``, ``schematics``, ``projectType``).
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

WORKSPACE_KEYS = ('version', 'newProjectRoot', 'projects')
PROJECT_KEYS = ('root', 'sourceRoot', 'prefix', 'targets', 'architect')


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


class ProjectDefinition(BaseModel):
    """A project declared under ``projects`` in a workspace file."""

    model_config = ConfigDict(frozen=True)

    root: str = Field(
        default='',
        description="Project root, relative to the workspace base path"
    )

    source_root: Optional[str] = Field(
        default=None,
        description="sourceRoot member"
    )

    prefix: Optional[str] = Field(
        default=None,
        description="Selector prefix member"
    )

    targets: dict[str, Any] = Field(
        default_factory=dict,
        description="Build targets (targets or the older architect member)"
    )

    extensions: dict[str, Any] = Field(
        default_factory=dict,
        description="All other project members"
    )

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> 'ProjectDefinition':
        """Split a raw project object into known members and extensions."""
        targets = data.get('targets', data.get('architect'))
        return cls(
            root=data.get('root', ''),
            source_root=data.get('sourceRoot'),
            prefix=data.get('prefix'),
            targets=targets if targets is not None else {},
            extensions={k: v for k, v in data.items() if k not in PROJECT_KEYS},
        )


class WorkspaceDocument(BaseModel):
    """A parsed workspace (or global) configuration file."""

    model_config = ConfigDict(frozen=True)

    file_path: Path
    version: Optional[int] = None
    new_project_root: Optional[str] = None
    projects: dict[str, ProjectDefinition] = Field(default_factory=dict)
    extensions: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_json(cls, data: dict[str, Any], file_path: Path) -> 'WorkspaceDocument':
        """
        Build a document from a parsed JSON object.

        Args:
            data: Top-level JSON object of the file
            file_path: Path the object was read from

        Returns:
            WorkspaceDocument instance
        """
        raw_projects = data.get('projects')
        if raw_projects is None:
            raw_projects = {}
        if not isinstance(raw_projects, dict):
            raise ValueError("'projects' must be an object")

        projects = {}
        for name, project in raw_projects.items():
            if not isinstance(project, dict):
                raise ValueError(f"Project '{name}' must be an object")
            projects[name] = ProjectDefinition.from_json(project)

        return cls(
            file_path=Path(file_path).resolve(),
            version=data.get('version'),
            new_project_root=data.get('newProjectRoot'),
            projects=projects,
            extensions={k: v for k, v in data.items() if k not in WORKSPACE_KEYS},
        )

    @property
    def base_path(self) -> Path:
        """Directory containing the configuration file."""
        return self.file_path.parent

    def get_project(self, name: str) -> Optional[ProjectDefinition]:
        return self.projects.get(name)

    def get_cli(self) -> dict[str, Any]:
        """Return the workspace ``cli`` extension, or an empty dict."""
        return _as_dict(self.extensions.get('cli'))

    def get_project_cli(self, name: str) -> dict[str, Any]:
        """Return the ``cli`` extension of a project, or an empty dict."""
        project = self.projects.get(name)
        if project is None:
            return {}
        return _as_dict(project.extensions.get('cli'))
