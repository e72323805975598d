"""Project selection by filesystem location."""

import os
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .workspace import WorkspaceDocument


def _resolve(base: Path, path: Union[str, Path]) -> str:
    return os.path.normpath(os.path.join(base, path))


def _is_inside(base: str, potential: str) -> bool:
    try:
        relative = os.path.relpath(potential, base)
    except ValueError:
        # Different drives on Windows
        return False

    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return False
    return not os.path.isabs(relative)


def get_project_by_path(workspace: WorkspaceDocument, location: Union[str, Path]) -> Optional[str]:
    """
    Find the project whose root contains ``location``.

    Project roots and ``location`` are resolved against the workspace base
    path. The deepest containing root wins. If two matching projects share a
    root, or the two deepest matches are equally deep, the location is
    ambiguous and no project is returned.

    Args:
        workspace: Workspace to search
        location: File or directory path

    Returns:
        Project name, or None
    """
    base = workspace.base_path
    target = _resolve(base, location)

    matches = []
    for name, project in workspace.projects.items():
        root = _resolve(base, project.root)
        if _is_inside(root, target):
            matches.append((root, name))

    if not matches:
        return None

    # Deepest roots first; the resolved root length is its depth
    matches.sort(key=lambda match: len(match[0]), reverse=True)

    if len(matches) > 1:
        roots = [root for root, _ in matches]
        if len(set(roots)) != len(roots) or len(roots[0]) == len(roots[1]):
            logger.debug(f"Ambiguous project for {target}: {[name for _, name in matches]}")
            return None

    return matches[0][1]


def get_project_by_cwd(workspace: WorkspaceDocument) -> Optional[str]:
    """
    Determine the project for the current working directory.

    A single-project workspace always selects that project. Otherwise the
    project containing the working directory is used, then the workspace
    ``defaultProject``.
    """
    if len(workspace.projects) == 1:
        return next(iter(workspace.projects))

    project = get_project_by_path(workspace, os.getcwd())
    if project:
        return project

    default_project = workspace.extensions.get('defaultProject')
    if default_project and isinstance(default_project, str):
        return default_project

    return None
