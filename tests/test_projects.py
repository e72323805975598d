"""Tests for project selection by location."""

import pytest

from ngconfig.core.config import WorkspaceDocument, get_project_by_cwd, get_project_by_path


def make_workspace(base, roots, **extensions):
    """Build a workspace whose projects have the given {name: root} mapping."""
    data = {
        "version": 1,
        "projects": {name: {"root": root} for name, root in roots.items()},
    }
    data.update(extensions)
    return WorkspaceDocument.from_json(data, base / "angular.json")


class TestGetProjectByPath:
    """Test path-based project selection."""

    def test_single_match(self, temp_dir):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"})

        assert get_project_by_path(workspace, temp_dir / "apps" / "app" / "src" / "main.ts") == "app"
        assert get_project_by_path(workspace, temp_dir / "libs" / "lib") == "lib"

    def test_relative_location(self, temp_dir):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"})

        assert get_project_by_path(workspace, "libs/lib/src") == "lib"

    def test_no_match(self, temp_dir):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"})

        assert get_project_by_path(workspace, temp_dir / "tools") is None
        assert get_project_by_path(workspace, temp_dir.parent) is None

    def test_sibling_with_common_prefix(self, temp_dir):
        workspace = make_workspace(temp_dir, {"app": "app", "other": "lib"})

        assert get_project_by_path(workspace, temp_dir / "app2" / "src") is None

    def test_parent_segments_are_resolved(self, temp_dir):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"})

        assert get_project_by_path(workspace, temp_dir / "apps" / "app" / ".." / "app" / "src") == "app"
        assert get_project_by_path(workspace, temp_dir / "apps" / "app" / ".." / "other") is None

    def test_deepest_root_wins(self, temp_dir):
        workspace = make_workspace(temp_dir, {"outer": "a", "inner": "a/b"})

        assert get_project_by_path(workspace, temp_dir / "a" / "b" / "c") == "inner"
        assert get_project_by_path(workspace, temp_dir / "a" / "c") == "outer"

    def test_deepest_root_wins_regardless_of_declaration_order(self, temp_dir):
        workspace = make_workspace(temp_dir, {"inner": "a/b", "outer": "a"})

        assert get_project_by_path(workspace, temp_dir / "a" / "b") == "inner"

    def test_workspace_root_project(self, temp_dir):
        workspace = make_workspace(temp_dir, {"app": "", "lib": "projects/lib"})

        assert get_project_by_path(workspace, temp_dir / "src") == "app"
        assert get_project_by_path(workspace, temp_dir / "projects" / "lib" / "src") == "lib"

    def test_identical_roots_are_ambiguous(self, temp_dir):
        workspace = make_workspace(temp_dir, {"one": "shared", "two": "shared"})

        assert get_project_by_path(workspace, temp_dir / "shared" / "src") is None

    def test_equivalent_roots_are_ambiguous(self, temp_dir):
        workspace = make_workspace(temp_dir, {"one": "shared", "two": "./shared/"})

        assert get_project_by_path(workspace, temp_dir / "shared") is None

    def test_shared_shallow_root_makes_location_ambiguous(self, temp_dir):
        workspace = make_workspace(temp_dir, {"one": "", "two": "", "lib": "lib"})

        assert get_project_by_path(workspace, temp_dir / "lib" / "src") is None


class TestGetProjectByCwd:
    """Test working-directory project selection."""

    def test_single_project_always_selected(self, temp_dir, monkeypatch):
        workspace = make_workspace(temp_dir / "ws", {"only": "projects/only"})
        monkeypatch.chdir(temp_dir)

        assert get_project_by_cwd(workspace) == "only"

    def test_project_containing_cwd(self, temp_dir, monkeypatch):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"})
        cwd = temp_dir / "libs" / "lib" / "src"
        cwd.mkdir(parents=True)
        monkeypatch.chdir(cwd)

        assert get_project_by_cwd(workspace) == "lib"

    def test_default_project_fallback(self, temp_dir, monkeypatch):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"}, defaultProject="app")
        monkeypatch.chdir(temp_dir)

        assert get_project_by_cwd(workspace) == "app"

    def test_location_beats_default_project(self, temp_dir, monkeypatch):
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"}, defaultProject="app")
        cwd = temp_dir / "libs" / "lib"
        cwd.mkdir(parents=True)
        monkeypatch.chdir(cwd)

        assert get_project_by_cwd(workspace) == "lib"

    @pytest.mark.parametrize("default_project", [None, "", 42, ["app"]])
    def test_no_match_and_no_usable_default(self, temp_dir, monkeypatch, default_project):
        extensions = {} if default_project is None else {"defaultProject": default_project}
        workspace = make_workspace(temp_dir, {"app": "apps/app", "lib": "libs/lib"}, **extensions)
        monkeypatch.chdir(temp_dir)

        assert get_project_by_cwd(workspace) is None

    def test_empty_workspace(self, temp_dir, monkeypatch):
        workspace = make_workspace(temp_dir, {})
        monkeypatch.chdir(temp_dir)

        assert get_project_by_cwd(workspace) is None
