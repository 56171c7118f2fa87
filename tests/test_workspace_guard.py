"""
Tests for workspace path resolution and containment.
"""

import os

import pytest

from bm25_search.core.exceptions import (
    NotADirectory,
    OutOfWorkspace,
    PathAccessError,
    PathNotFound,
)
from bm25_search.core.services.workspace_guard import WorkspaceGuard


@pytest.fixture
def layout(tmp_path):
    workspace = tmp_path / "ws"
    (workspace / "sub" / "deeper").mkdir(parents=True)
    (workspace / "file.txt").write_text("x")
    outside = tmp_path / "outside"
    outside.mkdir()
    sibling = tmp_path / "ws2"
    sibling.mkdir()
    return workspace, outside, sibling


def test_no_path_means_all_roots(layout):
    workspace, outside, _ = layout
    guard = WorkspaceGuard(str(workspace), [str(workspace), str(outside)])

    assert guard.resolve_search_dir(None) is None
    assert guard.resolve_search_dir("") is None
    assert guard.search_directories(None) == [
        os.path.realpath(workspace),
        os.path.realpath(outside),
    ]


def test_defaults_to_target_dir_as_only_root(layout):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))

    assert guard.directories == [os.path.realpath(workspace)]


def test_resolves_relative_path(layout):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))

    assert guard.resolve_search_dir("sub") == str(workspace / "sub")
    assert guard.resolve_search_dir(".") == str(workspace)
    assert guard.resolve_search_dir("sub/deeper/..") == str(workspace / "sub")


@pytest.mark.parametrize("path", ["..", "../outside", "sub/../../outside", "sub/deeper/../../.."])
def test_dotdot_escape_is_rejected(layout, path):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))

    with pytest.raises(OutOfWorkspace) as exc_info:
        guard.resolve_search_dir(path)

    message = str(exc_info.value)
    assert message.startswith("Path validation failed")
    assert f'"{path}"' in message
    assert os.path.realpath(workspace) in message


def test_absolute_path_outside_is_rejected(layout):
    workspace, outside, _ = layout
    guard = WorkspaceGuard(str(workspace))

    with pytest.raises(OutOfWorkspace):
        guard.resolve_search_dir(str(outside))


def test_sibling_with_common_prefix_is_outside(layout):
    workspace, _, sibling = layout
    guard = WorkspaceGuard(str(workspace))

    assert not guard.is_path_within_workspace(str(sibling))
    with pytest.raises(OutOfWorkspace):
        guard.resolve_search_dir("../ws2")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlink_escape_is_rejected(layout):
    workspace, outside, _ = layout
    os.symlink(outside, workspace / "link", target_is_directory=True)
    guard = WorkspaceGuard(str(workspace))

    with pytest.raises(OutOfWorkspace):
        guard.resolve_search_dir("link")


def test_path_in_second_root_is_allowed(layout):
    workspace, outside, _ = layout
    guard = WorkspaceGuard(str(workspace), [str(workspace), str(outside)])

    assert guard.resolve_search_dir(str(outside)) == str(outside)


def test_missing_path(layout):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))

    with pytest.raises(PathNotFound, match="Path does not exist"):
        guard.resolve_search_dir("nonexistent")


def test_file_is_not_a_directory(layout):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))

    with pytest.raises(NotADirectory, match="Path is not a directory"):
        guard.resolve_search_dir("file.txt")


def test_stat_failure_is_wrapped(layout, monkeypatch):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))
    target = str(workspace / "sub")
    real_stat = os.stat

    def fake_stat(path, *args, **kwargs):
        if os.fspath(path) == target:
            raise PermissionError(13, "Permission denied")
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)

    with pytest.raises(PathAccessError, match="Failed to access path stats") as exc_info:
        guard.resolve_search_dir("sub")

    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_null_byte_is_an_access_error(layout):
    workspace, _, _ = layout
    guard = WorkspaceGuard(str(workspace))

    with pytest.raises(PathAccessError) as exc_info:
        guard.resolve_search_dir("sub\x00x")

    assert isinstance(exc_info.value.__cause__, ValueError)
