"""Tests for the sandboxed workspace browser."""

import os

import pytest

from bb_dashboard.core.exceptions import WorkspaceAccessError
from bb_dashboard.services.workspace_browser import WorkspaceBrowser


@pytest.fixture
def workspace(tmp_path):
    root = tmp_path / "workspace"
    (root / "notes").mkdir(parents=True)
    (root / "notes" / "today.md").write_text("# Today\n")
    (root / "notes" / "deep" / "deeper").mkdir(parents=True)
    (root / "notes" / "deep" / "deeper" / "x.txt").write_text("x")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / ".secrets").write_text("token")
    (root / "b.json").write_text("{}")
    (root / "a.txt").write_text("hello")
    (tmp_path / "outside.txt").write_text("nope")
    return root


def test_tree_orders_dirs_first_and_skips_hidden(workspace):
    """Test tree ordering and filtering."""
    tree = WorkspaceBrowser(workspace).tree()

    assert [n.name for n in tree] == ["notes", "a.txt", "b.json"]
    notes = tree[0]
    assert notes.type == "dir"
    assert [c.path for c in notes.children] == ["notes/deep", "notes/today.md"]
    assert tree[1].size == 5


def test_tree_depth_limit(workspace):
    """Test that recursion stops at the configured depth."""
    tree = WorkspaceBrowser(workspace, max_depth=2).tree()
    deep = tree[0].children[0]
    assert deep.name == "deep"
    assert deep.children == []


def test_tree_missing_root(tmp_path):
    """Test that a missing workspace yields an empty tree."""
    assert WorkspaceBrowser(tmp_path / "nowhere").tree() == []


def test_read_file(workspace):
    """Test reading a file inside the workspace."""
    content = WorkspaceBrowser(workspace).read("notes/today.md")
    assert content.content == "# Today\n"
    assert content.truncated is False
    assert content.size == 8


def test_read_truncates_large_files(workspace):
    """Test the size cap on file reads."""
    (workspace / "big.log").write_text("a" * 100)

    content = WorkspaceBrowser(workspace, max_file_bytes=10).read("big.log")

    assert content.content == "a" * 10
    assert content.truncated is True
    assert content.size == 100


@pytest.mark.parametrize("path", ["../outside.txt", "notes/../../outside.txt", "/etc/passwd", ""])
def test_read_rejects_escapes(workspace, path):
    """Test that paths outside the workspace are refused."""
    with pytest.raises(WorkspaceAccessError):
        WorkspaceBrowser(workspace).read(path)


def test_read_rejects_escaping_symlink(workspace, tmp_path):
    """Test that a symlink pointing outside the workspace is refused and hidden."""
    os.symlink(tmp_path / "outside.txt", workspace / "link.txt")
    browser = WorkspaceBrowser(workspace)

    with pytest.raises(WorkspaceAccessError):
        browser.read("link.txt")
    assert "link.txt" not in [n.name for n in browser.tree()]


def test_read_missing_and_directory(workspace):
    """Test reading a missing file and a directory."""
    browser = WorkspaceBrowser(workspace)
    with pytest.raises(FileNotFoundError):
        browser.read("missing.md")
    with pytest.raises(WorkspaceAccessError):
        browser.read("notes")


def test_files_api(client, test_settings):
    """Test the tree and content endpoints."""
    root = test_settings.workspace_dir
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "plan.md").write_text("plan")

    response = client.get("/api/files/tree")
    assert response.status_code == 200
    tree = response.json()["tree"]
    assert tree[0]["name"] == "docs"
    assert tree[0]["children"][0]["path"] == "docs/plan.md"
    assert "children" not in tree[0]["children"][0]

    response = client.get("/api/files/content", params={"path": "docs/plan.md"})
    assert response.status_code == 200
    assert response.json()["content"] == "plan"

    assert client.get("/api/files/content", params={"path": "../x"}).status_code == 400
    assert client.get("/api/files/content", params={"path": "docs/none.md"}).status_code == 404
