"""
Tests for lazy file enumeration.
"""

import os

import pytest

from bm25_search.core.models.cancellation import CancellationToken
from bm25_search.infrastructure.file_system.enumerator import FileEnumerator


@pytest.fixture
def tree(tmp_path):
    files = [
        "README.md",
        ".env",
        "src/app.py",
        "src/util/helpers.py",
        "src/web/index.js",
        ".git/config",
        ".git/objects/ab/cdef",
        "node_modules/pkg/index.js",
        "src/node_modules/inner/index.js",
        "bower_components/lib.js",
        ".hg/store",
        ".svn/entries",
    ]
    for name in files:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(name)
    return tmp_path


def _relative(paths, root):
    return [p.relative_to(root).as_posix() for p in paths]


def test_default_include_skips_ignored_directories(tree):
    found = _relative(FileEnumerator().iter_files(tree), tree)

    assert sorted(found) == [".env", "README.md", "src/app.py", "src/util/helpers.py", "src/web/index.js"]


def test_paths_are_absolute_files(tree):
    for path in FileEnumerator().iter_files(tree):
        assert path.is_absolute()
        assert path.is_file()


def test_order_is_deterministic(tree):
    enumerator = FileEnumerator()

    assert list(enumerator.iter_files(tree)) == list(enumerator.iter_files(tree))


def test_include_glob_is_relative_to_root(tree):
    enumerator = FileEnumerator()

    assert _relative(enumerator.iter_files(tree, "*.md"), tree) == ["README.md"]
    assert _relative(enumerator.iter_files(tree, "*.py"), tree) == []
    assert sorted(_relative(enumerator.iter_files(tree, "**/*.py"), tree)) == [
        "src/app.py",
        "src/util/helpers.py",
    ]
    assert _relative(enumerator.iter_files(tree, "src/**/*.{js,ts}"), tree) == ["src/web/index.js"]


def test_include_cannot_reach_ignored_files(tree):
    found = _relative(FileEnumerator().iter_files(tree, "**/index.js"), tree)

    assert found == ["src/web/index.js"]


def test_custom_ignore_patterns(tree):
    enumerator = FileEnumerator(ignore_patterns=("src/**",))

    found = _relative(enumerator.iter_files(tree, "**/*.py"), tree)

    assert found == []


def test_enumeration_is_lazy_and_stops_on_cancel(tree):
    token = CancellationToken()
    files = FileEnumerator().iter_files(tree, cancel_token=token)

    first = next(files)
    token.cancel()

    assert first.is_file()
    assert list(files) == []


def test_cancelled_before_start_yields_nothing(tree):
    token = CancellationToken()
    token.cancel()

    assert list(FileEnumerator().iter_files(tree, cancel_token=token)) == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinked_directories_are_not_followed(tree):
    os.symlink(tree / "src", tree / "src_link", target_is_directory=True)
    os.symlink(tree, tree / "src" / "loop", target_is_directory=True)

    found = _relative(FileEnumerator().iter_files(tree, "**/*.py"), tree)

    assert sorted(found) == ["src/app.py", "src/util/helpers.py"]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX non-root")
def test_unreadable_directory_is_skipped(tree):
    locked = tree / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("secret")
    locked.chmod(0)
    try:
        found = _relative(FileEnumerator().iter_files(tree, "**/*.txt"), tree)
    finally:
        locked.chmod(0o755)

    assert found == []
