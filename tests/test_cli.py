"""
Tests for the command-line entry point.
"""

from bm25_search.presentation.cli import EXIT_ERROR, EXIT_OK, main


def test_search_prints_report(workspace, capsys):
    code = main(["--target-dir", str(workspace), "search", "fox"])

    out, err = capsys.readouterr()
    assert code == EXIT_OK
    assert 'Found 2 matches for query "fox"' in out
    assert "Found 2 matches" in err


def test_search_with_options(workspace, capsys):
    code = main(
        ["--target-dir", str(workspace), "search", "quick brown", "--include", "*.js"]
    )

    out, _ = capsys.readouterr()
    assert code == EXIT_OK
    assert "File: fileB.js" in out
    assert "fileA.txt" not in out


def test_no_matches_is_not_an_error(workspace, capsys):
    code = main(["--target-dir", str(workspace), "search", "nonexistentpattern"])

    out, _ = capsys.readouterr()
    assert code == EXIT_OK
    assert "No matches found" in out


def test_invalid_path_exits_with_error(workspace, capsys):
    code = main(["--target-dir", str(workspace), "search", "fox", "--path", "../.."])

    out, _ = capsys.readouterr()
    assert code == EXIT_ERROR
    assert "Path validation failed" in out


def test_multi_root_workspace(workspace, tmp_path, capsys):
    other = tmp_path / "other"
    other.mkdir()
    (other / "notes.md").write_text("a fox in another root")

    code = main(
        [
            "--target-dir", str(workspace),
            "--workspace", str(workspace),
            "--workspace", str(other),
            "search", "fox",
        ]
    )

    out, _ = capsys.readouterr()
    assert code == EXIT_OK
    assert "Found 3 matches" in out
    assert "File: notes.md" in out


def test_describe(workspace, capsys):
    code = main(["--target-dir", str(workspace), "describe", "needle", "--include", "*.py"])

    out, _ = capsys.readouterr()
    assert code == EXIT_OK
    assert out.strip() == "'needle' in *.py"
