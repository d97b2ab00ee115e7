"""
Tests for the command-line interface.
"""

import pytest

from grapher import cli


@pytest.fixture
def edge_file(tmp_path):
    """Fixture providing an edge list with two routes from 0 to 4."""
    path = tmp_path / "edges.txt"
    path.write_text(
        "# diamond\n0 1\n0 2\n2 3\n1 3\n1 4\n3 4\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's environment out of CLI runs."""
    monkeypatch.delenv("GRAPHER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GRAPHER_COMMENT_PREFIX", raising=False)


def test_show(edge_file, capsys):
    """Test printing the rendered graph."""
    assert cli.main(["show", edge_file]) == 0
    assert capsys.readouterr().out == "0[1,2]\n1[3,4]\n2[3]\n3[4]\n4[]\n"


def test_shortest(edge_file, capsys):
    """Test printing a shortest path by values."""
    assert cli.main(["shortest", edge_file, "0", "4"]) == 0
    assert capsys.readouterr().out == "0 -> 1 -> 4\n"


def test_shortest_no_path(edge_file, capsys):
    """Test the message for an unreachable target."""
    assert cli.main(["shortest", edge_file, "4", "0"]) == 0
    assert capsys.readouterr().out == "No path from 4 to 0\n"


def test_shortest_undirected(edge_file, capsys):
    """Test searching an edge list as undirected."""
    assert cli.main(["shortest", "--undirected", edge_file, "4", "0"]) == 0
    assert capsys.readouterr().out == "4 -> 1 -> 0\n"


def test_paths(edge_file, capsys):
    """Test printing every simple path."""
    assert cli.main(["paths", edge_file, "0", "4"]) == 0
    assert capsys.readouterr().out == (
        "0 -> 1 -> 3 -> 4\n0 -> 1 -> 4\n0 -> 2 -> 3 -> 4\n3 path(s) found\n"
    )


def test_paths_max_paths(edge_file, capsys):
    """Test limiting the number of printed paths."""
    assert cli.main(["paths", edge_file, "0", "4", "--max-paths", "1"]) == 0
    assert capsys.readouterr().out == "0 -> 1 -> 3 -> 4\n1 path(s) found\n"


def test_unknown_value(edge_file, capsys):
    """Test that a value missing from the graph is an error."""
    assert cli.main(["shortest", edge_file, "0", "9"]) == 1
    assert "No node with value 9" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    """Test that load failures are reported, not raised."""
    assert cli.main(["show", str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_malformed_file(tmp_path, capsys):
    """Test that malformed lines are reported with their line number."""
    path = tmp_path / "bad.txt"
    path.write_text("0 1\n2\n", encoding="utf-8")
    assert cli.main(["show", str(path)]) == 1
    assert "Line 2" in capsys.readouterr().err


def test_invalid_log_level(edge_file, capsys):
    """Test that configuration errors are reported."""
    assert cli.main(["show", edge_file, "--log-level", "loud"]) == 1
    assert "Invalid log level" in capsys.readouterr().err


def test_bench(edge_file, capsys):
    """Test the benchmark report."""
    assert cli.main(["bench", edge_file]) == 0
    out = capsys.readouterr().out
    assert "Graph.from_pairs:" in out
    assert "Inverting graph:" in out
    assert "Nodes: 5, edges: 6, isolated nodes: 0" in out
    assert "Memory used:" in out


def test_no_command(capsys):
    """Test that running without a command prints help."""
    assert cli.main([]) == 0
    assert "usage: grapher" in capsys.readouterr().out


def test_usage_error():
    """Test that argparse usage errors exit with status 2."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["shortest"])
    assert exc_info.value.code == 2
