"""Tests for the intropath CLI."""

import json

import pytest
from click.testing import CliRunner

from intropath.cli import cli

NETWORK_YAML = """\
nodes:
  - {id: a, name: Alice}
  - {id: b, name: Bob}
  - {id: c, name: Carol}
  - {id: d, name: Dave}
  - {id: e, name: Eve}
connections:
  - {contact_a_id: a, contact_b_id: b, strength: medium}
  - {contact_a_id: b, contact_b_id: d, strength: weak}
  - {contact_a_id: a, contact_b_id: c, strength: medium}
  - {contact_a_id: c, contact_b_id: d, strength: strong}
details:
  d: {company: Initech}
"""


@pytest.fixture
def network_file(tmp_path):
    path = tmp_path / "network.yaml"
    path.write_text(NETWORK_YAML, encoding="utf-8")
    return path


def test_best_markdown(network_file):
    result = CliRunner().invoke(
        cli, ["best", str(network_file), "--source", "a", "-t", "d", "-t", "e"]
    )

    assert result.exit_code == 0, result.output
    assert "# Best paths from a" in result.output
    assert "## 1. Dave [d]" in result.output
    assert "Alice [a] (medium) -> Bob [b] (weak) -> Dave [d] @ Initech" in result.output
    assert "## 2. Eve [e]\n- (no path)" in result.output


def test_alternatives_json(network_file):
    result = CliRunner().invoke(
        cli,
        ["alternatives", str(network_file), "-s", "a", "-t", "d", "-n", "2", "-f", "json"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    routes = [[step["contact_id"] for step in p["path_steps"]] for p in payload]
    assert routes == [["a", "c", "d"], ["a", "b", "d"]]
    assert payload[0]["confidence"] > payload[1]["confidence"]


def test_stats(network_file):
    result = CliRunner().invoke(cli, ["stats", str(network_file)])

    assert result.exit_code == 0, result.output
    assert "Contacts: 5" in result.output
    assert "Isolated: e" in result.output


def test_malformed_network_exits_with_message(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("connections:\n  - {contact_a_id: a}\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["stats", str(path)])

    assert result.exit_code == 1
    assert "missing 'contact_b_id'" in result.output


def test_invalid_utf8_network_exits_with_message(tmp_path):
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfe\x00nodes")

    result = CliRunner().invoke(cli, ["stats", str(path)])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_directory_argument_is_rejected(tmp_path):
    result = CliRunner().invoke(cli, ["stats", str(tmp_path)])

    assert result.exit_code == 2
    assert "is a directory" in result.output
