"""Tests for the summary and legend commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from kubeviz.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestSummaryCommand:
    def test_summary_table(self, cli_runner: CliRunner, manifest_file: Path) -> None:
        result = cli_runner.invoke(cli, ["summary", str(manifest_file)])
        assert result.exit_code == 0
        for kind in ("ConfigMap", "Deployment", "Service"):
            assert kind in result.stdout
        assert "3 resources, 11 nodes, 13 edges" in result.stdout

    def test_summary_json(self, cli_runner: CliRunner, manifest_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "summary", str(manifest_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "summary"
        assert data["data"]["counts"] == {"ConfigMap": 1, "Deployment": 1, "Service": 1}
        assert data["data"]["resource_count"] == 3

    def test_summary_quiet(self, cli_runner: CliRunner, manifest_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "summary", str(manifest_file)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["ConfigMap 1", "Deployment 1", "Service 1"]

    def test_summary_skips_non_resources(self, cli_runner: CliRunner) -> None:
        text = "kind: Service\nmetadata:\n  name: a\n---\n- 1\n- 2\n---\nfoo: bar\n"
        result = cli_runner.invoke(cli, ["--json", "summary"], input=text)
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["counts"] == {"Service": 1}

    def test_summary_error_op(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "summary"], input="")
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["op"] == "summary"
        assert data["error"]["code"] == "EMPTY_INPUT"

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner, manifest_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-v", "summary", str(manifest_file)])
        assert result.exit_code == 0
        assert "meta:" in result.stdout
        assert "parse" in result.stdout


@pytest.mark.usefixtures("_isolated_cwd")
class TestLegendCommand:
    def test_legend_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["legend"])
        assert result.exit_code == 0
        assert "Deployment" in result.stdout
        assert "#326CE5" in result.stdout

    def test_legend_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "legend"])
        assert result.exit_code == 0
        kinds = result.stdout.splitlines()
        assert kinds == sorted(kinds)
        assert "Pod" in kinds

    def test_legend_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "legend"])
        assert result.exit_code == 0
        items = json.loads(result.stdout)["data"]["items"]
        by_kind = {item["kind"]: item for item in items}
        assert by_kind["Pod"] == {"kind": "Pod", "color": "#00B4D8", "size": 40}
