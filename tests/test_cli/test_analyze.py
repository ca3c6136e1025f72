"""Tests for the wellquant analyze command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from wellquant.cli.main import cli


class TestAnalyzeCommand:
    def test_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["analyze", "--help"])
        assert result.exit_code == 0
        assert "Analyze a plate photograph" in result.output

    def test_prints_grid(self, runner: CliRunner, plate_tiff: Path, point_args):
        result = runner.invoke(cli, ["analyze", str(plate_tiff), *point_args])
        assert result.exit_code == 0, result.output
        assert "Estimated Cell Count" in result.output
        assert "10000" in result.output

    def test_exports_csv(self, runner: CliRunner, plate_tiff: Path, point_args, tmp_path: Path):
        out = tmp_path / "results.csv"
        result = runner.invoke(cli, ["analyze", str(plate_tiff), *point_args, "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "Exported" in result.output
        lines = out.read_text().splitlines()
        assert lines[0] == "Percentage Cells (%)"
        assert lines[2].startswith("A,0,")
        assert lines[20].endswith(",10000")

    def test_workers_option(self, runner: CliRunner, plate_tiff: Path, point_args, tmp_path: Path):
        out = tmp_path / "results.csv"
        result = runner.invoke(
            cli, ["analyze", str(plate_tiff), *point_args, "--workers", "4", "-o", str(out)],
        )
        assert result.exit_code == 0, result.output

    def test_overwrite_protection(
        self, runner: CliRunner, plate_tiff: Path, point_args, tmp_path: Path,
    ):
        out = tmp_path / "results.csv"
        out.write_text("existing data")

        result = runner.invoke(cli, ["analyze", str(plate_tiff), *point_args, "-o", str(out)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert out.read_text() == "existing data"

        result = runner.invoke(
            cli, ["analyze", str(plate_tiff), *point_args, "-o", str(out), "--overwrite"],
        )
        assert result.exit_code == 0
        assert out.read_text().startswith("Percentage Cells (%)")

    def test_output_is_directory(self, runner: CliRunner, plate_tiff: Path, point_args, tmp_path: Path):
        result = runner.invoke(cli, ["analyze", str(plate_tiff), *point_args, "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "directory" in result.output

    def test_missing_parent_directory(
        self, runner: CliRunner, plate_tiff: Path, point_args, tmp_path: Path,
    ):
        out = tmp_path / "missing" / "results.csv"
        result = runner.invoke(cli, ["analyze", str(plate_tiff), *point_args, "-o", str(out)])
        assert result.exit_code == 1
        assert "Parent directory does not exist" in result.output

    def test_reference_outside_image(self, runner: CliRunner, plate_tiff: Path):
        result = runner.invoke(cli, [
            "analyze", str(plate_tiff),
            "--a1", "100,100", "--h6", "600,800",
            "--min-ref", "5000,5000", "--max-ref", "600,800",
        ])
        assert result.exit_code == 1
        assert "min reference" in result.output
        assert "--min-ref" in result.output

    def test_coincident_landmarks(self, runner: CliRunner, plate_tiff: Path):
        result = runner.invoke(cli, [
            "analyze", str(plate_tiff),
            "--a1", "100,100", "--h6", "100,100",
            "--min-ref", "100,100", "--max-ref", "600,800",
        ])
        assert result.exit_code == 1
        assert "--a1, --h6" in result.output

    def test_degenerate_references_warn(self, runner: CliRunner, plate_tiff: Path):
        result = runner.invoke(cli, [
            "analyze", str(plate_tiff),
            "--a1", "100,100", "--h6", "600,800",
            "--min-ref", "100,100", "--max-ref", "100,100",
        ])
        assert result.exit_code == 0
        assert "indistinguishable" in result.output

    def test_undecodable_image(self, runner: CliRunner, tmp_path: Path, point_args):
        bad = tmp_path / "bad.tif"
        bad.write_bytes(b"garbage")
        result = runner.invoke(cli, ["analyze", str(bad), *point_args])
        assert result.exit_code == 1
        assert "Could not read image" in result.output

    def test_bad_point_format(self, runner: CliRunner, plate_tiff: Path):
        result = runner.invoke(cli, [
            "analyze", str(plate_tiff),
            "--a1", "100", "--h6", "600,800",
            "--min-ref", "100,100", "--max-ref", "600,800",
        ])
        assert result.exit_code == 2
        assert "X,Y" in result.output


class TestCliGroup:
    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0

    def test_lists_analyze(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "analyze" in result.output
