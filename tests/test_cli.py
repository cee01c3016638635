from __future__ import annotations

from typer.testing import CliRunner

from regpoly.cli import app

runner = CliRunner()


def test_path_command_lists_primitives():
    result = runner.invoke(app, ["path", "3", "--radius", "100"])
    assert result.exit_code == 0, result.output
    assert "3-gon outline" in result.output


def test_path_command_reports_circle_fallback():
    result = runner.invoke(app, ["path", "6", "--radius", "50", "--corner-radius", "60"])
    assert result.exit_code == 0, result.output
    assert "drawing a circle" in result.output


def test_path_command_rejects_two_sides():
    result = runner.invoke(app, ["path", "2"])
    assert result.exit_code != 0


def test_vertices_command():
    result = runner.invoke(app, ["vertices", "4", "--radius", "10"])
    assert result.exit_code == 0, result.output
    assert "4-gon vertices" in result.output


def test_radar_command_requires_matching_dims():
    ok = runner.invoke(app, ["radar", "3", "--dims", "1,0.5,0.25", "--max-radius", "10"])
    assert ok.exit_code == 0, ok.output
    bad = runner.invoke(app, ["radar", "4", "--dims", "1,0.5"])
    assert bad.exit_code != 0


def test_radar_command_rejects_non_numeric_dims():
    result = runner.invoke(app, ["radar", "3", "--dims", "1,a,0.5"])
    assert result.exit_code != 0


def test_svg_command_writes_file(tmp_path):
    output = tmp_path / "hex.svg"
    result = runner.invoke(app, ["svg", "6", "-c", "5", "-o", str(output)])
    assert result.exit_code == 0, result.output
    text = output.read_text()
    assert text.count(" A ") == 6

    again = runner.invoke(app, ["svg", "6", "-o", str(output)])
    assert again.exit_code == 0, again.output
    assert (tmp_path / "hex (1).svg").exists()

    replaced = runner.invoke(app, ["svg", "3", "-o", str(output), "--overwrite"])
    assert replaced.exit_code == 0, replaced.output
    assert " A " not in output.read_text()
