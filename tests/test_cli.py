from typer.testing import CliRunner

from mocklite.cli import app
from mocklite.demo import run_demo

runner = CliRunner()


def test_demo_command():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0, result.output
    assert "decorator.lookup('datasource') = 'BasicDataSource'" in result.output
    assert "verify times(1) lookup('datasource'): ok" in result.output
    assert "verify times(0) lookup('nonexistent'): ok" in result.output


def test_run_demo_reports_success():
    lines = []
    assert run_demo(lines.append) is True
    assert lines[0] == "stubbed lookup('datasource') -> 'BasicDataSource'"


def test_describe_command():
    result = runner.invoke(app, ["describe", "sample_types:Calculator", "-vv"])
    assert result.exit_code == 0, result.output
    assert "<mock Calculator> (Calculator)" in result.output
    assert "Calculator.add(a: int, b: int) -> 0" in result.output
    assert "Calculator.names() -> []" in result.output
    assert "version" not in result.output


def test_describe_unmockable_class():
    result = runner.invoke(app, ["describe", "sample_types:Sealed"])
    assert result.exit_code == 1


def test_describe_bad_target():
    assert runner.invoke(app, ["describe", "no_colon"]).exit_code == 2
    assert runner.invoke(app, ["describe", "sample_types:Missing"]).exit_code == 2
    assert runner.invoke(app, ["describe", "not_a_module_xyz:Thing"]).exit_code == 2
