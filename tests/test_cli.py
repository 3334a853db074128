import requests
import yaml
from click.testing import CliRunner

from kattis_py.cli import cli


def write_solution(directory, run, build=()):
    samples = directory / "samples"
    samples.mkdir()
    (samples / "1.in").write_text("1 2\n")
    (samples / "1.ans").write_text("3\n")
    (samples / "2.in").write_text("2 2\n")
    (samples / "2.ans").write_text("4\n")
    (directory / "kattis.yml").write_text(
        yaml.safe_dump(
            {
                "hostname": "open.kattis.com",
                "problem": "sum",
                "files": ["sum.sh"],
                "language": "Python 3",
                "build": list(build),
                "run": run,
            }
        )
    )


def test_test_command_passes(tmp_path):
    write_solution(tmp_path, ["read a b; echo $((a + b))"])

    result = CliRunner().invoke(cli, ["test", "-d", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert result.output.count("Correct") == 2
    assert "2/2 test cases passed" in result.output


def test_test_command_filters(tmp_path):
    write_solution(tmp_path, ["read a b; echo $((a * b))"])

    result = CliRunner().invoke(cli, ["test", "-d", str(tmp_path), "-i", "^1$"])

    assert result.exit_code == 0, result.output
    assert "Correct" in result.output
    assert "Wrong Answer" not in result.output


def test_test_command_reports_wrong_answer(tmp_path):
    write_solution(tmp_path, ["read a b; echo $((a * b))"])

    result = CliRunner().invoke(cli, ["test", "-d", str(tmp_path)])

    assert "Wrong Answer" in result.output
    assert "Found:" in result.output
    assert "Expected:" in result.output


def test_test_command_build_failure(tmp_path):
    write_solution(tmp_path, ["touch ran"], build=["exit 1"])

    result = CliRunner().invoke(cli, ["test", "-d", str(tmp_path)])

    assert result.exit_code == 1
    assert not (tmp_path / "ran").exists()


def test_test_command_without_config(tmp_path):
    result = CliRunner().invoke(cli, ["test", "-d", str(tmp_path)])
    assert result.exit_code == 1


def test_submit_can_be_cancelled(tmp_path):
    write_solution(tmp_path, ["cat"])

    result = CliRunner().invoke(cli, ["submit", "-d", str(tmp_path)], input="n\n")

    assert result.exit_code == 0, result.output
    assert "Language: Python 3" in result.output
    assert "Cancelled submission." in result.output


def test_network_failure_is_reported(tmp_path, monkeypatch):
    def unreachable(hostname, problem):
        raise requests.ConnectionError("no route")

    monkeypatch.setenv("KATTIS_CONFIG_HOME", str(tmp_path / "home"))
    monkeypatch.setattr("kattis_py.cli.assert_problem_exists", unreachable)

    result = CliRunner().invoke(
        cli, ["samples", "-p", "hello", "-d", str(tmp_path / "samples")]
    )

    assert result.exit_code == 1
    assert "Error" in result.output
    assert "no route" in result.output
    assert not isinstance(result.exception, requests.ConnectionError)
