"""Tests for spotrun CLI commands."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from spotrun.cli._io import default_build_file
from spotrun.cli.main import main

BUILD = """
spotbugs:
  effort: max
  report_level: high
  ignore_failures: {ignore}
configurations:
  spotbugs:
    - {{group: com.github.spotbugs, name: spotbugs, version: 4.0.0, file: libs/spotbugs.jar}}
  spotbugsSlf4j: [libs/slf4j-simple.jar]
tasks:
  spotbugsMain:
    class_dirs: [build/classes]
    visitors: [FindNullDeref, FindUnrelease]
    reports:
      html: true
"""


def write_build(tmp_path: Path, *, ignore: bool = False) -> Path:
    path = tmp_path / "spotrun.yaml"
    path.write_text(BUILD.format(ignore="true" if ignore else "false"), encoding="utf-8")
    return path


def completed(code: int) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=code)


class TestCLIMain:
    """Tests for main CLI entry point and command routing."""

    def test_tasks_lists_task_names(self, tmp_path, capsys):
        build = write_build(tmp_path)

        exit_code = main(["tasks", str(build)])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["spotbugsMain"]

    def test_args_prints_command_line(self, tmp_path, capsys):
        build = write_build(tmp_path)

        exit_code = main(["args", str(build), "--java", "/opt/jdk/bin/java"])

        out = capsys.readouterr().out.splitlines()
        report = (tmp_path / "build" / "reports" / "spotbugs" / "spotbugsMain" / "html.html").absolute()
        assert exit_code == 0
        assert out[0] == "/opt/jdk/bin/java"
        assert out[1] == "-cp"
        assert out[3] == "edu.umd.cs.findbugs.FindBugs2"
        assert out[4:] == [
            "-textui",
            "-html",
            "-outputFile",
            str(report),
            "-effort:max",
            "-high",
            "-visitors",
            "FindNullDeref,FindUnrelease",
            str((tmp_path / "build" / "classes").absolute()),
        ]
        assert report.parent.is_dir()

    def test_run_success(self, tmp_path, capsys):
        build = write_build(tmp_path)

        with patch("spotrun.launch.java.subprocess.run", return_value=completed(0)) as run:
            exit_code = main(["run", str(build), "--task", "spotbugsMain", "--java", "java"])

        assert exit_code == 0
        assert run.call_args.args[0][0] == "java"
        assert "html.html" in capsys.readouterr().out

    def test_run_exit_code_1_on_engine_failure(self, tmp_path, capsys):
        build = write_build(tmp_path)

        with patch("spotrun.launch.java.subprocess.run", return_value=completed(3)):
            exit_code = main(["run", str(build), "--java", "java"])

        assert exit_code == 1
        assert "non-zero status 3" in capsys.readouterr().err

    def test_run_ignore_failures_swallows_engine_failure(self, tmp_path, capsys):
        build = write_build(tmp_path, ignore=True)

        with patch("spotrun.launch.java.subprocess.run", return_value=completed(3)):
            exit_code = main(["run", str(build), "--java", "java"])

        assert exit_code == 0
        assert "status 3 (ignored)" in capsys.readouterr().out

    def test_run_exit_code_2_on_configuration_error(self, tmp_path, capsys):
        build = tmp_path / "spotrun.yaml"
        build.write_text("tasks:\n  main:\n    reports:\n      pdf: true\n", encoding="utf-8")

        with patch("spotrun.launch.java.subprocess.run") as run:
            exit_code = main(["run", str(build)])

        assert exit_code == 2
        assert "pdf is invalid as the report name" in capsys.readouterr().err
        run.assert_not_called()

    def test_run_exit_code_2_on_missing_engine_jar(self, tmp_path, capsys):
        build = tmp_path / "spotrun.yaml"
        build.write_text("tasks:\n  main:\n    ignore_failures: true\n", encoding="utf-8")

        with patch("spotrun.launch.java.subprocess.run") as run:
            exit_code = main(["run", str(build)])

        assert exit_code == 2
        assert "spotbugs" in capsys.readouterr().err
        run.assert_not_called()

    def test_missing_build_file(self, tmp_path, capsys):
        exit_code = main(["tasks", str(tmp_path / "missing.yaml")])

        assert exit_code == 2
        assert "does not exist" in capsys.readouterr().err

    def test_non_utf8_build_file_is_a_configuration_error(self, tmp_path, capsys):
        build = tmp_path / "spotrun.yaml"
        build.write_bytes(b"\xff\xfetasks: {}\n")

        exit_code = main(["tasks", str(build)])

        assert exit_code == 2
        assert "Cannot read build file" in capsys.readouterr().err

    def test_directory_as_build_file_is_a_configuration_error(self, tmp_path, capsys):
        exit_code = main(["tasks", str(tmp_path)])

        assert exit_code == 2
        assert "Cannot read build file" in capsys.readouterr().err

    def test_non_utf8_stylesheet_file_is_a_configuration_error(self, tmp_path, capsys):
        (tmp_path / "custom.xsl").write_bytes(b"\xff\xfe<xsl/>")
        build = tmp_path / "spotrun.yaml"
        build.write_text(
            "tasks:\n  main:\n    reports:\n      html: {enabled: true, stylesheet_file: custom.xsl}\n",
            encoding="utf-8",
        )

        exit_code = main(["args", str(build)])

        assert exit_code == 2
        assert "Cannot read stylesheet file" in capsys.readouterr().err

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as ei:
            main(["--version"])

        assert ei.value.code == 0
        assert capsys.readouterr().out.startswith("spotrun ")


def test_default_build_file_prefers_existing(tmp_path):
    assert default_build_file(tmp_path) == str(tmp_path / "spotrun.yaml")

    (tmp_path / "spotrun.json").write_text("{}", encoding="utf-8")

    assert default_build_file(tmp_path) == str(tmp_path / "spotrun.json")
