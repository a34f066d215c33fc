import os
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from spotrun.errors import ExecutionFailure, ResolutionError
from spotrun.launch.java import JavaExecLauncher, JavaExecSpec, default_java_executable


def make_spec(tmp_path: Path, *, ignore: bool = False) -> JavaExecSpec:
    return JavaExecSpec(
        classpath=frozenset({tmp_path / "b.jar", tmp_path / "a.jar"}),
        main_class="edu.umd.cs.findbugs.FindBugs2",
        args=("-textui", "-effort:max"),
        ignore_exit_value=ignore,
    )


def completed(code: int) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_command_line_layout(tmp_path: Path):
    cmd = JavaExecLauncher(java_executable="/opt/jdk/bin/java").command(make_spec(tmp_path))

    assert cmd == [
        "/opt/jdk/bin/java",
        "-cp",
        os.pathsep.join([str((tmp_path / "a.jar").absolute()), str((tmp_path / "b.jar").absolute())]),
        "edu.umd.cs.findbugs.FindBugs2",
        "-textui",
        "-effort:max",
    ]


def test_default_java_executable_uses_java_home():
    java = default_java_executable({"JAVA_HOME": "/opt/jdk"})

    assert Path(java).parent == Path("/opt/jdk") / "bin"


def test_default_java_executable_falls_back_to_path():
    assert default_java_executable({}) == "java"


def test_launch_success_returns_zero(tmp_path: Path):
    with patch("spotrun.launch.java.subprocess.run", return_value=completed(0)) as run:
        code = JavaExecLauncher(java_executable="java", cwd=tmp_path).launch(make_spec(tmp_path))

    assert code == 0
    assert run.call_args.kwargs["cwd"] == str(tmp_path)
    assert run.call_args.kwargs["check"] is False


def test_launch_non_zero_raises_execution_failure(tmp_path: Path):
    with patch("spotrun.launch.java.subprocess.run", return_value=completed(3)):
        with pytest.raises(ExecutionFailure) as ei:
            JavaExecLauncher(java_executable="java").launch(make_spec(tmp_path))

    assert ei.value.exit_code == 3
    assert "3" in str(ei.value)


def test_launch_non_zero_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    with patch("spotrun.launch.java.subprocess.run", return_value=completed(1)):
        with caplog.at_level("WARNING"):
            code = JavaExecLauncher(java_executable="java").launch(make_spec(tmp_path, ignore=True))

    assert code == 1
    assert "ignored" in caplog.text


def test_launch_missing_java_raises_resolution_error(tmp_path: Path):
    with patch("spotrun.launch.java.subprocess.run", side_effect=FileNotFoundError("java")):
        with pytest.raises(ResolutionError) as ei:
            JavaExecLauncher(java_executable="/nowhere/java").launch(make_spec(tmp_path, ignore=True))

    assert ei.value.details == {"java": "/nowhere/java"}
