# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Spotrun Contributors
#
# This file is part of Spotrun.
#
# Spotrun is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Spotrun is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from spotrun.errors import ExecutionFailure, ResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class JavaExecSpec:
    """
    A single ``java`` invocation: classpath, entry point and arguments.
    """

    classpath: frozenset[Path]
    main_class: str
    args: tuple[str, ...] = field(default_factory=tuple)
    ignore_exit_value: bool = False

    def classpath_string(self) -> str:
        return os.pathsep.join(str(p.absolute()) for p in sorted(self.classpath))


def default_java_executable(env: Mapping[str, str] | None = None) -> str:
    """
    ``$JAVA_HOME/bin/java`` when JAVA_HOME is set, otherwise ``java`` from PATH.
    """
    env = os.environ if env is None else env
    java_home = env.get("JAVA_HOME")
    if java_home:
        name = "java.exe" if os.name == "nt" else "java"
        return str(Path(java_home) / "bin" / name)
    return "java"


@dataclass(frozen=True, slots=True)
class JavaExecLauncher:
    """
    Runs the engine as a blocking subprocess.

    stdout/stderr are inherited so engine progress reaches the terminal.
    No timeout is imposed.
    """

    java_executable: str | None = None
    cwd: Path | None = None

    def command(self, spec: JavaExecSpec) -> list[str]:
        java = self.java_executable or default_java_executable()
        return [java, "-cp", spec.classpath_string(), spec.main_class, *spec.args]

    def launch(self, spec: JavaExecSpec) -> int:
        """
        Start the process and wait for it.

        Returns:
            The exit code (always 0 unless ignore_exit_value is set)

        Raises:
            ResolutionError if the java executable cannot be started
            ExecutionFailure on non-zero exit when not ignored
        """
        cmd = self.command(spec)
        logger.info("Launching %s", spec.main_class)
        logger.debug("Command line: %s", cmd)

        try:
            result = subprocess.run(
                cmd,
                cwd=str(self.cwd) if self.cwd is not None else None,
                check=False,
            )
        except FileNotFoundError as e:
            raise ResolutionError(
                f"Java executable not found: {cmd[0]}",
                code="java_not_found",
                details={"java": cmd[0]},
            ) from e

        if result.returncode != 0:
            if spec.ignore_exit_value:
                logger.warning("SpotBugs exited with status %s (ignored)", result.returncode)
                return result.returncode
            raise ExecutionFailure(
                result.returncode,
                details={"main_class": spec.main_class, "exit_code": result.returncode},
            )

        return result.returncode
