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
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from spotrun.core.assembler import assemble
from spotrun.core.config import Confidence, Effort, SpotBugsExtension, TaskConfig
from spotrun.core.spec import SpotBugsSpec
from spotrun.deps.configurations import (
    CONFIG_NAME,
    PLUGIN_CONFIG_NAME,
    SLF4J_CONFIG_NAME,
    ConfigurationContainer,
)
from spotrun.errors import ResolutionError
from spotrun.launch.java import JavaExecLauncher, JavaExecSpec
from spotrun.reporting.container import ReportContainer

logger = logging.getLogger(__name__)

MAIN_CLASS: Final[str] = "edu.umd.cs.findbugs.FindBugs2"


@dataclass(frozen=True)
class RunResult:
    exit_code: int
    spec: SpotBugsSpec
    report_destination: Path | None


class SpotBugsTask:
    """
    One analysis task: settable properties, its reports, and the run action.

    Properties are plain attributes; build scripts (or the build description
    loader) set them before run(). Each run snapshots them via config().
    """

    def __init__(
        self,
        name: str,
        *,
        configurations: ConfigurationContainer | None = None,
        reports_dir: Path | None = None,
        work_dir: Path | None = None,
    ) -> None:
        self.name = name
        self.configurations = configurations if configurations is not None else ConfigurationContainer()

        self.ignore_failures: bool | None = None
        self.show_progress: bool | None = None
        self.report_level: Confidence | None = None
        self.effort: Effort | None = None
        self.visitors: list[str] = []
        self.omit_visitors: list[str] = []
        self.include_filter: Path | None = None
        self.exclude_filter: Path | None = None
        self.only_analyze: list[str] = []
        self.source_dirs: list[Path] = []
        self.class_dirs: list[Path] = []
        self.aux_class_paths: list[Path] = []
        self.reports_dir: Path = reports_dir if reports_dir is not None else Path("build") / "reports" / "spotbugs" / name

        self.reports = ReportContainer(
            lambda: self.reports_dir,
            configurations=self.configurations,
            work_dir=work_dir,
        )

    def config(self) -> TaskConfig:
        return TaskConfig(
            reports_dir=self.reports_dir,
            ignore_failures=self.ignore_failures,
            show_progress=self.show_progress,
            report_level=self.report_level,
            effort=self.effort,
            visitors=tuple(self.visitors),
            omit_visitors=tuple(self.omit_visitors),
            include_filter=self.include_filter,
            exclude_filter=self.exclude_filter,
            only_analyze=tuple(self.only_analyze),
            source_dirs=tuple(self.source_dirs),
            class_dirs=tuple(self.class_dirs),
            aux_class_paths=tuple(self.aux_class_paths),
        )

    def plugin_jars(self) -> tuple[Path, ...]:
        if not self.configurations.contains(PLUGIN_CONFIG_NAME):
            return ()
        return self.configurations.files(PLUGIN_CONFIG_NAME)

    def launch_classpath(self) -> frozenset[Path]:
        """
        Engine jar(s) plus the SLF4J provider jar(s).

        Raises:
            ResolutionError if either configuration is missing or empty.
        """
        jars: set[Path] = set()
        for config_name, label in ((CONFIG_NAME, "SpotBugs jar file"), (SLF4J_CONFIG_NAME, "SLF4J provider jar file")):
            files = self.configurations.files(config_name)
            if not files:
                raise ResolutionError(
                    f"Configuration '{config_name}' resolved no files",
                    code="empty_configuration",
                    details={"configuration": config_name},
                )
            logger.info("%s: %s", label, [str(f) for f in files])
            jars.update(files)
        return frozenset(jars)

    def build_spec(self) -> SpotBugsSpec:
        return assemble(self.config(), self.reports, self.plugin_jars())

    def run(self, launcher: JavaExecLauncher | None = None) -> RunResult:
        """
        Assemble the spec and launch the engine.

        Configuration and resolution errors surface before any process is
        started, regardless of ignore_failures.
        """
        spec = self.build_spec()
        exec_spec = JavaExecSpec(
            classpath=self.launch_classpath(),
            main_class=MAIN_CLASS,
            args=tuple(spec.to_arguments()),
            ignore_exit_value=spec.ignore_failures,
        )

        launcher = launcher or JavaExecLauncher()
        exit_code = launcher.launch(exec_spec)

        enabled = self.reports.enabled()
        return RunResult(
            exit_code=exit_code,
            spec=spec,
            report_destination=enabled[0].destination() if enabled else None,
        )


def apply_defaults(extension: SpotBugsExtension, task: SpotBugsTask) -> SpotBugsTask:
    """
    Copy extension defaults into a freshly created task.

    Called once at task creation; later assignments on the task win.
    """
    task.ignore_failures = extension.ignore_failures
    task.show_progress = extension.show_progress
    task.report_level = extension.report_level
    task.effort = extension.effort
    task.visitors = list(extension.visitors)
    task.omit_visitors = list(extension.omit_visitors)
    task.reports_dir = extension.reports_dir / task.name
    task.include_filter = extension.include_filter
    task.exclude_filter = extension.exclude_filter
    task.only_analyze = list(extension.only_analyze)
    return task
