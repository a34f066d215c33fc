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

from dataclasses import dataclass
from pathlib import Path

from spotrun.core.task import SpotBugsTask, apply_defaults
from spotrun.deps.configurations import ConfigurationContainer
from spotrun.errors import ConfigurationError
from spotrun.model.types import BuildDescription, TaskDescription


@dataclass(frozen=True, slots=True)
class DefaultTaskResolver:
    """
    Creates configured SpotBugsTask instances from a BuildDescription.

    For every task:
      - extension defaults are applied first (once, at creation)
      - explicit task overrides are applied on top
      - reports are created in declaration order, which decides the winner
        when more than one is enabled

    Materialised stylesheets are written under ``work_dir``, which defaults
    to ``<build_dir>/tmp/spotrun/<task>``.
    """

    work_dir: Path | None = None

    def resolve(self, build: BuildDescription) -> dict[str, SpotBugsTask]:
        configurations = ConfigurationContainer(build.configurations)
        return {name: self._create_task(desc, build, configurations) for name, desc in build.tasks.items()}

    def select(self, build: BuildDescription, name: str | None) -> SpotBugsTask:
        """
        Create a single task by name. With no name, the build must declare
        exactly one task.
        """
        names = build.task_names()
        if name is None:
            if len(names) != 1:
                raise ConfigurationError(
                    f"Build declares {len(names)} tasks; choose one with --task. Available: {list(names)}.",
                    code="ambiguous_task",
                    details={"available": list(names)},
                )
            name = names[0]

        if name not in build.tasks:
            raise ConfigurationError(
                f"Unknown task '{name}'. Available: {list(names)}.",
                code="unknown_task",
                details={"task": name, "available": list(names)},
            )

        configurations = ConfigurationContainer(build.configurations)
        return self._create_task(build.tasks[name], build, configurations)

    def _create_task(
        self,
        desc: TaskDescription,
        build: BuildDescription,
        configurations: ConfigurationContainer,
    ) -> SpotBugsTask:
        work_dir = self.work_dir
        if work_dir is None:
            work_dir = (build.build_dir or build.base_dir / "build") / "tmp" / "spotrun" / desc.name
        task = SpotBugsTask(desc.name, configurations=configurations, work_dir=work_dir)
        apply_defaults(build.extension, task)

        for key, value in desc.overrides.items():
            setattr(task, key, list(value) if isinstance(value, (list, tuple)) else value)

        task.source_dirs = list(desc.source_dirs)
        task.class_dirs = list(desc.class_dirs)
        task.aux_class_paths = list(desc.aux_class_paths)

        for settings in desc.reports:
            report = task.reports.create(settings.format)
            report.enabled = settings.enabled
            if settings.destination is not None:
                report.set_destination(settings.destination)
            if settings.stylesheet_file is not None:
                report.set_stylesheet_text(_read_stylesheet(settings.stylesheet_file))  # type: ignore[union-attr]
            if settings.stylesheet is not None:
                report.set_stylesheet(settings.stylesheet)  # type: ignore[union-attr]

        return task


def _read_stylesheet(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read stylesheet file {path}: {e}",
            code="stylesheet_file_unreadable",
            details={"stylesheet_file": str(path)},
        ) from e
