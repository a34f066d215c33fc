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

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from spotrun.core.config import SpotBugsExtension
from spotrun.deps.configurations import ResolvedArtifact
from spotrun.reporting.types import ReportFormat


@dataclass(frozen=True, slots=True)
class ReportSettings:
    """
    Per-report settings from the build description.
    """

    format: ReportFormat
    enabled: bool = False
    destination: Path | None = None
    stylesheet: str | None = None  # entry name inside the spotbugs archive
    stylesheet_file: Path | None = None  # inline stylesheet read from this file


@dataclass(frozen=True, slots=True)
class TaskDescription:
    """
    One task as declared in the build description.

    ``overrides`` holds only the properties the task sets explicitly; they are
    applied after the extension defaults.
    """

    name: str
    source_dirs: tuple[Path, ...] = ()
    class_dirs: tuple[Path, ...] = ()
    aux_class_paths: tuple[Path, ...] = ()
    overrides: Mapping[str, Any] = field(default_factory=dict)
    reports: tuple[ReportSettings, ...] = ()


@dataclass(frozen=True, slots=True)
class BuildDescription:
    """
    Root of a spotrun build file (spotrun.yaml / spotrun.json).

    This model:
      - has every relative path already resolved against base_dir
      - is validated structurally by the loader
      - is never mutated; tasks are created from it by the resolver
    """

    version: int
    base_dir: Path
    extension: SpotBugsExtension
    configurations: Mapping[str, tuple[ResolvedArtifact, ...]] = field(default_factory=dict)
    tasks: Mapping[str, TaskDescription] = field(default_factory=dict)
    build_dir: Path | None = None  # scratch files (materialised stylesheets) go under here

    def task_names(self) -> tuple[str, ...]:
        return tuple(self.tasks.keys())
