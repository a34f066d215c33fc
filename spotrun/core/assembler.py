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

"""
Fold a TaskConfig and the selected report into a SpotBugsSpec.

Argument order is part of the engine contract:
  1. report option + -outputFile <destination>
  2. -effort:<level>
  3. report level token
  4. -visitors <csv>
  5. -omitVisitors <csv>
  6. -include <file>
  7. -exclude <file>
  8. -onlyAnalyze <csv>
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from spotrun.core.config import TaskConfig
from spotrun.core.spec import SpotBugsSpec, SpotBugsSpecBuilder
from spotrun.reporting.container import ReportContainer
from spotrun.reporting.types import Report

logger = logging.getLogger(__name__)


def _csv(values: Iterable[str]) -> str:
    return ",".join(values)


def report_arguments(report: Report) -> list[str]:
    """
    Arguments selecting the report format and destination.

    Creates the destination's parent directory if it is missing.
    """
    destination = report.destination()
    destination.parent.mkdir(parents=True, exist_ok=True)

    args: list[str] = []
    option = report.command_line_option()
    if option is not None:
        args.append(option)
    args.extend(["-outputFile", str(destination.absolute())])
    return args


def extra_arguments(config: TaskConfig, report: Report | None) -> list[str]:
    args: list[str] = []

    if report is not None:
        args.extend(report_arguments(report))

    if config.effort is not None:
        args.append(config.effort.to_command_line_option())

    if config.report_level is not None:
        args.append(config.report_level.to_command_line_option())

    if config.visitors:
        args.extend(["-visitors", _csv(config.visitors)])

    if config.omit_visitors:
        args.extend(["-omitVisitors", _csv(config.omit_visitors)])

    if config.include_filter is not None:
        args.extend(["-include", str(config.include_filter.absolute())])

    if config.exclude_filter is not None:
        args.extend(["-exclude", str(config.exclude_filter.absolute())])

    if config.only_analyze:
        args.extend(["-onlyAnalyze", _csv(config.only_analyze)])

    return args


def assemble(
    config: TaskConfig,
    reports: ReportContainer | Iterable[Report],
    plugins: Iterable[Path] = (),
) -> SpotBugsSpec:
    """
    Build the invocation spec for one run.

    Only the first enabled report (in insertion order) is passed to the
    engine; with none enabled the engine writes its default output.
    """
    if isinstance(reports, ReportContainer):
        report = reports.first_enabled()
    else:
        report = next((r for r in reports if r.is_enabled()), None)

    if report is not None:
        logger.debug("Selected %s report: %s", report.name, report.destination())

    builder = (
        SpotBugsSpecBuilder()
        .ignore_failures(bool(config.ignore_failures))
        .show_progress(bool(config.show_progress))
        .add_extra_arguments(*extra_arguments(config, report))
        .add_source_dirs(config.source_dirs)
        .add_class_dirs(config.class_dirs)
        .add_aux_class_paths(config.aux_class_paths)
        .add_plugins(plugins)
    )
    return builder.build()
