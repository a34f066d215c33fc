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
from collections.abc import Iterator
from pathlib import Path

from spotrun.deps.configurations import ConfigurationContainer
from spotrun.reporting.types import HtmlReport, Report, ReportFormat, ReportsDir, TextReport, XmlReport

logger = logging.getLogger(__name__)


class ReportContainer:
    """
    Ordered set of reports for one task, keyed by format.

    Typical lifecycle:
      reports = ReportContainer(reports_dir=lambda: task.reports_dir)
      reports.create("html").enabled = True
      report = reports.first_enabled()

    Insertion order is significant: when several reports are enabled, the
    first one created wins.
    """

    def __init__(
        self,
        reports_dir: ReportsDir,
        *,
        configurations: ConfigurationContainer | None = None,
        work_dir: Path | None = None,
    ) -> None:
        self._reports_dir = reports_dir
        self._configurations = configurations if configurations is not None else ConfigurationContainer()
        self._work_dir = work_dir
        self._reports: dict[ReportFormat, Report] = {}

    def _new_report(self, fmt: ReportFormat) -> Report:
        if fmt == ReportFormat.HTML:
            return HtmlReport(
                reports_dir=self._reports_dir,
                configurations=self._configurations,
                work_dir=self._work_dir,
            )
        if fmt == ReportFormat.XML:
            return XmlReport(reports_dir=self._reports_dir)
        return TextReport(reports_dir=self._reports_dir)

    def create(self, name: str | ReportFormat) -> Report:
        """
        Create (or return the existing) report for ``name``.

        Raises:
            ConfigurationError if the name is not text, xml or html.
        """
        fmt = name if isinstance(name, ReportFormat) else ReportFormat.from_str(name)
        if fmt not in self._reports:
            self._reports[fmt] = self._new_report(fmt)
        return self._reports[fmt]

    def get(self, name: str | ReportFormat) -> Report | None:
        fmt = name if isinstance(name, ReportFormat) else ReportFormat.from_str(name)
        return self._reports.get(fmt)

    def __iter__(self) -> Iterator[Report]:
        return iter(self._reports.values())

    def __len__(self) -> int:
        return len(self._reports)

    def enabled(self) -> tuple[Report, ...]:
        return tuple(r for r in self._reports.values() if r.is_enabled())

    def first_enabled(self) -> Report | None:
        """
        The report this run produces, or None (engine default output).

        Only one output format is passed to the engine; extra enabled reports
        are reported and ignored.
        """
        enabled = self.enabled()
        if not enabled:
            return None
        if len(enabled) > 1:
            logger.warning(
                "Multiple reports enabled (%s); only '%s' will be generated",
                ", ".join(r.name for r in enabled),
                enabled[0].name,
            )
        return enabled[0]
