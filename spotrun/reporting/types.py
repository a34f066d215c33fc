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

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import auto
from pathlib import Path
from typing import Protocol

from spotrun.deps.configurations import CONFIG_NAME, ConfigurationContainer, is_spotbugs_artifact
from spotrun.errors import ConfigurationError
from spotrun.reporting.stylesheet import resolve as resolve_stylesheet
from spotrun.reporting.resources import InlineTextResource, TextResource
from spotrun.utils.enum import StrEnum

# Report format enum


class ReportFormat(StrEnum):
    """
    Output formats the engine can write.

    The set is closed: report names outside it are rejected at the boundary.
    """

    TEXT = auto()
    XML = auto()
    HTML = auto()

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def from_str(cls, value: str) -> "ReportFormat":
        """
        Parse report format from string (case-insensitive).

        Raises:
            ConfigurationError if the name is not a supported format.
        """
        normalized = str(value).strip().lower()
        for fmt in ReportFormat:
            if fmt.value == normalized:
                return fmt
        raise ConfigurationError(
            f"{value} is invalid as the report name",
            code="invalid_report_name",
            details={"report": value, "supported": [f.value for f in ReportFormat]},
        )


_EXTENSIONS = {
    ReportFormat.TEXT: "txt",
    ReportFormat.XML: "xml",
    ReportFormat.HTML: "html",
}

ReportsDir = Path | Callable[[], Path]


def _current_dir(reports_dir: ReportsDir) -> Path:
    return reports_dir() if callable(reports_dir) else reports_dir


# Shared capability set


class ReportDescriptor(Protocol):
    """
    Capabilities every report variant provides.

    Variants are a closed union (see ``Report``); this protocol only names the
    shared surface used by the assembler.
    """

    @property
    def format(self) -> ReportFormat: ...

    @property
    def name(self) -> str: ...

    def is_enabled(self) -> bool: ...

    def destination(self) -> Path: ...

    def command_line_option(self) -> str | None: ...


@dataclass(slots=True)
class _SingleFileReport:
    reports_dir: ReportsDir
    enabled: bool = False
    destination_override: Path | None = None

    @property
    def name(self) -> str:
        return self.format.value  # type: ignore[attr-defined]

    def is_enabled(self) -> bool:
        return self.enabled

    def set_destination(self, path: Path | str | None) -> None:
        self.destination_override = Path(path) if path is not None else None

    def destination(self) -> Path:
        """
        Where the report file is written.

        Defaults to ``<reports_dir>/<name>.<ext>``; an explicit override wins.
        """
        if self.destination_override is not None:
            return self.destination_override
        fmt: ReportFormat = self.format  # type: ignore[attr-defined]
        return _current_dir(self.reports_dir) / f"{fmt.value}.{fmt.extension}"


@dataclass(slots=True)
class TextReport(_SingleFileReport):
    format: ReportFormat = field(default=ReportFormat.TEXT, init=False)

    def command_line_option(self) -> str | None:
        return "-sortByClass"


@dataclass(slots=True)
class XmlReport(_SingleFileReport):
    format: ReportFormat = field(default=ReportFormat.XML, init=False)

    def command_line_option(self) -> str | None:
        return "-xml:withMessages"


@dataclass(slots=True)
class HtmlReport(_SingleFileReport):
    """
    HTML report with an optional stylesheet.

    The stylesheet is either an inline resource (highest precedence) or the
    name of an entry inside the spotbugs engine archive, looked up in the
    ``spotbugs`` dependency configuration when first requested.
    """

    configurations: ConfigurationContainer = field(default_factory=ConfigurationContainer)
    stylesheet_resource: TextResource | None = None
    stylesheet_path: str | None = None
    work_dir: Path | None = None
    format: ReportFormat = field(default=ReportFormat.HTML, init=False)

    def set_stylesheet(self, value: TextResource | str | None) -> None:
        """
        A string names an entry inside the spotbugs archive; a TextResource
        is used verbatim.
        """
        if isinstance(value, str):
            self.stylesheet_path = value
        elif value is None:
            self.stylesheet_path = None
            self.stylesheet_resource = None
        else:
            self.stylesheet_resource = value

    def set_stylesheet_text(self, text: str) -> None:
        self.stylesheet_resource = InlineTextResource(text=text, work_dir=self.work_dir)

    def stylesheet(self) -> TextResource | None:
        """
        Resolve the effective stylesheet.

        Raises:
            ConfigurationError if a stylesheet path is set but the spotbugs
            archive is not among the resolved artifacts.
        """
        if self.stylesheet_resource is not None:
            return self.stylesheet_resource

        if self.stylesheet_path is None:
            return None

        candidates = (
            self.configurations.files(CONFIG_NAME, is_spotbugs_artifact)
            if self.configurations.contains(CONFIG_NAME)
            else ()
        )
        return resolve_stylesheet(candidates, self.stylesheet_path, work_dir=self.work_dir)

    def command_line_option(self) -> str | None:
        resource = self.stylesheet()
        if resource is None:
            return "-html"
        return f"-html:{resource.as_file().absolute()}"


Report = TextReport | XmlReport | HtmlReport
