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

from dataclasses import dataclass, field
from enum import auto
from pathlib import Path

from spotrun.errors import ConfigurationError
from spotrun.utils.enum import StrEnum


def _parse_enum(cls, value: str, field_name: str):
    normalized = str(value).strip().lower()
    for member in cls:
        if member.value == normalized:
            return member
    raise ConfigurationError(
        f"Invalid {field_name}: {value!r}. Expected one of {[m.value for m in cls]}.",
        code=f"invalid_{field_name}",
        details={"field": field_name, "value": value},
    )


class Effort(StrEnum):
    """
    Analysis thoroughness.

    Rendered as ``-effort:<value>``.
    """

    MIN = auto()
    DEFAULT = auto()
    MAX = auto()

    def to_command_line_option(self) -> str:
        return f"-effort:{self.value}"

    @classmethod
    def from_str(cls, value: str) -> "Effort":
        return _parse_enum(cls, value, "effort")


class Confidence(StrEnum):
    """
    Minimum confidence of reported findings (the engine's report level).
    """

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()

    def to_command_line_option(self) -> str:
        return _CONFIDENCE_OPTIONS[self]

    @classmethod
    def from_str(cls, value: str) -> "Confidence":
        return _parse_enum(cls, value, "report_level")


_CONFIDENCE_OPTIONS = {
    Confidence.LOW: "-low",
    Confidence.MEDIUM: "-medium",
    Confidence.HIGH: "-high",
}


@dataclass(frozen=True)
class TaskConfig:
    """
    Snapshot of one task's analysis settings, read once per run.
    """

    reports_dir: Path
    ignore_failures: bool | None = None
    show_progress: bool | None = None
    report_level: Confidence | None = None
    effort: Effort | None = None
    visitors: tuple[str, ...] = ()
    omit_visitors: tuple[str, ...] = ()
    include_filter: Path | None = None
    exclude_filter: Path | None = None
    only_analyze: tuple[str, ...] = ()
    source_dirs: tuple[Path, ...] = ()
    class_dirs: tuple[Path, ...] = ()
    aux_class_paths: tuple[Path, ...] = ()


@dataclass(frozen=True)
class SpotBugsExtension:
    """
    Project-wide defaults, copied into every task right after creation.

    Tasks may override any of these afterwards; reports_dir is namespaced
    per task (``<reports_dir>/<task name>``).
    """

    reports_dir: Path = field(default_factory=lambda: Path("build") / "reports" / "spotbugs")
    ignore_failures: bool | None = None
    show_progress: bool | None = None
    report_level: Confidence | None = None
    effort: Effort | None = None
    visitors: tuple[str, ...] = ()
    omit_visitors: tuple[str, ...] = ()
    include_filter: Path | None = None
    exclude_filter: Path | None = None
    only_analyze: tuple[str, ...] = ()
