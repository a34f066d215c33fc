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

from spotrun.reporting.container import ReportContainer
from spotrun.reporting.resources import ArchiveEntryResource, InlineTextResource, TextResource
from spotrun.reporting.stylesheet import resolve
from spotrun.reporting.types import (
    HtmlReport,
    Report,
    ReportDescriptor,
    ReportFormat,
    TextReport,
    XmlReport,
)

__all__ = [
    "ArchiveEntryResource",
    "HtmlReport",
    "InlineTextResource",
    "Report",
    "ReportContainer",
    "ReportDescriptor",
    "ReportFormat",
    "TextReport",
    "TextResource",
    "XmlReport",
    "resolve",
]
