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
from collections.abc import Iterable, Sequence
from pathlib import Path

from spotrun.errors import ConfigurationError
from spotrun.reporting.resources import ArchiveEntryResource

logger = logging.getLogger(__name__)


def resolve(
    candidate_archives: Iterable[Path],
    entry_name: str,
    *,
    work_dir: Path | None = None,
) -> ArchiveEntryResource:
    """
    Bind a stylesheet name to the first candidate archive.

    Sequences keep their order; unordered collections are sorted first so the
    choice does not depend on hash ordering. No archive content is read here.

    Raises:
        ConfigurationError if there is no candidate archive.
    """
    ordered = list(candidate_archives) if isinstance(candidate_archives, Sequence) else sorted(candidate_archives)
    if not ordered:
        raise ConfigurationError(
            f"Stylesheet path specified ({entry_name}) but no matching archive resolved in spotbugs configuration",
            code="stylesheet_archive_not_found",
            details={"stylesheet": entry_name},
        )

    archive = Path(ordered[0])
    logger.debug(
        "Specified stylesheet (%s) found in spotbugs configuration: %s",
        entry_name,
        archive.resolve(),
    )
    return ArchiveEntryResource(archive=archive, entry=entry_name, work_dir=work_dir)
