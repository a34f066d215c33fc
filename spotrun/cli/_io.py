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

from pathlib import Path

from spotrun.model.loader import DefaultBuildDescriptionLoader
from spotrun.model.types import BuildDescription

DEFAULT_BUILD_FILES = ("spotrun.yaml", "spotrun.yml", "spotrun.json")


def default_build_file(cwd: str | Path = ".") -> str:
    p = Path(cwd)
    for name in DEFAULT_BUILD_FILES:
        candidate = p / name
        if candidate.exists():
            return str(candidate)
    return str(p / DEFAULT_BUILD_FILES[0])


def load_build(path: str | None) -> BuildDescription:
    build_file = Path(path if path is not None else default_build_file())
    return DefaultBuildDescriptionLoader().load(build_file)
