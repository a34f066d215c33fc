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

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from spotrun.errors import ResolutionError

# Well-known configuration names
CONFIG_NAME: Final[str] = "spotbugs"
PLUGIN_CONFIG_NAME: Final[str] = "spotbugsPlugin"
SLF4J_CONFIG_NAME: Final[str] = "spotbugsSlf4j"

# Coordinates of the engine artifact (also the archive that bundles stylesheets)
SPOTBUGS_GROUP: Final[str] = "com.github.spotbugs"
SPOTBUGS_ARTIFACT: Final[str] = "spotbugs"


@dataclass(frozen=True, slots=True)
class ResolvedArtifact:
    """
    One file resolved for a dependency configuration.

    group/name are None for bare file entries with no declared coordinates.
    """

    file: Path
    group: str | None = None
    name: str | None = None
    version: str | None = None

    def matches(self, group: str, name: str) -> bool:
        return self.group == group and self.name == name


ArtifactFilter = Callable[[ResolvedArtifact], bool]


def is_spotbugs_artifact(artifact: ResolvedArtifact) -> bool:
    return artifact.matches(SPOTBUGS_GROUP, SPOTBUGS_ARTIFACT)


class ConfigurationContainer:
    """
    Maps configuration name -> resolved artifacts, in declaration order.

    This is the only view of dependency resolution spotrun needs: the engine
    runtime and logging provider jars, plugin jars, and the archive that
    carries bundled stylesheets.
    """

    def __init__(self, configurations: Mapping[str, Iterable[ResolvedArtifact]] | None = None) -> None:
        self._configurations: dict[str, tuple[ResolvedArtifact, ...]] = {}
        for name, artifacts in (configurations or {}).items():
            self.add(name, artifacts)

    def add(self, name: str, artifacts: Iterable[ResolvedArtifact]) -> None:
        self._configurations[name] = tuple(self._configurations.get(name, ())) + tuple(artifacts)

    def contains(self, name: str) -> bool:
        return name in self._configurations

    def names(self) -> tuple[str, ...]:
        return tuple(self._configurations.keys())

    def get_by_name(self, name: str) -> tuple[ResolvedArtifact, ...]:
        try:
            return self._configurations[name]
        except KeyError:
            raise ResolutionError(
                f"Configuration '{name}' not found. Available: {sorted(self._configurations)}.",
                code="configuration_not_found",
                details={"configuration": name, "available": sorted(self._configurations)},
            ) from None

    def files(self, name: str, predicate: ArtifactFilter | None = None) -> tuple[Path, ...]:
        """
        Files of the named configuration, optionally filtered by artifact coordinates.

        Raises:
            ResolutionError if the configuration does not exist.
        """
        return tuple(a.file for a in self.get_by_name(name) if predicate is None or predicate(a))
