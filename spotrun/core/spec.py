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

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


def _joined(paths: Iterable[Path]) -> str:
    return os.pathsep.join(str(p.absolute()) for p in sorted(paths))


@dataclass(frozen=True, slots=True)
class SpotBugsSpec:
    """
    Everything needed to launch the engine once.

    Immutable: built once per run by SpotBugsSpecBuilder and discarded after
    the process exits.
    """

    ignore_failures: bool = False
    show_progress: bool = False
    extra_arguments: tuple[str, ...] = field(default_factory=tuple)
    source_dirs: frozenset[Path] = field(default_factory=frozenset)
    class_dirs: frozenset[Path] = field(default_factory=frozenset)
    aux_class_paths: frozenset[Path] = field(default_factory=frozenset)
    plugins: frozenset[Path] = field(default_factory=frozenset)

    def to_arguments(self) -> list[str]:
        """
        Engine argument vector.

        Path sets are sorted so the vector is reproducible; extra arguments
        keep their insertion order and class dirs come last.
        """
        args: list[str] = ["-textui"]
        if self.show_progress:
            args.append("-progress")
        if self.plugins:
            args.extend(["-pluginList", _joined(self.plugins)])
        if self.aux_class_paths:
            args.extend(["-auxclasspath", _joined(self.aux_class_paths)])
        if self.source_dirs:
            args.extend(["-sourcepath", _joined(self.source_dirs)])
        args.extend(self.extra_arguments)
        args.extend(str(p.absolute()) for p in sorted(self.class_dirs))
        return args


class SpotBugsSpecBuilder:
    """
    Append-only builder for SpotBugsSpec.

    build() snapshots the current state; later builder calls never affect a
    spec that was already built.
    """

    def __init__(self) -> None:
        self._ignore_failures = False
        self._show_progress = False
        self._extra_arguments: list[str] = []
        self._source_dirs: set[Path] = set()
        self._class_dirs: set[Path] = set()
        self._aux_class_paths: set[Path] = set()
        self._plugins: set[Path] = set()

    def ignore_failures(self, value: bool) -> "SpotBugsSpecBuilder":
        self._ignore_failures = bool(value)
        return self

    def show_progress(self, value: bool) -> "SpotBugsSpecBuilder":
        self._show_progress = bool(value)
        return self

    def add_extra_arguments(self, *args: str) -> "SpotBugsSpecBuilder":
        self._extra_arguments.extend(args)
        return self

    def add_source_dirs(self, paths: Iterable[Path]) -> "SpotBugsSpecBuilder":
        self._source_dirs.update(Path(p) for p in paths)
        return self

    def add_class_dirs(self, paths: Iterable[Path]) -> "SpotBugsSpecBuilder":
        self._class_dirs.update(Path(p) for p in paths)
        return self

    def add_aux_class_paths(self, paths: Iterable[Path]) -> "SpotBugsSpecBuilder":
        self._aux_class_paths.update(Path(p) for p in paths)
        return self

    def add_plugins(self, paths: Iterable[Path]) -> "SpotBugsSpecBuilder":
        self._plugins.update(Path(p) for p in paths)
        return self

    def build(self) -> SpotBugsSpec:
        return SpotBugsSpec(
            ignore_failures=self._ignore_failures,
            show_progress=self._show_progress,
            extra_arguments=tuple(self._extra_arguments),
            source_dirs=frozenset(self._source_dirs),
            class_dirs=frozenset(self._class_dirs),
            aux_class_paths=frozenset(self._aux_class_paths),
            plugins=frozenset(self._plugins),
        )
