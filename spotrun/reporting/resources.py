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
Text resources handed to the engine as files.

A resource is an unresolved descriptor; nothing is read until ``as_string()``
or ``as_file()`` is called. Materialised files live at a path derived only from
the resource identity, so dereferencing the same resource twice always yields
the same path with the same content.
"""

import hashlib
import os
import tempfile
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from spotrun.errors import ResolutionError

# Length of hash prefix used for materialised resource directories
HASH_PREFIX_LENGTH = 16


def default_work_dir() -> Path:
    return Path(tempfile.gettempdir()) / "spotrun-resources"


def _digest(*parts: str) -> str:
    h = hashlib.sha256()
    for p in parts:
        h.update(p.encode("utf-8"))
        h.update(b"\0")
    return h.hexdigest()[:HASH_PREFIX_LENGTH]


def _write_if_changed(path: Path, data: bytes) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.is_file() and path.read_bytes() == data:
            return path
        # readers only ever see the old file or the complete new one
        with tempfile.NamedTemporaryFile(dir=path.parent, prefix=f".{path.name}.", delete=False) as tmp:
            tmp.write(data)
            temp_path = Path(tmp.name)
        try:
            os.replace(temp_path, path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
    except OSError as e:
        raise ResolutionError(
            f"Cannot write resource file {path}: {e}",
            code="resource_write_failed",
            details={"path": str(path)},
        ) from e
    return path


@dataclass(frozen=True, slots=True)
class InlineTextResource:
    """Stylesheet text supplied verbatim by the user."""

    text: str
    file_name: str = "stylesheet.xsl"
    work_dir: Path | None = None

    def as_string(self) -> str:
        return self.text

    def as_file(self) -> Path:
        base = self.work_dir or default_work_dir()
        target = base / _digest("inline", self.text) / self.file_name
        return _write_if_changed(target, self.text.encode("utf-8")).absolute()


@dataclass(frozen=True, slots=True)
class ArchiveEntryResource:
    """
    An entry inside a zip/jar archive.

    The archive is opened on every dereference, so a rebuilt archive is picked
    up without re-configuring.
    """

    archive: Path
    entry: str
    work_dir: Path | None = None

    def _read_bytes(self) -> bytes:
        if not self.archive.is_file():
            raise ResolutionError(
                f"Archive not found: {self.archive}",
                code="archive_not_found",
                details={"archive": str(self.archive), "entry": self.entry},
            )
        try:
            with zipfile.ZipFile(self.archive) as zf:
                return zf.read(self.entry)
        except KeyError:
            raise ResolutionError(
                f"Entry '{self.entry}' not found in archive {self.archive}",
                code="archive_entry_not_found",
                details={"archive": str(self.archive), "entry": self.entry},
            ) from None
        except zipfile.BadZipFile as e:
            raise ResolutionError(
                f"Not a valid archive: {self.archive}",
                code="invalid_archive",
                details={"archive": str(self.archive), "error": repr(e)},
            ) from e

    def as_string(self) -> str:
        return self._read_bytes().decode("utf-8")

    def as_file(self) -> Path:
        base = self.work_dir or default_work_dir()
        name = PurePosixPath(self.entry).name or "resource"
        target = base / _digest("archive", str(self.archive.resolve()), self.entry) / name
        return _write_if_changed(target, self._read_bytes()).absolute()


TextResource = InlineTextResource | ArchiveEntryResource
