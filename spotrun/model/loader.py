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

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from spotrun.core.config import Confidence, Effort, SpotBugsExtension
from spotrun.deps.configurations import ResolvedArtifact
from spotrun.errors import ConfigurationError
from spotrun.model.types import BuildDescription, ReportSettings, TaskDescription
from spotrun.reporting.types import ReportFormat

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = (1,)

_BOOL_SETTINGS = ("ignore_failures", "show_progress")
_LIST_SETTINGS = ("visitors", "omit_visitors", "only_analyze")
_PATH_SETTINGS = ("include_filter", "exclude_filter", "reports_dir")
_TASK_PATH_LISTS = ("source_dirs", "class_dirs", "aux_class_paths")
_REPORT_KEYS = ("enabled", "destination", "stylesheet", "stylesheet_file")

SETTING_KEYS = (*_BOOL_SETTINGS, *_LIST_SETTINGS, *_PATH_SETTINGS, "effort", "report_level")


class DefaultBuildDescriptionLoader:
    """
    Loads a BuildDescription from spotrun.yaml / spotrun.yml / spotrun.json.

    Relative paths are resolved against the directory containing the file.
    """

    def load(self, path: Path) -> BuildDescription:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigurationError(
                f"Build file does not exist: {path}",
                code="build_file_not_found",
                details={"path": str(path)},
            )

        data = self._read_file(path)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Build file root must be a mapping/object.", code="invalid_build_file")

        return self.parse(data, base_dir=path.absolute().parent)

    def parse(self, data: dict[str, Any], *, base_dir: Path) -> BuildDescription:
        version = data.get("version", 1)
        if not isinstance(version, int) or version not in SUPPORTED_VERSIONS:
            raise ConfigurationError(
                f"Unsupported build file version: {version!r}",
                code="invalid_version",
                details={"version": version, "supported": list(SUPPORTED_VERSIONS)},
            )

        build_dir = base_dir / str(data.get("build_dir", "build"))
        extension = self._parse_extension(data.get("spotbugs"), base_dir=base_dir, build_dir=build_dir)
        configurations = self._parse_configurations(data.get("configurations"), base_dir=base_dir)
        tasks = self._parse_tasks(data.get("tasks"), base_dir=base_dir)

        logger.debug("Loaded build description with tasks %s", list(tasks))

        return BuildDescription(
            version=version,
            base_dir=base_dir,
            extension=extension,
            configurations=configurations,
            tasks=tasks,
            build_dir=build_dir,
        )

    def _read_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read build file {path}: {e}",
                code="build_file_unreadable",
                details={"path": str(path)},
            ) from e

        try:
            if suffix == ".json":
                return json.loads(raw)
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse build file {path}: {e}",
                code="parse_error",
                details={"path": str(path)},
            ) from e

        # Unknown extension: try JSON then YAML
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            try:
                return yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Unsupported build file format: {path.name}",
                    code="unsupported_extension",
                    details={"supported": [".yaml", ".yml", ".json"]},
                ) from e

    # ----------------------------
    # Settings shared by extension and tasks
    # ----------------------------

    def _parse_settings(self, raw: dict[str, Any], *, where: str, base_dir: Path) -> dict[str, Any]:
        out: dict[str, Any] = {}

        for key in _BOOL_SETTINGS:
            if key in raw:
                value = raw[key]
                if not isinstance(value, bool):
                    raise ConfigurationError(
                        f"'{where}.{key}' must be a boolean, got {value!r}.",
                        code="invalid_setting",
                        details={"field": f"{where}.{key}", "value": value},
                    )
                out[key] = value

        for key in _LIST_SETTINGS:
            if key in raw and raw[key] is not None:
                out[key] = _string_list(raw[key], field=f"{where}.{key}")

        for key in _PATH_SETTINGS:
            if key in raw and raw[key] is not None:
                out[key] = _path(raw[key], field=f"{where}.{key}", base_dir=base_dir)

        if raw.get("effort") is not None:
            out["effort"] = Effort.from_str(raw["effort"])
        if raw.get("report_level") is not None:
            out["report_level"] = Confidence.from_str(raw["report_level"])

        return out

    def _parse_extension(self, raw: Any, *, base_dir: Path, build_dir: Path) -> SpotBugsExtension:
        default_reports_dir = build_dir / "reports" / "spotbugs"
        if raw is None:
            return SpotBugsExtension(reports_dir=default_reports_dir)
        if not isinstance(raw, dict):
            raise ConfigurationError("'spotbugs' must be a mapping/object.", code="invalid_extension")

        _reject_unknown(raw, SETTING_KEYS, where="spotbugs")
        settings = self._parse_settings(raw, where="spotbugs", base_dir=base_dir)
        settings.setdefault("reports_dir", default_reports_dir)
        for key in _LIST_SETTINGS:
            if key in settings:
                settings[key] = tuple(settings[key])
        return SpotBugsExtension(**settings)

    # ----------------------------
    # Dependency configurations
    # ----------------------------

    def _parse_configurations(self, raw: Any, *, base_dir: Path) -> dict[str, tuple[ResolvedArtifact, ...]]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigurationError("'configurations' must be a mapping/object.", code="invalid_configurations")

        out: dict[str, tuple[ResolvedArtifact, ...]] = {}
        for name, entries in raw.items():
            if entries is None:
                out[str(name)] = ()
                continue
            if not isinstance(entries, list):
                raise ConfigurationError(
                    f"Configuration '{name}' must be a list of artifacts.",
                    code="invalid_configuration",
                    details={"configuration": name},
                )
            out[str(name)] = tuple(self._parse_artifact(e, config_name=str(name), base_dir=base_dir) for e in entries)
        return out

    def _parse_artifact(self, raw: Any, *, config_name: str, base_dir: Path) -> ResolvedArtifact:
        # Support:
        #   - libs/foo.jar
        #   - {group: ..., name: ..., version: ..., file: libs/foo.jar}
        if isinstance(raw, str):
            return ResolvedArtifact(file=_path(raw, field=f"configurations.{config_name}", base_dir=base_dir))

        if isinstance(raw, dict):
            if "file" not in raw:
                raise ConfigurationError(
                    f"Artifact in configuration '{config_name}' is missing 'file'.",
                    code="invalid_artifact",
                    details={"configuration": config_name, "artifact": raw},
                )
            return ResolvedArtifact(
                file=_path(raw["file"], field=f"configurations.{config_name}.file", base_dir=base_dir),
                group=_optional_str(raw.get("group")),
                name=_optional_str(raw.get("name")),
                version=_optional_str(raw.get("version")),
            )

        raise ConfigurationError(
            f"Artifact in configuration '{config_name}' must be a path or an object.",
            code="invalid_artifact",
            details={"configuration": config_name, "artifact": raw},
        )

    # ----------------------------
    # Tasks and reports
    # ----------------------------

    def _parse_tasks(self, raw: Any, *, base_dir: Path) -> dict[str, TaskDescription]:
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigurationError("'tasks' must be a mapping/object.", code="invalid_tasks")

        out: dict[str, TaskDescription] = {}
        for name, spec in raw.items():
            name = str(name)
            if not name.strip():
                raise ConfigurationError("Task name must be a non-empty string.", code="invalid_task_name")
            if spec is None:
                spec = {}
            if not isinstance(spec, dict):
                raise ConfigurationError(
                    f"Task '{name}' must be an object.",
                    code="invalid_task",
                    details={"task": name},
                )

            where = f"tasks.{name}"
            _reject_unknown(spec, (*SETTING_KEYS, *_TASK_PATH_LISTS, "reports"), where=where)

            paths: dict[str, tuple[Path, ...]] = {}
            for key in _TASK_PATH_LISTS:
                values = _string_list(spec.get(key), field=f"{where}.{key}")
                paths[key] = tuple(_path(v, field=f"{where}.{key}", base_dir=base_dir) for v in values)

            out[name] = TaskDescription(
                name=name,
                source_dirs=paths["source_dirs"],
                class_dirs=paths["class_dirs"],
                aux_class_paths=paths["aux_class_paths"],
                overrides=self._parse_settings(spec, where=where, base_dir=base_dir),
                reports=self._parse_reports(spec.get("reports"), where=where, base_dir=base_dir),
            )
        return out

    def _parse_reports(self, raw: Any, *, where: str, base_dir: Path) -> tuple[ReportSettings, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, dict):
            raise ConfigurationError(f"'{where}.reports' must be a mapping/object.", code="invalid_reports")

        out: list[ReportSettings] = []
        for name, spec in raw.items():
            fmt = ReportFormat.from_str(str(name))
            rwhere = f"{where}.reports.{name}"

            # Support:
            #   html: true
            #   html: {enabled: true, stylesheet: fancy.xsl}
            if isinstance(spec, bool):
                out.append(ReportSettings(format=fmt, enabled=spec))
                continue
            if spec is None:
                spec = {}
            if not isinstance(spec, dict):
                raise ConfigurationError(
                    f"'{rwhere}' must be a boolean or an object.",
                    code="invalid_report",
                    details={"report": name},
                )
            _reject_unknown(spec, _REPORT_KEYS, where=rwhere)

            enabled = spec.get("enabled", False)
            if not isinstance(enabled, bool):
                raise ConfigurationError(
                    f"'{rwhere}.enabled' must be a boolean, got {enabled!r}.",
                    code="invalid_setting",
                    details={"field": f"{rwhere}.enabled", "value": enabled},
                )

            if fmt != ReportFormat.HTML and (spec.get("stylesheet") or spec.get("stylesheet_file")):
                raise ConfigurationError(
                    f"'{rwhere}': only the html report supports a stylesheet.",
                    code="stylesheet_not_supported",
                    details={"report": fmt.value},
                )

            destination = spec.get("destination")
            stylesheet_file = spec.get("stylesheet_file")
            out.append(
                ReportSettings(
                    format=fmt,
                    enabled=enabled,
                    destination=_path(destination, field=f"{rwhere}.destination", base_dir=base_dir)
                    if destination is not None
                    else None,
                    stylesheet=_optional_str(spec.get("stylesheet")),
                    stylesheet_file=_path(stylesheet_file, field=f"{rwhere}.stylesheet_file", base_dir=base_dir)
                    if stylesheet_file is not None
                    else None,
                )
            )
        return tuple(out)


def _reject_unknown(raw: dict[str, Any], allowed: tuple[str, ...], *, where: str) -> None:
    unknown = sorted(str(k) for k in raw if k not in allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown setting(s) in '{where}': {', '.join(unknown)}.",
            code="unknown_setting",
            details={"field": where, "unknown": unknown, "allowed": sorted(allowed)},
        )


def _string_list(raw: Any, *, field: str) -> list[str]:
    # null means "nothing"; a bare string is a one-element list
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise ConfigurationError(
            f"'{field}' must be a list of strings, got {raw!r}.",
            code="invalid_setting",
            details={"field": field, "value": raw},
        )
    bad = [v for v in raw if not isinstance(v, str) or not v.strip()]
    if bad:
        raise ConfigurationError(
            f"'{field}' items must be non-empty strings, got {bad!r}.",
            code="invalid_setting",
            details={"field": field, "value": bad},
        )
    return list(raw)


def _path(raw: Any, *, field: str, base_dir: Path) -> Path:
    if not isinstance(raw, str) or not raw.strip():
        raise ConfigurationError(
            f"'{field}' must be a non-empty path string, got {raw!r}.",
            code="invalid_path",
            details={"field": field, "value": raw},
        )
    p = Path(raw)
    return p if p.is_absolute() else base_dir / p


def _optional_str(raw: Any) -> str | None:
    if raw is None:
        return None
    s = str(raw).strip()
    return s or None
