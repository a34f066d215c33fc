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

from collections.abc import Mapping
from typing import Any


class SpotrunError(Exception):
    """
    Base class for all spotrun errors.

    Carries a stable machine-readable ``code`` and optional ``details`` so the
    CLI can render the offending field/value without parsing messages.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "spotrun_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SpotrunError):
    """
    User-supplied configuration is structurally invalid.

    Always fatal. Never suppressed by ``ignore_failures``.
    """

    def __init__(
        self,
        message: str,
        code: str = "config_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ResolutionError(SpotrunError):
    """Raised when an expected file, dependency or configuration cannot be located."""

    def __init__(
        self,
        message: str,
        code: str = "resolution_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class ExecutionFailure(SpotrunError):
    """The analysis engine exited with a non-zero status."""

    exit_code: int

    def __init__(
        self,
        exit_code: int,
        message: str | None = None,
        code: str = "execution_failure",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        self.exit_code = exit_code
        super().__init__(
            message or f"SpotBugs exited with non-zero status {exit_code}",
            code=code,
            details=details,
        )
