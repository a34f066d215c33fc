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

from spotrun.errors import ExecutionFailure

# CI-friendly semantics
EXIT_OK = 0
EXIT_ANALYSIS_FAILED = 1
EXIT_CONFIG_ERROR = 2


def exit_code_from_error(error: Exception) -> int:
    """
    Policy:
      - ExecutionFailure (engine exited non-zero, not ignored) => EXIT_ANALYSIS_FAILED
      - ConfigurationError / ResolutionError / anything else  => EXIT_CONFIG_ERROR
    """
    if isinstance(error, ExecutionFailure):
        return EXIT_ANALYSIS_FAILED
    return EXIT_CONFIG_ERROR
