# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation run configuration for CAVPGen."""

from cavpgen.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    GenerationConfig,
    Job,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "GenerationConfig",
    "Job",
    "load_config",
]
