# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the generation configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".cavpgen.yaml"


class ConfigError(Exception):
    """Raised when a generation configuration file is invalid or cannot be loaded."""


@dataclass
class Job:
    """One generation step: a vector file, a suite filter and a template pair.

    Attributes:
        vectors: Path of the response file, relative to the configuration file.
        ctr_location: Only suites with exactly this CTRLOCATION are rendered.
        rlen: Only suites with exactly this RLEN are rendered.
        suite_template: Expanded once per selected suite.
        case_template: Expanded once per case of a selected suite.
    """

    vectors: str
    suite_template: str
    case_template: str
    ctr_location: str = ""
    rlen: str = ""


@dataclass
class GenerationConfig:
    """The parsed configuration for one generation run.

    Attributes:
        prologue: Path of the text copied verbatim to the start of the output.
        output: Path of the generated file.
        jobs: Generation steps, rendered in order.
        prf_expressions: Optional replacement for the default PRF table.
    """

    prologue: str
    output: str
    jobs: list[Job] = field(default_factory=list)
    prf_expressions: dict[str, str] | None = None


def load_config(path: Path) -> GenerationConfig:
    """Load and parse a generation configuration file.

    Args:
        path: Path to the `.cavpgen.yaml` file.

    Returns:
        A GenerationConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> GenerationConfig:
    """Parse configuration YAML text into a GenerationConfig.

    Raises:
        ConfigError: If the YAML is invalid or required fields are missing.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    prologue = _require_string(data, "prologue", source_label)
    output = _require_string(data, "output", source_label)

    raw_jobs = data.get("jobs")
    if not isinstance(raw_jobs, list) or not raw_jobs:
        raise ConfigError(f"{source_label}: 'jobs' must be a non-empty list")
    jobs = [_parse_job(entry, index, source_label) for index, entry in enumerate(raw_jobs)]

    prf_expressions = None
    if "prf-expressions" in data:
        prf_expressions = _parse_prf_expressions(data["prf-expressions"], source_label)

    return GenerationConfig(prologue=prologue, output=output, jobs=jobs, prf_expressions=prf_expressions)


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a required string field from a mapping, raising ConfigError if missing."""
    if key not in mapping:
        raise ConfigError(f"{source_label}: missing required field '{key}'")
    return _optional_string(mapping, key, source_label)


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract an optional string field, defaulting to the empty string."""
    value = mapping.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _parse_job(entry: object, index: int, source_label: str) -> Job:
    """Parse a single job entry from the YAML list."""
    location = f"{source_label}: jobs[{index}]"

    if not isinstance(entry, dict):
        raise ConfigError(f"{location} must be a YAML mapping")

    return Job(
        vectors=_require_string(entry, "vectors", location),
        suite_template=_require_string(entry, "suite-template", location),
        case_template=_require_string(entry, "case-template", location),
        ctr_location=_optional_string(entry, "ctr-location", location),
        rlen=_optional_string(entry, "rlen", location),
    )


def _parse_prf_expressions(raw: object, source_label: str) -> dict[str, str]:
    """Parse the PRF name to expression table."""
    if not isinstance(raw, dict):
        raise ConfigError(f"{source_label}: 'prf-expressions' must be a YAML mapping")
    table: dict[str, str] = {}
    for name, expression in raw.items():
        if not isinstance(name, str) or not isinstance(expression, str):
            raise ConfigError(f"{source_label}: 'prf-expressions' entries must map strings to strings")
        table[name] = expression
    return table
