# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of parsed test vectors into test source text.

Templates use ``string.Template`` placeholders (``$name``) so that the emitted
source code can contain braces without escaping.

Suite templates may reference ``$prf`` and ``$prf_expression``. Case templates
may reference ``$prf``, ``$index``, ``$key``, ``$fixed``, ``$iv``, ``$l`` and
``$expected``.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterator, Mapping
from pathlib import Path
from string import Template
from types import MappingProxyType
from typing import TextIO

from cavpgen.config.settings import Job
from cavpgen.model.vectors import Document, Suite
from cavpgen.parser.parser import ParseError, parse_file

# ###############
# Public Interface
# ###############

DEFAULT_PRF_EXPRESSIONS: Mapping[str, str] = MappingProxyType(
    {
        "HMAC_SHA1": "NewHMACPRF(crypto.SHA1)",
        "HMAC_SHA224": "NewHMACPRF(crypto.SHA224)",
        "HMAC_SHA256": "NewHMACPRF(crypto.SHA256)",
        "HMAC_SHA384": "NewHMACPRF(crypto.SHA384)",
        "HMAC_SHA512": "NewHMACPRF(crypto.SHA512)",
    }
)


class GenerationError(Exception):
    """Raised when a vector file cannot be read, parsed, or rendered."""


def select_suites(
    document: Document,
    ctr_location: str,
    rlen: str,
    prf_expressions: Mapping[str, str] = DEFAULT_PRF_EXPRESSIONS,
) -> Iterator[tuple[Suite, str]]:
    """Yield the suites selected by a filter, paired with their PRF expression.

    A suite is selected when its CTRLOCATION and RLEN match exactly and its PRF
    has an entry in *prf_expressions*. Suites are yielded in document order.
    """
    for suite in document.suites:
        if suite.ctr_location != ctr_location or suite.rlen != rlen:
            continue
        expression = prf_expressions.get(suite.prf)
        if expression is None:
            continue
        yield suite, expression


def render_suites(
    document: Document,
    job: Job,
    prf_expressions: Mapping[str, str] = DEFAULT_PRF_EXPRESSIONS,
) -> str:
    """Render the suites of *document* selected by *job* using its templates.

    Raises:
        GenerationError: If a template references an unknown placeholder or is malformed.
    """
    suite_template = Template(job.suite_template)
    case_template = Template(job.case_template)
    parts: list[str] = []
    for suite, expression in select_suites(document, job.ctr_location, job.rlen, prf_expressions):
        parts.append(_substitute(suite_template, prf=suite.prf, prf_expression=expression))
        for index, case in enumerate(suite.cases):
            parts.append(
                _substitute(
                    case_template,
                    prf=suite.prf,
                    index=str(index),
                    key=case.key,
                    fixed=case.fixed,
                    iv=case.iv,
                    l=case.l,
                    expected=case.expected,
                )
            )
    return "".join(parts)


def generate(
    out: TextIO,
    prologue: TextIO,
    jobs: list[Job],
    base_dir: Path,
    prf_expressions: Mapping[str, str] = DEFAULT_PRF_EXPRESSIONS,
) -> None:
    """Write the prologue followed by the rendered output of every job.

    Args:
        out: Destination stream.
        prologue: Text copied verbatim before any generated code.
        jobs: Generation steps, rendered in order.
        base_dir: Directory that relative vector file paths are resolved against.
        prf_expressions: PRF name to generator expression table.

    Raises:
        GenerationError: If the prologue or a vector file cannot be read, a
            vector file is malformed, or a template cannot be expanded.
    """
    try:
        shutil.copyfileobj(prologue, out)
    except (OSError, UnicodeDecodeError) as exc:
        raise GenerationError(f"Cannot copy test prologue: {exc}") from exc

    for job in jobs:
        document = _load_vectors(base_dir / job.vectors)
        out.write(render_suites(document, job, prf_expressions))


# ################
# Implementation
# ################


def _load_vectors(path: Path) -> Document:
    """Parse one vector file, wrapping failures in GenerationError."""
    try:
        return parse_file(path)
    except ParseError as exc:
        raise GenerationError(f"{path}: {exc}") from exc
    except OSError as exc:
        raise GenerationError(f"Cannot read vector file '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise GenerationError(f"Vector file '{path}' is not valid UTF-8: {exc}") from exc


def _substitute(template: Template, **values: str) -> str:
    try:
        return template.substitute(values)
    except KeyError as exc:
        raise GenerationError(f"Unknown template placeholder: ${exc.args[0]}") from exc
    except ValueError as exc:
        raise GenerationError(f"Malformed template: {exc}") from exc
