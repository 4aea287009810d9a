# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Template rendering of parsed test vectors."""

from cavpgen.generator.render import (
    DEFAULT_PRF_EXPRESSIONS,
    GenerationError,
    generate,
    render_suites,
    select_suites,
)

__all__ = [
    "DEFAULT_PRF_EXPRESSIONS",
    "GenerationError",
    "generate",
    "render_suites",
    "select_suites",
]
