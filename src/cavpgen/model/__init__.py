# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for parsed CAVP response files."""

from cavpgen.model.vectors import Case, Document, Suite

__all__ = [
    "Case",
    "Suite",
    "Document",
]
