# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for CAVPGen documentation."""

project = "CAVPGen"
author = "CAVPGen Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
