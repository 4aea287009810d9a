# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Test-vector entities populated by the response file parser."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Case(BaseModel):
    """One test vector. All values are kept as the hex text found in the file."""

    l: str = ""  # noqa: E741
    key: str = ""
    iv: str = ""
    fixed: str = ""
    expected: str = ""


class Suite(BaseModel):
    """A bracketed section of a response file and the cases that follow it."""

    prf: str = ""
    ctr_location: str = ""
    rlen: str = ""
    cases: list[Case] = _Field(default_factory=list)


class Document(BaseModel):
    """A parsed response file. Suites appear in file order."""

    suites: list[Suite] = _Field(default_factory=list)
