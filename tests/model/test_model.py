# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the test-vector model."""

from cavpgen.model import Case, Document, Suite


class TestDefaults:
    def test_case_fields_default_to_empty_strings(self) -> None:
        case = Case()
        assert (case.l, case.key, case.iv, case.fixed, case.expected) == ("", "", "", "", "")

    def test_suite_defaults(self) -> None:
        suite = Suite()
        assert suite.prf == ""
        assert suite.ctr_location == ""
        assert suite.rlen == ""
        assert suite.cases == []

    def test_default_lists_are_not_shared(self) -> None:
        first = Suite()
        second = Suite()
        first.cases.append(Case(key="aa"))
        assert second.cases == []
        assert Document().suites is not Document().suites


class TestEquality:
    def test_structurally_equal_documents_compare_equal(self) -> None:
        def build() -> Document:
            return Document(suites=[Suite(prf="HMAC_SHA1", cases=[Case(key="aa", expected="bb")])])

        assert build() == build()

    def test_case_order_matters(self) -> None:
        a = Suite(cases=[Case(key="01"), Case(key="02")])
        b = Suite(cases=[Case(key="02"), Case(key="01")])
        assert a != b


class TestSerialization:
    def test_json_dump_uses_field_names(self) -> None:
        document = Document(suites=[Suite(prf="HMAC_SHA256", ctr_location="AFTER_FIXED", cases=[Case(l="256")])])
        restored = Document.model_validate_json(document.model_dump_json())
        assert restored == document
        assert '"ctr_location":"AFTER_FIXED"' in document.model_dump_json()
