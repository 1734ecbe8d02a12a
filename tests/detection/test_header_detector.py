"""Tests for the default header-based license detector."""

import pytest

from license_checker.detection.header import HeaderLicenseDetector, spdx_license_ids


def _ids(content: str) -> list[str]:
    return [match.license_id for match in HeaderLicenseDetector().detect(content.encode("utf-8"))]


def test_mit_header(mit_header: str) -> None:
    assert _ids(mit_header + "\nint main() {}\n") == ["MIT"]


def test_apache_header(apache_header: str) -> None:
    assert _ids(apache_header) == ["Apache-2.0"]


def test_no_header() -> None:
    assert _ids("int main() { return 0; }\n") == []
    assert HeaderLicenseDetector().detect(b"") == []


def test_header_wrapped_in_block_comment() -> None:
    content = (
        "/*\n"
        " * Licensed under the Apache License,\n"
        " * Version 2.0 (the \"License\");\n"
        " */\n"
    )
    assert _ids(content) == ["Apache-2.0"]


def test_header_in_hash_comments() -> None:
    content = (
        "# This Source Code Form is subject to the terms of the Mozilla Public\n"
        "# License, v. 2.0. If a copy of the MPL was not distributed with this\n"
    )
    assert _ids(content) == ["MPL-2.0"]


def test_bsd_variants_are_distinguished() -> None:
    preamble = (
        "// Redistribution and use in source and binary forms, with or without\n"
        "// modification, are permitted provided that the following conditions are\n"
        "// met:\n"
        "//  * Redistributions of source code must retain the above copyright notice.\n"
    )
    third_clause = (
        "//  * Neither the name of Example Inc. nor the names of its\n"
        "// contributors may be used to endorse or promote products derived from\n"
    )
    assert _ids(preamble) == ["BSD-2-Clause"]
    assert _ids(preamble + third_clause) == ["BSD-3-Clause"]


def test_gpl_versions() -> None:
    v2 = (
        "# it under the terms of the GNU General Public License as published by\n"
        "# the Free Software Foundation; either version 2 of the License, or\n"
    )
    v3 = (
        "# it under the terms of the GNU General Public License as published by\n"
        "# the Free Software Foundation, either version 3 of the License, or\n"
    )
    lesser = (
        "# it under the terms of the GNU Lesser General Public License as published by\n"
        "# the Free Software Foundation; either version 2.1 of the License, or\n"
    )
    assert _ids(v2) == ["GPL-2.0-or-later"]
    assert _ids(v3) == ["GPL-3.0-or-later"]
    assert _ids(lesser) == ["LGPL-2.1-or-later"]


def test_spdx_tag() -> None:
    assert _ids("// SPDX-License-Identifier: MIT\n") == ["MIT"]


def test_spdx_tag_with_comment_closer() -> None:
    assert _ids("/* SPDX-License-Identifier: Apache-2.0 */\nint x;\n") == ["Apache-2.0"]


def test_spdx_expression_reports_each_license() -> None:
    assert _ids("# SPDX-License-Identifier: MIT OR Apache-2.0\n") == ["MIT", "Apache-2.0"]


def test_unparseable_spdx_expression_ignored() -> None:
    assert spdx_license_ids("MIT AND (") == []
    assert spdx_license_ids("   ") == []


def test_matches_sorted_by_position(apache_header: str, mit_header: str) -> None:
    content = "// SPDX-License-Identifier: BSD-3-Clause\n" + apache_header + mit_header
    matches = HeaderLicenseDetector().detect(content.encode("utf-8"))

    assert [match.license_id for match in matches] == ["BSD-3-Clause", "Apache-2.0", "MIT"]
    assert all(match.start < match.end for match in matches)
    assert [match.start for match in matches] == sorted(match.start for match in matches)


def test_spans_point_at_the_notice(mit_header: str) -> None:
    content = mit_header
    match = HeaderLicenseDetector().detect(content.encode("utf-8"))[0]
    assert content[match.start:match.end].startswith("Permission is hereby granted")


@pytest.mark.parametrize("raw", [b"\xff\xfe binary \x00 data", bytes(range(256))])
def test_binary_content_does_not_raise(raw: bytes) -> None:
    assert HeaderLicenseDetector().detect(raw) == []
