"""License detection from file headers.

Two sources are recognised:

1. ``SPDX-License-Identifier:`` tags. The expression is parsed with
   ``license_expression`` and each license symbol is reported as written.
2. The opening sentence of well-known license notices. Words may be split by
   line breaks and comment markers, so a notice wrapped in ``//``, ``#`` or
   ``/* ... */`` comments is still found.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from license_expression import ExpressionError, Licensing

from license_checker.detection.base import LicenseDetector
from license_checker.models import LicenseMatch

logger = logging.getLogger(__name__)

licensing = Licensing()

SPDX_TAG_RE = re.compile(r"SPDX-License-Identifier:[ \t]*(?P<expr>[^\r\n]*)", re.IGNORECASE)
_COMMENT_CLOSERS_RE = re.compile(r"\*/|-->|#}|%}")

# Whitespace, comment markers and punctuation allowed between notice words.
_GAP = r"[\s/*#;,.:!()\-]+"
_WORD_TRIM = ",;.:()"


def phrase(text: str) -> str:
    words = [re.escape(word.strip(_WORD_TRIM)) for word in text.split()]
    return _GAP.join(word for word in words if word)


@dataclass(frozen=True)
class NoticePattern:
    license_id: str
    regex: re.Pattern[str]


def _notice(license_id: str, *parts: str) -> NoticePattern:
    return NoticePattern(license_id, re.compile("".join(parts), re.IGNORECASE))


NOTICE_PATTERNS: tuple[NoticePattern, ...] = (
    _notice("Apache-2.0", phrase("Licensed under the Apache License, Version 2.0")),
    _notice(
        "MIT",
        phrase(
            "Permission is hereby granted, free of charge, to any person obtaining a copy"
        ),
    ),
    _notice(
        "BSD-3-Clause",
        phrase("Neither the name of"),
        r"[\s\S]{1,200}?",
        phrase("nor the names of its contributors may be used to endorse or promote"),
    ),
    _notice(
        "BSD-2-Clause",
        phrase(
            "Redistribution and use in source and binary forms, with or without "
            "modification, are permitted provided that the following conditions are met"
        ),
        r"(?![\s\S]{0,2000}?" + phrase("Neither the name of") + ")",
    ),
    _notice(
        "ISC",
        phrase(
            "Permission to use, copy, modify, and/or distribute this software for any "
            "purpose with or without fee is hereby granted"
        ),
    ),
    _notice(
        "MPL-2.0",
        phrase(
            "This Source Code Form is subject to the terms of the Mozilla Public License, v. 2.0"
        ),
    ),
    _notice(
        "GPL-2.0-or-later",
        phrase(
            "GNU General Public License as published by the Free Software Foundation; "
            "either version 2 of the License"
        ),
    ),
    _notice(
        "GPL-3.0-or-later",
        phrase(
            "GNU General Public License as published by the Free Software Foundation, "
            "either version 3 of the License"
        ),
    ),
    _notice(
        "LGPL-2.1-or-later",
        phrase(
            "GNU Lesser General Public License as published by the Free Software Foundation; "
            "either version 2.1 of the License"
        ),
    ),
    _notice(
        "LGPL-3.0-or-later",
        phrase(
            "GNU Lesser General Public License as published by the Free Software Foundation, "
            "either version 3 of the License"
        ),
    ),
    _notice(
        "Unlicense",
        phrase("This is free and unencumbered software released into the public domain"),
    ),
)


def spdx_license_ids(expression: str) -> list[str]:
    """Return the license symbols of an SPDX expression, or [] if it cannot be parsed."""
    if not expression.strip():
        return []
    try:
        parsed = licensing.parse(expression, strict=False)
    except ExpressionError as exc:
        logger.debug("Ignoring unparseable SPDX expression %r: %s", expression, exc)
        return []
    if parsed is None:
        return []
    return [symbol.render() for symbol in licensing.license_symbols(parsed, decompose=False)]


class HeaderLicenseDetector(LicenseDetector):
    def __init__(self, notices: tuple[NoticePattern, ...] = NOTICE_PATTERNS) -> None:
        self.notices = notices

    def detect(self, content: bytes) -> list[LicenseMatch]:
        text = content.decode("utf-8", errors="replace")
        matches = self._spdx_matches(text) + self._notice_matches(text)
        return sorted(matches, key=lambda item: (item.start, item.end))

    def _spdx_matches(self, text: str) -> list[LicenseMatch]:
        matches: list[LicenseMatch] = []
        for hit in SPDX_TAG_RE.finditer(text):
            expression = _COMMENT_CLOSERS_RE.split(hit.group("expr"), maxsplit=1)[0]
            for license_id in spdx_license_ids(expression):
                matches.append(LicenseMatch(license_id, hit.start(), hit.end()))
        return matches

    def _notice_matches(self, text: str) -> list[LicenseMatch]:
        matches: list[LicenseMatch] = []
        for notice in self.notices:
            for hit in notice.regex.finditer(text):
                matches.append(LicenseMatch(notice.license_id, hit.start(), hit.end()))
        return matches
