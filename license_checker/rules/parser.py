"""Decode ``paths`` entries into rules."""

from __future__ import annotations

from typing import Any

from license_checker.constants import RULE_KEY_EXCLUDE, RULE_KEY_INCLUDE
from license_checker.errors import PatternSyntaxError, RuleConflictError
from license_checker.rules.models import Rule, RuleKind, RuleSet
from license_checker.rules.pattern import Pattern, compile_pattern


def _compile_all(patterns: list[Any], location: str) -> tuple[Pattern, ...]:
    compiled: list[Pattern] = []
    for position, pattern in enumerate(patterns):
        try:
            compiled.append(compile_pattern(pattern))
        except PatternSyntaxError as exc:
            raise PatternSyntaxError(
                exc.pattern, exc.detail, location=f"{location}[{position}]"
            ) from exc
    return tuple(compiled)


def parse_rule(entry: dict[str, Any], location: str = "paths") -> Rule | None:
    """Build a rule from ``{"include": [...]}`` or ``{"exclude": [...]}``.

    Returns ``None`` when the entry lists no patterns at all.
    """
    include = entry.get(RULE_KEY_INCLUDE) or []
    exclude = entry.get(RULE_KEY_EXCLUDE) or []

    if include and exclude:
        raise RuleConflictError(location)
    if include:
        return Rule(RuleKind.INCLUDE, _compile_all(include, f"{location}.include"))
    if exclude:
        return Rule(RuleKind.EXCLUDE, _compile_all(exclude, f"{location}.exclude"))
    return None


def parse_rules(entries: list[dict[str, Any]], location: str = "paths") -> RuleSet:
    rules: list[Rule] = []
    for index, entry in enumerate(entries):
        rule = parse_rule(entry, location=f"{location}[{index}]")
        if rule is not None:
            rules.append(rule)
    return RuleSet.of(rules)
