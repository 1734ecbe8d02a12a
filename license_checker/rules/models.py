"""Path rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from license_checker.rules.pattern import Pattern, compile_pattern


class RuleKind(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class Rule:
    kind: RuleKind
    patterns: tuple[Pattern, ...]

    @classmethod
    def include(cls, *patterns: str) -> "Rule":
        return cls(RuleKind.INCLUDE, tuple(compile_pattern(p) for p in patterns))

    @classmethod
    def exclude(cls, *patterns: str) -> "Rule":
        return cls(RuleKind.EXCLUDE, tuple(compile_pattern(p) for p in patterns))

    def matches(self, path: str) -> bool:
        return any(pattern.test(path) for pattern in self.patterns)

    def apply(self, path: str, decision: bool) -> bool:
        """Return the decision after this rule, or ``decision`` if it does not match."""
        if not self.matches(path):
            return decision
        return self.kind == RuleKind.INCLUDE

    def as_dict(self) -> dict[str, list[str]]:
        return {self.kind.value: [pattern.source for pattern in self.patterns]}


@dataclass(frozen=True)
class RuleSet:
    """Ordered include/exclude rules; later rules override earlier ones.

    Every path starts out included.
    """

    rules: tuple[Rule, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, rules: Iterable[Rule]) -> "RuleSet":
        return cls(tuple(rules))

    def evaluate(self, path: str) -> bool:
        decision = True
        for rule in self.rules:
            decision = rule.apply(path, decision)
        return decision

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def as_list(self) -> list[dict[str, list[str]]]:
        return [rule.as_dict() for rule in self.rules]
