from license_checker.rules.models import Rule, RuleKind, RuleSet
from license_checker.rules.parser import parse_rule, parse_rules
from license_checker.rules.pattern import Pattern, compile_pattern

__all__ = [
    "Pattern",
    "Rule",
    "RuleKind",
    "RuleSet",
    "compile_pattern",
    "parse_rule",
    "parse_rules",
]
