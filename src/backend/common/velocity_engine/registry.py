from __future__ import annotations

from typing import Dict, Type

from .rule import VelocityRule


class RuleRegistry:
    """Rule classes in registration order, which is also evaluation order."""

    def __init__(self):
        self._rules: Dict[str, Type[VelocityRule]] = {}

    def register(self, rule_cls: Type[VelocityRule]) -> None:
        rule_id = getattr(rule_cls, "rule_id", None)
        if not rule_id:
            raise ValueError("Rule class missing rule_id")
        if rule_id in self._rules:
            raise ValueError(f"Duplicate rule_id registered: {rule_id}")
        self._rules[rule_id] = rule_cls

    def create_all(self) -> list[VelocityRule]:
        return [cls() for cls in self._rules.values()]


registry = RuleRegistry()


def register_rule(rule_cls: Type[VelocityRule]) -> Type[VelocityRule]:
    registry.register(rule_cls)
    return rule_cls
