"""Rule registry: the set of layout rules and the run plan for one scan."""

from __future__ import annotations
import logging

from barnframe.models import GenerationConfig, LayoutContext
from barnframe.rules.base import LayoutRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Layout rules keyed by id.

    A scan asks for a run plan. The plan starts from the rules the
    GenerationConfig selects and pulls in every rule they depend on, so a
    constraint rule never runs without the zones it reads. Rules whose
    dependencies are not registered are left out of the plan.
    """

    def __init__(self) -> None:
        self._rules: dict[str, LayoutRule] = {}

    def register(self, rule: LayoutRule) -> None:
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> LayoutRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[LayoutRule]:
        return list(self._rules.values())

    def selected_ids(self, config: GenerationConfig) -> set[str]:
        """Registered ids chosen by the config, before dependencies are added."""
        ids = set(self._rules)
        if config.enabled_rules:
            ids &= set(config.enabled_rules)
        return ids - set(config.disabled_rules)

    def run_plan(self, context: LayoutContext) -> list[LayoutRule]:
        """
        Rules to run for this context, dependencies first.

        Selected rules bring their dependencies along even when the config
        left those out. Within that constraint lower priority runs first.
        Rules whose `applies()` is False are dropped last, so a dependent
        still runs after a dependency that had nothing to do.
        """
        selected = self.selected_ids(context.config)

        planned: set[str] = set()
        for rule_id in sorted(selected):
            required = self._requirements(rule_id)
            if required is None:
                logger.warning("Skipping rule %s: a dependency is not registered", rule_id)
                continue
            planned |= required

        for rule_id in sorted(planned - selected):
            logger.warning("Running rule %s: required by a selected rule", rule_id)

        ordered = self._ordered(planned)
        return [r for r in ordered if r.applies(context)]

    def _requirements(
        self, rule_id: str, trail: tuple[str, ...] = (),
    ) -> set[str] | None:
        """`rule_id` and everything it depends on, or None if any id is unknown."""
        if rule_id in trail:
            raise ValueError(f"Dependency cycle: {' -> '.join(trail + (rule_id,))}")
        rule = self._rules.get(rule_id)
        if rule is None:
            return None

        required = {rule_id}
        for dep_id in rule.dependencies:
            deps = self._requirements(dep_id, trail + (rule_id,))
            if deps is None:
                return None
            required |= deps
        return required

    def _ordered(self, rule_ids: set[str]) -> list[LayoutRule]:
        by_priority = sorted(
            (self._rules[i] for i in rule_ids),
            key=lambda r: (r.priority, r.get_id()),
        )
        done: set[str] = set()
        ordered: list[LayoutRule] = []

        def place(rule: LayoutRule) -> None:
            if rule.get_id() in done:
                return
            done.add(rule.get_id())
            for dep_id in rule.dependencies:
                place(self._rules[dep_id])
            ordered.append(rule)

        for rule in by_priority:
            place(rule)
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry holding the clearance, access, ventilation, structural and constraint rules."""
    from barnframe.rules.layout.access import AccessPathRule
    from barnframe.rules.layout.clearance import ClearanceZoneRule
    from barnframe.rules.layout.constraints import LayoutConstraintRule
    from barnframe.rules.layout.structural import StructuralElementRule
    from barnframe.rules.layout.ventilation import VentilationRule

    registry = RuleRegistry()
    for rule in (
        ClearanceZoneRule(),
        AccessPathRule(),
        VentilationRule(),
        StructuralElementRule(),
        LayoutConstraintRule(),
    ):
        registry.register(rule)
    return registry
