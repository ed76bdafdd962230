"""Validation engine evaluating advisory rules over calculator results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from ...shared.config import AdvisoryConfig
from ...shared.dto import ValidationIssue, ValidationSeverity


class DesignStage(str, Enum):
    """Pipeline stage whose inputs and results a rule inspects."""

    POWER = "power"
    MAGNETICS = "magnetics"
    THERMAL = "thermal"


class RuleEvaluator(Protocol):
    """Callable signature used to evaluate a validation rule."""

    def __call__(
        self, inputs: Any, results: Any, limits: AdvisoryConfig
    ) -> tuple[bool, Dict[str, float | str]]:  # pragma: no cover - structural
        ...


@dataclass(slots=True)
class ValidationRule:
    """Representation of a single validation rule tied to a design stage."""

    code: str
    message: str
    severity: ValidationSeverity
    evaluator: RuleEvaluator


@dataclass(slots=True)
class StageRuleSet:
    """Group of rules associated with a particular design stage and version."""

    stage: DesignStage
    version: str
    rules: Iterable[ValidationRule] = field(default_factory=list)


class ValidationEngine:
    """Central coordinator that evaluates rules over stage results."""

    def __init__(self, limits: Optional[AdvisoryConfig] = None) -> None:
        self._rulesets: Dict[DesignStage, StageRuleSet] = {}
        self._limits = limits or AdvisoryConfig()

    @property
    def limits(self) -> AdvisoryConfig:
        return self._limits

    def register_ruleset(self, rule_set: StageRuleSet, *, override: bool = False) -> None:
        """Register the rule set for a stage."""

        if not override and rule_set.stage in self._rulesets:
            raise ValueError(f"Ruleset for {rule_set.stage} already registered")

        self._rulesets[rule_set.stage] = rule_set

    def check(
        self,
        stage: DesignStage,
        inputs: Any,
        results: Any,
        stage_ruleset: Optional[StageRuleSet] = None,
    ) -> List[ValidationIssue]:
        """Evaluate all applicable rules and collect issues.

        A stage without a registered rule set yields no issues.
        """

        if stage_ruleset is None:
            stage_ruleset = self._rulesets.get(stage)
            if stage_ruleset is None:
                return []

        issues: List[ValidationIssue] = []
        for rule in stage_ruleset.rules:
            passed, details = rule.evaluator(inputs, results, self._limits)
            if passed:
                continue
            issues.append(
                ValidationIssue(
                    code=rule.code,
                    message=rule.message,
                    severity=rule.severity,
                    details=details,
                )
            )
        return issues

    def get_ruleset(self, stage: DesignStage) -> StageRuleSet:
        """Retrieve the registered ruleset for a stage."""

        try:
            return self._rulesets[stage]
        except KeyError as exc:
            raise LookupError(f"No ruleset registered for {stage}") from exc
