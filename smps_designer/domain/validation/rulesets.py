"""Default advisory rulesets flagging results that need attention.

None of these rules blocks a computation: a high loss, an overfull window or
an exhausted thermal budget are all valid results the designer must act on.
"""

from __future__ import annotations

from math import isclose
from typing import Dict, Tuple

from ...shared.config import AdvisoryConfig
from ...shared.dto import (
    MagneticInputs,
    MagneticResults,
    PowerInputs,
    PowerResults,
    ThermalInputs,
    ThermalResults,
    ValidationSeverity,
)
from .engine import DesignStage, StageRuleSet, ValidationEngine, ValidationRule


def _warning(code: str, message: str, func) -> ValidationRule:
    return ValidationRule(code=code, message=message, severity=ValidationSeverity.WARNING, evaluator=func)


def _power_rules() -> list[ValidationRule]:
    def losses_limit(
        inputs: PowerInputs, results: PowerResults, limits: AdvisoryConfig
    ) -> Tuple[bool, Dict[str, float]]:
        passed = not results.losses > limits.loss_warning_w
        return passed, {"losses_w": results.losses, "limit_w": limits.loss_warning_w}

    return [_warning("power_losses_high", "Power stage losses are high", losses_limit)]


def _magnetics_rules() -> list[ValidationRule]:
    def window_fill(
        inputs: MagneticInputs, results: MagneticResults, limits: AdvisoryConfig
    ) -> Tuple[bool, Dict[str, float]]:
        passed = not results.fill_factor > limits.fill_factor_limit
        return passed, {"fill_factor": results.fill_factor, "limit": limits.fill_factor_limit}

    return [
        _warning(
            "magnetics_fill_factor",
            "Winding may not fit in the core window",
            window_fill,
        )
    ]


def _thermal_rules() -> list[ValidationRule]:
    def passive_heatsink(
        inputs: ThermalInputs, results: ThermalResults, limits: AdvisoryConfig
    ) -> Tuple[bool, Dict[str, float]]:
        return not results.max_theta_sa < 0.0, {"max_theta_sa": results.max_theta_sa}

    def junction_limit(
        inputs: ThermalInputs, results: ThermalResults, limits: AdvisoryConfig
    ) -> Tuple[bool, Dict[str, float]]:
        junction, limit = results.junction_temp, inputs.max_junction_temp
        # A budget solved exactly to the limit lands on it up to float noise.
        passed = not junction > limit or isclose(junction, limit, rel_tol=1e-9)
        return passed, {"junction_temp": junction, "limit": limit}

    return [
        _warning(
            "thermal_no_passive_heatsink",
            "No passive heatsink meets the junction limit; consider forced air or lower losses",
            passive_heatsink,
        ),
        _warning("thermal_junction_over_limit", "Junction temperature exceeds its maximum", junction_limit),
    ]


def register_default_rules(engine: ValidationEngine) -> None:
    """Populate the validation engine with the default rule sets."""

    engine.register_ruleset(StageRuleSet(stage=DesignStage.POWER, version="1.0", rules=_power_rules()))
    engine.register_ruleset(StageRuleSet(stage=DesignStage.MAGNETICS, version="1.0", rules=_magnetics_rules()))
    engine.register_ruleset(StageRuleSet(stage=DesignStage.THERMAL, version="1.0", rules=_thermal_rules()))
