"""Advisory rules and engine evaluated over calculator results."""

from .engine import DesignStage, StageRuleSet, ValidationEngine, ValidationRule
from .rulesets import register_default_rules

__all__ = [
    "DesignStage",
    "StageRuleSet",
    "ValidationEngine",
    "ValidationRule",
    "register_default_rules",
]
