"""Shared utilities and data transfer objects."""

from .dto import (
    CoreParameters,
    DesignRequest,
    DesignSessionResult,
    MagneticInputs,
    MagneticResults,
    PowerInputs,
    PowerResults,
    ThermalInputs,
    ThermalParameters,
    ThermalResults,
    ValidationIssue,
    ValidationSeverity,
)
from .config import AdvisoryConfig, AppConfig, DefaultsConfig

__all__ = [
    "CoreParameters",
    "DesignRequest",
    "DesignSessionResult",
    "MagneticInputs",
    "MagneticResults",
    "PowerInputs",
    "PowerResults",
    "ThermalInputs",
    "ThermalParameters",
    "ThermalResults",
    "ValidationIssue",
    "ValidationSeverity",
    "AdvisoryConfig",
    "AppConfig",
    "DefaultsConfig",
]
