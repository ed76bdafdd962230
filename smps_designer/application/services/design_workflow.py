"""Orchestrates the power stage -> magnetics -> thermal design pipeline."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import List, Optional

from smps_designer.domain.converters import (
    TopologyRegistry,
    compute_power_stage,
    default_registry,
    resolve_topology,
)
from smps_designer.domain.magnetics import compute_magnetics
from smps_designer.domain.thermal import compute_thermal
from smps_designer.domain.validation import DesignStage, ValidationEngine, register_default_rules
from smps_designer.shared.config import AdvisoryConfig, AppConfig, DefaultsConfig
from smps_designer.shared.dto import (
    DesignRequest,
    DesignSessionResult,
    ValidationIssue,
)

logger = logging.getLogger(__name__)


class DesignWorkflowService:
    """Facade that chains the calculators and collects design advisories.

    The magnetics stage takes its inductance and peak current from the power
    stage, and the thermal stage takes the power-stage losses as its total
    loss. Advisories never stop the pipeline.
    """

    def __init__(
        self,
        *,
        validation_engine: Optional[ValidationEngine] = None,
        limits: Optional[AdvisoryConfig] = None,
        registry: Optional[TopologyRegistry] = None,
    ) -> None:
        if validation_engine is not None and limits is not None:
            raise ValueError("Pass advisory limits either directly or through the validation engine, not both")
        if validation_engine is None:
            validation_engine = ValidationEngine(limits)
            register_default_rules(validation_engine)
        self._validation_engine = validation_engine
        self._registry = registry or default_registry
        self._post_run_callbacks: List[Callable[[DesignSessionResult], None]] = []

    @classmethod
    def from_config(cls, config: AppConfig) -> DesignWorkflowService:
        return cls(limits=config.advisories)

    @staticmethod
    def default_request(topology: str, defaults: Optional[DefaultsConfig] = None) -> DesignRequest:
        """Build a request at the nominal operating point of ``defaults``."""

        defaults = defaults or DefaultsConfig()
        return DesignRequest(
            topology=resolve_topology(topology).value,
            power=defaults.power_inputs(),
            core=defaults.core_parameters(),
            thermal=defaults.thermal_parameters(),
        )

    def register_post_run_callback(
        self, callback: Callable[[DesignSessionResult], None]
    ) -> None:
        """Register a callable executed after a successful run."""

        self._post_run_callbacks.append(callback)

    def run(self, request: DesignRequest) -> DesignSessionResult:
        """Execute the full design pipeline for the given request."""

        topology = resolve_topology(request.topology)
        limits = self._validation_engine.limits

        power = compute_power_stage(topology, request.power, registry=self._registry)

        magnetic_inputs = request.core.to_inputs(power.inductance, power.peak_current)
        magnetics = compute_magnetics(magnetic_inputs)

        # Zero or undefined losses would leave the thermal budget undefined.
        total_loss = power.losses
        if not total_loss or math.isnan(total_loss):
            total_loss = limits.thermal_loss_fallback_w
        thermal_inputs = request.thermal.to_inputs(total_loss)
        thermal = compute_thermal(thermal_inputs)

        issues: List[ValidationIssue] = []
        issues.extend(self._validation_engine.check(DesignStage.POWER, request.power, power))
        issues.extend(self._validation_engine.check(DesignStage.MAGNETICS, magnetic_inputs, magnetics))
        issues.extend(self._validation_engine.check(DesignStage.THERMAL, thermal_inputs, thermal))
        for issue in issues:
            logger.warning(f"{topology.value}: {issue.code} {dict(issue.details)}")

        result = DesignSessionResult(
            topology=topology.value,
            power_inputs=request.power,
            power=power,
            magnetic_inputs=magnetic_inputs,
            magnetics=magnetics,
            thermal_inputs=thermal_inputs,
            thermal=thermal,
            issues=issues,
        )
        logger.info(f"Design session for {topology.value} completed with {len(issues)} advisories")

        for callback in self._post_run_callbacks:
            callback(result)

        return result
