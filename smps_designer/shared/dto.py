"""Shared data transfer objects for the converter calculation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Mapping, Optional


class ValidationSeverity(str, Enum):
    """Severity levels returned by the validation engine."""

    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a rule violation or advisory detected on a design stage."""

    code: str
    message: str
    severity: ValidationSeverity
    details: Mapping[str, float | str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PowerInputs:
    """Electrical operating point of the power stage."""

    vin: float  # V
    vout: float  # V
    iout: float  # A
    fsw: float  # kHz
    ripple_current_percent: float
    ripple_voltage_percent: float
    efficiency: float  # ratio in (0, 1]
    turns_ratio: Optional[float] = None  # Np/Ns, isolated topologies only


@dataclass(frozen=True, slots=True)
class PowerResults:
    """Component stresses and passive sizing derived for the power stage."""

    duty_cycle: float
    inductance: float  # µH (magnetizing inductance for isolated topologies)
    ripple_current: float  # A
    peak_current: float  # A
    rms_current: float  # A
    input_current: float  # A
    output_capacitance: float  # µF
    input_capacitance: float  # µF
    output_ripple_voltage: float  # mV
    switch_voltage_stress: float  # V
    diode_voltage_stress: float  # V
    output_power: float  # W
    input_power: float  # W
    losses: float  # W
    turns_ratio: Optional[float] = None


@dataclass(frozen=True, slots=True)
class MagneticInputs:
    """Target inductance plus core and winding parameters."""

    inductance: float  # µH
    peak_current: float  # A
    bmax: float  # T
    ae: float  # mm²
    window_area: float  # mm²
    current_density: float  # A/mm²
    core_permeability: float  # relative µr
    core_length_mm: float


@dataclass(frozen=True, slots=True)
class MagneticResults:
    """Winding and gap sizing for the inductor or transformer core."""

    turns: int
    air_gap_mm: float
    wire_area_mm2: float
    wire_diameter_mm: float
    fill_factor: float
    al_value: float  # nH/N²


@dataclass(frozen=True, slots=True)
class ThermalInputs:
    """Dissipated power and the fixed part of the thermal chain."""

    total_loss: float  # W
    ambient_temp: float  # °C
    max_junction_temp: float  # °C
    theta_jc: float  # °C/W
    theta_cs: float  # °C/W


@dataclass(frozen=True, slots=True)
class ThermalResults:
    """Heatsink budget and the resulting temperature profile."""

    max_theta_sa: float  # °C/W
    junction_temp: float  # °C
    temp_rise_heatsink: float  # °C
    heatsink_temp: float  # °C
    case_temp: float  # °C


@dataclass(frozen=True, slots=True)
class CoreParameters:
    """Core and material data; inductance and peak current come from the power stage."""

    bmax: float
    ae: float
    window_area: float
    current_density: float
    core_permeability: float
    core_length_mm: float

    def to_inputs(self, inductance: float, peak_current: float) -> MagneticInputs:
        return MagneticInputs(
            inductance=inductance,
            peak_current=peak_current,
            bmax=self.bmax,
            ae=self.ae,
            window_area=self.window_area,
            current_density=self.current_density,
            core_permeability=self.core_permeability,
            core_length_mm=self.core_length_mm,
        )


@dataclass(frozen=True, slots=True)
class ThermalParameters:
    """Thermal chain data; total loss comes from the power stage."""

    ambient_temp: float
    max_junction_temp: float
    theta_jc: float
    theta_cs: float

    def to_inputs(self, total_loss: float) -> ThermalInputs:
        return ThermalInputs(
            total_loss=total_loss,
            ambient_temp=self.ambient_temp,
            max_junction_temp=self.max_junction_temp,
            theta_jc=self.theta_jc,
            theta_cs=self.theta_cs,
        )


@dataclass(frozen=True, slots=True)
class DesignRequest:
    """Request envelope provided by the presentation layer."""

    topology: str
    power: PowerInputs
    core: CoreParameters
    thermal: ThermalParameters


@dataclass(frozen=True, slots=True)
class DesignSessionResult:
    """Outcome of a full power stage, magnetics and thermal evaluation."""

    topology: str
    power_inputs: PowerInputs
    power: PowerResults
    magnetic_inputs: MagneticInputs
    magnetics: MagneticResults
    thermal_inputs: ThermalInputs
    thermal: ThermalResults
    issues: List[ValidationIssue] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
