"""Configuration management for the application."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .dto import CoreParameters, PowerInputs, ThermalParameters


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


@dataclass
class DefaultsConfig:
    """Nominal operating point offered to the user before any edit."""

    # Power stage
    vin: float = 12.0
    vout: float = 5.0
    iout: float = 2.0
    fsw_khz: float = 200.0
    ripple_current_percent: float = 30.0
    ripple_voltage_percent: float = 1.0
    efficiency: float = 0.9
    turns_ratio: float = 2.0

    # Magnetics
    bmax: float = 0.3
    ae_mm2: float = 52.0
    window_area_mm2: float = 40.0
    current_density: float = 4.0
    core_permeability: float = 2500.0
    core_length_mm: float = 37.0

    # Thermal
    ambient_temp: float = 25.0
    max_junction_temp: float = 125.0
    theta_jc: float = 2.0
    theta_cs: float = 0.5

    def power_inputs(self) -> PowerInputs:
        return PowerInputs(
            vin=self.vin,
            vout=self.vout,
            iout=self.iout,
            fsw=self.fsw_khz,
            ripple_current_percent=self.ripple_current_percent,
            ripple_voltage_percent=self.ripple_voltage_percent,
            efficiency=self.efficiency,
            turns_ratio=self.turns_ratio,
        )

    def core_parameters(self) -> CoreParameters:
        return CoreParameters(
            bmax=self.bmax,
            ae=self.ae_mm2,
            window_area=self.window_area_mm2,
            current_density=self.current_density,
            core_permeability=self.core_permeability,
            core_length_mm=self.core_length_mm,
        )

    def thermal_parameters(self) -> ThermalParameters:
        return ThermalParameters(
            ambient_temp=self.ambient_temp,
            max_junction_temp=self.max_junction_temp,
            theta_jc=self.theta_jc,
            theta_cs=self.theta_cs,
        )


@dataclass
class AdvisoryConfig:
    """Thresholds used to flag results that need the designer's attention."""

    loss_warning_w: float = 5.0
    fill_factor_limit: float = 0.5
    thermal_loss_fallback_w: float = 0.01


@dataclass
class AppConfig:
    """Application configuration."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    advisories: AdvisoryConfig = field(default_factory=AdvisoryConfig)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> AppConfig:
        """Load configuration from environment variables."""
        load_dotenv(env_file or ".env")

        base = DefaultsConfig()
        defaults = DefaultsConfig(
            vin=_env_float("SMPS_DEFAULT_VIN", base.vin),
            vout=_env_float("SMPS_DEFAULT_VOUT", base.vout),
            iout=_env_float("SMPS_DEFAULT_IOUT", base.iout),
            fsw_khz=_env_float("SMPS_DEFAULT_FSW_KHZ", base.fsw_khz),
            ripple_current_percent=_env_float("SMPS_DEFAULT_RIPPLE_CURRENT_PCT", base.ripple_current_percent),
            ripple_voltage_percent=_env_float("SMPS_DEFAULT_RIPPLE_VOLTAGE_PCT", base.ripple_voltage_percent),
            efficiency=_env_float("SMPS_DEFAULT_EFFICIENCY", base.efficiency),
            turns_ratio=_env_float("SMPS_DEFAULT_TURNS_RATIO", base.turns_ratio),
            bmax=_env_float("SMPS_DEFAULT_BMAX", base.bmax),
            ae_mm2=_env_float("SMPS_DEFAULT_AE_MM2", base.ae_mm2),
            window_area_mm2=_env_float("SMPS_DEFAULT_WINDOW_AREA_MM2", base.window_area_mm2),
            current_density=_env_float("SMPS_DEFAULT_CURRENT_DENSITY", base.current_density),
            core_permeability=_env_float("SMPS_DEFAULT_CORE_PERMEABILITY", base.core_permeability),
            core_length_mm=_env_float("SMPS_DEFAULT_CORE_LENGTH_MM", base.core_length_mm),
            ambient_temp=_env_float("SMPS_DEFAULT_AMBIENT_TEMP", base.ambient_temp),
            max_junction_temp=_env_float("SMPS_DEFAULT_MAX_JUNCTION_TEMP", base.max_junction_temp),
            theta_jc=_env_float("SMPS_DEFAULT_THETA_JC", base.theta_jc),
            theta_cs=_env_float("SMPS_DEFAULT_THETA_CS", base.theta_cs),
        )

        advisories = AdvisoryConfig(
            loss_warning_w=_env_float("SMPS_LOSS_WARNING_W", 5.0),
            fill_factor_limit=_env_float("SMPS_FILL_FACTOR_LIMIT", 0.5),
            thermal_loss_fallback_w=_env_float("SMPS_THERMAL_LOSS_FALLBACK_W", 0.01),
        )

        return cls(defaults=defaults, advisories=advisories)
