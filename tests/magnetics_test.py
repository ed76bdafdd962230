"""Pytests for the magnetics sizing."""
# python libraries
import dataclasses
import math

# own libraries
from smps_designer import MagneticInputs, PowerInputs, Topology, compute_magnetics, compute_power_stage

# 3rd party libraries
import pytest
from pytest import approx


def _inputs(**overrides) -> MagneticInputs:
    values = dict(inductance=27.0, peak_current=2.30, bmax=0.3, ae=52.0, window_area=40.0,
                  current_density=4.0, core_permeability=2500.0, core_length_mm=37.0)
    values.update(overrides)
    return MagneticInputs(**values)


def test_buck_inductor_on_default_core():
    """27 uH at 2.3 A peak on a 52 mm² core at 0.3 T."""
    results = compute_magnetics(_inputs())

    assert results.turns == 4
    assert isinstance(results.turns, int)
    # mu0 * 16 * 52e-6 / 27e-6 - 37e-3 / 2500 = 23.9 um
    assert results.air_gap_mm == approx(0.02)
    assert results.al_value == approx(1687.5, abs=0.1)
    assert results.wire_area_mm2 == approx(0.575)
    assert results.wire_diameter_mm == approx(0.86)
    assert results.fill_factor == approx(0.0575, abs=1e-3)


def test_turns_round_up():
    """Any fractional turn count is rounded up so Bmax is never exceeded."""
    results = compute_magnetics(_inputs(inductance=100.0, peak_current=1.05, bmax=0.1, ae=100.0))

    # L * I / (B * Ae) = 10.5
    assert results.turns == 11


def test_air_gap_floored_at_zero():
    """A low-permeability core already has enough reluctance: no gap is needed."""
    results = compute_magnetics(_inputs(core_permeability=1.0))

    assert results.air_gap_mm == 0.0


def test_gap_grows_with_core_permeability():
    """The higher the core permeability, the more of the reluctance the gap must provide."""
    low = compute_magnetics(_inputs(core_permeability=500.0))
    high = compute_magnetics(_inputs(core_permeability=5000.0))

    assert high.air_gap_mm >= low.air_gap_mm


def test_fill_factor_above_half_is_reported():
    """An overfull window is returned as is; it is not an error."""
    results = compute_magnetics(_inputs(window_area=2.0))

    assert results.fill_factor > 0.5


def test_magnetics_from_buck_power_stage():
    """Inductance and peak current are taken from the buck power stage."""
    power = compute_power_stage(
        Topology.BUCK,
        PowerInputs(vin=12.0, vout=5.0, iout=2.0, fsw=200.0, ripple_current_percent=30.0,
                    ripple_voltage_percent=1.0, efficiency=0.9),
    )
    results = compute_magnetics(_inputs(inductance=power.inductance, peak_current=power.peak_current))

    assert results.turns >= 1
    assert results.air_gap_mm >= 0.0


def test_repeated_evaluation_is_identical():
    """Identical inputs give identical results."""
    assert compute_magnetics(_inputs()) == compute_magnetics(_inputs())


def test_zero_flux_density_does_not_raise():
    """Bmax = 0 asks for infinitely many turns; the float is returned."""
    results = compute_magnetics(_inputs(bmax=0.0))

    assert math.isinf(results.turns)


def test_zero_current_density_does_not_raise():
    """A zero current density gives an infinite conductor."""
    results = compute_magnetics(_inputs(current_density=0.0))

    assert math.isinf(results.wire_area_mm2)
    assert math.isinf(results.wire_diameter_mm)
    assert math.isinf(results.fill_factor)
    assert results.turns == 4


def test_results_are_immutable():
    """Result records are frozen value types."""
    results = compute_magnetics(_inputs())

    with pytest.raises(dataclasses.FrozenInstanceError):
        results.turns = 5
