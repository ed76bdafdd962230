"""Pytests for the thermal-chain calculation."""
# python libraries
import math

# own libraries
from smps_designer import ThermalInputs, compute_thermal

# 3rd party libraries
from pytest import approx


def _inputs(**overrides) -> ThermalInputs:
    values = dict(total_loss=10.0 / 9.0, ambient_temp=25.0, max_junction_temp=125.0, theta_jc=2.0, theta_cs=0.5)
    values.update(overrides)
    return ThermalInputs(**values)


def test_heatsink_budget_for_buck_losses():
    """1.11 W from the nominal buck leaves 87.5 C/W for the heatsink."""
    results = compute_thermal(_inputs())

    assert results.max_theta_sa == approx(87.5)
    assert results.junction_temp == approx(125.0)
    assert results.temp_rise_heatsink == approx(97.22, abs=1e-2)
    assert results.heatsink_temp == approx(122.22, abs=1e-2)
    assert results.case_temp == approx(122.78, abs=1e-2)


def test_temperatures_stack_along_the_chain():
    """Case sits theta_CS * P above the heatsink and the junction theta_JC * P above the case."""
    results = compute_thermal(_inputs(total_loss=4.0))

    assert results.case_temp - results.heatsink_temp == approx(4.0 * 0.5)
    assert results.junction_temp - results.case_temp == approx(4.0 * 2.0)


def test_negative_budget_is_a_result():
    """100 W through 2.5 C/W already exceeds the junction limit."""
    results = compute_thermal(_inputs(total_loss=100.0))

    assert results.max_theta_sa == approx(-1.5)
    assert results.temp_rise_heatsink == 0.0
    assert results.heatsink_temp == 25.0
    assert results.case_temp == approx(75.0)
    assert results.junction_temp == approx(275.0)


def test_negative_budget_keeps_heatsink_at_ambient():
    """With no budget left the heatsink stays exactly at ambient temperature."""
    results = compute_thermal(_inputs(total_loss=50.0, ambient_temp=31.37))

    assert results.max_theta_sa < 0
    assert results.heatsink_temp == 31.37
    assert results.temp_rise_heatsink == 0


def test_repeated_evaluation_is_identical():
    """Identical inputs give identical results."""
    assert compute_thermal(_inputs()) == compute_thermal(_inputs())


def test_zero_loss_does_not_raise():
    """Zero loss gives an unbounded heatsink budget instead of an exception."""
    results = compute_thermal(_inputs(total_loss=0.0))

    assert math.isinf(results.max_theta_sa)
    assert math.isnan(results.junction_temp)
