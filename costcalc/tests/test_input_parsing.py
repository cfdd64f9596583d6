"""
Tests for input coercion at the boundary.
Invalid input is coerced, never raised.
"""

import pytest

from costcalc.domain.workload_models import Environment, WorkloadParameters
from costcalc.utils.parsing import coerce_price, parse_number, to_non_negative_int


@pytest.mark.parametrize("raw,expected", [
    (5, 5.0),
    ("2.5", 2.5),
    ("  42 ", 42.0),
    ("abc", None),
    ("", None),
    (None, None),
    (True, None),
    ("nan", None),
    (float("inf"), None),
    ([1], None),
])
def test_parse_number(raw, expected):
    """Only finite numbers parse."""
    assert parse_number(raw) == expected


def test_int_coercion_truncates_and_clamps():
    """Fractions truncate; negatives and garbage become 0."""
    assert to_non_negative_int("12.9") == 12
    assert to_non_negative_int(-3) == 0
    assert to_non_negative_int("lots") == 0


def test_coerce_price_reasons():
    """Rejected prices come back as 0 with a reason."""
    assert coerce_price("0.105") == (0.105, None)
    assert coerce_price("-1") == (0.0, "Price must not be negative")
    assert coerce_price("x") == (0.0, "Price must be a finite number")


def test_workload_from_raw_strings():
    """String input from a form is parsed."""
    params = WorkloadParameters.from_raw("25000", "1200", "750.5", "Staging")

    assert params == WorkloadParameters(
        daily_users=25000,
        peak_tps=1200,
        data_volume_gb=750.5,
        environment=Environment.STAGING,
    )


def test_workload_from_raw_garbage_is_zero():
    """Unparseable and negative values become 0; unknown environment becomes dev."""
    params = WorkloadParameters.from_raw("many", -10, "-4.2", "qa")

    assert params.daily_users == 0
    assert params.peak_tps == 0
    assert params.data_volume_gb == 0.0
    assert params.environment == Environment.DEV


def test_workload_from_raw_defaults():
    """Missing values are treated as 0."""
    assert WorkloadParameters.from_raw() == WorkloadParameters()


def test_environment_parse_accepts_enum():
    """Already-parsed environments pass through."""
    assert Environment.parse(Environment.TEST) is Environment.TEST
