"""
Tests for presentation formatting.
"""

from costcalc.pricing.baseline import AURORA_STORAGE, DATA_TRANSFER, EKS_CLUSTER
from costcalc.services.formatting import format_breakdown, format_money, format_price, format_price_table


def test_price_precision():
    """Per-GB rates use three decimals, flat prices two."""
    assert format_price(EKS_CLUSTER, 73) == "73.00"
    assert format_price(AURORA_STORAGE, 0.09) == "0.090"
    assert format_price(DATA_TRANSFER, 0.105 * 1.08) == "0.113"


def test_price_table_display_after_region_switch(price_table):
    """Display strings follow the active region."""
    price_table.apply_region("us-east-1")
    display = format_price_table(price_table.snapshot())

    assert display[EKS_CLUSTER] == "69.35"
    assert display["thirdParty.wso2_standard"] == "1833.00"


def test_format_money():
    assert format_money(2774.5, symbol="€") == "€2774.50"
    assert format_money(0, symbol="$") == "$0.00"


def test_breakdown_text(engine, price_table, scenario_a_params):
    """Breakdown text lists each line item and the three totals."""
    breakdown = engine.calculate(scenario_a_params, price_table.snapshot())
    text = format_breakdown(breakdown, symbol="€")

    assert "• EKS Cluster (1 cluster): €73.00" in text
    assert "• EKS Nodes (1 × small): €55.00" in text
    assert "• Aurora Storage (100 GB): €9.00" in text
    assert "• MongoDB Atlas (M20): €205.00" in text
    assert "• Data Transfer (100 GB): €10.50" in text
    assert "Fixed Cost Total: €1906.00" in text
    assert "AWS Variable Cost Total: €1135.50" in text
    assert "Overall Total Cost: €3041.50" in text
