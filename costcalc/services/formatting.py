"""
Presentation helpers.

Rounding to display precision happens here and nowhere earlier.
"""
from typing import Dict, Optional

from costcalc.core.config import config
from costcalc.domain.cost_models import CostBreakdown, CostLineItem
from costcalc.domain.pricing_models import PriceSnapshot
from costcalc.pricing.baseline import RESOURCE_PRICES_BY_KEY


SEPARATOR = "-" * 46

# Line items whose quantity is a data volume
VOLUME_ITEMS = {"aurora.storage", "dataTransfer"}


def format_money(amount: float, symbol: Optional[str] = None) -> str:
    """Format an amount with currency symbol and two decimals (e.g. '€73.00')."""
    if symbol is None:
        symbol = config.CURRENCY_SYMBOL
    return f"{symbol}{amount:.2f}"


def format_price(key: str, value: float) -> str:
    """
    Format a unit price at its display precision.

    Per-GB rates show three decimals, everything else two.
    """
    resource = RESOURCE_PRICES_BY_KEY.get(key)
    decimals = resource.decimals if resource else 2
    return f"{value:.{decimals}f}"


def format_price_table(snapshot: PriceSnapshot) -> Dict[str, str]:
    """Display strings for every price, used to repopulate editable price fields."""
    return {key: format_price(key, value) for key, value in snapshot.prices.items()}


def describe_line_item(item: CostLineItem) -> str:
    """Human-readable label with quantity and tier annotations."""
    if item.key in VOLUME_ITEMS:
        return f"{item.label} ({item.quantity:g} GB)"
    if item.key == "eks.cluster":
        return f"{item.label} (1 cluster)"
    if item.tier and item.key in ("eks.nodes", "aurora.instances"):
        return f"{item.label} ({item.quantity:g} × {item.tier})"
    if item.tier:
        return f"{item.label} ({item.tier})"
    return item.label


def format_breakdown(breakdown: CostBreakdown, symbol: Optional[str] = None) -> str:
    """
    Render a breakdown as multi-line text.

    Args:
        breakdown: Calculation result
        symbol: Currency symbol (default: configured symbol)

    Returns:
        One line per line item followed by fixed, variable and overall totals
    """
    lines = [
        f"• {describe_line_item(item)}: {format_money(item.subtotal, symbol)}"
        for item in breakdown.line_items
    ]
    lines.append(SEPARATOR)
    lines.append(f"Fixed Cost Total: {format_money(breakdown.fixed_total, symbol)}")
    lines.append(f"AWS Variable Cost Total: {format_money(breakdown.variable_total, symbol)}")
    lines.append("")
    lines.append(f"Overall Total Cost: {format_money(breakdown.grand_total, symbol)}")
    return "\n".join(lines) + "\n"
