"""
Domain models for cost breakdowns.
Defines the structure of a calculation result and its line items.
"""
from typing import Tuple, Dict, Any, Optional
from dataclasses import dataclass

from costcalc.domain.workload_models import WorkloadParameters


FIXED = "fixed"
VARIABLE = "variable"


@dataclass(frozen=True)
class CostLineItem:
    """Represents the monthly cost of one resource."""
    key: str  # e.g., "eks.nodes"
    label: str
    price_key: str  # Price table key the unit price came from
    cost_class: str  # "fixed" | "variable"
    quantity: float
    unit_price: float
    subtotal: float
    tier: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "key": self.key,
            "label": self.label,
            "price_key": self.price_key,
            "cost_class": self.cost_class,
            "quantity": self.quantity,
            "unit_price": round(self.unit_price, 3),
            "subtotal": round(self.subtotal, 2),
            "tier": self.tier,
        }


@dataclass(frozen=True)
class SizingDecisions:
    """Tier choices made by the sizing rules."""
    node_tier: str  # "small" | "medium" | "large"
    node_count: int
    relational_tier: str  # "small" | "medium"
    relational_instance_count: int
    document_tier: str  # "M20" | "M40"
    cache_topology: str  # "single" | "multi"
    streaming_tier: str  # "dev" | "prod"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "node_tier": self.node_tier,
            "node_count": self.node_count,
            "relational_tier": self.relational_tier,
            "relational_instance_count": self.relational_instance_count,
            "document_tier": self.document_tier,
            "cache_topology": self.cache_topology,
            "streaming_tier": self.streaming_tier,
        }


@dataclass(frozen=True)
class CostBreakdown:
    """Represents a complete monthly cost calculation."""
    parameters: WorkloadParameters
    decisions: SizingDecisions
    line_items: Tuple[CostLineItem, ...]
    fixed_total: float
    variable_total: float
    grand_total: float
    region: str
    currency: str

    def line_item(self, key: str) -> CostLineItem:
        """
        Get a line item by key.

        Raises:
            KeyError: If no line item has that key
        """
        for item in self.line_items:
            if item.key == key:
                return item
        raise KeyError(key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "currency": self.currency,
            "region": self.region,
            "parameters": self.parameters.to_dict(),
            "decisions": self.decisions.to_dict(),
            "line_items": [item.to_dict() for item in self.line_items],
            "fixed_total": round(self.fixed_total, 2),
            "variable_total": round(self.variable_total, 2),
            "grand_total": round(self.grand_total, 2),
        }
