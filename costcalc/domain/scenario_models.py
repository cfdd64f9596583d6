"""
Domain models for what-if comparison.
Defines per-line-item deltas and comparison results.
"""
from typing import List, Dict, Any, Optional
from dataclasses import dataclass

from costcalc.domain.cost_models import CostBreakdown


@dataclass
class ScenarioDeltaLineItem:
    """Represents the delta for a single line item between base and scenario."""
    key: str
    label: str
    base_subtotal: float
    scenario_subtotal: float
    delta: float
    delta_percent: Optional[float]  # None if base_subtotal == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "key": self.key,
            "label": self.label,
            "base_subtotal": round(self.base_subtotal, 2),
            "scenario_subtotal": round(self.scenario_subtotal, 2),
            "delta": round(self.delta, 2),
        }
        if self.delta_percent is not None:
            result["delta_percent"] = round(self.delta_percent, 1)
        else:
            result["delta_percent"] = None
        return result


@dataclass
class ScenarioComparisonResult:
    """Result of comparing a base calculation with a what-if scenario."""
    base: CostBreakdown
    scenario: CostBreakdown
    deltas: List[ScenarioDeltaLineItem]
    total_delta: float
    region_changed: bool
    assumptions: List[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        # Sort deltas by absolute delta descending
        sorted_deltas = sorted(
            self.deltas,
            key=lambda x: abs(x.delta),
            reverse=True
        )

        return {
            "region_changed": self.region_changed,
            "assumptions": self.assumptions,
            "base": self.base.to_dict(),
            "scenario": self.scenario.to_dict(),
            "deltas": [delta.to_dict() for delta in sorted_deltas],
            "total_delta": round(self.total_delta, 2),
        }
