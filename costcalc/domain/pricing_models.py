"""
Domain models for unit prices.
Defines priced resources, immutable price snapshots and validation failures.
"""
from typing import Dict, Any, FrozenSet, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class PriceFamily(Enum):
    """Resource families a price belongs to."""
    COMPUTE = "compute"
    RELATIONAL = "relational"
    DOCUMENT = "document"
    CACHE = "cache"
    STREAMING = "streaming"
    LOAD_BALANCER = "load_balancer"
    EGRESS = "egress"
    THIRD_PARTY = "third_party"


@dataclass(frozen=True)
class ResourcePrice:
    """Catalog entry for a single billable unit."""
    key: str  # e.g., "eks.nodeGroup.medium"
    family: PriceFamily
    label: str
    unit: str  # e.g., "node-month", "GB-month"
    baseline: float
    aws_billed: bool = True  # Third-party SaaS prices have no regional variation
    decimals: int = 2  # Display precision

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "key": self.key,
            "family": self.family.value,
            "label": self.label,
            "unit": self.unit,
            "baseline": self.baseline,
            "aws_billed": self.aws_billed,
            "decimals": self.decimals,
        }


@dataclass(frozen=True)
class PriceSnapshot:
    """
    Read-only copy of a price table at one point in time.

    The sizing engine only ever sees snapshots, so a table mutated after the
    snapshot was taken cannot affect a calculation in progress.
    """
    prices: Mapping[str, float]
    region: str
    multiplier: float
    overridden_keys: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # Detach from the caller's dict and forbid item assignment
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))
        object.__setattr__(self, "overridden_keys", frozenset(self.overridden_keys))

    def __getitem__(self, key: str) -> float:
        return self.prices[key]

    def __contains__(self, key: str) -> bool:
        return key in self.prices

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "region": self.region,
            "multiplier": self.multiplier,
            "prices": dict(self.prices),
            "overridden_keys": sorted(self.overridden_keys),
        }


@dataclass
class PriceValidationFailure:
    """Records a manual price that was rejected and coerced to zero."""
    key: str
    raw_value: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "key": self.key,
            "raw_value": self.raw_value,
            "reason": self.reason,
        }
