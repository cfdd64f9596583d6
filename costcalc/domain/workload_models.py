"""
Domain models for workload sizing inputs.
"""
from typing import Dict, Any
from dataclasses import dataclass
from enum import Enum

from costcalc.utils.parsing import to_non_negative_int, to_non_negative_float


class Environment(Enum):
    """Deployment environment, lowest first."""
    DEV = "dev"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, raw: Any) -> "Environment":
        """Parse an environment name, falling back to DEV for anything unrecognized."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        return cls.DEV


@dataclass(frozen=True)
class WorkloadParameters:
    """
    Sizing inputs for one calculation.

    Values are assumed sanitized (non-negative). Use from_raw() at the input
    boundary to get that guarantee for user-typed values.
    """
    daily_users: int = 0
    peak_tps: int = 0
    data_volume_gb: float = 0.0
    environment: Environment = Environment.DEV

    @classmethod
    def from_raw(
        cls,
        daily_users: Any = None,
        peak_tps: Any = None,
        data_volume_gb: Any = None,
        environment: Any = None
    ) -> "WorkloadParameters":
        """
        Build parameters from raw input values.

        Unparseable or negative numbers become 0 and an unknown environment
        becomes dev. Never raises.
        """
        return cls(
            daily_users=to_non_negative_int(daily_users),
            peak_tps=to_non_negative_int(peak_tps),
            data_volume_gb=to_non_negative_float(data_volume_gb),
            environment=Environment.parse(environment),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "daily_users": self.daily_users,
            "peak_tps": self.peak_tps,
            "data_volume_gb": self.data_volume_gb,
            "environment": self.environment.value,
        }
