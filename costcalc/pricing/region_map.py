"""
AWS region code to price multiplier mapping.
Baseline prices are quoted for Frankfurt; other regions scale them.
"""
from typing import Dict, Optional, List


BASELINE_REGION = "eu-central-1"

# Multiplier applied to every AWS-billed baseline price
REGION_MULTIPLIERS: Dict[str, float] = {
    "eu-central-1": 1.00,    # baseline (Frankfurt)
    "us-east-1": 0.95,       # ~5% cheaper
    "eu-west-1": 1.02,       # ~2% more
    "ap-southeast-1": 1.08,  # ~8% more
}

# Human-readable names for the region selector
REGION_NAMES: Dict[str, str] = {
    "eu-central-1": "Europe (Frankfurt)",
    "us-east-1": "US East (N. Virginia)",
    "eu-west-1": "Europe (Ireland)",
    "ap-southeast-1": "Asia Pacific (Singapore)",
}


def is_known_region(region_code: Optional[str]) -> bool:
    """Check whether a region code has a defined multiplier."""
    return region_code in REGION_MULTIPLIERS


def get_region_multiplier(region_code: Optional[str]) -> float:
    """
    Get the price multiplier for a region code.

    Args:
        region_code: AWS region code (e.g., 'us-east-1')

    Returns:
        Multiplier for the region, or 1.0 if the region is not defined
    """
    return REGION_MULTIPLIERS.get(region_code, 1.0)


def get_region_name(region_code: str) -> Optional[str]:
    """
    Get the display name for a region code.

    Returns:
        Region name (e.g., 'Europe (Ireland)'), or None if not found
    """
    return REGION_NAMES.get(region_code)


def get_all_regions() -> List[str]:
    """
    Get all supported region codes.

    Returns:
        List of region codes, baseline first
    """
    return list(REGION_MULTIPLIERS.keys())
