"""
Price table holding the current unit price of every billable resource.

Prices are resolved from the baseline catalog, a regional multiplier and
per-key manual overrides. All mutation goes through apply_region() and
set_price(); the sizing engine reads immutable snapshots.
"""
import copy
import logging
from typing import Any, Dict, List, Optional, Set

from costcalc.core.config import config
from costcalc.domain.pricing_models import PriceSnapshot, PriceValidationFailure
from costcalc.pricing.baseline import DEFAULT_PRICES, RESOURCE_PRICES_BY_KEY, aws_billed_keys
from costcalc.pricing.region_map import BASELINE_REGION, get_region_multiplier, is_known_region
from costcalc.utils.parsing import coerce_price


logger = logging.getLogger(__name__)


class PricingError(Exception):
    """Base class for price table errors."""
    pass


class UnknownPriceKeyError(PricingError):
    """Raised when a price key is not in the catalog."""

    def __init__(self, key: str):
        super().__init__(f"Unknown price key: {key}")
        self.key = key


class PriceTable:
    """
    Mutable, session-lived set of unit prices.

    A region switch regenerates every AWS-billed price from baseline and
    discards manual overrides for those keys. Third-party prices are never
    touched by a region switch.
    """

    def __init__(self, region: str = BASELINE_REGION, baseline: Optional[Dict[str, float]] = None):
        """
        Initialize price table.

        Args:
            region: Initial region (default: baseline region)
            baseline: Baseline prices by key (default: catalog defaults)
        """
        self._baseline: Dict[str, float] = dict(baseline if baseline is not None else DEFAULT_PRICES)
        self._prices: Dict[str, float] = dict(self._baseline)
        self._overridden: Set[str] = set()
        self._validation_failures: List[PriceValidationFailure] = []
        self._region = BASELINE_REGION
        self._multiplier = 1.0
        self.apply_region(region)

    @property
    def region(self) -> str:
        return self._region

    @property
    def multiplier(self) -> float:
        return self._multiplier

    @property
    def validation_failures(self) -> List[PriceValidationFailure]:
        """Rejected manual prices, oldest first."""
        return list(self._validation_failures)

    def apply_region(self, region: str) -> None:
        """
        Re-level AWS-billed prices for a region.

        Unknown regions use a multiplier of 1.0. Overrides of AWS-billed keys
        are discarded; third-party prices and their overrides are kept.

        Args:
            region: AWS region code (e.g., 'eu-west-1')
        """
        if not is_known_region(region):
            logger.warning("Unknown region %r, using identity price multiplier", region)

        multiplier = get_region_multiplier(region)
        for key in aws_billed_keys():
            if key in self._baseline:
                self._prices[key] = self._baseline[key] * multiplier
                self._overridden.discard(key)

        self._region = region
        self._multiplier = multiplier
        logger.info("Applied region %s (multiplier %.2f)", region, multiplier)

    def set_price(self, key: str, value: Any) -> Optional[PriceValidationFailure]:
        """
        Manually override one price.

        Non-numeric, non-finite and negative values are stored as 0 and
        recorded as a validation failure.

        Args:
            key: Price key (e.g., 'eks.cluster')
            value: Number or raw string typed by the operator

        Returns:
            The recorded PriceValidationFailure, or None if the value was accepted

        Raises:
            UnknownPriceKeyError: If the key is not in the catalog
        """
        if key not in RESOURCE_PRICES_BY_KEY:
            raise UnknownPriceKeyError(key)

        price, reason = coerce_price(value)
        failure = None
        if reason is not None:
            failure = PriceValidationFailure(key=key, raw_value=str(value), reason=reason)
            self._validation_failures.append(failure)
            logger.warning("Rejected price %r for %s: %s; using 0", value, key, reason)

        self._prices[key] = price
        self._overridden.add(key)
        logger.info("Price override %s = %s", key, price)
        return failure

    def get_price(self, key: str) -> float:
        """
        Get the current price for a key.

        Raises:
            UnknownPriceKeyError: If the key is not in the table
        """
        try:
            return self._prices[key]
        except KeyError:
            raise UnknownPriceKeyError(key) from None

    def overridden_keys(self) -> Set[str]:
        """Keys currently holding a manual override."""
        return set(self._overridden)

    def clear_validation_failures(self) -> None:
        self._validation_failures.clear()

    def reset(self) -> None:
        """Restore baseline prices for the baseline region, dropping every override."""
        self._prices = dict(self._baseline)
        self._overridden.clear()
        self._validation_failures.clear()
        self.apply_region(BASELINE_REGION)

    def copy(self) -> "PriceTable":
        """Independent copy, used for what-if calculations that must not touch this table."""
        return copy.deepcopy(self)

    def snapshot(self) -> PriceSnapshot:
        """
        Get an immutable copy of all current prices.

        Returns:
            PriceSnapshot that later mutations of this table do not affect
        """
        return PriceSnapshot(
            prices=self._prices,
            region=self._region,
            multiplier=self._multiplier,
            overridden_keys=frozenset(self._overridden),
        )


# Global singleton instance
_price_table: Optional[PriceTable] = None


def get_price_table() -> PriceTable:
    """
    Get the process-wide price table used by the HTTP surface.

    Returns:
        PriceTable instance
    """
    global _price_table
    if _price_table is None:
        _price_table = PriceTable(region=config.DEFAULT_REGION)
    return _price_table
