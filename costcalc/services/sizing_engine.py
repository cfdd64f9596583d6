"""
Sizing engine.
Maps workload parameters to resource tiers and prices them against a snapshot.
"""
from typing import List, Optional, Tuple
import logging
import math

from costcalc.core.config import config
from costcalc.domain.cost_models import CostBreakdown, CostLineItem, SizingDecisions, FIXED, VARIABLE
from costcalc.domain.pricing_models import PriceSnapshot
from costcalc.domain.scenario_models import ScenarioDeltaLineItem, ScenarioComparisonResult
from costcalc.domain.workload_models import Environment, WorkloadParameters
from costcalc.pricing import baseline as keys
from costcalc.pricing.price_table import PriceTable


logger = logging.getLogger(__name__)


# Compute tier upper bounds (inclusive) on peak TPS
SMALL_TIER_MAX_TPS = 1000
MEDIUM_TIER_MAX_TPS = 5000

# Peak TPS one node of each tier can serve
NODE_CAPACITY_TPS = {
    "small": 1000,
    "medium": 2000,
    "large": 5000,
}

NODE_PRICE_KEYS = {
    "small": keys.EKS_NODE_SMALL,
    "medium": keys.EKS_NODE_MEDIUM,
    "large": keys.EKS_NODE_LARGE,
}

# Daily users up to which a single small database and cache node suffice
SMALL_USER_BASE_MAX = 5000
USERS_PER_MEDIUM_DB_INSTANCE = 10000

# Data volume up to which the M20 document tier suffices
DOCUMENT_M20_MAX_GB = 500

DEV_STREAMING_ENVIRONMENTS = {Environment.DEV, Environment.TEST}

# Fixed third-party selection: API management, identity, CDN
THIRD_PARTY_SELECTION: List[Tuple[str, str, str]] = [
    ("thirdParty.wso2", "WSO2 API Manager", keys.WSO2_STANDARD),
    ("thirdParty.auth0", "Auth0 Essentials", keys.AUTH0_ESSENTIALS),
    ("thirdParty.cloudflare", "Cloudflare Pro", keys.CLOUDFLARE_PRO),
]


class SizingEngineError(Exception):
    """Raised when a snapshot is missing a price the sizing rules need."""
    pass


def select_node_tier(peak_tps: int) -> str:
    """Pick the compute node class for a peak TPS; boundaries go to the cheaper tier."""
    if peak_tps <= SMALL_TIER_MAX_TPS:
        return "small"
    if peak_tps <= MEDIUM_TIER_MAX_TPS:
        return "medium"
    return "large"


def node_count_for(tier: str, peak_tps: int) -> int:
    """Number of nodes of a tier needed for a peak TPS (at least one)."""
    return max(1, math.ceil(peak_tps / NODE_CAPACITY_TPS[tier]))


def relational_sizing(daily_users: int) -> Tuple[str, int]:
    """
    Pick the relational instance tier.

    Returns:
        Tuple of (tier, instance_count)
    """
    if daily_users <= SMALL_USER_BASE_MAX:
        return "small", 1
    return "medium", max(1, math.ceil(daily_users / USERS_PER_MEDIUM_DB_INSTANCE))


def select_document_tier(data_volume_gb: float) -> str:
    return "M20" if data_volume_gb <= DOCUMENT_M20_MAX_GB else "M40"


def select_cache_topology(daily_users: int) -> str:
    return "single" if daily_users <= SMALL_USER_BASE_MAX else "multi"


def select_streaming_tier(environment: Environment) -> str:
    return "dev" if environment in DEV_STREAMING_ENVIRONMENTS else "prod"


class SizingEngine:
    """
    Stateless calculator from workload parameters and prices to a cost breakdown.

    Inputs are assumed sanitized; see WorkloadParameters.from_raw().
    """

    def __init__(self, currency: Optional[str] = None):
        """
        Args:
            currency: Currency code reported on breakdowns (default: configured currency)
        """
        self.currency = currency or config.CURRENCY

    def decide(self, params: WorkloadParameters) -> SizingDecisions:
        """Apply the tiering rules without pricing anything."""
        node_tier = select_node_tier(params.peak_tps)
        relational_tier, relational_count = relational_sizing(params.daily_users)
        return SizingDecisions(
            node_tier=node_tier,
            node_count=node_count_for(node_tier, params.peak_tps),
            relational_tier=relational_tier,
            relational_instance_count=relational_count,
            document_tier=select_document_tier(params.data_volume_gb),
            cache_topology=select_cache_topology(params.daily_users),
            streaming_tier=select_streaming_tier(params.environment),
        )

    def calculate(self, params: WorkloadParameters, prices: PriceSnapshot) -> CostBreakdown:
        """
        Calculate the monthly cost breakdown.

        Args:
            params: Sanitized workload parameters
            prices: Price snapshot to price resources with

        Returns:
            CostBreakdown with one line item per resource and fixed/variable totals

        Raises:
            SizingEngineError: If the snapshot lacks a required price key
        """
        decisions = self.decide(params)

        def price(key: str) -> float:
            try:
                return prices[key]
            except KeyError:
                raise SizingEngineError(f"Price snapshot is missing {key}") from None

        def item(key, label, price_key, cost_class, quantity, tier=None):
            unit_price = price(price_key)
            return CostLineItem(
                key=key,
                label=label,
                price_key=price_key,
                cost_class=cost_class,
                quantity=quantity,
                unit_price=unit_price,
                subtotal=quantity * unit_price,
                tier=tier,
            )

        relational_key = keys.AURORA_SMALL if decisions.relational_tier == "small" else keys.AURORA_MEDIUM
        document_key = keys.MONGODB_M20 if decisions.document_tier == "M20" else keys.MONGODB_M40
        cache_key = keys.REDIS_SMALL if decisions.cache_topology == "single" else keys.REDIS_MULTI
        streaming_key = keys.KAFKA_DEV if decisions.streaming_tier == "dev" else keys.KAFKA_PROD

        line_items = [
            item("eks.cluster", "EKS Cluster", keys.EKS_CLUSTER, VARIABLE, 1),
            item("eks.nodes", "EKS Nodes", NODE_PRICE_KEYS[decisions.node_tier], VARIABLE,
                 decisions.node_count, decisions.node_tier),
            item("aurora.instances", "Aurora Instance(s)", relational_key, VARIABLE,
                 decisions.relational_instance_count, decisions.relational_tier),
            item("aurora.storage", "Aurora Storage", keys.AURORA_STORAGE, VARIABLE, params.data_volume_gb),
            item("mongodb", "MongoDB Atlas", document_key, VARIABLE, 1, decisions.document_tier),
            item("redis", "Redis", cache_key, VARIABLE, 1, decisions.cache_topology),
            item("kafka", "Kafka (MSK)", streaming_key, VARIABLE, 1, decisions.streaming_tier),
            item("dataTransfer", "Data Transfer", keys.DATA_TRANSFER, VARIABLE, params.data_volume_gb),
            item("alb", "Load Balancer (ALB)", keys.ALB, FIXED, 1),
        ]
        for key, label, price_key in THIRD_PARTY_SELECTION:
            line_items.append(item(key, label, price_key, FIXED, 1))

        fixed_total = sum(i.subtotal for i in line_items if i.cost_class == FIXED)
        variable_total = sum(i.subtotal for i in line_items if i.cost_class == VARIABLE)
        grand_total = fixed_total + variable_total

        logger.debug(
            "Calculated %s: fixed=%.2f variable=%.2f total=%.2f",
            decisions, fixed_total, variable_total, grand_total
        )

        return CostBreakdown(
            parameters=params,
            decisions=decisions,
            line_items=tuple(line_items),
            fixed_total=fixed_total,
            variable_total=variable_total,
            grand_total=grand_total,
            region=prices.region,
            currency=self.currency,
        )

    def compare(
        self,
        base_params: WorkloadParameters,
        scenario_params: WorkloadParameters,
        table: PriceTable,
        scenario_region: Optional[str] = None
    ) -> ScenarioComparisonResult:
        """
        Compare the current calculation with a what-if scenario.

        The scenario is priced on a scratch copy of the table when a region
        is given, so the live table is never changed.

        Args:
            base_params: Parameters for the base calculation
            scenario_params: Parameters for the scenario
            table: Live price table
            scenario_region: Optional region to price the scenario in

        Returns:
            ScenarioComparisonResult with both breakdowns and per-item deltas
        """
        base_snapshot = table.snapshot()
        base = self.calculate(base_params, base_snapshot)

        assumptions = []
        region_changed = False
        scenario_snapshot = base_snapshot
        if scenario_region and scenario_region != base_snapshot.region:
            region_changed = True
            scratch = table.copy()
            scratch.apply_region(scenario_region)
            scenario_snapshot = scratch.snapshot()
            assumptions.append(
                f"Region overridden from {base_snapshot.region} to {scenario_region}"
            )
            dropped = sorted(base_snapshot.overridden_keys - scenario_snapshot.overridden_keys)
            if dropped:
                assumptions.append(
                    f"Manual prices reset to regional baseline: {', '.join(dropped)}"
                )

        base_values = base_params.to_dict()
        for name, value in scenario_params.to_dict().items():
            if value != base_values[name]:
                assumptions.append(f"{name} overridden from {base_values[name]} to {value}")

        scenario = self.calculate(scenario_params, scenario_snapshot)

        return ScenarioComparisonResult(
            base=base,
            scenario=scenario,
            deltas=self._calculate_deltas(base, scenario),
            total_delta=scenario.grand_total - base.grand_total,
            region_changed=region_changed,
            assumptions=assumptions,
        )

    def _calculate_deltas(
        self,
        base: CostBreakdown,
        scenario: CostBreakdown
    ) -> List[ScenarioDeltaLineItem]:
        """
        Calculate deltas between base and scenario line items, matched by key.

        Both breakdowns always carry the same line item keys.
        """
        scenario_map = {item.key: item for item in scenario.line_items}

        deltas = []
        for base_item in base.line_items:
            scenario_item = scenario_map[base_item.key]
            delta = scenario_item.subtotal - base_item.subtotal

            delta_percent = None
            if base_item.subtotal > 0:
                delta_percent = (delta / base_item.subtotal) * 100

            deltas.append(ScenarioDeltaLineItem(
                key=base_item.key,
                label=base_item.label,
                base_subtotal=base_item.subtotal,
                scenario_subtotal=scenario_item.subtotal,
                delta=delta,
                delta_percent=delta_percent
            ))

        return deltas


def recalculate(params: WorkloadParameters, table: PriceTable) -> CostBreakdown:
    """
    Recompute the full breakdown from the table's current prices.

    Args:
        params: Sanitized workload parameters
        table: Price table to snapshot

    Returns:
        CostBreakdown
    """
    return SizingEngine().calculate(params, table.snapshot())
