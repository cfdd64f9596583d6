"""
Baseline price catalog.
Default monthly prices for the baseline region (eu-central-1), in EUR.
"""
from typing import Dict, List

from costcalc.domain.pricing_models import PriceFamily, ResourcePrice


# Price keys
EKS_CLUSTER = "eks.cluster"
EKS_NODE_SMALL = "eks.nodeGroup.small"
EKS_NODE_MEDIUM = "eks.nodeGroup.medium"
EKS_NODE_LARGE = "eks.nodeGroup.large"
AURORA_SMALL = "aurora.small"
AURORA_MEDIUM = "aurora.medium"
AURORA_STORAGE = "aurora.storage"
MONGODB_M20 = "mongodb.m20"
MONGODB_M40 = "mongodb.m40"
REDIS_SMALL = "redis.small"
REDIS_MULTI = "redis.multi"
KAFKA_DEV = "kafka.dev"
KAFKA_PROD = "kafka.prod"
ALB = "alb"
DATA_TRANSFER = "dataTransfer"
WSO2_MICRO = "thirdParty.wso2_micro"
WSO2_STANDARD = "thirdParty.wso2_standard"
AUTH0_ESSENTIALS = "thirdParty.auth0_essentials"
AUTH0_PROFESSIONAL = "thirdParty.auth0_professional"
CLOUDFLARE_PRO = "thirdParty.cloudflare_pro"
CLOUDFLARE_BUSINESS = "thirdParty.cloudflare_business"


RESOURCE_PRICES: List[ResourcePrice] = [
    # EKS
    ResourcePrice(EKS_CLUSTER, PriceFamily.COMPUTE, "EKS Cluster", "cluster-month", 73.0),
    ResourcePrice(EKS_NODE_SMALL, PriceFamily.COMPUTE, "EKS Node (t3.large)", "node-month", 55.0),
    ResourcePrice(EKS_NODE_MEDIUM, PriceFamily.COMPUTE, "EKS Node (t3.xlarge)", "node-month", 110.0),
    ResourcePrice(EKS_NODE_LARGE, PriceFamily.COMPUTE, "EKS Node (c5.2xlarge)", "node-month", 352.0),

    # Aurora
    ResourcePrice(AURORA_SMALL, PriceFamily.RELATIONAL, "Aurora db.t3.medium", "instance-month", 330.0),
    ResourcePrice(AURORA_MEDIUM, PriceFamily.RELATIONAL, "Aurora db.t3.large", "instance-month", 660.0),
    ResourcePrice(AURORA_STORAGE, PriceFamily.RELATIONAL, "Aurora Storage", "GB-month", 0.09, decimals=3),

    # MongoDB Atlas
    ResourcePrice(MONGODB_M20, PriceFamily.DOCUMENT, "MongoDB Atlas M20", "cluster-month", 205.0),
    ResourcePrice(MONGODB_M40, PriceFamily.DOCUMENT, "MongoDB Atlas M40", "cluster-month", 880.0),

    # ElastiCache Redis
    ResourcePrice(REDIS_SMALL, PriceFamily.CACHE, "Redis cache.t3.micro", "month", 33.0),
    ResourcePrice(REDIS_MULTI, PriceFamily.CACHE, "Redis Multi-AZ", "month", 66.0),

    # MSK Kafka
    ResourcePrice(KAFKA_DEV, PriceFamily.STREAMING, "Kafka single broker (t3.small)", "month", 14.0),
    ResourcePrice(KAFKA_PROD, PriceFamily.STREAMING, "Kafka 3 x m5.large", "month", 420.0),

    # ALB & Data Transfer
    ResourcePrice(ALB, PriceFamily.LOAD_BALANCER, "Application Load Balancer", "month", 18.0),
    ResourcePrice(DATA_TRANSFER, PriceFamily.EGRESS, "Data Transfer Out", "GB", 0.105, decimals=3),

    # Third-party SaaS (global, not region scaled)
    ResourcePrice(WSO2_MICRO, PriceFamily.THIRD_PARTY, "WSO2 API Manager Micro", "month", 550.0, aws_billed=False),
    ResourcePrice(WSO2_STANDARD, PriceFamily.THIRD_PARTY, "WSO2 API Manager Standard", "month", 1833.0, aws_billed=False),
    ResourcePrice(AUTH0_ESSENTIALS, PriceFamily.THIRD_PARTY, "Auth0 Essentials", "month", 32.0, aws_billed=False),
    ResourcePrice(AUTH0_PROFESSIONAL, PriceFamily.THIRD_PARTY, "Auth0 Professional", "month", 220.0, aws_billed=False),
    ResourcePrice(CLOUDFLARE_PRO, PriceFamily.THIRD_PARTY, "Cloudflare Pro", "month", 23.0, aws_billed=False),
    ResourcePrice(CLOUDFLARE_BUSINESS, PriceFamily.THIRD_PARTY, "Cloudflare Business", "month", 184.0, aws_billed=False),
]

RESOURCE_PRICES_BY_KEY: Dict[str, ResourcePrice] = {price.key: price for price in RESOURCE_PRICES}

DEFAULT_PRICES: Dict[str, float] = {price.key: price.baseline for price in RESOURCE_PRICES}


def get_resource_price(key: str) -> ResourcePrice:
    """
    Look up the catalog entry for a price key.

    Raises:
        KeyError: If the key is not in the catalog
    """
    return RESOURCE_PRICES_BY_KEY[key]


def aws_billed_keys() -> List[str]:
    """Keys whose prices scale with the selected region."""
    return [price.key for price in RESOURCE_PRICES if price.aws_billed]


def third_party_keys() -> List[str]:
    """Keys for region-invariant third-party SaaS fees."""
    return [price.key for price in RESOURCE_PRICES if not price.aws_billed]
