"""
Shared pytest fixtures for calculator tests.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient

from costcalc.domain.workload_models import Environment, WorkloadParameters
from costcalc.main import app
from costcalc.pricing.price_table import PriceTable, get_price_table
from costcalc.services.sizing_engine import SizingEngine


@pytest.fixture
def price_table():
    """Fresh baseline price table."""
    return PriceTable()


@pytest.fixture
def engine():
    """Sizing engine reporting EUR."""
    return SizingEngine(currency="EUR")


@pytest.fixture
def scenario_a_params():
    """Small production workload."""
    return WorkloadParameters(
        daily_users=1000,
        peak_tps=500,
        data_volume_gb=100.0,
        environment=Environment.PRODUCTION,
    )


@pytest.fixture
def client(price_table):
    """FastAPI test client bound to an isolated price table."""
    app.dependency_overrides[get_price_table] = lambda: price_table
    yield TestClient(app)
    app.dependency_overrides.clear()
