"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from oracle_amm.amm.brownfi import BrownFiV1Math, BrownFiV2Math
from oracle_amm.api.main import app
from oracle_amm.pools.types import PoolStateV1, PoolStateV2
from tests.helpers import DAI, V1_PAIR, V2_PAIR, WETH, make_v1_pool, make_v2_pool


@pytest.fixture
def v1_math() -> BrownFiV1Math:
    """V1 math with upstream placeholders disabled."""
    return BrownFiV1Math()


@pytest.fixture
def v2_math() -> BrownFiV2Math:
    return BrownFiV2Math()


@pytest.fixture
def v1_pool() -> PoolStateV1:
    """The V1 reference pool (100/200 reserves, kappa 2, price 2, 0.25% fee)."""
    return make_v1_pool()


@pytest.fixture
def v2_pool() -> PoolStateV2:
    """The V2 reference pool (100/200 reserves, kappa 2, prices 2/1, 0.25% fee, no skew)."""
    return make_v2_pool()


@pytest.fixture
def weth_dai_v1_pool() -> PoolStateV1:
    """A V1 reference pool with real token addresses, for address-based quoting."""
    return make_v1_pool(address=V1_PAIR, token0=WETH, token1=DAI)


@pytest.fixture
def weth_dai_v2_pool() -> PoolStateV2:
    """A V2 reference pool with real token addresses, for address-based quoting."""
    return make_v2_pool(address=V2_PAIR, token0=WETH, token1=DAI)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()
