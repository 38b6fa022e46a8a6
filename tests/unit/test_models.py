"""Tests for snapshot and quote request models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from oracle_amm.models import (
    PoolSnapshot,
    PoolSnapshotV1,
    PoolSnapshotV2,
    QuoteRequest,
    QuoteResponse,
)
from oracle_amm.models.types import (
    UINT256_MAX,
    normalize_address,
    validate_uint256,
)
from tests.helpers import DAI, ONE_ETHER, Q64, WETH, make_v1_snapshot, make_v2_snapshot


class TestValidateUint256:
    def test_int_and_string(self):
        assert validate_uint256(5) == 5
        assert validate_uint256("123456789012345678901234567890") == 123456789012345678901234567890

    def test_bounds(self):
        assert validate_uint256(str(UINT256_MAX)) == UINT256_MAX
        with pytest.raises(ValueError, match="overflow"):
            validate_uint256(UINT256_MAX + 1)
        with pytest.raises(ValueError, match="negative"):
            validate_uint256("-1")

    @pytest.mark.parametrize("value", [True, 1.5, "1e18", "0x10", None])
    def test_rejected(self, value):
        with pytest.raises(ValueError):
            validate_uint256(value)


class TestAddresses:
    def test_normalize(self):
        assert normalize_address("0xABCdef") == "0xabcdef"
        assert normalize_address("abc") == "0xabc"


class TestPoolSnapshot:
    adapter = TypeAdapter(PoolSnapshot)

    def test_discriminates_v1(self):
        snapshot = self.adapter.validate_python(make_v1_snapshot())
        assert isinstance(snapshot, PoolSnapshotV1)
        assert snapshot.reserve0 == 100 * ONE_ETHER
        assert snapshot.oracle_price is not None

    def test_discriminates_v2(self):
        snapshot = self.adapter.validate_python(make_v2_snapshot())
        assert isinstance(snapshot, PoolSnapshotV2)
        assert snapshot.lambda_ == 0
        assert snapshot.price0 == 2 * Q64
        assert snapshot.update_feed_data == "0x"

    def test_snake_case_population(self):
        snapshot = PoolSnapshotV2(
            version="v2",
            address=WETH,
            token0=WETH,
            token1=DAI,
            reserve0=1,
            reserve1=1,
            token0_decimals=6,
        )
        assert snapshot.token0_decimals == 6
        assert snapshot.price0 is None

    def test_unknown_version_rejected(self):
        with pytest.raises(ValidationError):
            self.adapter.validate_python(make_v2_snapshot(version="v3"))

    def test_decimals_must_fit_uint8(self):
        with pytest.raises(ValidationError):
            self.adapter.validate_python(make_v2_snapshot(token0Decimals=256))

    def test_bad_address_rejected(self):
        with pytest.raises(ValidationError):
            self.adapter.validate_python(make_v1_snapshot(token0="0x1234"))

    def test_negative_reserve_rejected(self):
        with pytest.raises(ValidationError):
            self.adapter.validate_python(make_v1_snapshot(reserve0="-5"))


class TestQuoteModels:
    def test_quote_request_aliases(self):
        request = QuoteRequest.model_validate(
            {"pool": make_v2_snapshot(), "tokenIn": WETH, "tokenOut": DAI, "amount": "10"}
        )
        assert request.token_in == WETH
        assert request.amount == 10
        assert isinstance(request.pool, PoolSnapshotV2)

    def test_quote_response_serializes_camel_case(self):
        response = QuoteResponse(
            pool=WETH, token_in=WETH, token_out=DAI, amount_in="1", amount_out="2"
        )
        data = response.model_dump(by_alias=True)
        assert data["amountIn"] == "1"
        assert data["tokenOut"] == DAI
