"""Tests for BrownFi V1 pool math.

Reference values come from the V1 library's own checks: reserves 100/200,
kappa 2 (Q128), oracle price 2 (Q128), 0.25% fee.
"""

import pytest

from oracle_amm.amm.brownfi import (
    BrownFiV1Math,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    QuoteNotImplemented,
)
from oracle_amm.safe_int import DivisionByZero, Underflow
from tests.helpers import ONE_ETHER, Q128, make_v1_pool


class TestV1QuoteByOutput:
    """Tests for BrownFiV1Math.quote_by_output."""

    def test_reference_zero_to_one(self, v1_math, v1_pool):
        assert v1_math.quote_by_output(v1_pool, True, 10 * ONE_ETHER) == 5277044854881266492

    def test_reference_one_to_zero(self, v1_math, v1_pool):
        assert v1_math.quote_by_output(v1_pool, False, 10 * ONE_ETHER) == 22284122562674094710

    def test_deterministic(self, v1_math, v1_pool):
        first = v1_math.quote_by_output(v1_pool, True, 7 * ONE_ETHER)
        second = v1_math.quote_by_output(v1_pool, True, 7 * ONE_ETHER)
        assert first == second

    def test_strictly_monotonic_in_output(self, v1_math, v1_pool):
        amounts = [ONE_ETHER, 5 * ONE_ETHER, 20 * ONE_ETHER, 80 * ONE_ETHER, 150 * ONE_ETHER]
        quotes = [v1_math.quote_by_output(v1_pool, True, a) for a in amounts]
        assert quotes == sorted(quotes)
        assert len(set(quotes)) == len(quotes)

    def test_zero_kappa_means_one_unit(self, v1_math):
        """kappa == 0 falls back to Q128."""
        defaulted = make_v1_pool(kappa=0)
        explicit = make_v1_pool(kappa=Q128)
        for zero_to_one in (True, False):
            assert v1_math.quote_by_output(
                defaulted, zero_to_one, 10 * ONE_ETHER
            ) == v1_math.quote_by_output(explicit, zero_to_one, 10 * ONE_ETHER)

    def test_higher_kappa_costs_more(self, v1_math):
        flat = make_v1_pool(kappa=Q128)
        steep = make_v1_pool(kappa=4 * Q128)
        assert v1_math.quote_by_output(steep, True, 10 * ONE_ETHER) > v1_math.quote_by_output(
            flat, True, 10 * ONE_ETHER
        )

    @pytest.mark.parametrize("amount", [0, -1])
    def test_non_positive_output_rejected(self, v1_math, v1_pool, amount):
        with pytest.raises(InsufficientOutputAmount):
            v1_math.quote_by_output(v1_pool, True, amount)

    @pytest.mark.parametrize("reserve0,reserve1", [(0, 200 * ONE_ETHER), (100 * ONE_ETHER, 0)])
    def test_empty_reserve_rejected(self, v1_math, reserve0, reserve1):
        pool = make_v1_pool(reserve0=reserve0, reserve1=reserve1)
        with pytest.raises(InsufficientLiquidity):
            v1_math.quote_by_output(pool, True, ONE_ETHER)

    def test_ninety_percent_boundary_without_fee(self, v1_math):
        """Output must stay strictly below 90% of the output reserve."""
        pool = make_v1_pool(fee=0)
        with pytest.raises(InsufficientOutputAmount):
            v1_math.quote_by_output(pool, True, 180 * ONE_ETHER)
        assert v1_math.quote_by_output(pool, True, 180 * ONE_ETHER - 1) > 0

    def test_ninety_percent_boundary_includes_fee(self, v1_math, v1_pool):
        """The cap applies to the fee-grossed output."""
        with pytest.raises(InsufficientOutputAmount):
            v1_math.quote_by_output(v1_pool, True, 1799 * ONE_ETHER // 10)

    def test_error_message_mirrors_revert_reason(self, v1_math, v1_pool):
        with pytest.raises(InsufficientOutputAmount, match="INSUFFICIENT_OUTPUT_AMOUNT"):
            v1_math.quote_by_output(v1_pool, True, 0)

    def test_full_fee_is_degenerate(self, v1_math):
        with pytest.raises(DivisionByZero):
            v1_math.quote_by_output(make_v1_pool(fee=10_000), True, ONE_ETHER)

    def test_fee_above_denominator_underflows(self, v1_math):
        with pytest.raises(Underflow):
            v1_math.quote_by_output(make_v1_pool(fee=10_001), True, ONE_ETHER)

    def test_zero_oracle_price_is_degenerate(self, v1_math):
        with pytest.raises(DivisionByZero):
            v1_math.quote_by_output(make_v1_pool(oracle_price=0), True, ONE_ETHER)


class TestV1Placeholders:
    """Exact input and spot price have no V1 formula."""

    def test_quote_by_input_not_implemented(self, v1_math, v1_pool):
        with pytest.raises(QuoteNotImplemented):
            v1_math.quote_by_input(v1_pool, True, ONE_ETHER)

    def test_spot_price_not_implemented(self, v1_math, v1_pool):
        with pytest.raises(QuoteNotImplemented):
            v1_math.spot_price(v1_pool, False)

    def test_placeholder_values_when_enabled(self, v1_pool):
        math = BrownFiV1Math(placeholders=True)
        assert math.quote_by_input(v1_pool, True, 123) == 123
        assert math.spot_price(v1_pool, True) == 1.0

    def test_placeholders_do_not_change_exact_output(self, v1_math, v1_pool):
        math = BrownFiV1Math(placeholders=True)
        assert math.quote_by_output(v1_pool, True, 10 * ONE_ETHER) == v1_math.quote_by_output(
            v1_pool, True, 10 * ONE_ETHER
        )
