"""
Unit tests for listing terms, tax terms and preset init data builders.
"""

from decimal import Decimal

import pytest
from eth_abi import decode
from eth_utils import function_signature_to_4byte_selector

from conftest import CONTRACT, ORIGINAL
from iqspace.constants import (
    LISTING_STRATEGY_IDS,
    TAX_STRATEGY_IDS,
    ListingStrategy,
    TaxStrategy,
)
from iqspace.errors import TranslationError, UnknownStrategyError
from iqspace.terms import (
    convert_percentage,
    convert_to_wei,
    decode_listing_terms,
    decode_tax_terms,
    make_fixed_rate_listing_terms,
    make_fixed_rate_listing_terms_from_unconverted,
    make_fixed_rate_tax_terms,
    make_fixed_rate_tax_terms_from_unconverted,
    make_fixed_rate_with_reward_listing_terms,
    make_fixed_rate_with_reward_listing_terms_from_unconverted,
    make_fixed_rate_with_reward_tax_terms,
    make_fixed_rate_with_reward_tax_terms_from_unconverted,
    make_warper_preset_init_data,
)
from iqspace.types import ListingTerms


class TestConversions:
    """Test unit conversions."""

    def test_convert_to_wei(self):
        assert convert_to_wei("1") == 10**18
        assert convert_to_wei("0.000001") == 10**12
        assert convert_to_wei(Decimal("2.5"), decimals=6) == 2_500_000

    def test_convert_percentage(self):
        assert convert_percentage(5) == 50_000
        assert convert_percentage("5.5") == 55_000
        assert convert_percentage("0.0001") == 1

    @pytest.mark.parametrize(
        "value", ["-1", "0.00001", "abc", "NaN", "Infinity", "-Infinity", Decimal("NaN")]
    )
    def test_convert_percentage_rejects(self, value):
        with pytest.raises(TranslationError):
            convert_percentage(value)

    @pytest.mark.parametrize("value", ["NaN", "sNaN", "Infinity", Decimal("-Infinity")])
    def test_convert_to_wei_rejects_non_finite(self, value):
        with pytest.raises(TranslationError):
            convert_to_wei(value)


class TestListingTerms:
    """Test listing terms builders."""

    def test_fixed_rate(self):
        terms = make_fixed_rate_listing_terms(100)

        assert terms.strategy_id == LISTING_STRATEGY_IDS[ListingStrategy.FIXED_RATE]
        assert decode(["uint256"], terms.strategy_data) == (100,)

    def test_fixed_rate_with_reward(self):
        terms = make_fixed_rate_with_reward_listing_terms(100, 2_000)

        assert terms.strategy_id == LISTING_STRATEGY_IDS[ListingStrategy.FIXED_RATE_WITH_REWARD]
        assert decode(["uint256", "uint16"], terms.strategy_data) == (100, 2_000)

    def test_from_unconverted(self):
        assert make_fixed_rate_listing_terms_from_unconverted(
            "0.0001"
        ) == make_fixed_rate_listing_terms(10**14)
        assert make_fixed_rate_with_reward_listing_terms_from_unconverted(
            "1", "5"
        ) == make_fixed_rate_with_reward_listing_terms(10**18, 50_000)

    def test_decode(self):
        decoded = decode_listing_terms(make_fixed_rate_with_reward_listing_terms(7, 3))

        assert decoded == {
            "strategy": ListingStrategy.FIXED_RATE_WITH_REWARD,
            "base_rate": 7,
            "reward_rate": 3,
        }
        assert "reward_rate" not in decode_listing_terms(make_fixed_rate_listing_terms(7))

    def test_decode_unknown_strategy(self):
        with pytest.raises(UnknownStrategyError):
            decode_listing_terms(ListingTerms(b"\x00" * 4, b""))


class TestTaxTerms:
    """Test tax terms builders."""

    def test_fixed_rate_tax(self):
        terms = make_fixed_rate_tax_terms(1_000)

        assert terms.strategy_id == TAX_STRATEGY_IDS[TaxStrategy.FIXED_RATE_TAX]
        assert decode(["uint16"], terms.strategy_data) == (1_000,)

    def test_fixed_rate_tax_with_reward(self):
        terms = make_fixed_rate_with_reward_tax_terms(1_000, 500)

        assert terms.strategy_id == TAX_STRATEGY_IDS[TaxStrategy.FIXED_RATE_TAX_WITH_REWARD]
        assert decode_tax_terms(terms) == {
            "strategy": TaxStrategy.FIXED_RATE_TAX_WITH_REWARD,
            "rate": 1_000,
            "reward_rate": 500,
        }

    def test_from_unconverted(self):
        assert make_fixed_rate_tax_terms_from_unconverted("0.1") == make_fixed_rate_tax_terms(1_000)
        assert make_fixed_rate_with_reward_tax_terms_from_unconverted(
            "0.1", "0.05"
        ) == make_fixed_rate_with_reward_tax_terms(1_000, 500)


class TestWarperPresetInitData:
    """Test preset initializer calldata."""

    def test_init_data(self):
        data = make_warper_preset_init_data(ORIGINAL, CONTRACT)

        assert data[:4] == function_signature_to_4byte_selector("__initialize(bytes)")
        (payload,) = decode(["bytes"], data[4:])
        original, metahub = decode(["address", "address"], payload)
        assert original.lower() == ORIGINAL.lower()
        assert metahub.lower() == CONTRACT.lower()
