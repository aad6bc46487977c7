"""
Builders for listing terms, tax terms and warper preset init data.

Rates are passed to the contracts as integers. Token amounts use the payment
token's decimals (18 by default) and percentages carry
``PERCENTAGE_DECIMALS`` decimal places, so ``Decimal("5.5")`` percent is
sent as ``55000``.
"""

from decimal import Decimal
from typing import Any, Dict, Union

from eth_abi import decode, encode
from eth_utils import function_signature_to_4byte_selector

from .constants import (
    LISTING_STRATEGY_IDS,
    TAX_STRATEGY_IDS,
    ListingStrategy,
    TaxStrategy,
    listing_strategy_from_id,
    normalize_bytes,
    tax_strategy_from_id,
)
from .errors import TranslationError
from .types import ListingTerms, TaxTerms

PERCENTAGE_DECIMALS = 4
TOKEN_DECIMALS = 18

WARPER_PRESET_INITIALIZER = "__initialize(bytes)"

Number = Union[int, str, Decimal]

_LISTING_STRATEGY_DATA = {
    ListingStrategy.FIXED_RATE: ["uint256"],
    ListingStrategy.FIXED_RATE_WITH_REWARD: ["uint256", "uint16"],
}

_TAX_STRATEGY_DATA = {
    TaxStrategy.FIXED_RATE_TAX: ["uint16"],
    TaxStrategy.FIXED_RATE_TAX_WITH_REWARD: ["uint16", "uint16"],
}


def convert_to_wei(amount: Number, decimals: int = TOKEN_DECIMALS) -> int:
    """Scale a token amount to its integer representation."""
    return _scale(amount, decimals, "amount")


def convert_percentage(percent: Number) -> int:
    """Scale a percentage to its integer representation."""
    return _scale(percent, PERCENTAGE_DECIMALS, "percentage")


def _scale(value: Number, decimals: int, field: str) -> int:
    try:
        scaled = Decimal(str(value)) * (Decimal(10) ** decimals)
    except ArithmeticError:
        raise TranslationError(
            f"Invalid {field} '{value}'", field=field, value=value
        ) from None
    if not scaled.is_finite():
        raise TranslationError(
            f"{field.capitalize()} '{value}' is not finite", field=field, value=value
        )
    if scaled < 0 or scaled != scaled.to_integral_value():
        raise TranslationError(
            f"{field.capitalize()} '{value}' has more than {decimals} decimals or is negative",
            field=field,
            value=value,
        )
    return int(scaled)


def make_fixed_rate_listing_terms(base_rate: int) -> ListingTerms:
    """Fixed rate listing terms; ``base_rate`` is payment token units per second."""
    return ListingTerms(
        strategy_id=LISTING_STRATEGY_IDS[ListingStrategy.FIXED_RATE],
        strategy_data=encode(
            _LISTING_STRATEGY_DATA[ListingStrategy.FIXED_RATE], [base_rate]
        ),
    )


def make_fixed_rate_with_reward_listing_terms(
    base_rate: int, reward_rate: int
) -> ListingTerms:
    return ListingTerms(
        strategy_id=LISTING_STRATEGY_IDS[ListingStrategy.FIXED_RATE_WITH_REWARD],
        strategy_data=encode(
            _LISTING_STRATEGY_DATA[ListingStrategy.FIXED_RATE_WITH_REWARD],
            [base_rate, reward_rate],
        ),
    )


def make_fixed_rate_listing_terms_from_unconverted(
    base_rate: Number, decimals: int = TOKEN_DECIMALS
) -> ListingTerms:
    return make_fixed_rate_listing_terms(convert_to_wei(base_rate, decimals))


def make_fixed_rate_with_reward_listing_terms_from_unconverted(
    base_rate: Number, reward_rate: Number, decimals: int = TOKEN_DECIMALS
) -> ListingTerms:
    return make_fixed_rate_with_reward_listing_terms(
        convert_to_wei(base_rate, decimals), convert_percentage(reward_rate)
    )


def make_fixed_rate_tax_terms(rate: int) -> TaxTerms:
    return TaxTerms(
        strategy_id=TAX_STRATEGY_IDS[TaxStrategy.FIXED_RATE_TAX],
        strategy_data=encode(_TAX_STRATEGY_DATA[TaxStrategy.FIXED_RATE_TAX], [rate]),
    )


def make_fixed_rate_with_reward_tax_terms(rate: int, reward_rate: int) -> TaxTerms:
    return TaxTerms(
        strategy_id=TAX_STRATEGY_IDS[TaxStrategy.FIXED_RATE_TAX_WITH_REWARD],
        strategy_data=encode(
            _TAX_STRATEGY_DATA[TaxStrategy.FIXED_RATE_TAX_WITH_REWARD],
            [rate, reward_rate],
        ),
    )


def make_fixed_rate_tax_terms_from_unconverted(rate: Number) -> TaxTerms:
    return make_fixed_rate_tax_terms(convert_percentage(rate))


def make_fixed_rate_with_reward_tax_terms_from_unconverted(
    rate: Number, reward_rate: Number
) -> TaxTerms:
    return make_fixed_rate_with_reward_tax_terms(
        convert_percentage(rate), convert_percentage(reward_rate)
    )


def decode_listing_terms(terms: ListingTerms) -> Dict[str, Any]:
    """Strategy and integer rates of listing terms."""
    strategy = listing_strategy_from_id(terms.strategy_id)
    values = decode(
        _LISTING_STRATEGY_DATA[strategy], normalize_bytes(terms.strategy_data)
    )
    result: Dict[str, Any] = {"strategy": strategy, "base_rate": values[0]}
    if strategy is ListingStrategy.FIXED_RATE_WITH_REWARD:
        result["reward_rate"] = values[1]
    return result


def decode_tax_terms(terms: TaxTerms) -> Dict[str, Any]:
    """Strategy and integer rates of tax terms."""
    strategy = tax_strategy_from_id(terms.strategy_id)
    values = decode(_TAX_STRATEGY_DATA[strategy], normalize_bytes(terms.strategy_data))
    result: Dict[str, Any] = {"strategy": strategy, "rate": values[0]}
    if strategy is TaxStrategy.FIXED_RATE_TAX_WITH_REWARD:
        result["reward_rate"] = values[1]
    return result


def make_warper_preset_init_data(original: str, metahub: str) -> bytes:
    """Calldata of the preset initializer for a warper over ``original``.

    Both arguments are contract addresses.
    """
    payload = encode(["address", "address"], [original, metahub])
    return function_signature_to_4byte_selector(WARPER_PRESET_INITIALIZER) + encode(
        ["bytes"], [payload]
    )
