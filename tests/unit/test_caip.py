"""
Unit tests for CAIP identifiers.
"""

import pytest

from iqspace.caip import AccountId, AssetId, AssetName, AssetType, ChainId
from iqspace.errors import InvalidAssetTypeError, InvalidIdentifierError, TranslationError


class TestChainId:
    """Test the ChainId class."""

    def test_parse(self):
        chain_id = ChainId.parse("eip155:1")

        assert chain_id.namespace == "eip155"
        assert chain_id.reference == "1"
        assert str(chain_id) == "eip155:1"

    def test_eip155(self):
        assert ChainId.eip155(31337) == ChainId("eip155", "31337")

    @pytest.mark.parametrize("value", ["eip155", "e:1", "eip155:", "EIP155:1", ":1", 155])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidIdentifierError):
            ChainId.parse(value)

    def test_construction_is_validated(self):
        with pytest.raises(InvalidIdentifierError):
            ChainId("eip155", "")

    def test_equality_and_hash(self):
        assert ChainId.parse("eip155:1") == ChainId("eip155", "1")
        assert len({ChainId("eip155", "1"), ChainId.parse("eip155:1")}) == 1


class TestAccountId:
    """Test the AccountId class."""

    def test_parse(self):
        value = "eip155:1:0xab16a96D359eC26a11e2C2b3d8f8B8942d5Bfcdb"
        account_id = AccountId.parse(value)

        assert account_id.chain_id == ChainId("eip155", "1")
        assert account_id.address == "0xab16a96D359eC26a11e2C2b3d8f8B8942d5Bfcdb"
        assert str(account_id) == value

    @pytest.mark.parametrize(
        "value",
        ["eip155:1", "0xab16a96D359eC26a11e2C2b3d8f8B8942d5Bfcdb", "eip155:1:", None],
    )
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidIdentifierError):
            AccountId.parse(value)


class TestAssetType:
    """Test AssetName and AssetType."""

    def test_parse(self):
        value = "eip155:1/erc721:0x06012c8cf97BEaD5deAe237070F9587f8E7A266d"
        asset_type = AssetType.parse(value)

        assert asset_type.chain_id == ChainId("eip155", "1")
        assert asset_type.asset_name == AssetName(
            "erc721", "0x06012c8cf97BEaD5deAe237070F9587f8E7A266d"
        )
        assert str(asset_type) == value

    @pytest.mark.parametrize(
        "value",
        [
            "eip155:1",
            "eip155:1/erc721",
            "eip155/erc721:0x06012c8cf97BEaD5deAe237070F9587f8E7A266d",
            "eip155:1/erc721:0x06012c8cf97BEaD5deAe237070F9587f8E7A266d/1",
        ],
    )
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidAssetTypeError):
            AssetType.parse(value)

    def test_invalid_asset_type_is_translation_error(self):
        with pytest.raises(TranslationError):
            AssetType.parse("not-an-asset")


class TestAssetId:
    """Test the AssetId class."""

    def test_parse(self):
        value = "eip155:1/erc721:0x06012c8cf97BEaD5deAe237070F9587f8E7A266d/771769"
        asset_id = AssetId.parse(value)

        assert asset_id.token_id == "771769"
        assert asset_id.asset_type == AssetType.parse(
            "eip155:1/erc721:0x06012c8cf97BEaD5deAe237070F9587f8E7A266d"
        )
        assert str(asset_id) == value

    def test_integer_token_id(self):
        asset_name = AssetName("erc721", "0x06012c8cf97BEaD5deAe237070F9587f8E7A266d")
        asset_id = AssetId(ChainId("eip155", "1"), asset_name, 5)

        assert asset_id.token_id == "5"
        assert asset_id == AssetId(ChainId("eip155", "1"), asset_name, "5")
        assert str(asset_id).endswith("/5")

    def test_invalid_token_id(self):
        with pytest.raises(InvalidAssetTypeError):
            AssetId(ChainId("eip155", "1"), AssetName("erc721", "0x00"), "")

    def test_missing_token_id(self):
        with pytest.raises(InvalidAssetTypeError):
            AssetId.parse("eip155:1/erc721:0x06012c8cf97BEaD5deAe237070F9587f8E7A266d")
