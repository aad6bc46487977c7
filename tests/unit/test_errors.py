"""Tests for the IQ Space SDK exception hierarchy."""

import pytest

from iqspace.errors import (
    ConfigurationError,
    ContractResolutionError,
    ErrorCategory,
    ErrorSeverity,
    InvalidAssetTypeError,
    InvalidIdentifierError,
    IQSpaceError,
    LookupTableError,
    TranslationError,
    UnknownAssetClassError,
    UnknownNamespaceError,
    UnknownStatusCodeError,
    UnknownStrategyError,
    create_translation_error,
)


class TestIQSpaceError:
    """Test base error functionality."""

    def test_base_error_creation(self):
        """Test base error creation."""
        error = IQSpaceError("Test error message")

        assert error.message == "Test error message"
        assert error.error_code is None
        assert error.severity == ErrorSeverity.MEDIUM
        assert error.category == ErrorCategory.SYSTEM
        assert error.cause is None
        assert error.metadata == {}
        assert error.timestamp > 0

    def test_error_to_dict(self):
        """Test error to dictionary conversion."""
        cause = ValueError("boom")
        error = IQSpaceError("Test error", error_code="TEST_ERROR", cause=cause)
        error_dict = error.to_dict()

        assert error_dict["type"] == "IQSpaceError"
        assert error_dict["message"] == "Test error"
        assert error_dict["error_code"] == "TEST_ERROR"
        assert error_dict["severity"] == "medium"
        assert error_dict["category"] == "system"
        assert error_dict["cause"] == "boom"
        assert "timestamp" in error_dict

    def test_error_string_representation(self):
        """Test error string representation."""
        error = IQSpaceError(
            "Test error", error_code="TEST_ERROR", severity=ErrorSeverity.HIGH
        )
        error_str = str(error)

        assert "IQSpaceError: Test error" in error_str
        assert "Code: TEST_ERROR" in error_str
        assert "Severity: high" in error_str
        assert "Category" not in error_str


class TestTranslationError:
    """Test translation errors."""

    def test_translation_error_creation(self):
        """Test translation error creation."""
        error = TranslationError("Bad value", field="namespace", value="x", expected="erc20")

        assert error.field == "namespace"
        assert error.value == "x"
        assert error.expected == "erc20"
        assert error.category == ErrorCategory.VALIDATION

    def test_translation_error_to_dict(self):
        error = TranslationError("Bad value", field="token_id", value=12)
        error_dict = error.to_dict()

        assert error_dict["field"] == "token_id"
        assert error_dict["value"] == "12"
        assert error_dict["expected"] is None

    @pytest.mark.parametrize(
        "error_class,error_code",
        [
            (InvalidIdentifierError, "INVALID_IDENTIFIER"),
            (InvalidAssetTypeError, "INVALID_ASSET_TYPE"),
            (UnknownNamespaceError, "UNKNOWN_NAMESPACE"),
            (UnknownAssetClassError, "UNKNOWN_ASSET_CLASS"),
            (UnknownStatusCodeError, "UNKNOWN_STATUS_CODE"),
            (UnknownStrategyError, "UNKNOWN_STRATEGY"),
        ],
    )
    def test_subclass_defaults(self, error_class, error_code):
        error = error_class("Bad value")

        assert isinstance(error, TranslationError)
        assert error.error_code == error_code
        assert error.category == ErrorCategory.VALIDATION

    def test_unknown_status_code_is_high_severity(self):
        assert UnknownStatusCodeError("Bad code").severity == ErrorSeverity.HIGH


class TestOtherErrors:
    """Test configuration, lookup table and resolution errors."""

    def test_lookup_table_error(self):
        error = LookupTableError("Broken table", table="asset_classes")

        assert error.severity == ErrorSeverity.CRITICAL
        assert error.to_dict()["table"] == "asset_classes"

    def test_configuration_error(self):
        error = ConfigurationError("Bad config", config_key="rpc_url", config_value="ftp://x")

        assert error.category == ErrorCategory.CONFIGURATION
        assert error.to_dict()["config_value"] == "ftp://x"

    def test_contract_resolution_error(self):
        error = ContractResolutionError("No ABI", contract_name="Metahub", address="0x01")

        assert error.category == ErrorCategory.CONTRACT
        assert error.to_dict()["contract_name"] == "Metahub"
        assert not isinstance(error, TranslationError)


class TestConvenienceFunctions:
    """Test convenience functions."""

    def test_create_translation_error(self):
        """Test create translation error."""
        error = create_translation_error(UnknownNamespaceError, "namespace", "erc404", "erc20")

        assert isinstance(error, UnknownNamespaceError)
        assert error.field == "namespace"
        assert "erc404" in error.message

    def test_create_translation_error_with_message(self):
        error = create_translation_error(
            TranslationError, "amount", -1, ">= 0", message="Negative amount"
        )

        assert error.message == "Negative amount"
