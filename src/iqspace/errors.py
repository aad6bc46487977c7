"""Exception hierarchy for the IQ Space SDK.

Errors raised by this package are translation-time failures: a malformed
identifier, an unknown namespace or an unrecognised code returned by a
contract. Failures coming from the contracts themselves (reverts, transport
errors) are raised by web3 and are never wrapped here.
"""

import time
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    CONTRACT = "contract"
    SYSTEM = "system"


class IQSpaceError(Exception):
    """Base exception for all SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        cause: Optional[Exception] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.cause = cause
        self.metadata = metadata or {}
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.value,
            "category": self.category.value,
            "cause": str(self.cause) if self.cause else None,
            "metadata": self.metadata,
            "timestamp": self.timestamp,
        }

    def __str__(self) -> str:
        parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.severity != ErrorSeverity.MEDIUM:
            parts.append(f"Severity: {self.severity.value}")

        if self.category != ErrorCategory.SYSTEM:
            parts.append(f"Category: {self.category.value}")

        return " | ".join(parts)


class TranslationError(IQSpaceError):
    """A value could not be translated between SDK and contract form."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        expected: Optional[Any] = None,
        **kwargs,
    ):
        kwargs.setdefault("category", ErrorCategory.VALIDATION)
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.expected = expected

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "field": self.field,
                "value": str(self.value) if self.value is not None else None,
                "expected": str(self.expected) if self.expected is not None else None,
            }
        )
        return data


class InvalidIdentifierError(TranslationError):
    """Malformed CAIP identifier or one bound to a foreign chain."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "INVALID_IDENTIFIER")
        super().__init__(message, **kwargs)


class InvalidAssetTypeError(TranslationError):
    """Malformed asset type descriptor."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "INVALID_ASSET_TYPE")
        super().__init__(message, **kwargs)


class UnknownNamespaceError(TranslationError):
    """Asset namespace with no asset class."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "UNKNOWN_NAMESPACE")
        super().__init__(message, **kwargs)


class UnknownAssetClassError(TranslationError):
    """Asset class id with no namespace."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "UNKNOWN_ASSET_CLASS")
        super().__init__(message, **kwargs)


class UnknownStatusCodeError(TranslationError):
    """Rental status code missing from the status table."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "UNKNOWN_STATUS_CODE")
        kwargs.setdefault("severity", ErrorSeverity.HIGH)
        super().__init__(message, **kwargs)


class UnknownStrategyError(TranslationError):
    """Listing or tax strategy id missing from the strategy tables."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "UNKNOWN_STRATEGY")
        super().__init__(message, **kwargs)


class LookupTableError(IQSpaceError):
    """A protocol lookup table is incomplete or not one-to-one."""

    def __init__(self, message: str, table: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            error_code="LOOKUP_TABLE",
            severity=ErrorSeverity.CRITICAL,
            **kwargs,
        )
        self.table = table

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"table": self.table})
        return data


class ConfigurationError(IQSpaceError):
    """Configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, category=ErrorCategory.CONFIGURATION, **kwargs)
        self.config_key = config_key
        self.config_value = config_value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "config_key": self.config_key,
                "config_value": str(self.config_value)
                if self.config_value is not None
                else None,
            }
        )
        return data


class ContractResolutionError(IQSpaceError):
    """A contract handle could not be built."""

    def __init__(
        self,
        message: str,
        contract_name: Optional[str] = None,
        address: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(
            message,
            category=ErrorCategory.CONTRACT,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.contract_name = contract_name
        self.address = address

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"contract_name": self.contract_name, "address": self.address})
        return data


def create_translation_error(
    error_class: type, field: str, value: Any, expected: Any, message: Optional[str] = None
) -> TranslationError:
    """Create a translation error of the given class."""
    if message is None:
        message = f"Invalid value for field '{field}': expected {expected}, got {value!r}"

    return error_class(message, field=field, value=value, expected=expected)
