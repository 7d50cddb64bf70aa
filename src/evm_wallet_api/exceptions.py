# src/evm_wallet_api/exceptions.py
from typing import Any, Dict


class WalletApiError(Exception):
    """Base exception class for wallet API errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "kind": self.kind}

class ConfigurationError(WalletApiError):
    """Raised when required configuration is missing or malformed"""
    pass

class ValidationError(WalletApiError):
    """Raised when caller input is rejected before any network call"""
    status_code = 400

class InvalidAddress(ValidationError):
    """Raised when an address cannot be parsed"""
    pass

class InvalidPrivateKey(ValidationError):
    """Raised when a private key cannot be parsed"""
    pass

class InvalidDestinationAddress(ValidationError):
    """Raised when the recipient of a transfer cannot be parsed"""
    pass

class InvalidAmount(ValidationError):
    """Raised when a transfer amount is not a valid display-unit decimal"""
    pass

class InvalidTransactionHash(ValidationError):
    """Raised when a transaction hash cannot be parsed"""
    pass

class InsufficientBalance(ValidationError):
    """Raised when the sender cannot cover the requested amount"""

    def __init__(self, current_balance: int, requested_amount: int):
        # Imported here, units depends on this module
        from .wallet.units import format_amount

        self.current_balance = current_balance
        self.requested_amount = requested_amount
        self.current_display = format_amount(current_balance)
        self.requested_display = format_amount(requested_amount)
        super().__init__(
            f"Insufficient balance: have {self.current_display}, "
            f"need {self.requested_display}"
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["current_balance"] = self.current_display
        payload["requested_amount"] = self.requested_display
        return payload

class ProviderError(WalletApiError):
    """Raised when a JSON-RPC call to the chain provider fails"""

    def __init__(self, verb: str, detail: str):
        self.verb = verb
        self.detail = detail
        super().__init__(f"Failed to {verb}: {detail}")

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["operation"] = self.verb
        return payload

class ExplorerError(WalletApiError):
    """Raised when the block explorer API fails or returns garbage"""
    status_code = 502
