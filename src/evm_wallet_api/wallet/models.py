# src/evm_wallet_api/wallet/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Wallet:
    address: str
    private_key: str
    mnemonic: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "address": self.address,
            "private_key": self.private_key,
            "mnemonic": self.mnemonic,
        }


@dataclass(frozen=True)
class AccountSnapshot:
    """Point-in-time view of an account, fields are None when their fetch failed"""
    address: str
    checksum_address: str
    is_checksum_valid: bool
    balance: Optional[str]
    balance_wei: Optional[int]
    nonce: Optional[int]
    is_contract: Optional[bool]
    network: str
    explorer_url: str
    unavailable: Tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.unavailable)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "checksum_address": self.checksum_address,
            "is_checksum_valid": self.is_checksum_valid,
            "balance": self.balance,
            "balance_wei": str(self.balance_wei) if self.balance_wei is not None else None,
            "nonce": self.nonce,
            "is_contract": self.is_contract,
            "network": self.network,
            "explorer_url": self.explorer_url,
            "degraded": self.degraded,
            "unavailable": list(self.unavailable),
        }


@dataclass(frozen=True)
class UnsignedTransaction:
    to: str
    value: int
    gas: int
    gas_price: int
    nonce: int
    chain_id: int

    def to_tx_dict(self) -> Dict[str, Any]:
        """Legacy transaction fields as eth-account expects them"""
        return {
            "to": self.to,
            "value": self.value,
            "gas": self.gas,
            "gasPrice": self.gas_price,
            "nonce": self.nonce,
            "chainId": self.chain_id,
            "data": b"",
        }


@dataclass(frozen=True)
class SignedTransaction:
    raw_transaction: bytes = field(repr=False)
    hash: str


@dataclass(frozen=True)
class SendResult:
    transaction_hash: str
    from_address: str
    to_address: str
    amount: str
    # Unknown until the transaction is mined
    gas_used: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transaction_hash": self.transaction_hash,
            "from_address": self.from_address,
            "to_address": self.to_address,
            "amount": self.amount,
            "gas_used": self.gas_used,
        }


class TransactionState(Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"


@dataclass(frozen=True)
class TransactionReceiptView:
    hash: str
    status: TransactionState
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    confirmations: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "status": self.status.value,
            "block_number": self.block_number,
            "gas_used": self.gas_used,
            "confirmations": self.confirmations,
        }
