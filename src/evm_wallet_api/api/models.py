# File: src/evm_wallet_api/api/models.py
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

class SendTokenRequest(BaseModel):
    from_private_key: str
    to_address: str
    amount: str  # display units, e.g. "0.1"

    def __repr__(self) -> str:
        return f"SendTokenRequest(to_address={self.to_address!r}, amount={self.amount!r})"

class WalletResponse(BaseModel):
    address: str
    private_key: str
    mnemonic: str

class BalanceResponse(BaseModel):
    balance: str

class WalletInfoResponse(BaseModel):
    address: str
    checksum_address: str
    is_checksum_valid: bool
    balance: Optional[str]
    balance_wei: Optional[str]
    nonce: Optional[int]
    is_contract: Optional[bool]
    network: str
    explorer_url: str
    degraded: bool
    unavailable: List[str]

class SendTokenResponse(BaseModel):
    transaction_hash: str
    from_address: str
    to_address: str
    amount: str
    gas_used: Optional[int] = None

class TransactionStatusResponse(BaseModel):
    hash: str
    status: str  # "success", "failed" or "pending"
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    confirmations: Optional[int] = None

class TransactionHistoryResponse(BaseModel):
    address: str
    transactions: List[Dict[str, Any]]

class ErrorResponse(BaseModel):
    error: str
    kind: str
