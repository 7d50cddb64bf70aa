from .inspector import AccountInspector
from .keys import WalletGenerator
from .models import (
    AccountSnapshot,
    SendResult,
    SignedTransaction,
    TransactionReceiptView,
    TransactionState,
    UnsignedTransaction,
    Wallet,
)
from .status import StatusTracker
from .transactions import TransactionService

__all__ = [
    "AccountInspector",
    "AccountSnapshot",
    "SendResult",
    "SignedTransaction",
    "StatusTracker",
    "TransactionReceiptView",
    "TransactionService",
    "TransactionState",
    "UnsignedTransaction",
    "Wallet",
    "WalletGenerator",
]
