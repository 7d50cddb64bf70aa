# src/evm_wallet_api/wallet/status.py
from ..chain.provider import ChainGateway
from ..utils.logger import get_logger
from .address import parse_tx_hash
from .models import TransactionReceiptView, TransactionState

logger = get_logger(__name__)


class StatusTracker:
    def __init__(self, gateway: ChainGateway):
        self.gateway = gateway

    async def get_status(self, tx_hash: str) -> TransactionReceiptView:
        """Resolve the confirmation state of a broadcast transaction"""
        tx_hash = parse_tx_hash(tx_hash)

        receipt = await self.gateway.get_transaction_receipt(tx_hash)
        if receipt is None:
            logger.debug(f"Transaction {tx_hash} pending (no receipt yet)")
            return TransactionReceiptView(hash=tx_hash, status=TransactionState.PENDING)

        block_number = receipt.get("blockNumber")
        head = await self.gateway.get_block_number()
        confirmations = None
        if block_number is not None:
            # The head can briefly lag the inclusion block across RPC nodes
            confirmations = max(0, head - block_number)

        status = TransactionState.SUCCESS if receipt.get("status") else TransactionState.FAILED
        return TransactionReceiptView(
            hash=tx_hash,
            status=status,
            block_number=block_number,
            gas_used=receipt.get("gasUsed"),
            confirmations=confirmations,
        )
