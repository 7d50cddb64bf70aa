# File: src/evm_wallet_api/api/routes/transactions.py
from fastapi import APIRouter, Depends

from ...monitoring.metrics import MetricsCollector
from ...wallet import StatusTracker, TransactionService
from ..dependencies import get_metrics, get_status_tracker, get_transaction_service
from ..models import SendTokenRequest, SendTokenResponse, TransactionStatusResponse

router = APIRouter(tags=["transactions"])

@router.post("/send-tokens", response_model=SendTokenResponse)
async def send_tokens(
    payload: SendTokenRequest,
    service: TransactionService = Depends(get_transaction_service),
    metrics: MetricsCollector = Depends(get_metrics),
):
    result = await service.send(payload.from_private_key, payload.to_address, payload.amount)
    metrics.transactions_broadcast.inc()
    return result.to_dict()

@router.get("/transaction-status/{tx_hash}", response_model=TransactionStatusResponse)
async def get_transaction_status(
    tx_hash: str, tracker: StatusTracker = Depends(get_status_tracker)
):
    view = await tracker.get_status(tx_hash)
    return view.to_dict()
