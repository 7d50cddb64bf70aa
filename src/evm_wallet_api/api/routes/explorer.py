# File: src/evm_wallet_api/api/routes/explorer.py
from fastapi import APIRouter, Depends, Query

from ...chain.explorer import ExplorerClient
from ...utils.config import Config
from ...wallet.address import parse_address
from ..dependencies import get_explorer
from ..models import TransactionHistoryResponse

router = APIRouter(tags=["explorer"])

@router.get("/transactions/{address}", response_model=TransactionHistoryResponse)
async def get_transactions(
    address: str,
    page: int = Query(1, ge=1),
    offset: int = Query(Config.EXPLORER_PAGE_SIZE, ge=1, le=Config.EXPLORER_MAX_PAGE_SIZE),
    explorer: ExplorerClient = Depends(get_explorer),
):
    checksum = parse_address(address)
    transactions = await explorer.get_transactions(checksum, page=page, offset=offset)
    return {"address": checksum, "transactions": transactions}
