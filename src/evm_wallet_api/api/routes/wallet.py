# File: src/evm_wallet_api/api/routes/wallet.py
from fastapi import APIRouter, Depends

from ...monitoring.metrics import MetricsCollector
from ...wallet import AccountInspector, WalletGenerator
from ..dependencies import get_generator, get_inspector, get_metrics
from ..models import BalanceResponse, WalletInfoResponse, WalletResponse

router = APIRouter(tags=["wallet"])

@router.api_route("/create-wallet", methods=["GET", "POST"], response_model=WalletResponse)
@router.api_route("/generate-wallet", methods=["GET", "POST"], response_model=WalletResponse,
                  include_in_schema=False)
@router.api_route("/wallet", methods=["GET", "POST"], response_model=WalletResponse,
                  include_in_schema=False)
async def create_wallet(
    generator: WalletGenerator = Depends(get_generator),
    metrics: MetricsCollector = Depends(get_metrics),
):
    """Generate a fresh wallet. The private key and mnemonic are shown once."""
    wallet = generator.generate()
    metrics.wallets_generated.inc()
    return wallet.to_dict()

@router.get("/balance/{address}", response_model=BalanceResponse)
async def get_balance(address: str, inspector: AccountInspector = Depends(get_inspector)):
    return {"balance": await inspector.get_balance(address)}

@router.get("/wallet-info/{address}", response_model=WalletInfoResponse)
async def get_wallet_info(address: str, inspector: AccountInspector = Depends(get_inspector)):
    snapshot = await inspector.get_wallet_info(address)
    return snapshot.to_dict()
