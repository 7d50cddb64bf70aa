from .explorer import router as explorer_router
from .transactions import router as transactions_router
from .wallet import router as wallet_router

__all__ = ["explorer_router", "transactions_router", "wallet_router"]
