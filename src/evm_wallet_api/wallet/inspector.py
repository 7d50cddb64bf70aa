# src/evm_wallet_api/wallet/inspector.py
import asyncio
from typing import Any, Dict, List

from ..chain.provider import ChainGateway
from ..exceptions import ProviderError
from ..utils.config import Settings
from ..utils.logger import get_logger
from .address import checksum_status, parse_address
from .models import AccountSnapshot
from .units import format_amount

logger = get_logger(__name__)


class AccountInspector:
    def __init__(self, gateway: ChainGateway, settings: Settings):
        self.gateway = gateway
        self.settings = settings

    async def get_balance(self, address: str) -> str:
        """Get the balance of an address in display units"""
        checksum = parse_address(address)
        balance_wei = await self.gateway.get_balance(checksum)
        return format_amount(balance_wei)

    async def get_wallet_info(self, address: str) -> AccountSnapshot:
        """Get balance, nonce and contract status of an address.

        Each field is fetched on its own. A field whose fetch fails is reported
        as None and listed in ``unavailable`` instead of failing the request.
        """
        checksum, is_checksum_valid = checksum_status(address)

        balance, nonce, code = await asyncio.gather(
            self.gateway.get_balance(checksum),
            self.gateway.get_transaction_count(checksum),
            self.gateway.get_code(checksum),
            return_exceptions=True,
        )
        fields: Dict[str, Any] = {"balance": balance, "nonce": nonce, "code": code}
        unavailable: List[str] = []
        for name, value in fields.items():
            if isinstance(value, ProviderError):
                logger.warning(f"Wallet info for {checksum}: {value.message}")
                fields[name] = None
                unavailable.append("is_contract" if name == "code" else name)
            elif isinstance(value, BaseException):
                raise value

        balance_wei = fields["balance"]
        code = fields["code"]
        return AccountSnapshot(
            address=address.strip(),
            checksum_address=checksum,
            is_checksum_valid=is_checksum_valid,
            balance=format_amount(balance_wei) if balance_wei is not None else None,
            balance_wei=balance_wei,
            nonce=fields["nonce"],
            is_contract=len(code) > 0 if code is not None else None,
            network=self.settings.NETWORK_NAME,
            explorer_url=self.settings.explorer_address_url(checksum),
            unavailable=tuple(unavailable),
        )
