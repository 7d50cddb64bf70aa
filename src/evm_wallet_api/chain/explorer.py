# File: src/evm_wallet_api/chain/explorer.py
from typing import Any, Dict, List, Optional

import httpx

from ..exceptions import ExplorerError
from ..utils.config import Config
from ..utils.logger import get_logger
from ..wallet.address import parse_address

logger = get_logger(__name__)

# Etherscan-family APIs report an empty history as an error status
_NO_TRANSACTIONS = "No transactions found"


class ExplorerClient:
    """Read-only client for an Etherscan-compatible block explorer API."""

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str] = None,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def get_transactions(
        self, address: str, page: int = 1, offset: int = Config.EXPLORER_PAGE_SIZE
    ) -> List[Dict[str, Any]]:
        """List historical transactions for an address, newest first."""
        checksum = parse_address(address)
        params = {
            "module": "account",
            "action": "txlist",
            "address": checksum,
            "page": max(page, 1),
            "offset": min(max(offset, 1), Config.EXPLORER_MAX_PAGE_SIZE),
            "sort": "desc",
        }
        if self.api_key:
            params["apikey"] = self.api_key

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.get(self.api_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.error(f"Explorer request failed for {checksum}: {e}")
            raise ExplorerError(f"Explorer request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Explorer returned a non-JSON body for {checksum}")
            raise ExplorerError("Explorer returned an invalid JSON response") from e

        if not isinstance(data, dict):
            raise ExplorerError("Explorer returned an unexpected payload")

        result = data.get("result")
        if str(data.get("status")) != "1":
            if data.get("message") == _NO_TRANSACTIONS or result == []:
                return []
            detail = result if isinstance(result, str) else data.get("message", "unknown error")
            raise ExplorerError(f"Explorer error: {detail}")

        if not isinstance(result, list):
            raise ExplorerError("Explorer returned an unexpected payload")
        return result
