"""Gateway to the remote JSON-RPC provider.

Every chain read and write goes through :class:`ChainGateway`. Failures of any
kind, timeouts included, surface as :class:`ProviderError` tagged with the
operation that failed. Nothing is retried here; retry policy belongs to the
caller.
"""

import asyncio
from typing import Any, Awaitable, Dict, Optional

from web3 import AsyncWeb3
from web3.exceptions import TransactionNotFound

from ..exceptions import ProviderError
from ..utils.config import Settings
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ChainGateway:
    """Shared handle on one RPC endpoint. Safe to reuse across requests."""

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30.0,
        web3: Optional[AsyncWeb3] = None,
    ):
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._web3 = web3

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChainGateway":
        return cls(settings.POLYGON_RPC, timeout=settings.RPC_TIMEOUT)

    @property
    def web3(self) -> AsyncWeb3:
        """The AsyncWeb3 instance, built on first use."""
        if self._web3 is None:
            self._web3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(self.rpc_url))
            logger.info(f"Connected gateway to RPC endpoint {_redact(self.rpc_url)}")
        return self._web3

    async def _call(self, verb: str, awaitable: Awaitable[Any]) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Timed out trying to {verb} after {self.timeout}s")
            raise ProviderError(verb, f"timed out after {self.timeout}s") from e
        except Exception as e:
            logger.error(f"Failed to {verb}: {e}")
            raise ProviderError(verb, str(e) or type(e).__name__) from e

    async def get_balance(self, address: str) -> int:
        return int(await self._call("fetch balance", self.web3.eth.get_balance(address)))

    async def get_transaction_count(self, address: str) -> int:
        return int(await self._call(
            "fetch nonce", self.web3.eth.get_transaction_count(address)
        ))

    async def get_code(self, address: str) -> bytes:
        return bytes(await self._call("fetch code", self.web3.eth.get_code(address)))

    async def get_gas_price(self) -> int:
        return int(await self._call("fetch gas price", _read(lambda: self.web3.eth.gas_price)))

    async def get_chain_id(self) -> int:
        return int(await self._call("fetch chain id", _read(lambda: self.web3.eth.chain_id)))

    async def get_block_number(self) -> int:
        return int(await self._call(
            "fetch block number", _read(lambda: self.web3.eth.block_number)
        ))

    async def send_raw_transaction(self, raw_transaction: bytes) -> str:
        tx_hash = await self._call(
            "broadcast transaction", self.web3.eth.send_raw_transaction(raw_transaction)
        )
        return AsyncWeb3.to_hex(tx_hash)

    async def get_transaction_receipt(self, tx_hash: str) -> Optional[Dict[str, Any]]:
        """Receipt as a dict, or None while the transaction is not mined."""
        receipt = await self._call("fetch receipt", _receipt_or_none(self.web3, tx_hash))
        return dict(receipt) if receipt is not None else None

    async def close(self) -> None:
        """Close the HTTP session the provider caches. No-op if never connected."""
        if self._web3 is None:
            return
        await self._web3.provider.disconnect()
        logger.info(f"Disconnected gateway from {_redact(self.rpc_url)}")


async def _read(getter):
    # Property reads on AsyncEth return a coroutine, evaluate it inside the timeout
    return await getter()


async def _receipt_or_none(web3: AsyncWeb3, tx_hash: str):
    try:
        return await web3.eth.get_transaction_receipt(tx_hash)
    except TransactionNotFound:
        return None


def _redact(url: str) -> str:
    # Hosted RPC URLs usually embed an API key in the path
    scheme, _, rest = url.partition("://")
    host = rest.split("/", 1)[0]
    return f"{scheme}://{host}/..." if rest else url

