"""Build, sign and broadcast native-currency transfers.

The pipeline validates every input before touching the network, then reads
balance, gas price, nonce and chain id fresh for each send. Nonces are not
reserved: two concurrent sends from one key can read the same nonce and the
network will accept at most one of them.
"""

import asyncio
from typing import Tuple

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from ..chain.provider import ChainGateway
from ..exceptions import InsufficientBalance, InvalidDestinationAddress, ProviderError
from ..utils.config import Config
from ..utils.logger import get_logger
from .address import parse_address, parse_private_key
from .models import SendResult, SignedTransaction, UnsignedTransaction
from .units import parse_amount

logger = get_logger(__name__)


class TransactionService:
    def __init__(self, gateway: ChainGateway, gas_limit: int = Config.TRANSFER_GAS_LIMIT):
        self.gateway = gateway
        self.gas_limit = gas_limit

    async def build_transaction(
        self, from_private_key: str, to_address: str, amount: str
    ) -> Tuple[LocalAccount, UnsignedTransaction]:
        """Validate inputs and assemble an unsigned, chain-bound transfer."""
        account = parse_private_key(from_private_key)
        recipient = parse_address(to_address, error=InvalidDestinationAddress)
        value = parse_amount(amount)

        balance = await self.gateway.get_balance(account.address)
        if balance < value:
            raise InsufficientBalance(current_balance=balance, requested_amount=value)

        gas_price, nonce = await asyncio.gather(
            self.gateway.get_gas_price(),
            self.gateway.get_transaction_count(account.address),
        )
        chain_id = await self.gateway.get_chain_id()

        unsigned = UnsignedTransaction(
            to=recipient,
            value=value,
            gas=self.gas_limit,
            gas_price=gas_price,
            nonce=nonce,
            chain_id=chain_id,
        )
        return account, unsigned

    def sign(self, account: LocalAccount, unsigned: UnsignedTransaction) -> SignedTransaction:
        """Sign with EIP-155 replay protection for the transaction's chain id"""
        try:
            signed = Account.sign_transaction(unsigned.to_tx_dict(), account.key)
        except Exception as e:
            raise ProviderError("sign transaction", str(e)) from e
        return SignedTransaction(
            raw_transaction=bytes(signed.raw_transaction),
            hash=Web3.to_hex(signed.hash),
        )

    async def send(self, from_private_key: str, to_address: str, amount: str) -> SendResult:
        """Send ``amount`` display units from the key's address to ``to_address``"""
        account, unsigned = await self.build_transaction(from_private_key, to_address, amount)
        signed = self.sign(account, unsigned)

        tx_hash = await self.gateway.send_raw_transaction(signed.raw_transaction)
        if tx_hash.lower() != signed.hash.lower():
            logger.warning(f"Provider reported hash {tx_hash}, locally computed {signed.hash}")
        logger.info(
            f"Broadcast {tx_hash}: {amount} from {account.address} to {unsigned.to} "
            f"(nonce {unsigned.nonce}, chain {unsigned.chain_id})"
        )

        return SendResult(
            transaction_hash=tx_hash,
            from_address=account.address,
            to_address=unsigned.to,
            amount=amount,
        )
