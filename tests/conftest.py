# tests/conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from eth_account import Account
from web3 import Web3

from evm_wallet_api.chain.explorer import ExplorerClient
from evm_wallet_api.chain.provider import ChainGateway
from evm_wallet_api.utils.config import Settings

# Throwaway key, never funded anywhere
SENDER_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
RECIPIENT = "0xd3cda913deb6f67967b99d67acdfa1712c293601"
TX_HASH = "0x" + "ab" * 32


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        POLYGON_RPC="http://localhost:8545",
        NETWORK_NAME="Polygon Amoy",
        EXPLORER_URL="https://amoy.polygonscan.com/",
        EXPLORER_API_URL="https://api-amoy.polygonscan.com/api",
    )


@pytest.fixture
def sender():
    return Account.from_key(SENDER_KEY)


@pytest.fixture
def gateway():
    """Fake provider gateway with a funded sender on chain 80002"""
    gateway = AsyncMock(spec=ChainGateway)
    gateway.get_balance.return_value = 5 * 10 ** 18
    gateway.get_transaction_count.return_value = 5
    gateway.get_code.return_value = b""
    gateway.get_gas_price.return_value = 30 * 10 ** 9
    gateway.get_chain_id.return_value = 80002
    gateway.get_block_number.return_value = 1_000
    gateway.get_transaction_receipt.return_value = None
    gateway.send_raw_transaction.side_effect = lambda raw: Web3.to_hex(Web3.keccak(raw))
    return gateway


@pytest.fixture
def explorer():
    explorer = MagicMock(spec=ExplorerClient)
    explorer.get_transactions = AsyncMock(return_value=[])
    return explorer
