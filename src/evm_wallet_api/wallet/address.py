# src/evm_wallet_api/wallet/address.py
import re
from typing import Tuple, Type

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3

from ..exceptions import (
    InvalidAddress,
    InvalidPrivateKey,
    InvalidTransactionHash,
    ValidationError,
)

_ADDRESS_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{40}$")
_PRIVATE_KEY_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")
_TX_HASH_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


def to_checksum(address: str) -> str:
    """EIP-55 checksum form of a hex address, any casing accepted"""
    body = address[2:] if address.lower().startswith("0x") else address
    return Web3.to_checksum_address("0x" + body.lower())


def parse_address(
    address: str, error: Type[ValidationError] = InvalidAddress
) -> str:
    """Parse a 20-byte hex address and return its checksum form.

    Casing is not enforced, a wrong checksum still parses.
    """
    text = (address or "").strip()
    if not _ADDRESS_PATTERN.match(text):
        raise error(f"Invalid address: {address!r}")
    return to_checksum(text)


def checksum_status(address: str) -> Tuple[str, bool]:
    """Return (checksum form, whether the supplied casing already matches it)"""
    checksum = parse_address(address)
    text = address.strip()
    if not text.startswith("0x"):
        text = "0x" + text
    return checksum, text == checksum


def parse_private_key(private_key: str) -> LocalAccount:
    text = (private_key or "").strip()
    if not _PRIVATE_KEY_PATTERN.match(text):
        raise InvalidPrivateKey("Invalid private key: expected 32 bytes of hex")
    try:
        return Account.from_key(text if text.startswith("0x") else "0x" + text)
    except Exception as e:
        # Key material is never echoed back
        raise InvalidPrivateKey(f"Invalid private key: {type(e).__name__}") from e


def parse_tx_hash(tx_hash: str) -> str:
    text = (tx_hash or "").strip()
    if not _TX_HASH_PATTERN.match(text):
        raise InvalidTransactionHash(f"Invalid transaction hash: {tx_hash!r}")
    if not text.startswith("0x"):
        text = "0x" + text
    return text.lower()
