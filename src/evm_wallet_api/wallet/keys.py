# src/evm_wallet_api/wallet/keys.py
import secrets
from typing import Callable, Optional

from eth_account import Account
from mnemonic import Mnemonic

from ..utils.config import Config
from .models import Wallet

Account.enable_unaudited_hdwallet_features()


class WalletGenerator:
    """Creates fresh BIP-39 wallets. Holds no state besides its entropy source."""

    def __init__(
        self,
        entropy_provider: Optional[Callable[[int], bytes]] = None,
        derivation_path: str = Config.DERIVATION_PATH,
    ):
        self._entropy_provider = entropy_provider or secrets.token_bytes
        self._derivation_path = derivation_path
        self._mnemonic = Mnemonic(Config.MNEMONIC_LANGUAGE)

    def generate(self) -> Wallet:
        """Generate a new wallet from secure randomness"""
        entropy = self._entropy_provider(Config.MNEMONIC_ENTROPY_BYTES)
        return self.from_entropy(entropy)

    def from_entropy(self, entropy: bytes) -> Wallet:
        """Deterministically build a wallet from 16 bytes of entropy"""
        if len(entropy) != Config.MNEMONIC_ENTROPY_BYTES:
            raise ValueError(
                f"Expected {Config.MNEMONIC_ENTROPY_BYTES} bytes of entropy, "
                f"got {len(entropy)}"
            )
        phrase = self._mnemonic.to_mnemonic(entropy)
        return self.from_mnemonic(phrase)

    def from_mnemonic(self, phrase: str) -> Wallet:
        """Re-derive the wallet behind a mnemonic phrase"""
        if not self._mnemonic.check(phrase):
            raise ValueError("Mnemonic phrase failed its checksum")
        account = Account.from_mnemonic(phrase, account_path=self._derivation_path)
        return Wallet(
            address=account.address,
            private_key=bytes(account.key).hex(),
            mnemonic=phrase,
        )
