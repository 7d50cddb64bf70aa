# tests/test_keys.py
import pytest
from eth_account import Account

from evm_wallet_api.wallet.keys import WalletGenerator

# BIP-39 test vector: all-zero entropy
ZERO_ENTROPY = bytes(16)
ZERO_MNEMONIC = " ".join(["abandon"] * 11 + ["about"])
ZERO_ADDRESS = "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"

class TestWalletGenerator:
    @pytest.fixture
    def generator(self):
        return WalletGenerator()

    def test_generate_shape(self, generator):
        wallet = generator.generate()
        assert wallet.address.startswith("0x") and len(wallet.address) == 42
        assert len(wallet.private_key) == 64
        int(wallet.private_key, 16)
        assert len(wallet.mnemonic.split(" ")) == 12

    def test_generate_uses_fresh_entropy(self, generator):
        first, second = generator.generate(), generator.generate()
        assert first.address != second.address
        assert first.mnemonic != second.mnemonic

    def test_known_vector(self, generator):
        wallet = generator.from_entropy(ZERO_ENTROPY)
        assert wallet.mnemonic == ZERO_MNEMONIC
        assert wallet.address == ZERO_ADDRESS

    def test_deterministic_for_same_entropy(self):
        entropy = bytes(range(16))
        generator = WalletGenerator(entropy_provider=lambda size: entropy)
        assert generator.generate() == generator.generate()
        assert generator.generate() == WalletGenerator().from_entropy(entropy)

    def test_mnemonic_round_trip(self, generator):
        wallet = generator.generate()
        restored = generator.from_mnemonic(wallet.mnemonic)
        assert restored == wallet

    def test_private_key_matches_address(self, generator):
        wallet = generator.generate()
        assert Account.from_key("0x" + wallet.private_key).address == wallet.address

    def test_entropy_size_enforced(self, generator):
        with pytest.raises(ValueError):
            generator.from_entropy(bytes(32))

    def test_bad_mnemonic_checksum(self, generator):
        with pytest.raises(ValueError):
            generator.from_mnemonic(" ".join(["abandon"] * 12))

    def test_entropy_provider_asked_for_16_bytes(self, mocker):
        provider = mocker.Mock(return_value=ZERO_ENTROPY)
        wallet = WalletGenerator(entropy_provider=provider).generate()
        provider.assert_called_once_with(16)
        assert wallet.address == ZERO_ADDRESS
