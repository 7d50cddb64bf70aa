# src/evm_wallet_api/utils/config.py
from typing import Optional

from pydantic import Field, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError


class Config:
    # Native currency
    NATIVE_DECIMALS = 18
    MAX_UINT256 = 2 ** 256 - 1

    # Transaction configuration
    TRANSFER_GAS_LIMIT = 21000  # plain value transfer, no contract code

    # Key derivation
    MNEMONIC_LANGUAGE = "english"
    MNEMONIC_ENTROPY_BYTES = 16  # 12 words
    DERIVATION_PATH = "m/44'/60'/0'/0/0"

    # Explorer proxy
    EXPLORER_PAGE_SIZE = 25
    EXPLORER_MAX_PAGE_SIZE = 100


class Settings(BaseSettings):
    POLYGON_RPC: str = Field(min_length=1)
    NETWORK_NAME: str = "Polygon"
    EXPLORER_URL: str = "https://polygonscan.com"
    EXPLORER_API_URL: str = "https://api.polygonscan.com/api"
    EXPLORER_API_KEY: Optional[str] = None

    RPC_TIMEOUT: float = 30.0
    EXPLORER_TIMEOUT: float = 15.0

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def explorer_address_url(self, checksum_address: str) -> str:
        return f"{self.EXPLORER_URL.rstrip('/')}/address/{checksum_address}"


def load_settings(**overrides) -> Settings:
    """Load settings from the environment, failing loudly on missing values."""
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        missing = [
            ".".join(str(part) for part in error["loc"])
            for error in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(missing)}"
        ) from e
