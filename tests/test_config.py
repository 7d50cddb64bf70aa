# tests/test_config.py
import logging
import logging.handlers
import pytest

from evm_wallet_api.exceptions import ConfigurationError
from evm_wallet_api.monitoring.logging_config import HANDLER_MARKER, LogConfig
from evm_wallet_api.utils.config import Config, load_settings
from evm_wallet_api.utils.logger import get_logger

class TestConfig:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch, tmp_path):
        for name in ("POLYGON_RPC", "NETWORK_NAME", "EXPLORER_URL", "RPC_TIMEOUT", "PORT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.chdir(tmp_path)

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("POLYGON_RPC", "https://polygon-rpc.example/v2/key")
        settings = load_settings()
        assert settings.POLYGON_RPC == "https://polygon-rpc.example/v2/key"
        assert settings.NETWORK_NAME == "Polygon"
        assert settings.PORT == 3000
        assert settings.EXPLORER_API_KEY is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("POLYGON_RPC", "http://localhost:8545")
        monkeypatch.setenv("RPC_TIMEOUT", "2.5")
        monkeypatch.setenv("NETWORK_NAME", "Local")
        settings = load_settings()
        assert settings.RPC_TIMEOUT == 2.5
        assert settings.NETWORK_NAME == "Local"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("POLYGON_RPC=http://from-dotenv:8545\nPORT=4000\n")
        settings = load_settings()
        assert settings.POLYGON_RPC == "http://from-dotenv:8545"
        assert settings.PORT == 4000

    def test_missing_rpc(self):
        with pytest.raises(ConfigurationError, match="POLYGON_RPC"):
            load_settings()

    def test_empty_rpc(self, monkeypatch, tmp_path):
        monkeypatch.setenv("POLYGON_RPC", "")
        with pytest.raises(ConfigurationError, match="POLYGON_RPC"):
            load_settings()

        monkeypatch.delenv("POLYGON_RPC")
        (tmp_path / ".env").write_text("POLYGON_RPC=\n")
        with pytest.raises(ConfigurationError, match="POLYGON_RPC"):
            load_settings()

    def test_explorer_address_url(self, monkeypatch):
        monkeypatch.setenv("POLYGON_RPC", "http://localhost:8545")
        monkeypatch.setenv("EXPLORER_URL", "https://polygonscan.com/")
        settings = load_settings()
        assert settings.explorer_address_url("0xAbC") == "https://polygonscan.com/address/0xAbC"

    def test_protocol_constants(self):
        assert Config.TRANSFER_GAS_LIMIT == 21000
        assert Config.NATIVE_DECIMALS == 18
        assert Config.DERIVATION_PATH == "m/44'/60'/0'/0/0"


class TestLogging:
    @pytest.fixture
    def root_handlers(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        yield
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(saved_level)

    def test_get_logger_is_idempotent(self):
        logger = get_logger("evm_wallet_api.tests.idempotent")
        assert get_logger("evm_wallet_api.tests.idempotent") is logger
        assert len(logger.handlers) <= 1

    def test_log_config_writes_file(self, tmp_path, root_handlers):
        log_dir = tmp_path / "logs"
        LogConfig(log_dir=str(log_dir), level="DEBUG").setup_logging()
        logger = get_logger("evm_wallet_api.tests.file")
        logger.info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        files = list(log_dir.iterdir())
        assert len(files) == 1
        assert "written to file" in files[0].read_text()

    def test_log_config_console_only(self, root_handlers):
        root = LogConfig(level="WARNING").setup_logging()
        assert root.level == logging.WARNING
        assert not any(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in root.handlers
        )

    def test_setup_logging_twice_does_not_stack_handlers(self, tmp_path, root_handlers):
        config = LogConfig(log_dir=str(tmp_path / "logs"))
        config.setup_logging()
        root = config.setup_logging()

        installed = [
            handler for handler in root.handlers
            if getattr(handler, HANDLER_MARKER, False)
        ]
        assert len(installed) == 2
        assert sum(
            isinstance(handler, logging.handlers.RotatingFileHandler) for handler in installed
        ) == 1
